"""
Display formatting shared by the narrator, the API and the CLI.

MIST -> SUI conversion uses Decimal so amounts render without float noise.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

SUI_DECIMALS = 9
MIST_PER_SUI = Decimal(10) ** SUI_DECIMALS


def mist_to_sui(value: Any) -> Decimal:
    """Convert a MIST amount (int or integer string) to SUI; malformed input counts as 0."""
    try:
        return Decimal(int(str(value).strip())) / MIST_PER_SUI
    except (TypeError, ValueError, InvalidOperation):
        return Decimal(0)


def format_sui_amount(value: Any) -> str:
    """MIST -> plain decimal SUI string, trailing zeros dropped (e.g. 1500000000 -> '1.5')."""
    amount = mist_to_sui(value).normalize()
    return f"{amount:f}"


def shorten_address(address: str, head: int = 6, tail: int = 4) -> str:
    """0x1234567890abcdef... -> 0x1234...cdef; short strings are returned unchanged."""
    if not address or len(address) <= head + tail + 3:
        return address
    return f"{address[:head]}...{address[-tail:]}"


def coin_symbol(coin_type: str) -> str:
    """'0x2::sui::SUI' -> 'SUI'."""
    return coin_type[coin_type.rfind(":") + 1:]


def format_object_type(object_type: str) -> str:
    """
    Shorten a Move type for display.

    Only the outer path before any type arguments is split: 'pkg::mod::Coin'
    (exactly three segments) -> 'mod::Coin', anything else keeps the last
    segment. Type arguments are kept as-is:
    '0x2::coin::Coin<0x2::sui::SUI>' -> 'coin::Coin<0x2::sui::SUI>'.
    """
    head, bracket, type_args = object_type.partition("<")
    segments = head.split("::")
    if len(segments) == 3:
        short = "::".join(segments[-2:])
    else:
        short = segments[-1]
    return f"{short}{bracket}{type_args}"


def action_count_name(verb: str, count: int, noun: str = "object") -> str:
    """('Transferred', 2) -> 'Transferred 2 objects'; singular for exactly one."""
    suffix = "" if count == 1 else "s"
    return f"{verb} {count} {noun}{suffix}"
