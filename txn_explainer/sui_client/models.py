"""
Data models for the Sui client layer.

Network identifiers, the fixed inclusion options sent with every
sui_getTransactionBlock call, and the resolver's search result.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class NetworkType(str, Enum):
    """Sui networks, declared in the default search order."""

    MAINNET = "mainnet"
    DEVNET = "devnet"
    TESTNET = "testnet"


DEFAULT_SEARCH_ORDER: tuple[NetworkType, ...] = (
    NetworkType.MAINNET,
    NetworkType.DEVNET,
    NetworkType.TESTNET,
)

_DISPLAY_NAMES = {
    NetworkType.MAINNET: "🌐 Mainnet",
    NetworkType.DEVNET: "🔧 Devnet",
    NetworkType.TESTNET: "🧪 Testnet",
}

_COLORS = {
    NetworkType.MAINNET: "green",
    NetworkType.DEVNET: "orange",
    NetworkType.TESTNET: "blue",
}


def network_display_name(network: NetworkType | str) -> str:
    """Human label with emoji; unknown names are capitalized as-is."""
    try:
        return _DISPLAY_NAMES[NetworkType(network)]
    except ValueError:
        name = str(network)
        return name[:1].upper() + name[1:]


def network_color(network: NetworkType | str) -> str:
    """Badge color for a network: green | orange | blue | gray."""
    try:
        return _COLORS[NetworkType(network)]
    except ValueError:
        return "gray"


@dataclass(frozen=True)
class InclusionOptions:
    """
    Response sections requested from the fullnode.

    Always requested in full; there is no partial-fetch mode.
    """

    show_balance_changes: bool = True
    show_effects: bool = True
    show_events: bool = True
    show_input: bool = True
    show_object_changes: bool = True

    def to_rpc(self) -> dict[str, bool]:
        """Return the camelCase options object expected by sui_getTransactionBlock."""
        return {
            "showBalanceChanges": self.show_balance_changes,
            "showEffects": self.show_effects,
            "showEvents": self.show_events,
            "showInput": self.show_input,
            "showObjectChanges": self.show_object_changes,
        }


FULL_INCLUSION_OPTIONS = InclusionOptions()


@dataclass(frozen=True)
class NetworkSearchResult:
    """Raw transaction block and the network it was found on."""

    transaction: dict[str, Any]
    network: NetworkType
