"""
Transaction category heuristics.

Assigns exactly one coarse label from call names, transferred object types
and the number of created objects. Rules are checked in order and the first
match wins; this is naming-convention guesswork, not verification.
"""

from __future__ import annotations

from typing import Sequence

from txn_explainer.analysis_engine.changes import Transfer
from txn_explainer.analysis_engine.models import MoveCall

CATEGORY_TOKEN_SWAP = "Token Swap"
CATEGORY_NFT_TRANSFER = "NFT Transfer"
CATEGORY_MINTING = "Token/Object Minting"
CATEGORY_ASSET_TRANSFER = "Asset Transfer"
CATEGORY_CONTRACT_INTERACTION = "Smart Contract Interaction"
CATEGORY_OBJECT_CREATION = "Object Creation"
CATEGORY_GENERIC = "Generic Transaction"

CATEGORIES = (
    CATEGORY_TOKEN_SWAP,
    CATEGORY_NFT_TRANSFER,
    CATEGORY_MINTING,
    CATEGORY_ASSET_TRANSFER,
    CATEGORY_CONTRACT_INTERACTION,
    CATEGORY_OBJECT_CREATION,
    CATEGORY_GENERIC,
)

SWAP_KEYWORDS = ("swap", "exchange", "trade")
NFT_KEYWORDS = ("nft", "collectible", "token")
MINT_KEYWORDS = ("mint", "create")


def _contains_any(text: str, keywords: Sequence[str]) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in keywords)


def classify_category(
    calls: Sequence[MoveCall],
    transfers: Sequence[Transfer],
    created_count: int,
) -> str:
    """Return one of CATEGORIES. Order of checks matters."""
    if any(
        _contains_any(call.function_name, SWAP_KEYWORDS)
        or _contains_any(call.module_name, SWAP_KEYWORDS)
        for call in calls
    ):
        return CATEGORY_TOKEN_SWAP

    if transfers and any(_contains_any(t.object_type, NFT_KEYWORDS) for t in transfers):
        return CATEGORY_NFT_TRANSFER

    if created_count > 0 or any(_contains_any(call.function_name, MINT_KEYWORDS) for call in calls):
        return CATEGORY_MINTING

    if transfers:
        return CATEGORY_ASSET_TRANSFER

    if calls:
        return CATEGORY_CONTRACT_INTERACTION

    # Shadowed by the minting rule whenever created_count > 0
    if created_count > 0:
        return CATEGORY_OBJECT_CREATION

    return CATEGORY_GENERIC
