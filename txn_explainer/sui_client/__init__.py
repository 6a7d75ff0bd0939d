"""
Sui client package.

Extracts digests from user input, talks JSON-RPC to Sui fullnodes and
resolves a digest against an ordered list of networks.
"""

from txn_explainer.sui_client.digest import extract_digest, is_valid_transaction_digest
from txn_explainer.sui_client.models import (
    DEFAULT_SEARCH_ORDER,
    FULL_INCLUSION_OPTIONS,
    InclusionOptions,
    NetworkSearchResult,
    NetworkType,
    network_color,
    network_display_name,
)
from txn_explainer.sui_client.resolver import MultiNetworkResolver, build_resolver
from txn_explainer.sui_client.rpc import SuiRpcClient

__all__ = [
    "DEFAULT_SEARCH_ORDER",
    "FULL_INCLUSION_OPTIONS",
    "InclusionOptions",
    "MultiNetworkResolver",
    "NetworkSearchResult",
    "NetworkType",
    "SuiRpcClient",
    "build_resolver",
    "extract_digest",
    "is_valid_transaction_digest",
    "network_color",
    "network_display_name",
]
