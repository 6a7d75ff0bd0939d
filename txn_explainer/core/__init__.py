"""
Core utilities: shared exceptions and cross-cutting concerns.

Used by the Sui client, the analysis engine, the API server and the CLI.
"""

from txn_explainer.core.exceptions import (
    ConfigError,
    RpcError,
    TransactionNotFoundOnAnyNetwork,
    TransportError,
    TxnExplainerError,
    UnknownObjectChangeType,
)

__all__ = [
    "ConfigError",
    "RpcError",
    "TransactionNotFoundOnAnyNetwork",
    "TransportError",
    "TxnExplainerError",
    "UnknownObjectChangeType",
]
