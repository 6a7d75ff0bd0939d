"""
Application-level exceptions.

Only TransactionNotFoundOnAnyNetwork and UnknownObjectChangeType are meant to
reach callers; transport errors are absorbed by the resolver per network.
"""

from __future__ import annotations

from typing import Sequence


class TxnExplainerError(Exception):
    """Base class for all Txn Explainer errors."""


class ConfigError(TxnExplainerError):
    """Invalid configuration value (e.g. unknown network name in SUI_NETWORK_ORDER)."""


class TransportError(TxnExplainerError):
    """A single network could not return the transaction (HTTP failure, timeout, bad payload)."""

    def __init__(self, message: str, network: str | None = None) -> None:
        super().__init__(message)
        self.network = network


class RpcError(TransportError):
    """The fullnode answered with a JSON-RPC error object (typically: digest not found)."""

    def __init__(
        self,
        message: str,
        network: str | None = None,
        code: int | None = None,
    ) -> None:
        super().__init__(message, network=network)
        self.code = code


class TransactionNotFoundOnAnyNetwork(TxnExplainerError):
    """Every network in the search order was probed and none returned the transaction."""

    def __init__(self, digest: str, networks: Sequence[str]) -> None:
        self.digest = digest
        self.networks = tuple(networks)
        super().__init__(
            f"Transaction {digest} not found on any network ({', '.join(self.networks)})"
        )


class UnknownObjectChangeType(TxnExplainerError):
    """An object change carried a tag outside the closed set; treated as a logic error."""

    def __init__(self, change_type: object) -> None:
        self.change_type = change_type
        super().__init__(f"Unknown object change type: {change_type!r}")
