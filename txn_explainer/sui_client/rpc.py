"""
Sui fullnode JSON-RPC client.

Thin async wrapper over httpx for sui_getTransactionBlock. One client per
network; each call opens its own AsyncClient so a client object holds no
connection state between lookups. Timeouts are enforced here, not in the
resolver.
"""

from __future__ import annotations

import itertools
from typing import Any

import httpx

from txn_explainer.core.exceptions import RpcError, TransportError
from txn_explainer.sui_client.models import (
    FULL_INCLUSION_OPTIONS,
    InclusionOptions,
    NetworkType,
)
from txn_explainer.txn_logging import get_logger

logger = get_logger(__name__)

GET_TRANSACTION_BLOCK_METHOD = "sui_getTransactionBlock"

_request_ids = itertools.count(1)


def _build_rpc_body(digest: str, options: InclusionOptions) -> dict[str, Any]:
    return {
        "jsonrpc": "2.0",
        "id": next(_request_ids),
        "method": GET_TRANSACTION_BLOCK_METHOD,
        "params": [digest, options.to_rpc()],
    }


class SuiRpcClient:
    """
    JSON-RPC client bound to one Sui network.

    get_transaction_block() is the fetch capability handed to the resolver.
    """

    def __init__(
        self,
        network: NetworkType,
        rpc_url: str,
        *,
        timeout_sec: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            network: Network this client talks to (used in errors and logs).
            rpc_url: Fullnode HTTP endpoint (e.g. https://fullnode.testnet.sui.io:443).
            timeout_sec: HTTP timeout for each request.
            transport: Optional httpx transport (tests pass httpx.MockTransport).
        """
        if not rpc_url.strip():
            raise ValueError("rpc_url must be non-empty")
        if timeout_sec <= 0:
            raise ValueError("timeout_sec must be positive")
        self.network = NetworkType(network)
        self._rpc_url = rpc_url.rstrip("/")
        self._timeout = timeout_sec
        self._transport = transport

    @property
    def rpc_url(self) -> str:
        return self._rpc_url

    async def get_transaction_block(
        self,
        digest: str,
        options: InclusionOptions = FULL_INCLUSION_OPTIONS,
    ) -> dict[str, Any]:
        """
        Fetch one transaction block.

        Raises:
            RpcError: fullnode returned a JSON-RPC error or no result (e.g. unknown digest).
            TransportError: HTTP status error, timeout, connection failure or non-JSON body.
        """
        body = _build_rpc_body(digest, options)
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                transport=self._transport,
            ) as client:
                resp = await client.post(self._rpc_url, json=body)
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPError as e:
            raise TransportError(
                f"{self.network.value}: {type(e).__name__}: {e}",
                network=self.network.value,
            ) from e
        except ValueError as e:
            raise TransportError(
                f"{self.network.value}: response is not valid JSON",
                network=self.network.value,
            ) from e

        if not isinstance(data, dict):
            raise TransportError(
                f"{self.network.value}: unexpected response shape",
                network=self.network.value,
            )
        if "error" in data:
            err = data["error"] or {}
            message = err.get("message", err) if isinstance(err, dict) else err
            code = err.get("code") if isinstance(err, dict) else None
            raise RpcError(
                f"Sui RPC error on {self.network.value}: {message} (code={code})",
                network=self.network.value,
                code=code,
            )
        result = data.get("result")
        if not isinstance(result, dict):
            raise RpcError(
                f"Sui RPC returned no result on {self.network.value}",
                network=self.network.value,
            )
        logger.debug(
            "rpc_transaction_block_fetched",
            network=self.network.value,
            digest=digest,
        )
        return result
