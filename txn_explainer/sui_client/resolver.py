"""
Multi-network transaction resolver.

Probes an ordered list of Sui networks for a digest, one network at a time,
and returns the first network that has it. Per-network failures are logged
and skipped; if every network fails the search ends with a single
TransactionNotFoundOnAnyNetwork naming the digest and the probed order.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Mapping, Sequence

from txn_explainer.core.exceptions import TransactionNotFoundOnAnyNetwork
from txn_explainer.sui_client.models import (
    DEFAULT_SEARCH_ORDER,
    FULL_INCLUSION_OPTIONS,
    InclusionOptions,
    NetworkSearchResult,
    NetworkType,
)
from txn_explainer.sui_client.rpc import SuiRpcClient
from txn_explainer.txn_logging import get_logger

logger = get_logger(__name__)

TransactionFetcher = Callable[[str, InclusionOptions], Awaitable[dict[str, Any]]]


class MultiNetworkResolver:
    """
    Sequential first-success search over a fixed network order.

    Construct once at startup with one fetcher per network and pass the
    instance to callers. Holds no per-search state: every call re-probes from
    the start of the order.
    """

    def __init__(
        self,
        fetchers: Mapping[NetworkType, TransactionFetcher],
        order: Sequence[NetworkType] = DEFAULT_SEARCH_ORDER,
    ) -> None:
        """
        Args:
            fetchers: Network -> async fetch(digest, options) returning the raw
                transaction block; must raise on absence or transport failure.
            order: Networks to probe, first to last. Every entry needs a fetcher.
        """
        if not order:
            raise ValueError("order must name at least one network")
        missing = [n.value for n in order if n not in fetchers]
        if missing:
            raise ValueError(f"no fetcher configured for: {', '.join(missing)}")
        if len(set(order)) != len(order):
            raise ValueError("order must not repeat a network")
        self._fetchers = dict(fetchers)
        self._order = tuple(order)

    @property
    def order(self) -> tuple[NetworkType, ...]:
        return self._order

    async def find_transaction(
        self,
        digest: str,
        options: InclusionOptions = FULL_INCLUSION_OPTIONS,
    ) -> NetworkSearchResult:
        """
        Return the transaction from the first network in order that has it.

        One attempt per network, strictly sequential; later networks are not
        touched after a success.

        Raises:
            TransactionNotFoundOnAnyNetwork: every network failed.
        """
        for network in self._order:
            fetch = self._fetchers[network]
            try:
                transaction = await fetch(digest, options)
            except Exception as e:
                logger.warning(
                    "network_probe_failed",
                    digest=digest,
                    network=network.value,
                    error=str(e),
                )
                continue
            logger.info("transaction_found", digest=digest, network=network.value)
            return NetworkSearchResult(transaction=transaction, network=network)

        error = TransactionNotFoundOnAnyNetwork(digest, [n.value for n in self._order])
        logger.warning(
            "transaction_not_found",
            digest=digest,
            networks=list(error.networks),
        )
        raise error


def build_resolver(settings: Any, *, transport: Any = None) -> MultiNetworkResolver:
    """
    Wire one SuiRpcClient per configured network into a resolver.

    Args:
        settings: txn_explainer.config.Settings (network_order, rpc_urls, rpc_timeout_sec).
        transport: Optional httpx transport shared by all clients (tests).
    """
    fetchers: dict[NetworkType, TransactionFetcher] = {}
    for network in settings.network_order:
        client = SuiRpcClient(
            network,
            settings.rpc_urls[network],
            timeout_sec=settings.rpc_timeout_sec,
            transport=transport,
        )
        fetchers[network] = client.get_transaction_block
    return MultiNetworkResolver(fetchers, order=settings.network_order)
