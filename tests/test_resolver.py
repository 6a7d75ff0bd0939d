"""
Tests for the multi-network resolver: order, short-circuit, aggregated not-found.

Fetchers are AsyncMocks; async calls are driven with asyncio.run.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock

import pytest

from conftest import DIGEST, build_record
from txn_explainer.core.exceptions import RpcError, TransactionNotFoundOnAnyNetwork, TransportError
from txn_explainer.sui_client.models import FULL_INCLUSION_OPTIONS, NetworkType
from txn_explainer.sui_client.resolver import MultiNetworkResolver

MAINNET, DEVNET, TESTNET = NetworkType.MAINNET, NetworkType.DEVNET, NetworkType.TESTNET


def _fetchers(mainnet, devnet, testnet):
    return {MAINNET: mainnet, DEVNET: devnet, TESTNET: testnet}


def test_found_on_first_network_short_circuits():
    record = build_record()
    mainnet = AsyncMock(return_value=record)
    devnet = AsyncMock(return_value=record)
    testnet = AsyncMock(return_value=record)
    resolver = MultiNetworkResolver(_fetchers(mainnet, devnet, testnet))

    result = asyncio.run(resolver.find_transaction(DIGEST))

    assert result.network is MAINNET
    assert result.transaction is record
    mainnet.assert_awaited_once_with(DIGEST, FULL_INCLUSION_OPTIONS)
    devnet.assert_not_awaited()
    testnet.assert_not_awaited()


def test_found_on_tertiary_probes_each_network_once():
    record = build_record()
    mainnet = AsyncMock(side_effect=RpcError("not found", network="mainnet"))
    devnet = AsyncMock(side_effect=TransportError("connection reset", network="devnet"))
    testnet = AsyncMock(return_value=record)
    resolver = MultiNetworkResolver(_fetchers(mainnet, devnet, testnet))

    result = asyncio.run(resolver.find_transaction(DIGEST))

    assert result.network is TESTNET
    assert mainnet.await_count == 1
    assert devnet.await_count == 1
    assert testnet.await_count == 1


def test_found_on_middle_network_leaves_later_untouched():
    mainnet = AsyncMock(side_effect=RpcError("not found"))
    devnet = AsyncMock(return_value=build_record())
    testnet = AsyncMock(return_value=build_record())
    resolver = MultiNetworkResolver(_fetchers(mainnet, devnet, testnet))

    result = asyncio.run(resolver.find_transaction(DIGEST))

    assert result.network is DEVNET
    testnet.assert_not_awaited()


def test_not_found_anywhere_names_all_networks_in_order(not_found):
    resolver = MultiNetworkResolver(_fetchers(not_found, not_found, not_found))

    with pytest.raises(TransactionNotFoundOnAnyNetwork) as exc_info:
        asyncio.run(resolver.find_transaction(DIGEST))

    assert exc_info.value.digest == DIGEST
    assert exc_info.value.networks == ("mainnet", "devnet", "testnet")
    assert str(exc_info.value) == f"Transaction {DIGEST} not found on any network (mainnet, devnet, testnet)"


def test_any_exception_from_fetcher_is_skipped():
    """Malformed responses surface as arbitrary exceptions; resolver moves on."""
    mainnet = AsyncMock(side_effect=KeyError("result"))
    devnet = AsyncMock(side_effect=ValueError("bad json"))
    testnet = AsyncMock(return_value=build_record())
    resolver = MultiNetworkResolver(_fetchers(mainnet, devnet, testnet))

    assert asyncio.run(resolver.find_transaction(DIGEST)).network is TESTNET


def test_probes_are_sequential():
    """Next network is not probed until the previous probe has completed."""
    events: list[str] = []

    def _probe(name, found):
        async def _fetch(digest, options):
            events.append(f"start:{name}")
            await asyncio.sleep(0)
            events.append(f"end:{name}")
            if not found:
                raise RpcError("not found")
            return build_record()

        return _fetch

    resolver = MultiNetworkResolver(
        _fetchers(_probe("mainnet", False), _probe("devnet", False), _probe("testnet", True))
    )
    asyncio.run(resolver.find_transaction(DIGEST))

    assert events == [
        "start:mainnet", "end:mainnet",
        "start:devnet", "end:devnet",
        "start:testnet", "end:testnet",
    ]


def test_each_search_restarts_from_first_network():
    mainnet = AsyncMock(side_effect=RpcError("not found"))
    devnet = AsyncMock(return_value=build_record())
    testnet = AsyncMock()
    resolver = MultiNetworkResolver(_fetchers(mainnet, devnet, testnet))

    asyncio.run(resolver.find_transaction(DIGEST))
    asyncio.run(resolver.find_transaction(DIGEST))

    assert mainnet.await_count == 2
    assert devnet.await_count == 2


def test_custom_order_is_respected():
    testnet = AsyncMock(return_value=build_record())
    mainnet = AsyncMock(return_value=build_record())
    resolver = MultiNetworkResolver(
        {TESTNET: testnet, MAINNET: mainnet}, order=(TESTNET, MAINNET)
    )

    assert asyncio.run(resolver.find_transaction(DIGEST)).network is TESTNET
    mainnet.assert_not_awaited()


def test_constructor_validates_order(not_found):
    with pytest.raises(ValueError, match="no fetcher"):
        MultiNetworkResolver({MAINNET: not_found})
    with pytest.raises(ValueError, match="at least one"):
        MultiNetworkResolver({MAINNET: not_found}, order=())
    with pytest.raises(ValueError, match="repeat"):
        MultiNetworkResolver({MAINNET: not_found}, order=(MAINNET, MAINNET))
