"""
Tests for TransactionLookup: last-request-wins and error bookkeeping.
"""

from __future__ import annotations

import asyncio

import pytest

from conftest import DIGEST, OTHER_DIGEST, build_record
from txn_explainer.analysis_engine.lookup import TransactionLookup
from txn_explainer.core.exceptions import RpcError, TransactionNotFoundOnAnyNetwork
from txn_explainer.sui_client.models import NetworkType
from txn_explainer.sui_client.resolver import MultiNetworkResolver


def _resolver(fetch) -> MultiNetworkResolver:
    return MultiNetworkResolver({NetworkType.TESTNET: fetch}, order=(NetworkType.TESTNET,))


def test_lookup_accepts_explorer_url_and_stores_current():
    async def fetch(digest, options):
        return build_record(digest=digest)

    session = TransactionLookup(_resolver(fetch))
    summary = asyncio.run(session.lookup(f"https://suiscan.xyz/testnet/tx/{DIGEST}"))

    assert summary is not None
    assert summary.digest == DIGEST
    assert summary.network is NetworkType.TESTNET
    assert session.current is summary
    assert session.error is None


def test_newer_lookup_wins_over_slower_older_one():
    gate = asyncio.Event()

    async def fetch(digest, options):
        if digest == DIGEST:
            await gate.wait()
        return build_record(digest=digest)

    async def scenario():
        session = TransactionLookup(_resolver(fetch))
        older = asyncio.create_task(session.lookup(DIGEST))
        await asyncio.sleep(0)
        newer = await session.lookup(OTHER_DIGEST)
        gate.set()
        stale = await older
        return session, newer, stale

    session, newer, stale = asyncio.run(scenario())

    assert stale is None
    assert newer is not None and newer.digest == OTHER_DIGEST
    assert session.current is newer


def test_error_from_abandoned_lookup_is_discarded():
    gate = asyncio.Event()

    async def fetch(digest, options):
        if digest == DIGEST:
            await gate.wait()
            raise RpcError("not found")
        return build_record(digest=digest)

    async def scenario():
        session = TransactionLookup(_resolver(fetch))
        older = asyncio.create_task(session.lookup(DIGEST))
        await asyncio.sleep(0)
        await session.lookup(OTHER_DIGEST)
        gate.set()
        return session, await older

    session, stale = asyncio.run(scenario())

    assert stale is None
    assert session.error is None
    assert session.current.digest == OTHER_DIGEST


def test_not_found_is_recorded_and_raised(not_found):
    session = TransactionLookup(_resolver(not_found))

    with pytest.raises(TransactionNotFoundOnAnyNetwork):
        asyncio.run(session.lookup(DIGEST))

    assert isinstance(session.error, TransactionNotFoundOnAnyNetwork)
    assert session.current is None


def test_malformed_record_still_produces_summary():
    async def fetch(digest, options):
        record = build_record(digest=digest, commands=[{"MoveCall": "x"}])
        record["effects"]["status"] = "success"
        return record

    session = TransactionLookup(_resolver(fetch))
    summary = asyncio.run(session.lookup(DIGEST))

    assert summary.status == "failure"
    assert session.current is summary
    assert session.error is None
