"""
Pytest fixtures for Txn Explainer tests.

Record factories shape sui_getTransactionBlock results; fake fetchers stand in
for per-network JSON-RPC clients so resolver tests never touch the network.
"""

from __future__ import annotations

from typing import Any

import pytest

from txn_explainer.core.exceptions import RpcError

DIGEST = "DmVJ3GC8qRpGEkfvTT2T642V95kgFHDeCk2agbpx98w8"
OTHER_DIGEST = "4epaeL3kiHkT7sukmBDguao5bKqptHnMtKy8vgpCFteo"
SENDER = "0x7d20dcdb2bca4f508ea9613994683eb4e76e9c4ed371169677c1be02aaf0b58e"
RECIPIENT = "0xab12cd34ef56ab12cd34ef56ab12cd34ef56ab12cd34ef56ab12cd34ef56ab12"


def build_record(
    *,
    digest: str = DIGEST,
    status: str | None = "success",
    sender: str | None = SENDER,
    epoch: str | None = "512",
    object_changes: list[dict[str, Any]] | None = None,
    balance_changes: list[dict[str, Any]] | None = None,
    commands: list[dict[str, Any]] | None = None,
    kind: str = "ProgrammableTransaction",
    gas_used: dict[str, str] | None = None,
    gas_data: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Build a sui_getTransactionBlock-shaped result."""
    effects: dict[str, Any] = {
        "gasUsed": gas_used
        or {
            "computationCost": "1000000",
            "storageCost": "2000000",
            "storageRebate": "500000",
            "nonRefundableStorageFee": "5000",
        },
    }
    if status is not None:
        effects["status"] = {"status": status}
    if epoch is not None:
        effects["executedEpoch"] = epoch
    data: dict[str, Any] = {
        "gasData": gas_data or {"budget": "5000000", "price": "750"},
        "transaction": {"kind": kind, "transactions": commands or []},
    }
    if sender is not None:
        data["sender"] = sender
    return {
        "digest": digest,
        "transaction": {"data": data},
        "effects": effects,
        "objectChanges": object_changes or [],
        "balanceChanges": balance_changes or [],
    }


def move_call(package: str, module: str, function: str) -> dict[str, Any]:
    return {"MoveCall": {"package": package, "module": module, "function": function, "arguments": []}}


def transferred(object_type: str, recipient: Any, sender: str = SENDER) -> dict[str, Any]:
    return {
        "type": "transferred",
        "sender": sender,
        "recipient": recipient,
        "objectType": object_type,
        "objectId": "0x5",
        "version": "10",
        "digest": "x",
    }


@pytest.fixture
def make_record():
    """Factory for raw transaction records; see build_record for keyword arguments."""
    return build_record


@pytest.fixture
def not_found():
    """Async fetcher that always fails the way a fullnode does for an unknown digest."""

    async def _fetch(digest, options):
        raise RpcError(f"Could not find the referenced transaction [TransactionDigest({digest})]", code=-32602)

    return _fetch
