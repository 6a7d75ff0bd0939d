"""
Summary builder: raw transaction block to an immutable TransactionSummary.

Pure and synchronous: feeds the record through change classification,
narration and categorization, and extracts status, sender, epoch and gas.
Missing fields fall back to defaults ('Unknown', 0, empty lists); the only
error that escapes is UnknownObjectChangeType.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from decimal import Decimal
from typing import Any

from txn_explainer.analysis_engine.category import classify_category
from txn_explainer.analysis_engine.changes import classify_changes
from txn_explainer.analysis_engine.formatting import mist_to_sui
from txn_explainer.analysis_engine.models import UNKNOWN, as_dict, as_list, extract_move_calls
from txn_explainer.analysis_engine.narrator import narrate
from txn_explainer.sui_client.models import NetworkType

STATUS_SUCCESS = "success"
STATUS_FAILURE = "failure"


@dataclass(frozen=True)
class GasSummary:
    """Gas accounting in SUI (converted from MIST)."""

    budget: float
    price: float
    computation: float
    storage: float
    non_refundable: float
    rebate: float
    used: float
    """computation + storage - rebate - price, as the node reports the parts."""


@dataclass(frozen=True)
class ObjectCounts:
    created: int
    mutated: int
    deleted: int


@dataclass(frozen=True)
class TransactionSummary:
    digest: str
    network: NetworkType
    status: str
    sender: str
    epoch: str
    gas: GasSummary
    objects: ObjectCounts
    actions: tuple[str, ...]
    category: str
    transaction: dict[str, Any] = field(repr=False, compare=False)
    """Raw record, passed through untouched for display."""

    def to_dict(self, *, include_raw: bool = False) -> dict[str, Any]:
        """JSON-serializable view; the raw record is included only on request."""
        out: dict[str, Any] = {
            "digest": self.digest,
            "network": self.network.value,
            "status": self.status,
            "sender": self.sender,
            "epoch": self.epoch,
            "gas": asdict(self.gas),
            "objects": asdict(self.objects),
            "actions": list(self.actions),
            "category": self.category,
        }
        if include_raw:
            out["transaction"] = self.transaction
        return out


def _gas_amount(value: Any) -> Decimal:
    """MIST -> SUI, clamped at zero for the component fields."""
    amount = mist_to_sui(value if value is not None else 0)
    return amount if amount > 0 else Decimal(0)


def _build_gas(record: dict[str, Any]) -> GasSummary:
    effects = as_dict(record.get("effects"))
    gas_used = as_dict(effects.get("gasUsed"))
    gas_data = as_dict(as_dict(as_dict(record.get("transaction")).get("data")).get("gasData"))

    budget = _gas_amount(gas_data.get("budget"))
    price = _gas_amount(gas_data.get("price"))
    computation = _gas_amount(gas_used.get("computationCost"))
    storage = _gas_amount(gas_used.get("storageCost"))
    non_refundable = _gas_amount(gas_used.get("nonRefundableStorageFee"))
    rebate = _gas_amount(gas_used.get("storageRebate"))
    used = computation + storage - rebate - price

    return GasSummary(
        budget=float(budget),
        price=float(price),
        computation=float(computation),
        storage=float(storage),
        non_refundable=float(non_refundable),
        rebate=float(rebate),
        used=float(used),
    )


def build_summary(record: dict[str, Any], network: NetworkType) -> TransactionSummary:
    """
    Summarize one transaction block. Does not mutate record.

    Raises:
        UnknownObjectChangeType: an objectChanges entry has an unrecognized type.
    """
    effects = as_dict(record.get("effects"))
    tx_data = as_dict(as_dict(record.get("transaction")).get("data"))

    status = as_dict(effects.get("status")).get("status")
    classified = classify_changes(
        as_list(record.get("objectChanges")),
        as_list(record.get("balanceChanges")),
    )
    calls = extract_move_calls(record)

    return TransactionSummary(
        digest=str(record.get("digest") or UNKNOWN),
        network=NetworkType(network),
        status=STATUS_SUCCESS if status == STATUS_SUCCESS else STATUS_FAILURE,
        sender=str(tx_data.get("sender") or UNKNOWN),
        epoch=str(effects.get("executedEpoch") or UNKNOWN),
        gas=_build_gas(record),
        objects=ObjectCounts(
            created=classified.created,
            mutated=classified.mutated,
            deleted=classified.deleted,
        ),
        actions=tuple(narrate(classified, calls)),
        category=classify_category(calls, classified.transfers, classified.created),
        transaction=record,
    )
