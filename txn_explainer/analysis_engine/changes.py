"""
Change classification: object changes and balance changes into buckets.

Every object change lands in exactly one bucket (created, mutated, deleted,
transferred, published, wrapped). Balance changes become signed movements
with a readable account label and coin symbol.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from txn_explainer.analysis_engine.formatting import (
    coin_symbol,
    format_sui_amount,
    shorten_address,
)
from txn_explainer.analysis_engine.models import (
    UNKNOWN,
    AddressOwner,
    ConsensusAddressOwner,
    Created,
    Deleted,
    Immutable,
    Mutated,
    ObjectOwner,
    Owner,
    Published,
    Shared,
    Transferred,
    Wrapped,
    parse_balance_change,
    parse_object_change,
)
from txn_explainer.core.exceptions import UnknownObjectChangeType

DIRECTION_SENT = "sent"
DIRECTION_RECEIVED = "received"


@dataclass(frozen=True)
class Transfer:
    object_id: str
    object_type: str
    sender: str
    recipient: str


@dataclass(frozen=True)
class Publish:
    package_id: str
    modules: str
    """Module names joined with ', '."""


@dataclass(frozen=True)
class BalanceMovement:
    account: str
    direction: str
    """'sent' for a debit, 'received' for a credit."""
    amount: str
    """Magnitude in SUI units, already formatted."""
    symbol: str


@dataclass(frozen=True)
class ClassifiedChanges:
    created: int = 0
    mutated: int = 0
    deleted: int = 0
    wrapped: int = 0
    transfers: tuple[Transfer, ...] = ()
    publishes: tuple[Publish, ...] = ()
    balance_movements: tuple[BalanceMovement, ...] = ()

    @property
    def object_change_count(self) -> int:
        """Total object changes across all six buckets."""
        return (
            self.created
            + self.mutated
            + self.deleted
            + self.wrapped
            + len(self.transfers)
            + len(self.publishes)
        )


def transfer_recipient(owner: Owner | None) -> str:
    """Prefer the address owner, then the object owner, else 'Unknown'."""
    if isinstance(owner, AddressOwner):
        return owner.address
    if isinstance(owner, ObjectOwner):
        return owner.object_id
    return UNKNOWN


def account_label(owner: Owner | None) -> str:
    """Readable account name for a balance change owner."""
    if isinstance(owner, AddressOwner):
        return f"Address {shorten_address(owner.address)}"
    if isinstance(owner, ObjectOwner):
        return f"Object {shorten_address(owner.object_id)}"
    if isinstance(owner, Shared):
        return "Shared"
    if isinstance(owner, ConsensusAddressOwner):
        return f"Consensus address {shorten_address(owner.owner)}"
    if isinstance(owner, Immutable):
        return "Immutable"
    return UNKNOWN


def classify_balance_change(raw: dict[str, Any]) -> BalanceMovement:
    change = parse_balance_change(raw)
    if change.amount.startswith("-"):
        direction, magnitude = DIRECTION_SENT, change.amount[1:]
    else:
        direction, magnitude = DIRECTION_RECEIVED, change.amount
    return BalanceMovement(
        account=account_label(change.owner),
        direction=direction,
        amount=format_sui_amount(magnitude),
        symbol=coin_symbol(change.coin_type),
    )


def classify_changes(
    object_changes: Iterable[dict[str, Any]],
    balance_changes: Iterable[dict[str, Any]],
) -> ClassifiedChanges:
    """
    Partition object changes into buckets and label balance changes.

    Raises:
        UnknownObjectChangeType: an object change carries a tag outside the closed set.
    """
    created = mutated = deleted = wrapped = 0
    transfers: list[Transfer] = []
    publishes: list[Publish] = []

    for raw in object_changes:
        change = parse_object_change(raw)
        if isinstance(change, Created):
            created += 1
        elif isinstance(change, Deleted):
            deleted += 1
        elif isinstance(change, Mutated):
            mutated += 1
        elif isinstance(change, Transferred):
            transfers.append(
                Transfer(
                    object_id=change.object_id,
                    object_type=change.object_type,
                    sender=change.sender,
                    recipient=transfer_recipient(change.recipient),
                )
            )
        elif isinstance(change, Published):
            publishes.append(Publish(change.package_id, ", ".join(change.modules)))
        elif isinstance(change, Wrapped):
            wrapped += 1
        else:
            raise UnknownObjectChangeType(type(change).__name__)

    movements = tuple(
        classify_balance_change(raw) for raw in balance_changes if isinstance(raw, dict)
    )
    return ClassifiedChanges(
        created=created,
        mutated=mutated,
        deleted=deleted,
        wrapped=wrapped,
        transfers=tuple(transfers),
        publishes=tuple(publishes),
        balance_movements=movements,
    )
