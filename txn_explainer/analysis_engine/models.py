"""
Typed views over the raw sui_getTransactionBlock payload.

Object changes and owners are closed sum types: each variant is its own
frozen dataclass, and the parse_* functions map the JSON shapes onto them.
An object change outside the six known tags raises UnknownObjectChangeType;
everything else that is missing degrades to a documented default.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from txn_explainer.core.exceptions import UnknownObjectChangeType

UNKNOWN = "Unknown"

PROGRAMMABLE_KINDS = frozenset({"ProgrammableTransaction", "ProgrammableSystemTransaction"})


def as_dict(value: Any) -> dict[str, Any]:
    """value if it is a dict, else {}; wrong-typed record fields read as absent."""
    return value if isinstance(value, dict) else {}


def as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


# -----------------------------------------------------------------------------
# Owners
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class AddressOwner:
    address: str


@dataclass(frozen=True)
class ObjectOwner:
    object_id: str


@dataclass(frozen=True)
class Shared:
    initial_shared_version: int | None = None


@dataclass(frozen=True)
class Immutable:
    pass


@dataclass(frozen=True)
class ConsensusAddressOwner:
    owner: str
    start_version: int | None = None


Owner = Union[AddressOwner, ObjectOwner, Shared, Immutable, ConsensusAddressOwner]


def parse_owner(raw: Any) -> Owner | None:
    """
    Map an owner descriptor onto the Owner sum type; None if unrecognized.

    Keys are checked AddressOwner, ObjectOwner, Shared, ConsensusAddressOwner
    in that order since a descriptor may carry more than one.
    """
    if isinstance(raw, dict):
        if "AddressOwner" in raw:
            return AddressOwner(str(raw["AddressOwner"]))
        if "ObjectOwner" in raw:
            return ObjectOwner(str(raw["ObjectOwner"]))
        if "Shared" in raw:
            shared = raw["Shared"] if isinstance(raw["Shared"], dict) else {}
            return Shared(_as_optional_int(shared.get("initial_shared_version")))
        if "ConsensusAddressOwner" in raw:
            inner = raw["ConsensusAddressOwner"]
            if not isinstance(inner, dict):
                return None
            return ConsensusAddressOwner(
                owner=str(inner.get("owner") or UNKNOWN),
                start_version=_as_optional_int(inner.get("start_version")),
            )
        return None
    if raw == "Immutable":
        return Immutable()
    return None


# -----------------------------------------------------------------------------
# Object changes
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class Created:
    object_id: str
    object_type: str


@dataclass(frozen=True)
class Deleted:
    object_id: str
    object_type: str


@dataclass(frozen=True)
class Mutated:
    object_id: str
    object_type: str


@dataclass(frozen=True)
class Transferred:
    object_id: str
    object_type: str
    sender: str
    recipient: Owner | None


@dataclass(frozen=True)
class Published:
    package_id: str
    modules: tuple[str, ...]


@dataclass(frozen=True)
class Wrapped:
    object_id: str
    object_type: str


ObjectChange = Union[Created, Deleted, Mutated, Transferred, Published, Wrapped]

OBJECT_CHANGE_TYPES = ("created", "deleted", "mutated", "transferred", "published", "wrapped")


def parse_object_change(raw: Any) -> ObjectChange:
    """
    Map one objectChanges entry onto the ObjectChange sum type.

    Raises:
        UnknownObjectChangeType: entry is not a dict or its "type" is not one of the six tags.
    """
    if not isinstance(raw, dict):
        raise UnknownObjectChangeType(raw)
    change_type = raw.get("type")
    object_id = str(raw.get("objectId") or UNKNOWN)
    object_type = str(raw.get("objectType") or UNKNOWN)
    if change_type == "created":
        return Created(object_id, object_type)
    if change_type == "deleted":
        return Deleted(object_id, object_type)
    if change_type == "mutated":
        return Mutated(object_id, object_type)
    if change_type == "transferred":
        return Transferred(
            object_id=object_id,
            object_type=object_type,
            sender=str(raw.get("sender") or UNKNOWN),
            recipient=parse_owner(raw.get("recipient")),
        )
    if change_type == "published":
        return Published(
            package_id=str(raw.get("packageId") or UNKNOWN),
            modules=tuple(str(m) for m in as_list(raw.get("modules"))),
        )
    if change_type == "wrapped":
        return Wrapped(object_id, object_type)
    raise UnknownObjectChangeType(change_type)


# -----------------------------------------------------------------------------
# Balance changes and Move calls
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class BalanceChange:
    coin_type: str
    amount: str
    """Signed integer in MIST, string-encoded; leading '-' is a debit."""
    owner: Owner | None


def parse_balance_change(raw: dict[str, Any]) -> BalanceChange:
    return BalanceChange(
        coin_type=str(raw.get("coinType") or ""),
        amount=str(raw.get("amount") or "0").strip(),
        owner=parse_owner(raw.get("owner")),
    )


@dataclass(frozen=True)
class MoveCall:
    package_id: str
    module_name: str
    function_name: str
    arguments: tuple[Any, ...] = ()


def extract_move_calls(record: dict[str, Any]) -> list[MoveCall]:
    """
    Return the MoveCall commands of a programmable transaction, in order.

    Other transaction kinds (genesis, epoch change, ...) have no calls.
    """
    data = as_dict(as_dict(record.get("transaction")).get("data"))
    tx_kind = as_dict(data.get("transaction"))
    if tx_kind.get("kind") not in PROGRAMMABLE_KINDS:
        return []
    calls: list[MoveCall] = []
    for command in as_list(tx_kind.get("transactions")):
        if not isinstance(command, dict) or "MoveCall" not in command:
            continue
        call = as_dict(command["MoveCall"])
        calls.append(
            MoveCall(
                package_id=str(call.get("package") or UNKNOWN),
                module_name=str(call.get("module") or UNKNOWN),
                function_name=str(call.get("function") or UNKNOWN),
                arguments=tuple(as_list(call.get("arguments"))),
            )
        )
    return calls


def _as_optional_int(value: Any) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
