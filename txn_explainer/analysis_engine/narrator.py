"""
Action narration: classified changes and Move calls into readable lines.

Order is fixed: balance movements, then the transfer block, then the call
block. Empty blocks are left out entirely.
"""

from __future__ import annotations

from typing import Sequence

from txn_explainer.analysis_engine.changes import ClassifiedChanges
from txn_explainer.analysis_engine.formatting import action_count_name, format_object_type
from txn_explainer.analysis_engine.models import MoveCall


def narrate(classified: ClassifiedChanges, calls: Sequence[MoveCall]) -> list[str]:
    actions: list[str] = []

    for movement in classified.balance_movements:
        actions.append(
            f"{movement.account} {movement.direction} {movement.amount} {movement.symbol}"
        )

    if classified.transfers:
        actions.append(action_count_name("Transferred", len(classified.transfers)))
        for transfer in classified.transfers:
            actions.append(
                f"- Transferred {format_object_type(transfer.object_type)} "
                f"from {transfer.sender} to {transfer.recipient}"
            )

    if calls:
        actions.append(action_count_name("Executed", len(calls), "move call"))
        for call in calls:
            actions.append(f"- Called {call.module_name}::{call.function_name}()")

    return actions
