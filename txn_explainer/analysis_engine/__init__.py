"""
Analysis engine: raw Sui transaction blocks to readable summaries.

Classifies object and balance changes, narrates what happened, assigns a
coarse category and assembles the immutable TransactionSummary. Pure and
synchronous; safe to call concurrently for different records.
"""

from txn_explainer.analysis_engine.category import CATEGORIES, classify_category
from txn_explainer.analysis_engine.changes import ClassifiedChanges, classify_changes
from txn_explainer.analysis_engine.lookup import TransactionLookup
from txn_explainer.analysis_engine.narrator import narrate
from txn_explainer.analysis_engine.summary import TransactionSummary, build_summary

__all__ = [
    "CATEGORIES",
    "ClassifiedChanges",
    "TransactionLookup",
    "TransactionSummary",
    "build_summary",
    "classify_category",
    "classify_changes",
    "narrate",
]
