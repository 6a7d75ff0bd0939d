"""
Lookup session with last-request-wins semantics.

Each lookup() takes a ticket; when it finishes it only publishes its
summary (or error) if no newer lookup has started since. Results of
abandoned lookups are dropped, and their in-flight probes are left to finish
on their own.
"""

from __future__ import annotations

import itertools

from txn_explainer.analysis_engine.summary import TransactionSummary, build_summary
from txn_explainer.core.exceptions import TxnExplainerError
from txn_explainer.sui_client.digest import extract_digest
from txn_explainer.sui_client.resolver import MultiNetworkResolver
from txn_explainer.txn_logging import bind_digest


class TransactionLookup:
    """Holds the state of the latest search: current summary or error."""

    def __init__(self, resolver: MultiNetworkResolver) -> None:
        self._resolver = resolver
        self._tickets = itertools.count(1)
        self._latest = 0
        self._current: TransactionSummary | None = None
        self._error: TxnExplainerError | None = None

    @property
    def current(self) -> TransactionSummary | None:
        return self._current

    @property
    def error(self) -> TxnExplainerError | None:
        return self._error

    async def lookup(self, text: str) -> TransactionSummary | None:
        """
        Resolve and summarize a digest or explorer URL.

        Returns the summary, or None if a newer lookup superseded this one.
        Errors are stored on the session (and re-raised) only for the latest lookup.
        """
        ticket = next(self._tickets)
        self._latest = ticket
        self._current = None
        self._error = None

        digest = extract_digest(text)
        log = bind_digest(digest)
        try:
            result = await self._resolver.find_transaction(digest)
            summary = build_summary(result.transaction, result.network)
        except TxnExplainerError as e:
            if ticket != self._latest:
                log.info("lookup_superseded", ticket=ticket, error=str(e))
                return None
            self._error = e
            raise

        if ticket != self._latest:
            log.info("lookup_superseded", ticket=ticket)
            return None
        self._current = summary
        return summary
