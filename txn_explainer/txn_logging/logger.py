"""
structlog setup for Txn Explainer.

One JSON line per event on stderr (LOG_FORMAT=console for local runs), so the
CLI's stdout carries only its report. Events are snake_case names passed as
the first argument and emitted under "event_type".
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

LOG_LEVEL_VALUE = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
LOG_FORMAT = os.getenv("LOG_FORMAT", "json").strip().lower()


def _rename_event(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    event_dict["event_type"] = event_dict.pop("event", None)
    return event_dict


def configure_structlog() -> None:
    renderer: Any
    if LOG_FORMAT == "console":
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty(), event_key="event_type")
    else:
        renderer = structlog.processors.JSONRenderer()
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
            structlog.processors.format_exc_info,
            _rename_event,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(LOG_LEVEL_VALUE),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Module logger with its name bound:
        logger.info("transaction_found", digest=digest, network="testnet")
    """
    return structlog.get_logger(name).bind(logger=name)


def bind_digest(digest: str) -> structlog.BoundLogger:
    """Logger with digest bound to every subsequent event."""
    return get_logger("txn_explainer").bind(digest=digest)
