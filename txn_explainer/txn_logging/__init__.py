"""
Structured logging for Txn Explainer.

JSON logs with timestamp, event_type, digest and network.
Use get_logger() in all modules for aggregation-friendly output.
"""

from txn_explainer.txn_logging.logger import bind_digest, get_logger

__all__ = ["bind_digest", "get_logger"]
