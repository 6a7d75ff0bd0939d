"""
Digest extraction from free-form input.

Accepts a bare transaction digest or a link from a known Sui explorer
(SuiVision, Suiscan) and returns the candidate digest. Validation is the
caller's job; is_valid_transaction_digest() is provided for that.
"""

from __future__ import annotations

import re

import base58

# Explorer URL patterns, tried in order; group 1 is the digest
EXPLORER_URL_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"suivision\.xyz/[^/]*txblock/([A-Za-z0-9]+)"),
    re.compile(r"suiscan\.xyz/[^/]*/tx/([A-Za-z0-9]+)"),
)

# Transaction digests are base58-encoded 32-byte hashes
DIGEST_BYTE_LENGTH = 32


def extract_digest_from_url(url: str) -> str | None:
    """Return the digest captured by the first matching explorer pattern, else None."""
    for pattern in EXPLORER_URL_PATTERNS:
        match = pattern.search(url)
        if match and match.group(1):
            return match.group(1)
    return None


def extract_digest(text: str) -> str:
    """
    Normalize user input into a candidate digest. Never raises.

    Tries explorer URL patterns first, then falls back to the trimmed input.
    """
    trimmed = (text or "").strip()
    return extract_digest_from_url(trimmed) or trimmed


def is_valid_transaction_digest(value: str) -> bool:
    """True if value is base58 that decodes to exactly 32 bytes."""
    if not value:
        return False
    try:
        raw = base58.b58decode(value)
    except ValueError:
        return False
    return len(raw) == DIGEST_BYTE_LENGTH
