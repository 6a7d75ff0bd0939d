"""
Environment variable loading for Txn Explainer.

- SUI_NETWORK_ORDER: comma-separated search order (default: mainnet,devnet,testnet)
- SUI_<NETWORK>_RPC_URL: fullnode JSON-RPC endpoint per network
- SUI_RPC_TIMEOUT_SEC: per-request HTTP timeout
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from txn_explainer.core.exceptions import ConfigError

# Project root: config is txn_explainer/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

MAINNET_RPC_URL = "https://fullnode.mainnet.sui.io:443"
DEVNET_RPC_URL = "https://fullnode.devnet.sui.io:443"
TESTNET_RPC_URL = "https://fullnode.testnet.sui.io:443"

DEFAULT_RPC_URLS = {
    "mainnet": MAINNET_RPC_URL,
    "devnet": DEVNET_RPC_URL,
    "testnet": TESTNET_RPC_URL,
}
DEFAULT_NETWORK_ORDER = "mainnet,devnet,testnet"
DEFAULT_RPC_TIMEOUT_SEC = 30.0


def load_txn_explainer_env() -> None:
    """Load .env from project root. Safe to call multiple times; never overrides real env."""
    load_dotenv(_ENV_PATH, override=False)


def get_network_order_names() -> list[str]:
    """Return SUI_NETWORK_ORDER as a list of lowercase names, empty entries dropped."""
    load_txn_explainer_env()
    raw = os.getenv("SUI_NETWORK_ORDER") or DEFAULT_NETWORK_ORDER
    return [name.strip().lower() for name in raw.split(",") if name.strip()]


def get_rpc_url(network: str) -> str:
    """
    Resolve the fullnode URL for a network.
    Order: SUI_<NETWORK>_RPC_URL > public fullnode default.
    """
    load_txn_explainer_env()
    url = (os.getenv(f"SUI_{network.upper()}_RPC_URL") or "").strip()
    if url:
        return url
    return DEFAULT_RPC_URLS[network]


def get_rpc_timeout_sec() -> float:
    load_txn_explainer_env()
    raw = (os.getenv("SUI_RPC_TIMEOUT_SEC") or "").strip()
    if not raw:
        return DEFAULT_RPC_TIMEOUT_SEC
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"SUI_RPC_TIMEOUT_SEC must be a number, got {raw!r}") from None
