"""
Application settings.

Collects the environment-derived configuration (network search order,
fullnode URLs, RPC timeout, API host/port, log level) into one frozen
dataclass used by the resolver factory, the API server and the CLI.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from txn_explainer.config.env import (
    get_network_order_names,
    get_rpc_timeout_sec,
    get_rpc_url,
    load_txn_explainer_env,
)
from txn_explainer.core.exceptions import ConfigError
from txn_explainer.sui_client.models import NetworkType


@dataclass(frozen=True)
class Settings:
    """Resolved configuration; build with get_settings()."""

    network_order: tuple[NetworkType, ...]
    rpc_urls: dict[NetworkType, str]
    rpc_timeout_sec: float
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "info"


def _parse_network_order(names: list[str]) -> tuple[NetworkType, ...]:
    order: list[NetworkType] = []
    for name in names:
        try:
            network = NetworkType(name)
        except ValueError:
            raise ConfigError(
                f"Unknown network {name!r} in SUI_NETWORK_ORDER "
                f"(expected one of: {', '.join(n.value for n in NetworkType)})"
            ) from None
        if network in order:
            raise ConfigError(f"Network {name!r} listed twice in SUI_NETWORK_ORDER")
        order.append(network)
    if not order:
        raise ConfigError("SUI_NETWORK_ORDER must name at least one network")
    return tuple(order)


def _parse_api_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ConfigError(f"API_PORT must be an integer, got {raw!r}") from None
    if not 0 < port < 65536:
        raise ConfigError(f"API_PORT out of range: {port}")
    return port


def get_settings() -> Settings:
    """
    Return the current application settings.

    Raises:
        ConfigError: SUI_NETWORK_ORDER is empty, repeats or names an unknown network,
            or SUI_RPC_TIMEOUT_SEC / API_PORT is not a valid number.
    """
    load_txn_explainer_env()
    order = _parse_network_order(get_network_order_names())
    timeout = get_rpc_timeout_sec()
    if timeout <= 0:
        raise ConfigError("SUI_RPC_TIMEOUT_SEC must be positive")
    return Settings(
        network_order=order,
        rpc_urls={network: get_rpc_url(network.value) for network in order},
        rpc_timeout_sec=timeout,
        api_host=os.getenv("API_HOST", "0.0.0.0").strip(),
        api_port=_parse_api_port(os.getenv("API_PORT", "8000").strip() or "8000"),
        log_level=os.getenv("LOG_LEVEL", "info").strip().lower(),
    )
