"""
Tests for env-driven settings.
"""

from __future__ import annotations

import pytest

from txn_explainer.config import get_settings
from txn_explainer.config.env import MAINNET_RPC_URL
from txn_explainer.core.exceptions import ConfigError
from txn_explainer.sui_client.models import NetworkType


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "SUI_NETWORK_ORDER",
        "SUI_MAINNET_RPC_URL",
        "SUI_DEVNET_RPC_URL",
        "SUI_TESTNET_RPC_URL",
        "SUI_RPC_TIMEOUT_SEC",
        "API_PORT",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = get_settings()
    assert settings.network_order == (NetworkType.MAINNET, NetworkType.DEVNET, NetworkType.TESTNET)
    assert settings.rpc_urls[NetworkType.MAINNET] == MAINNET_RPC_URL
    assert settings.rpc_timeout_sec == 30.0


def test_custom_order_url_and_timeout(monkeypatch):
    monkeypatch.setenv("SUI_NETWORK_ORDER", " Testnet , mainnet ")
    monkeypatch.setenv("SUI_TESTNET_RPC_URL", "http://localhost:9000")
    monkeypatch.setenv("SUI_RPC_TIMEOUT_SEC", "2.5")

    settings = get_settings()

    assert settings.network_order == (NetworkType.TESTNET, NetworkType.MAINNET)
    assert settings.rpc_urls == {
        NetworkType.TESTNET: "http://localhost:9000",
        NetworkType.MAINNET: MAINNET_RPC_URL,
    }
    assert settings.rpc_timeout_sec == 2.5


@pytest.mark.parametrize("order", ["mainnet,localnet", "mainnet,mainnet", " , "])
def test_bad_network_order(monkeypatch, order):
    monkeypatch.setenv("SUI_NETWORK_ORDER", order)
    with pytest.raises(ConfigError):
        get_settings()


def test_non_positive_timeout(monkeypatch):
    monkeypatch.setenv("SUI_RPC_TIMEOUT_SEC", "0")
    with pytest.raises(ConfigError):
        get_settings()


def test_non_numeric_timeout(monkeypatch):
    monkeypatch.setenv("SUI_RPC_TIMEOUT_SEC", "soon")
    with pytest.raises(ConfigError, match="SUI_RPC_TIMEOUT_SEC"):
        get_settings()


@pytest.mark.parametrize("port", ["http", "8000.5", "0", "70000"])
def test_bad_api_port(monkeypatch, port):
    monkeypatch.setenv("API_PORT", port)
    with pytest.raises(ConfigError, match="API_PORT"):
        get_settings()


def test_api_port_from_env(monkeypatch):
    monkeypatch.setenv("API_PORT", "9100")
    assert get_settings().api_port == 9100
