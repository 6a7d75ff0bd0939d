"""
Main entrypoint: Txn Explainer HTTP API.

Env: SUI_NETWORK_ORDER, SUI_<NETWORK>_RPC_URL, SUI_RPC_TIMEOUT_SEC, API_HOST, API_PORT, LOG_LEVEL.

Equivalent: uvicorn txn_explainer.api_server.app:app --host 0.0.0.0 --port 8000
"""

import sys

# Configure structured JSON logging before other imports that may log
from txn_explainer.txn_logging import get_logger

logger = get_logger("main")


def main() -> None:
    """Validate settings, build the resolver once, then serve the API."""
    from txn_explainer.config import get_settings
    from txn_explainer.core.exceptions import ConfigError

    try:
        settings = get_settings()
    except ConfigError as e:
        logger.error("main_config_error", message=str(e))
        sys.exit(1)

    logger.info(
        "main_networks_configured",
        network_order=[n.value for n in settings.network_order],
        rpc_timeout_sec=settings.rpc_timeout_sec,
    )

    from txn_explainer.api_server.app import app
    import uvicorn

    logger.info("main_server_starting", host=settings.api_host, port=settings.api_port)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level)


if __name__ == "__main__":
    main()
