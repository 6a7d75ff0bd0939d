"""
Explain one Sui transaction from the command line.

How to run:
    From project root (with .env configured, optional):
        python -m txn_explainer.tools.explain_digest <digest-or-explorer-url>
        python -m txn_explainer.tools.explain_digest <digest> --json --include-raw

Env vars (all optional):
    SUI_NETWORK_ORDER, SUI_MAINNET_RPC_URL, SUI_DEVNET_RPC_URL, SUI_TESTNET_RPC_URL,
    SUI_RPC_TIMEOUT_SEC

Exit codes: 0 found, 1 not found on any network, 2 invalid input or config.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from txn_explainer.analysis_engine.formatting import shorten_address
from txn_explainer.analysis_engine.lookup import TransactionLookup
from txn_explainer.analysis_engine.summary import TransactionSummary
from txn_explainer.config import get_settings
from txn_explainer.core.exceptions import (
    ConfigError,
    TransactionNotFoundOnAnyNetwork,
    UnknownObjectChangeType,
)
from txn_explainer.sui_client.digest import extract_digest, is_valid_transaction_digest
from txn_explainer.sui_client.models import network_display_name
from txn_explainer.sui_client.resolver import build_resolver
from txn_explainer.txn_logging import get_logger

logger = get_logger(__name__)


def render_text(summary: TransactionSummary) -> str:
    """Plain-text report: header, object counts, gas, then what happened."""
    gas = summary.gas
    lines = [
        f"Transaction {summary.digest}",
        f"  Status:   {summary.status.upper()}",
        f"  Found on: {network_display_name(summary.network)}",
        f"  Sender:   {shorten_address(summary.sender)}",
        f"  Epoch:    {summary.epoch}",
        f"  Objects:  created={summary.objects.created} "
        f"modified={summary.objects.mutated} deleted={summary.objects.deleted}",
        f"  Gas used: {gas.used:.6f} SUI "
        f"(price {gas.price:.3e}, computation {gas.computation:.3e}, storage {gas.storage:.3e}, "
        f"non-refund {gas.non_refundable:.3e}, rebate {gas.rebate:.3e})",
    ]
    if summary.actions:
        lines.append(f"What happened? [{summary.category}]")
        lines.extend(f"  {action}" for action in summary.actions)
    return "\n".join(lines)


async def run(text: str, *, as_json: bool, include_raw: bool) -> str:
    resolver = build_resolver(get_settings())
    summary = await TransactionLookup(resolver).lookup(text)
    if as_json:
        return json.dumps(summary.to_dict(include_raw=include_raw), indent=2)
    return render_text(summary)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Find a Sui transaction on mainnet, devnet or testnet and explain it.",
    )
    parser.add_argument("digest", help="Transaction digest or SuiVision/Suiscan URL")
    parser.add_argument("--json", action="store_true", help="Print the summary as JSON")
    parser.add_argument("--include-raw", action="store_true", help="With --json, include the raw transaction block")
    args = parser.parse_args(argv)

    if not is_valid_transaction_digest(extract_digest(args.digest)):
        print("ERROR: Please enter a valid transaction digest or Sui Explorer URL", file=sys.stderr)
        return 2
    try:
        output = asyncio.run(run(args.digest, as_json=args.json, include_raw=args.include_raw))
    except ConfigError as e:
        print("ERROR:", e, file=sys.stderr)
        return 2
    except TransactionNotFoundOnAnyNetwork as e:
        print("ERROR:", e, file=sys.stderr)
        return 1
    except UnknownObjectChangeType as e:
        logger.exception("explain_digest_failed", error=str(e))
        print("ERROR:", e, file=sys.stderr)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
