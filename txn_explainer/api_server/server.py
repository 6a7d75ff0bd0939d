"""
FastAPI server: transaction lookup API.

Exposes GET /transactions/{digest} (and GET /transactions?q=<digest or
explorer URL>) returning the summary of the first network that has the
transaction. The resolver is built once from settings and injected as a
dependency so tests can replace it.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from txn_explainer.analysis_engine.summary import TransactionSummary, build_summary
from txn_explainer.config import get_settings
from txn_explainer.core.exceptions import (
    TransactionNotFoundOnAnyNetwork,
    UnknownObjectChangeType,
)
from txn_explainer.sui_client.digest import extract_digest, is_valid_transaction_digest
from txn_explainer.sui_client.examples import EXAMPLE_DIGESTS
from txn_explainer.sui_client.models import network_color, network_display_name
from txn_explainer.sui_client.resolver import MultiNetworkResolver, build_resolver
from txn_explainer.txn_logging import get_logger

logger = get_logger(__name__)


# -----------------------------------------------------------------------------
# Dependencies
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_resolver() -> MultiNetworkResolver:
    """App-scoped resolver with one JSON-RPC client per configured network."""
    return build_resolver(get_settings())


# -----------------------------------------------------------------------------
# Response models
# -----------------------------------------------------------------------------


class GasResponse(BaseModel):
    budget: float
    price: float
    computation: float
    storage: float
    non_refundable: float
    rebate: float
    used: float = Field(..., description="computation + storage - rebate - price (SUI)")


class ObjectCountsResponse(BaseModel):
    created: int = Field(..., ge=0)
    mutated: int = Field(..., ge=0)
    deleted: int = Field(..., ge=0)


class TransactionResponse(BaseModel):
    """GET /transactions/{digest} response."""

    digest: str
    network: str = Field(..., description="Network the transaction was found on")
    network_display_name: str
    network_color: str
    status: str = Field(..., description="success | failure")
    sender: str
    epoch: str
    gas: GasResponse
    objects: ObjectCountsResponse
    actions: list[str] = Field(default_factory=list, description="What happened, in order")
    category: str
    transaction: dict[str, Any] | None = Field(None, description="Raw transaction block (include_raw=true)")


class ExampleResponse(BaseModel):
    digest: str
    description: str
    network: str
    features: list[str] = Field(default_factory=list)


def _to_response(summary: TransactionSummary, include_raw: bool) -> TransactionResponse:
    data = summary.to_dict(include_raw=include_raw)
    return TransactionResponse(
        network_display_name=network_display_name(summary.network),
        network_color=network_color(summary.network),
        **data,
    )


async def _explain(digest: str, resolver: MultiNetworkResolver, include_raw: bool) -> TransactionResponse:
    if not is_valid_transaction_digest(digest):
        raise HTTPException(
            status_code=400,
            detail="Please enter a valid transaction digest or Sui Explorer URL",
        )
    try:
        result = await resolver.find_transaction(digest)
    except TransactionNotFoundOnAnyNetwork as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    try:
        summary = build_summary(result.transaction, result.network)
    except UnknownObjectChangeType as e:
        logger.error(
            "summary_unknown_object_change",
            digest=digest,
            network=result.network.value,
            error=str(e),
        )
        raise HTTPException(status_code=502, detail=str(e)) from e
    return _to_response(summary, include_raw)


# -----------------------------------------------------------------------------
# App and routes
# -----------------------------------------------------------------------------

app = FastAPI(
    title="Txn Explainer API",
    description="Find a Sui transaction on mainnet, devnet or testnet and explain what it did.",
    version="0.1.0",
)


@app.get("/health")
def health() -> dict[str, str]:
    """Liveness probe: API is up."""
    return {"status": "ok"}


@app.get("/examples", response_model=list[ExampleResponse])
def list_examples() -> list[dict[str, Any]]:
    """Curated digests worth trying, with the network each lives on."""
    return [example.to_dict() for example in EXAMPLE_DIGESTS]


@app.get("/transactions", response_model=TransactionResponse)
async def find_transaction_by_query(
    q: str = Query(..., min_length=1, description="Transaction digest or SuiVision/Suiscan URL"),
    include_raw: bool = False,
    resolver: MultiNetworkResolver = Depends(get_resolver),
) -> TransactionResponse:
    """Accepts explorer links as well as bare digests."""
    return await _explain(extract_digest(q), resolver, include_raw)


@app.get("/transactions/{digest}", response_model=TransactionResponse)
async def get_transaction(
    digest: str,
    include_raw: bool = False,
    resolver: MultiNetworkResolver = Depends(get_resolver),
) -> TransactionResponse:
    """
    Resolve a digest across networks and return its summary.

    400 for a malformed digest, 404 when no network has it, 502 when the
    node returns an object change this service does not understand.
    """
    return await _explain(digest.strip(), resolver, include_raw)


@app.exception_handler(HTTPException)
def http_exception_handler(request: Any, exc: HTTPException) -> JSONResponse:
    """Consistent JSON error response for HTTPException."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
    )
