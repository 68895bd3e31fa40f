"""
Supplier CRUD + derived views.

Every read recomputes sustainabilityScore and riskLevel from the CURRENT
weight configuration. Weights are fetched once per request, so a list is
always scored against a single snapshot.
"""
from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, HTTPException, Response

from sustain_engine.api.dependencies import engine_http_error, get_supplier_repository, get_weights_store
from sustain_engine.core.auth import require_admin, verify_token
from sustain_engine.core.errors import EngineError
from sustain_engine.schemas.insights import Recommendation
from sustain_engine.schemas.supplier import (
    ScoreBreakdown,
    SupplierCreate,
    SupplierUpdate,
    SupplierWithCalculated,
)
from sustain_engine.scoring.engine import score_all, score_breakdown, score_supplier
from sustain_engine.scoring.recommendations import recommend
from sustain_engine.services.supplier_repository import SupplierRepository
from sustain_engine.services.weights_store import WeightConfigurationStore

logger = structlog.get_logger()
router = APIRouter(prefix="/v1/suppliers", tags=["suppliers"])


@router.get("", response_model=list[SupplierWithCalculated])
async def list_suppliers(
    repo: SupplierRepository = Depends(get_supplier_repository),
    store: WeightConfigurationStore = Depends(get_weights_store),
    token: dict = Depends(verify_token),
):
    try:
        weights = await store.get()
        return score_all(await repo.list_all(), weights)
    except EngineError as e:
        logger.error("supplier_scoring_failed", error=str(e))
        raise engine_http_error(e)


@router.get("/{supplier_id}", response_model=SupplierWithCalculated)
async def get_supplier(
    supplier_id: str,
    repo: SupplierRepository = Depends(get_supplier_repository),
    store: WeightConfigurationStore = Depends(get_weights_store),
    token: dict = Depends(verify_token),
):
    try:
        weights = await store.get()
        supplier = await repo.get(supplier_id)
        if supplier is None:
            raise HTTPException(404, "Supplier not found")
        return score_supplier(supplier, weights)
    except EngineError as e:
        logger.error("supplier_scoring_failed", supplier_id=supplier_id, error=str(e))
        raise engine_http_error(e)


@router.get("/{supplier_id}/score", response_model=ScoreBreakdown)
async def get_score_breakdown(
    supplier_id: str,
    repo: SupplierRepository = Depends(get_supplier_repository),
    store: WeightConfigurationStore = Depends(get_weights_store),
    token: dict = Depends(verify_token),
):
    """Per-factor contributions behind the supplier's current score."""
    try:
        weights = await store.get()
        supplier = await repo.get(supplier_id)
        if supplier is None:
            raise HTTPException(404, "Supplier not found")
        return score_breakdown(supplier, weights)
    except EngineError as e:
        logger.error("supplier_scoring_failed", supplier_id=supplier_id, error=str(e))
        raise engine_http_error(e)


@router.get("/{supplier_id}/recommendations", response_model=list[Recommendation])
async def get_recommendations(
    supplier_id: str,
    repo: SupplierRepository = Depends(get_supplier_repository),
    store: WeightConfigurationStore = Depends(get_weights_store),
    token: dict = Depends(verify_token),
):
    try:
        weights = await store.get()
        supplier = await repo.get(supplier_id)
        if supplier is None:
            raise HTTPException(404, "Supplier not found")
        return recommend(score_supplier(supplier, weights))
    except EngineError as e:
        logger.error("supplier_scoring_failed", supplier_id=supplier_id, error=str(e))
        raise engine_http_error(e)


@router.post("", response_model=SupplierWithCalculated, status_code=201)
async def create_supplier(
    data: SupplierCreate,
    repo: SupplierRepository = Depends(get_supplier_repository),
    store: WeightConfigurationStore = Depends(get_weights_store),
    token: dict = Depends(verify_token),
):
    logger.info("supplier_registration", name=data.name, caller=token.get("sub", "unknown"))
    try:
        weights = await store.get()
        supplier = await repo.create(data)
        return score_supplier(supplier, weights)
    except EngineError as e:
        logger.error("supplier_scoring_failed", error=str(e))
        raise engine_http_error(e)


@router.patch("/{supplier_id}", response_model=SupplierWithCalculated)
async def update_supplier(
    supplier_id: str,
    data: SupplierUpdate,
    repo: SupplierRepository = Depends(get_supplier_repository),
    store: WeightConfigurationStore = Depends(get_weights_store),
    token: dict = Depends(verify_token),
):
    try:
        weights = await store.get()
        supplier = await repo.update(supplier_id, data)
        if supplier is None:
            raise HTTPException(404, "Supplier not found")
        return score_supplier(supplier, weights)
    except EngineError as e:
        logger.error("supplier_scoring_failed", supplier_id=supplier_id, error=str(e))
        raise engine_http_error(e)


@router.delete("/{supplier_id}", status_code=204)
async def delete_supplier(
    supplier_id: str,
    repo: SupplierRepository = Depends(get_supplier_repository),
    token: dict = Depends(require_admin),
):
    if not await repo.delete(supplier_id):
        raise HTTPException(404, "Supplier not found")
    logger.info("supplier_removed_by_admin", supplier_id=supplier_id, caller=token.get("sub", "unknown"))
    return Response(status_code=204)
