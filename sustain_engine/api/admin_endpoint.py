"""
Admin API — global scoring weights.

  GET /v1/admin/weights  → active configuration (defaults if never saved)
  PUT /v1/admin/weights  → validate + replace; previous values are not kept

A total outside target ± tolerance is reported in the X-Weights-Advisory
header but does not block the save.
"""
from __future__ import annotations

from typing import Any

import structlog
from fastapi import APIRouter, Body, Depends, Response

from sustain_engine.api.dependencies import engine_http_error, get_weights_store
from sustain_engine.core.auth import require_admin, verify_token
from sustain_engine.core.errors import ValidationError
from sustain_engine.schemas.weights import Weights
from sustain_engine.services.weights_store import WeightConfigurationStore

logger = structlog.get_logger()
router = APIRouter(prefix="/v1/admin", tags=["admin"])

ADVISORY_HEADER = "X-Weights-Advisory"


@router.get("/weights", response_model=Weights)
async def get_weights(
    store: WeightConfigurationStore = Depends(get_weights_store),
    token: dict = Depends(verify_token),
):
    return await store.get()


@router.put(
    "/weights",
    response_model=Weights,
    summary="Replace the global scoring weights",
    description="All eight weights are required. Every supplier score changes on its next read.",
)
async def save_weights(
    response: Response,
    payload: Any = Body(...),
    store: WeightConfigurationStore = Depends(get_weights_store),
    token: dict = Depends(require_admin),
):
    user = token.get("sub", "unknown")
    try:
        saved, advisory = await store.save_with_advisory(payload)
    except ValidationError as e:
        logger.warning("weights_rejected", fields=e.fields, changed_by=user)
        raise engine_http_error(e)

    if advisory:
        response.headers[ADVISORY_HEADER] = advisory

    logger.info("weights_updated", changed_by=user, total=saved.total)
    return saved
