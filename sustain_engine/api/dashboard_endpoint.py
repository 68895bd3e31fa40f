from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends

from sustain_engine.api.dependencies import engine_http_error, get_supplier_repository, get_weights_store
from sustain_engine.core.auth import verify_token
from sustain_engine.core.errors import EngineError
from sustain_engine.schemas.insights import DashboardMetrics
from sustain_engine.scoring.engine import score_all
from sustain_engine.scoring.portfolio import summarize
from sustain_engine.services.supplier_repository import SupplierRepository
from sustain_engine.services.weights_store import WeightConfigurationStore

logger = structlog.get_logger()
router = APIRouter(prefix="/v1/dashboard", tags=["dashboard"])


@router.get("/metrics", response_model=DashboardMetrics)
async def dashboard_metrics(
    repo: SupplierRepository = Depends(get_supplier_repository),
    store: WeightConfigurationStore = Depends(get_weights_store),
    token: dict = Depends(verify_token),
):
    try:
        weights = await store.get()
        return summarize(score_all(await repo.list_all(), weights))
    except EngineError as e:
        logger.error("dashboard_metrics_failed", error=str(e))
        raise engine_http_error(e)
