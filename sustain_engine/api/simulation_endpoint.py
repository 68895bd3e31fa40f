"""
POST /v1/simulation

Resolves both suppliers, scores them against one weight snapshot and runs
the what-if projection. Responds with null (not an error) while the form is
incomplete or a supplier id does not resolve.
"""
from __future__ import annotations

from typing import Optional

import structlog
from fastapi import APIRouter, Depends

from sustain_engine.api.dependencies import engine_http_error, get_supplier_repository, get_weights_store
from sustain_engine.core.auth import verify_token
from sustain_engine.core.errors import EngineError
from sustain_engine.schemas.simulation import SimulationRequest, SimulationResult
from sustain_engine.schemas.supplier import SupplierWithCalculated
from sustain_engine.schemas.weights import Weights
from sustain_engine.scoring.engine import score_supplier
from sustain_engine.scoring.simulator import simulate
from sustain_engine.services.supplier_repository import SupplierRepository
from sustain_engine.services.weights_store import WeightConfigurationStore

logger = structlog.get_logger()
router = APIRouter(prefix="/v1/simulation", tags=["simulation"])


async def _resolve(
    repo: SupplierRepository, supplier_id: Optional[str], weights: Weights,
) -> Optional[SupplierWithCalculated]:
    if not supplier_id:
        return None
    supplier = await repo.get(supplier_id)
    return score_supplier(supplier, weights) if supplier is not None else None


@router.post("", response_model=Optional[SimulationResult])
async def run_simulation(
    request: SimulationRequest,
    repo: SupplierRepository = Depends(get_supplier_repository),
    store: WeightConfigurationStore = Depends(get_weights_store),
    token: dict = Depends(verify_token),
):
    try:
        weights = await store.get()
        current = await _resolve(repo, request.current_supplier_id, weights)
        prospective = await _resolve(repo, request.prospective_supplier_id, weights)
    except EngineError as e:
        logger.error("simulation_scoring_failed", error=str(e))
        raise engine_http_error(e)

    result = simulate(current, prospective, request.quantity, request.years, request.risk_tolerance)
    if result is not None:
        logger.info(
            "simulation_complete",
            current_supplier_id=request.current_supplier_id,
            prospective_supplier_id=request.prospective_supplier_id,
            carbon_savings=result.carbon_savings,
            cost_impact=result.cost_impact,
        )
    return result
