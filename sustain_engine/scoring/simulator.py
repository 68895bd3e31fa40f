"""
What-if Simulation Engine

Projects the environmental and cost impact of switching from a current to a
prospective supplier over a contract horizon:

    diff_per_unit × quantity × years × risk_multiplier  (÷ display unit)

Linear in years: no discounting, no compounding. The risk multiplier models
confidence in the projection (conservative tolerance dampens it, aggressive
tolerance amplifies it); it is unrelated to a supplier's risk level.

Pure: consumes two already-scored suppliers, never calls the scorer.
"""
from __future__ import annotations

from typing import Optional

import structlog

from sustain_engine.schemas.simulation import RiskTolerance, SimulationResult
from sustain_engine.schemas.supplier import SupplierWithCalculated
from sustain_engine.scoring.rounding import round_half_up

logger = structlog.get_logger()

RISK_MULTIPLIERS: dict[RiskTolerance, float] = {
    RiskTolerance.LOW: 0.7,
    RiskTolerance.MEDIUM: 1.0,
    RiskTolerance.HIGH: 1.3,
}

CARBON_UNIT_DIVISOR = 1000  # reported in tons
WATER_UNIT_DIVISOR = 100


def is_computable(
    current: Optional[SupplierWithCalculated],
    prospective: Optional[SupplierWithCalculated],
    quantity: Optional[int],
    years: Optional[int],
) -> bool:
    """Both suppliers resolved and a positive quantity and contract length."""
    if current is None or prospective is None:
        return False
    if quantity is None or quantity <= 0:
        return False
    if years is None or years <= 0:
        return False
    return True


def simulate(
    current: Optional[SupplierWithCalculated],
    prospective: Optional[SupplierWithCalculated],
    quantity: Optional[int],
    years: Optional[int],
    risk_tolerance: RiskTolerance = RiskTolerance.MEDIUM,
) -> Optional[SimulationResult]:
    """
    Returns None when the inputs are not computable (a supplier did not
    resolve, or quantity/years are missing or not positive). That is an
    expected form state, not an error.
    """
    if not is_computable(current, prospective, quantity, years):
        logger.info(
            "simulation_not_computable",
            current_resolved=current is not None,
            prospective_resolved=prospective is not None,
            quantity=quantity,
            years=years,
        )
        return None

    risk_tolerance = RiskTolerance(risk_tolerance)
    multiplier = RISK_MULTIPLIERS[risk_tolerance]
    scale = quantity * years * multiplier

    carbon_diff_per_unit = current.carbon_footprint - prospective.carbon_footprint
    water_diff_per_unit = current.water_usage - prospective.water_usage
    cost_diff_per_unit = prospective.transport_cost_per_unit - current.transport_cost_per_unit

    return SimulationResult(
        current_supplier=current,
        prospective_supplier=prospective,
        carbon_savings=round_half_up(carbon_diff_per_unit * scale / CARBON_UNIT_DIVISOR),
        water_savings=round_half_up(water_diff_per_unit * scale / WATER_UNIT_DIVISOR),
        cost_impact=round_half_up(cost_diff_per_unit * scale),
        years=years,
        risk_tolerance=risk_tolerance,
    )
