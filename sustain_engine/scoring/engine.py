"""
Sustainability Scoring Engine

Orchestrates:
  1. Factor sub-scores (0-100 each)
  2. Weighted accumulation against the given weight snapshot
  3. Normalization by the weight total (so weights need not sum to 100)
  4. Rounding + clamping to [0, 100]
  5. Risk level from the final score

Pure: no I/O, no globals. The caller fetches one weight snapshot and passes
it in; scores are recomputed on every read and never stored.
"""
from __future__ import annotations

from typing import Iterable

import structlog

from sustain_engine.core.errors import ConfigurationError, DataError
from sustain_engine.schemas.supplier import (
    FactorScore,
    RiskLevel,
    ScoreBreakdown,
    Supplier,
    SupplierWithCalculated,
)
from sustain_engine.schemas.weights import Weights
from sustain_engine.scoring import factors
from sustain_engine.scoring.factors import FactorResult
from sustain_engine.scoring.rounding import round_half_up

logger = structlog.get_logger()

REQUIRED_METRICS = ("carbon_footprint", "water_usage")


# ═══════════════════════════════════════════════════════════════
# Risk thresholds (lower bounds are inclusive)
#   score >= 75  → Low
#   score >= 50  → Medium
#   score <  50  → High
# ═══════════════════════════════════════════════════════════════
RISK_THRESHOLDS = [
    (75, RiskLevel.LOW),
    (50, RiskLevel.MEDIUM),
]


def classify_risk(score: float) -> RiskLevel:
    for threshold, level in RISK_THRESHOLDS:
        if score >= threshold:
            return level
    return RiskLevel.HIGH


def _factor_results(supplier: Supplier) -> list[FactorResult]:
    for metric in REQUIRED_METRICS:
        if getattr(supplier, metric, None) is None:
            raise DataError(metric, supplier_id=getattr(supplier, "id", None))

    return [
        factors.score_carbon(supplier.carbon_footprint),
        factors.score_water(supplier.water_usage),
        factors.score_waste_reduction(supplier.waste_reduction),
        factors.score_energy_efficiency(supplier.energy_efficiency),
        factors.score_iso14001(supplier.iso14001),
        factors.score_recycling_policy(supplier.recycling_policy),
        factors.score_water_policy(supplier.water_policy),
        factors.score_sustainability_report(supplier.sustainability_report),
    ]


def _max_possible(weights: Weights) -> float:
    max_possible = weights.total
    if not max_possible > 0:
        raise ConfigurationError(
            f"Weights must sum to a positive number to normalize scores, got {max_possible}"
        )
    return max_possible


def score_breakdown(supplier: Supplier, weights: Weights) -> ScoreBreakdown:
    """
    Full scoring pass with per-factor contributions.
    """
    max_possible = _max_possible(weights)

    factor_scores: list[FactorScore] = []
    total = 0.0
    for result in _factor_results(supplier):
        weight = getattr(weights, result.weight_key)
        contribution = (result.sub_score / 100) * weight
        total += contribution
        factor_scores.append(
            FactorScore(
                factor_name=result.factor_name,
                raw_value=result.raw_value,
                sub_score=round(result.sub_score, 2),
                weight=weight,
                weighted_score=round(contribution, 2),
            )
        )

    final_score = max(0, min(100, round_half_up(total / max_possible * 100)))

    return ScoreBreakdown(
        supplier_id=supplier.id,
        sustainability_score=final_score,
        risk_level=classify_risk(final_score),
        total_points=round(total, 2),
        max_possible=max_possible,
        factor_scores=factor_scores,
    )


def calculate_sustainability_score(supplier: Supplier, weights: Weights) -> int:
    return score_breakdown(supplier, weights).sustainability_score


def score_supplier(supplier: Supplier, weights: Weights) -> SupplierWithCalculated:
    """
    Main scoring entry point: Supplier × Weights → SupplierWithCalculated.
    """
    breakdown = score_breakdown(supplier, weights)

    logger.debug(
        "supplier_scored",
        supplier_id=supplier.id,
        score=breakdown.sustainability_score,
        risk_level=breakdown.risk_level.value,
    )

    return SupplierWithCalculated.model_validate({
        **supplier.model_dump(),
        "sustainability_score": breakdown.sustainability_score,
        "risk_level": breakdown.risk_level,
    })


def score_all(suppliers: Iterable[Supplier], weights: Weights) -> list[SupplierWithCalculated]:
    """
    Score a batch against ONE weight snapshot. Callers fetch weights once per
    batch; a weight change mid-batch never mixes configurations.
    """
    return [score_supplier(s, weights) for s in suppliers]
