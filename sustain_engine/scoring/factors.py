"""
Sustainability factor definitions.

Each factor:
  1. Takes one raw metric from the supplier record
  2. Normalizes it to a 0-100 sub-score
  3. Names the weight that applies to it

Weights are applied in the engine, not here.

Convention: HIGHER sub-score = MORE sustainable.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Raw values at or above the cap earn a sub-score of 0.
CAP_CARBON = 4000.0  # tons/year
CAP_WATER = 2500.0   # liters


@dataclass(frozen=True)
class FactorResult:
    factor_name: str
    weight_key: str
    raw_value: str
    sub_score: float


def _inverse_capped(value: float, cap: float) -> float:
    return 100 - min(value, cap) / cap * 100


def _percent(value: Optional[float]) -> float:
    return float(value or 0)


# ═══════════════════════════════════════════════════════════════
# Inverse-is-better metrics: lower usage, higher sub-score
# ═══════════════════════════════════════════════════════════════
def score_carbon(carbon_footprint: float) -> FactorResult:
    return FactorResult(
        "CarbonFootprint", "carbon_footprint",
        f"{carbon_footprint:g} t", _inverse_capped(carbon_footprint, CAP_CARBON),
    )


def score_water(water_usage: float) -> FactorResult:
    return FactorResult(
        "WaterUsage", "water_usage",
        f"{water_usage:g} L", _inverse_capped(water_usage, CAP_WATER),
    )


# ═══════════════════════════════════════════════════════════════
# Higher-is-better percentages: passed through unchanged
# ═══════════════════════════════════════════════════════════════
def score_waste_reduction(waste_reduction: Optional[float]) -> FactorResult:
    pct = _percent(waste_reduction)
    return FactorResult("WasteReduction", "waste_reduction", f"{pct:g}%", pct)


def score_energy_efficiency(energy_efficiency: Optional[float]) -> FactorResult:
    pct = _percent(energy_efficiency)
    return FactorResult("EnergyEfficiency", "energy_efficiency", f"{pct:g}%", pct)


# ═══════════════════════════════════════════════════════════════
# Policies / certifications: full weight or nothing
# ═══════════════════════════════════════════════════════════════
def _policy(factor_name: str, weight_key: str, present: Optional[bool]) -> FactorResult:
    if present:
        return FactorResult(factor_name, weight_key, "Yes", 100.0)
    return FactorResult(factor_name, weight_key, "No", 0.0)


def score_iso14001(certified: Optional[bool]) -> FactorResult:
    return _policy("ISO14001", "iso14001", certified)


def score_recycling_policy(has_policy: Optional[bool]) -> FactorResult:
    return _policy("RecyclingPolicy", "recycling_policy", has_policy)


def score_water_policy(has_policy: Optional[bool]) -> FactorResult:
    return _policy("WaterPolicy", "water_policy", has_policy)


def score_sustainability_report(publishes: Optional[bool]) -> FactorResult:
    return _policy("SustainabilityReport", "sustainability_report", publishes)
