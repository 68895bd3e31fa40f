"""
Supplier payloads.

One canonical Supplier shape: raw metrics as registered/edited, plus the
derived SupplierWithCalculated view that the scorer builds on every read.
Wire names are camelCase (`carbonFootprint`, `ISO14001`, ...).
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

HISTORICAL_CARBON_MONTHS = 12


class RiskLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        allow_inf_nan=False,
    )


def _check_historical_carbon(v: Optional[list[float]]) -> Optional[list[float]]:
    if v and len(v) != HISTORICAL_CARBON_MONTHS:
        raise ValueError(f"historicalCarbon must be empty or hold exactly {HISTORICAL_CARBON_MONTHS} monthly values")
    return v


class SupplierCreate(CamelModel):
    """Registration / onboarding payload."""
    name: str = Field(min_length=1)
    product_category: str = "General"
    location: str = "Unknown"
    employee_count: int = Field(0, ge=0)

    # ── Environmental metrics ──
    carbon_footprint: float = Field(ge=0, description="tons/year")
    water_usage: float = Field(ge=0, description="liters")
    waste_generation: float = Field(0, ge=0, description="tons")
    waste_reduction: float = Field(0, ge=0, le=100, description="percent")
    energy_efficiency: float = Field(0, ge=0, le=100, description="percent")

    # ── Social / operational metrics ──
    labor_practices: float = Field(0, ge=0, le=100, description="percent")
    transport_cost_per_unit: float = Field(0, ge=0, description="currency per unit")
    on_time_delivery: float = Field(0, ge=0, le=100, description="percent")
    regulatory_flags: int = Field(0, ge=0)
    lead_time_days: int = Field(0, ge=0)

    # ── Policies / certifications ──
    iso14001: bool = Field(False, alias="ISO14001")
    recycling_policy: bool = False
    water_policy: bool = False
    sustainability_report: bool = False

    historical_carbon: list[float] = Field(default_factory=list)

    @field_validator("historical_carbon")
    @classmethod
    def validate_historical_carbon(cls, v):
        return _check_historical_carbon(v)


class SupplierUpdate(CamelModel):
    """Partial update (admin edit or supplier self-service). Only set fields are written."""
    name: Optional[str] = Field(None, min_length=1)
    product_category: Optional[str] = None
    location: Optional[str] = None
    employee_count: Optional[int] = Field(None, ge=0)
    carbon_footprint: Optional[float] = Field(None, ge=0)
    water_usage: Optional[float] = Field(None, ge=0)
    waste_generation: Optional[float] = Field(None, ge=0)
    waste_reduction: Optional[float] = Field(None, ge=0, le=100)
    energy_efficiency: Optional[float] = Field(None, ge=0, le=100)
    labor_practices: Optional[float] = Field(None, ge=0, le=100)
    transport_cost_per_unit: Optional[float] = Field(None, ge=0)
    on_time_delivery: Optional[float] = Field(None, ge=0, le=100)
    regulatory_flags: Optional[int] = Field(None, ge=0)
    lead_time_days: Optional[int] = Field(None, ge=0)
    iso14001: Optional[bool] = Field(None, alias="ISO14001")
    recycling_policy: Optional[bool] = None
    water_policy: Optional[bool] = None
    sustainability_report: Optional[bool] = None
    historical_carbon: Optional[list[float]] = None

    @field_validator("historical_carbon")
    @classmethod
    def validate_historical_carbon(cls, v):
        return _check_historical_carbon(v)


class Supplier(SupplierCreate):
    """Persisted supplier record. Score and risk level are never stored."""
    id: str


class SupplierWithCalculated(Supplier):
    """Supplier plus the fields derived from the current weight configuration."""
    sustainability_score: int = Field(ge=0, le=100)
    risk_level: RiskLevel


# ── Score explanation ──

class FactorScore(CamelModel):
    """One metric's contribution to the sustainability score."""
    factor_name: str
    raw_value: Optional[str] = None
    sub_score: float = Field(description="Normalized 0-100 sub-score")
    weight: float
    weighted_score: float = Field(description="Points earned out of `weight`")


class ScoreBreakdown(CamelModel):
    supplier_id: str
    sustainability_score: int
    risk_level: RiskLevel
    total_points: float
    max_possible: float
    factor_scores: list[FactorScore]
