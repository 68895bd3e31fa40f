"""
What-if simulation payloads: switch from a current to a prospective supplier
over a contract horizon.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import Field

from sustain_engine.schemas.supplier import CamelModel, SupplierWithCalculated


class RiskTolerance(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SimulationRequest(CamelModel):
    """
    Form state from the simulation page. Fields may still be blank while the
    user is filling it in; the simulation then comes back as null.
    """
    current_supplier_id: Optional[str] = None
    prospective_supplier_id: Optional[str] = None
    quantity: Optional[int] = Field(None, description="Units ordered per year")
    years: Optional[int] = Field(None, description="Contract length in years")
    risk_tolerance: RiskTolerance = RiskTolerance.MEDIUM


class SimulationResult(CamelModel):
    current_supplier: SupplierWithCalculated
    prospective_supplier: SupplierWithCalculated
    carbon_savings: int = Field(description="Tons; positive means the prospective supplier is cleaner")
    water_savings: int = Field(description="Hundreds of liters; positive means less water")
    cost_impact: int = Field(description="Currency; positive means the prospective supplier costs more")
    years: int
    risk_tolerance: RiskTolerance
