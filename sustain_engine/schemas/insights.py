from __future__ import annotations

from pydantic import Field

from sustain_engine.schemas.supplier import CamelModel


class Recommendation(CamelModel):
    type: str
    title: str
    description: str


class RiskDistribution(CamelModel):
    low: int = 0
    medium: int = 0
    high: int = 0


class DashboardMetrics(CamelModel):
    total_suppliers: int
    avg_score: float = Field(description="Mean sustainability score, one decimal")
    certified_suppliers: int = Field(description="Suppliers holding ISO 14001")
    risk_distribution: RiskDistribution
