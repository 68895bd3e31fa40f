"""
Portfolio summary for the procurement dashboard.
"""
from __future__ import annotations

from typing import Sequence

from sustain_engine.schemas.insights import DashboardMetrics, RiskDistribution
from sustain_engine.schemas.supplier import RiskLevel, SupplierWithCalculated


def summarize(suppliers: Sequence[SupplierWithCalculated]) -> DashboardMetrics:
    total = len(suppliers)
    avg_score = sum(s.sustainability_score for s in suppliers) / total if total else 0.0

    return DashboardMetrics(
        total_suppliers=total,
        avg_score=round(avg_score, 1),
        certified_suppliers=sum(1 for s in suppliers if s.iso14001),
        risk_distribution=RiskDistribution(
            low=sum(1 for s in suppliers if s.risk_level == RiskLevel.LOW),
            medium=sum(1 for s in suppliers if s.risk_level == RiskLevel.MEDIUM),
            high=sum(1 for s in suppliers if s.risk_level == RiskLevel.HIGH),
        ),
    )
