"""
Improvement recommendations for a scored supplier.

Rules are checked in a fixed order and the result is truncated to the first
three. A supplier that triggers nothing, or that already scores above 80,
also gets the "maintain excellence" note.
"""
from __future__ import annotations

from sustain_engine.schemas.insights import Recommendation
from sustain_engine.schemas.supplier import RiskLevel, SupplierWithCalculated

MAX_RECOMMENDATIONS = 3

CARBON_THRESHOLD = 2000    # tons/year
WATER_THRESHOLD = 1500     # liters
WASTE_THRESHOLD = 15       # tons
EXCELLENCE_SCORE = 80


def recommend(supplier: SupplierWithCalculated) -> list[Recommendation]:
    recommendations: list[Recommendation] = []

    if supplier.carbon_footprint > CARBON_THRESHOLD:
        recommendations.append(Recommendation(
            type="Carbon Reduction Strategy",
            title="High Carbon Footprint Detected",
            description=(
                f"Your carbon footprint of {supplier.carbon_footprint:g} tons is above industry standards. "
                "Consider implementing renewable energy sources and energy efficiency measures "
                "to reduce emissions by 20-30%."
            ),
        ))

    if supplier.water_usage > WATER_THRESHOLD:
        recommendations.append(Recommendation(
            type="Water Conservation Initiative",
            title="Water Usage Optimization",
            description=(
                f"With {supplier.water_usage:g}L water usage, implementing water recycling systems "
                "and monitoring could reduce consumption by 15-25%."
            ),
        ))

    if supplier.waste_generation > WASTE_THRESHOLD:
        recommendations.append(Recommendation(
            type="Waste Management Enhancement",
            title="Reduce Waste Generation",
            description=(
                f"Generating {supplier.waste_generation:g} tons of waste leaves room for improvement. "
                "A comprehensive recycling and reuse program could cut disposal costs "
                "and lift your sustainability score."
            ),
        ))

    if not supplier.iso14001:
        recommendations.append(Recommendation(
            type="Certification Opportunity",
            title="ISO 14001 Certification",
            description=(
                "Obtaining ISO 14001 certification would demonstrate environmental management "
                "commitment and could boost your sustainability score significantly."
            ),
        ))

    if supplier.risk_level == RiskLevel.HIGH:
        recommendations.append(Recommendation(
            type="Risk Management",
            title="Risk Mitigation Required",
            description=(
                "Your sustainability score places you in the high risk band. Consider diversifying "
                "suppliers and implementing risk monitoring systems."
            ),
        ))

    if not recommendations or supplier.sustainability_score > EXCELLENCE_SCORE:
        recommendations.append(Recommendation(
            type="Sustainability Leadership",
            title="Maintain Excellence",
            description=(
                "Your sustainability performance is excellent. Consider sharing best practices with "
                "other suppliers and exploring additional green initiatives to lead by example."
            ),
        ))

    return recommendations[:MAX_RECOMMENDATIONS]
