"""
Tests for improvement recommendations and the dashboard portfolio summary.
"""
from sustain_engine.schemas.supplier import RiskLevel, SupplierWithCalculated
from sustain_engine.scoring.portfolio import summarize
from sustain_engine.scoring.recommendations import recommend


def _make_scored(**overrides) -> SupplierWithCalculated:
    """Baseline supplier that triggers no threshold rule."""
    kwargs = {
        "id": "SUP-001",
        "name": "Baseline Ltd.",
        "carbon_footprint": 1000,
        "water_usage": 500,
        "waste_generation": 5,
        "iso14001": True,
        "sustainability_score": 70,
        "risk_level": RiskLevel.MEDIUM,
    }
    kwargs.update(overrides)
    return SupplierWithCalculated(**kwargs)


class TestRecommendations:

    def test_nothing_triggered_gives_excellence(self):
        recs = recommend(_make_scored())
        assert [r.title for r in recs] == ["Maintain Excellence"]

    def test_high_score_appends_excellence(self):
        recs = recommend(_make_scored(carbon_footprint=2500, sustainability_score=81, risk_level=RiskLevel.LOW))
        assert [r.title for r in recs] == ["High Carbon Footprint Detected", "Maintain Excellence"]

    def test_score_of_80_is_not_excellent(self):
        recs = recommend(_make_scored(carbon_footprint=2500, sustainability_score=80, risk_level=RiskLevel.LOW))
        assert [r.title for r in recs] == ["High Carbon Footprint Detected"]

    def test_thresholds_are_strict(self):
        recs = recommend(_make_scored(carbon_footprint=2000, water_usage=1500, waste_generation=15))
        assert [r.title for r in recs] == ["Maintain Excellence"]

    def test_all_rules_capped_at_three_in_order(self):
        supplier = _make_scored(
            carbon_footprint=3890,
            water_usage=2100,
            waste_generation=22,
            iso14001=False,
            sustainability_score=12,
            risk_level=RiskLevel.HIGH,
        )
        recs = recommend(supplier)
        assert len(recs) == 3
        assert [r.type for r in recs] == [
            "Carbon Reduction Strategy",
            "Water Conservation Initiative",
            "Waste Management Enhancement",
        ]

    def test_certification_and_risk(self):
        recs = recommend(_make_scored(iso14001=False, sustainability_score=30, risk_level=RiskLevel.HIGH))
        assert [r.title for r in recs] == ["ISO 14001 Certification", "Risk Mitigation Required"]

    def test_description_mentions_metric(self):
        recs = recommend(_make_scored(carbon_footprint=3890))
        assert "3890 tons" in recs[0].description

    def test_deterministic(self):
        supplier = _make_scored(water_usage=1800, iso14001=False)
        assert recommend(supplier) == recommend(supplier)


class TestPortfolioSummary:

    def test_summary(self):
        suppliers = [
            _make_scored(id="A", sustainability_score=85, risk_level=RiskLevel.LOW),
            _make_scored(id="B", sustainability_score=60, risk_level=RiskLevel.MEDIUM, iso14001=False),
            _make_scored(id="C", sustainability_score=21, risk_level=RiskLevel.HIGH, iso14001=False),
        ]
        metrics = summarize(suppliers)

        assert metrics.total_suppliers == 3
        assert metrics.avg_score == 55.3
        assert metrics.certified_suppliers == 1
        assert (metrics.risk_distribution.low, metrics.risk_distribution.medium, metrics.risk_distribution.high) == (1, 1, 1)

    def test_empty_portfolio(self):
        metrics = summarize([])
        assert metrics.total_suppliers == 0
        assert metrics.avg_score == 0.0
        assert metrics.risk_distribution.high == 0
