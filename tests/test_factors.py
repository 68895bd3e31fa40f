"""
Unit tests for individual sustainability factors.
"""
from sustain_engine.scoring.factors import (
    CAP_CARBON, CAP_WATER,
    score_carbon, score_water, score_waste_reduction, score_energy_efficiency,
    score_iso14001, score_recycling_policy, score_water_policy, score_sustainability_report,
)


class TestCarbon:
    def test_zero_emissions_full_score(self):
        assert score_carbon(0).sub_score == 100.0

    def test_half_cap(self):
        r = score_carbon(2000)
        assert r.sub_score == 50.0
        assert r.weight_key == "carbon_footprint"

    def test_at_cap_zero(self):
        assert score_carbon(CAP_CARBON).sub_score == 0.0

    def test_far_beyond_cap_clamps_to_zero(self):
        assert score_carbon(1_000_000).sub_score == 0.0


class TestWater:
    def test_zero_usage_full_score(self):
        assert score_water(0).sub_score == 100.0

    def test_partial(self):
        assert score_water(500).sub_score == 80.0

    def test_beyond_cap_clamps_to_zero(self):
        assert score_water(CAP_WATER * 10).sub_score == 0.0


class TestPercentages:
    def test_pass_through(self):
        assert score_energy_efficiency(72).sub_score == 72.0
        assert score_waste_reduction(35).sub_score == 35.0

    def test_missing_defaults_to_zero(self):
        assert score_energy_efficiency(None).sub_score == 0.0
        assert score_waste_reduction(None).sub_score == 0.0


class TestPolicies:
    def test_present_earns_full_sub_score(self):
        for fn in (score_iso14001, score_recycling_policy, score_water_policy, score_sustainability_report):
            r = fn(True)
            assert r.sub_score == 100.0
            assert r.raw_value == "Yes"

    def test_absent_earns_nothing(self):
        for fn in (score_iso14001, score_recycling_policy, score_water_policy, score_sustainability_report):
            assert fn(False).sub_score == 0.0
            assert fn(None).sub_score == 0.0
