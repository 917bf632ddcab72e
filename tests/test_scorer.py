"""Tests for the composite trajectory scorer.

Covers: component formulas and clamping, AI governance gap penalty,
half-up rounding of the total, rating bands and explanation text.
"""

import pytest

from simlab.scenario.scorer import (
    GovernanceWeights,
    compute_composite_score,
    decarbonization_score,
    governance_score,
    oriented,
    rating_for,
)
from simlab.utils import round_half_up


class TestRatingFor:
    @pytest.mark.parametrize("total,expected", [
        (100, "Thriving"),
        (80, "Thriving"),
        (79, "Promising"),
        (65, "Promising"),
        (64, "Mixed signals"),
        (50, "Mixed signals"),
        (49, "Under stress"),
        (35, "Under stress"),
        (34, "Critical"),
        (0, "Critical"),
    ])
    def test_bands(self, total, expected):
        assert rating_for(total) == expected


class TestComponents:
    def test_oriented_lower_is_better(self):
        assert oriented("gini", 0.3) == pytest.approx(0.7)

    def test_oriented_higher_is_better(self):
        assert oriented("civic_trust", 0.6) == pytest.approx(0.6)

    def test_oriented_clamps(self):
        assert oriented("civic_trust", 1.4) == 1.0
        assert oriented("gini", 1.2) == 0.0

    def test_decarbonization_fraction_of_baseline(self):
        assert decarbonization_score(20.0, 52.0) == pytest.approx(1 - 20 / 52)

    def test_decarbonization_clamped_at_zero_when_emissions_double(self):
        assert decarbonization_score(104.0, 52.0) == 0.0
        assert decarbonization_score(500.0, 52.0) == 0.0

    def test_decarbonization_small_baseline_uses_floor_of_one(self):
        assert decarbonization_score(0.5, 0.5) == pytest.approx(0.5)

    def test_decarbonization_negative_emissions_clamped_to_one(self):
        assert decarbonization_score(-5.0, 52.0) == 1.0

    def test_governance_full_when_trust_above_threshold_and_no_gap(self):
        assert governance_score(0.70, 0.55) == 1.0

    def test_governance_readiness_scales_with_trust(self):
        assert governance_score(0.45, 0.10) == pytest.approx(0.45 / 0.65)

    def test_governance_gap_penalty(self):
        # gap = 0.8 - 0.3 - 0.1 = 0.4, penalty 1.0 wipes out readiness
        assert governance_score(0.30, 0.80) == 0.0

    def test_governance_margin_tolerates_small_gap(self):
        # ai exceeds trust by exactly the margin: no penalty
        assert governance_score(0.65, 0.75) == pytest.approx(1.0)

    def test_governance_weights_are_configurable(self):
        lenient = GovernanceWeights(trust_threshold=0.3, gap_margin=0.5, gap_penalty=0.0)
        assert governance_score(0.30, 0.80, lenient) == 1.0

    def test_governance_threshold_must_be_positive(self):
        with pytest.raises(ValueError):
            GovernanceWeights(trust_threshold=0)


class TestComputeCompositeScore:
    def test_none_when_current_missing(self, baseline):
        assert compute_composite_score(None, baseline) is None

    def test_none_when_baseline_missing(self, aggressive_2041):
        assert compute_composite_score(aggressive_2041, None) is None

    def test_baseline_against_itself(self, baseline):
        result = compute_composite_score(baseline, baseline)
        # (0.58 + 0.45 + 0.35 + 0 + 0.6923) / 5 = 0.4145
        assert result.total == 41
        assert result.rating == "Under stress"

    def test_aggressive_2041(self, aggressive_2041, baseline):
        result = compute_composite_score(aggressive_2041, baseline)
        # (0.68 + 0.70 + 0.65 + 0.6154 + 1.0) / 5 = 0.7291
        assert result.total == 73
        assert result.rating == "Promising"

    def test_five_components_in_order(self, aggressive_2041, baseline):
        result = compute_composite_score(aggressive_2041, baseline)
        assert [c.key for c in result.components] == [
            "equality", "trust", "resilience", "decarbonization", "ai_governance",
        ]

    def test_component_points(self, aggressive_2041, baseline):
        result = compute_composite_score(aggressive_2041, baseline)
        assert result.component("equality").points == 68
        assert result.component("decarbonization").points == 62
        assert result.component("ai_governance").points == 100
        assert result.component("missing") is None

    def test_explanations_quote_metric_values(self, aggressive_2041, baseline):
        result = compute_composite_score(aggressive_2041, baseline)
        assert result.component("equality").explanation == (
            "GINI is 0.320 - moderate inequality remains"
        )
        assert "20.00 Gt vs 52.00 Gt baseline" in result.component("decarbonization").explanation
        assert result.component("ai_governance").explanation.endswith(
            "governance institutions are strong and keeping pace"
        )

    @pytest.mark.parametrize(
        "gini, phrase",
        [
            (0.25, "income is well distributed"),
            (0.45, "moderate inequality remains"),
            (0.55, "significant inequality persists"),
        ],
    )
    def test_equality_tiers(self, gini, phrase, snapshot_factory, baseline):
        result = compute_composite_score(snapshot_factory(2040, gini=gini), baseline)
        assert result.component("equality").explanation.endswith(phrase)

    def test_tier_cutoffs_differ_by_component(self, snapshot_factory, baseline):
        # 0.45 is in the middle tier for trust but the lowest tier for equality
        snap = snapshot_factory(2040, gini=0.55, civic_trust=0.45)
        result = compute_composite_score(snap, baseline)
        assert result.component("trust").explanation.endswith(
            "cooperation is possible but fragile"
        )
        assert result.component("equality").explanation.endswith(
            "significant inequality persists"
        )

    def test_components_clamped_for_unit_interval_inputs(self, snapshot_factory, baseline):
        for value in (0.0, 0.25, 0.5, 0.75, 1.0):
            snap = snapshot_factory(2030, gini=value, civic_trust=value, resilience_score=value)
            result = compute_composite_score(snap, baseline)
            for c in result.components:
                assert 0.0 <= c.value <= 1.0
            assert 0 <= result.total <= 100

    def test_extreme_emissions_clamp_decarbonization(self, snapshot_factory, baseline):
        snap = snapshot_factory(2030, annual_emissions=2 * baseline.annual_emissions)
        result = compute_composite_score(snap, baseline)
        assert result.component("decarbonization").value == 0.0

    def test_custom_weights_change_total(self, snapshot_factory, baseline):
        snap = snapshot_factory(2040, civic_trust=0.3, ai_influence=0.8)
        default = compute_composite_score(snap, baseline)
        lenient = compute_composite_score(
            snap, baseline, GovernanceWeights(trust_threshold=0.3, gap_penalty=0.0)
        )
        assert lenient.total > default.total


class TestRoundHalfUp:
    def test_half_rounds_up(self):
        assert round_half_up(72.5) == 73
        assert round_half_up(0.5) == 1

    def test_below_half_rounds_down(self):
        assert round_half_up(72.49) == 72
