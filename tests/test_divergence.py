"""Tests for branch divergence, baseline deltas and overlay series."""

import pytest

from simlab.scenario.divergence import (
    baseline_deltas,
    compare,
    compare_at,
    format_delta,
    judge_delta,
    overlay_series,
)


class TestJudgeDelta:
    def test_lower_is_better(self):
        assert judge_delta("gini", -0.1) is True
        assert judge_delta("gini", 0.1) is False
        assert judge_delta("annual_emissions", -3.0) is True

    def test_higher_is_better(self):
        assert judge_delta("civic_trust", 0.1) is True
        assert judge_delta("resilience_score", -0.1) is False

    def test_zero_is_not_good_when_strict(self):
        assert judge_delta("gini", 0.0) is False
        assert judge_delta("civic_trust", 0.0) is False

    def test_zero_is_good_when_inclusive(self):
        assert judge_delta("gini", 0.0, inclusive=True) is True
        assert judge_delta("civic_trust", 0.0, inclusive=True) is True

    def test_stable_metric(self):
        assert judge_delta("ai_influence", 0.04) is True
        assert judge_delta("ai_influence", -0.04) is True
        assert judge_delta("ai_influence", 0.2) is False


class TestCompare:
    def test_gini_lower_is_good(self, snapshot_factory):
        a = snapshot_factory(2040, gini=0.30)
        b = snapshot_factory(2040, gini=0.40)
        gini = next(d for d in compare(a, b) if d.metric == "gini")
        assert gini.delta == pytest.approx(-0.10)
        assert gini.judged_good is True

    def test_trust_drop_is_bad(self, snapshot_factory):
        a = snapshot_factory(2040, civic_trust=0.40)
        b = snapshot_factory(2040, civic_trust=0.55)
        trust = next(d for d in compare(a, b) if d.metric == "civic_trust")
        assert trust.delta == pytest.approx(-0.15)
        assert trust.judged_good is False

    def test_four_metrics_without_ai(self, aggressive_2041, status_quo_2041):
        result = compare(aggressive_2041, status_quo_2041)
        assert [d.metric for d in result] == [
            "gini", "civic_trust", "annual_emissions", "resilience_score",
        ]
        assert [d.label for d in result] == ["GINI", "Trust", "Emissions", "Resilience"]
        assert all(d.judged_good for d in result)

    def test_none_when_side_missing(self, baseline):
        assert compare(baseline, None) is None
        assert compare(None, baseline) is None

    def test_compare_at_shorter_trajectory(self, scenario_factory, snapshot_factory):
        long = scenario_factory("long", [snapshot_factory(2026 + i) for i in range(3)])
        short = scenario_factory("short", [snapshot_factory(2026)])
        assert compare_at(long, short, 0) is not None
        assert compare_at(long, short, 2) is None


class TestBaselineDeltas:
    def test_all_five_metrics(self, aggressive_2041, baseline):
        cards = baseline_deltas(aggressive_2041, baseline)
        assert [c.metric for c in cards] == [
            "gini", "civic_trust", "annual_emissions", "resilience_score", "ai_influence",
        ]

    def test_goodness(self, aggressive_2041, baseline):
        cards = {c.metric: c for c in baseline_deltas(aggressive_2041, baseline)}
        assert cards["gini"].good is True
        assert cards["annual_emissions"].delta == pytest.approx(-32.0)
        assert cards["annual_emissions"].good is True
        # ai influence grew by 0.45, well outside the stable band
        assert cards["ai_influence"].good is False

    def test_unchanged_is_good(self, baseline):
        assert all(c.good for c in baseline_deltas(baseline, baseline))

    def test_empty_when_missing(self, baseline):
        assert baseline_deltas(None, baseline) == []


class TestFormatDelta:
    def test_signed(self):
        assert format_delta(0.12) == "+0.120"
        assert format_delta(-0.1) == "-0.100"
        assert format_delta(-32.0, 1) == "-32.0"


class TestOverlaySeries:
    def test_runs_over_longer_trajectory(self, scenario_factory, snapshot_factory):
        a = scenario_factory("a", [snapshot_factory(2026), snapshot_factory(2027, gini=0.3)])
        b = scenario_factory("b", [snapshot_factory(2026, gini=0.5)])
        rows = overlay_series(a, b)
        assert len(rows) == 2
        assert rows[0]["a_gini"] == 0.42
        assert rows[0]["b_gini"] == 0.5
        assert rows[1]["year"] == 2027
        assert rows[1]["a_gini"] == 0.3
        assert rows[1]["b_gini"] is None

    def test_year_from_other_side_when_first_is_short(self, scenario_factory, snapshot_factory):
        a = scenario_factory("a", [snapshot_factory(2026)])
        b = scenario_factory("b", [snapshot_factory(2026), snapshot_factory(2027)])
        rows = overlay_series(a, b)
        assert rows[1]["year"] == 2027
        assert rows[1]["a_civic_trust"] is None
