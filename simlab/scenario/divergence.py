"""Divergence analysis between two branches and against the baseline.

Every good/bad judgement reads METRIC_DIRECTIONS so the comparison cards,
the baseline deltas and the report text never disagree.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from simlab.scenario.constants import (
    DIVERGENCE_METRICS,
    METRIC_DIRECTIONS,
    METRIC_LABELS,
    METRIC_ORDER,
    METRIC_SHORT_LABELS,
    STABLE_TOLERANCE,
)
from simlab.scenario.models import Scenario, Snapshot


class MetricDivergence(BaseModel):
    """Signed gap between two snapshots on one metric."""
    metric: str
    label: str
    delta: float
    judged_good: bool


class BaselineDelta(BaseModel):
    """Movement of one metric since the baseline."""
    metric: str
    label: str
    current: float
    baseline: float
    delta: float
    good: bool


def judge_delta(metric: str, delta: float, inclusive: bool = False) -> bool:
    """Is *delta* a move in the metric's good direction?

    With ``inclusive`` a zero delta counts as good (used for the baseline
    cards, where "no worse than baseline" is the bar).
    """
    direction = METRIC_DIRECTIONS.get(metric, "stable")
    if direction == "higher_is_better":
        return delta >= 0 if inclusive else delta > 0
    if direction == "lower_is_better":
        return delta <= 0 if inclusive else delta < 0
    return abs(delta) < STABLE_TOLERANCE


def compare(a: Snapshot | None, b: Snapshot | None) -> list[MetricDivergence] | None:
    """Compare *a* against *b* on gini, trust, emissions and resilience.

    ``delta = a - b``. Returns None when either side is missing.
    """
    if a is None or b is None:
        return None
    result = []
    for metric in DIVERGENCE_METRICS:
        delta = a.metric(metric) - b.metric(metric)
        result.append(MetricDivergence(
            metric=metric,
            label=METRIC_SHORT_LABELS[metric],
            delta=delta,
            judged_good=judge_delta(metric, delta),
        ))
    return result


def compare_at(primary: Scenario, other: Scenario, index: int) -> list[MetricDivergence] | None:
    """Compare two scenarios at the same trajectory position.

    The other trajectory may be shorter; positions past its end yield None.
    """
    return compare(primary.snapshot_at(index), other.snapshot_at(index))


def baseline_deltas(current: Snapshot | None, baseline: Snapshot | None) -> list[BaselineDelta]:
    """Per-metric movement since baseline for all five metrics."""
    if current is None or baseline is None:
        return []
    cards = []
    for metric in METRIC_ORDER:
        cur = current.metric(metric)
        base = baseline.metric(metric)
        delta = cur - base
        cards.append(BaselineDelta(
            metric=metric,
            label=METRIC_LABELS[metric],
            current=cur,
            baseline=base,
            delta=delta,
            good=judge_delta(metric, delta, inclusive=True),
        ))
    return cards


def format_delta(delta: float, digits: int = 3) -> str:
    """Signed fixed-point rendering, e.g. +0.120 or -0.100."""
    return f"{delta:+.{digits}f}"


def overlay_series(a: Scenario, b: Scenario) -> list[dict[str, Any]]:
    """Index-aligned rows for plotting two trajectories together.

    Runs over the longer trajectory; the shorter side reads as None.
    """
    length = max(len(a.trajectory), len(b.trajectory))
    start = a.start_year or b.start_year or 0
    rows: list[dict[str, Any]] = []
    for i in range(length):
        sa = a.snapshot_at(i)
        sb = b.snapshot_at(i)
        if sa is not None:
            year = sa.year
        elif sb is not None:
            year = sb.year
        else:
            year = start + i
        row: dict[str, Any] = {"year": year}
        for metric in METRIC_ORDER:
            row[f"a_{metric}"] = sa.metric(metric) if sa is not None else None
            row[f"b_{metric}"] = sb.metric(metric) if sb is not None else None
        rows.append(row)
    return rows
