"""Composite trajectory scorer.

Reduces a snapshot and the session baseline to a 0-100 score built from five
sub-scores, each clamped to [0, 1] and oriented so that 1.0 is best:

    Equality         1 - gini
    Trust            civic_trust
    Resilience       resilience_score
    Decarbonization  1 - emissions / max(1, baseline emissions)
    AI governance    clamp(trust / threshold) - gap * penalty,
                     gap = max(0, ai_influence - trust - margin)

The AI governance term treats automation outpacing institutional trust as the
dominant failure mode; low trust alone only lowers readiness.
"""

from __future__ import annotations

import logging

import numpy as np
from pydantic import BaseModel, Field

from simlab.scenario.constants import (
    COMPONENT_TIER_BOUNDS,
    COMPONENT_TIER_PHRASES,
    METRIC_DIRECTIONS,
    RATING_BANDS,
)
from simlab.scenario.models import Snapshot
from simlab.utils import clamp01, round_half_up

logger = logging.getLogger(__name__)


class GovernanceWeights(BaseModel):
    """Heuristic constants of the AI governance sub-score.

    Not empirically calibrated; override through settings when exploring.
    """
    trust_threshold: float = Field(default=0.65, gt=0)
    gap_margin: float = 0.1
    gap_penalty: float = Field(default=2.5, ge=0)


DEFAULT_GOVERNANCE = GovernanceWeights()


class ScoreComponent(BaseModel):
    key: str
    label: str
    value: float          # clamped sub-score in [0, 1]
    points: int           # value on a 0-100 scale
    explanation: str


class ScoreBreakdown(BaseModel):
    total: int
    rating: str
    components: list[ScoreComponent]

    def component(self, key: str) -> ScoreComponent | None:
        for c in self.components:
            if c.key == key:
                return c
        return None


def rating_for(total: int) -> str:
    """Map a 0-100 total to its rating label."""
    for lower_bound, label in RATING_BANDS:
        if total >= lower_bound:
            return label
    return RATING_BANDS[-1][1]


def oriented(metric: str, value: float) -> float:
    """Orient a normalized metric so that 1.0 is the good end."""
    if METRIC_DIRECTIONS.get(metric) == "lower_is_better":
        return clamp01(1 - value)
    return clamp01(value)


def governance_score(
    civic_trust: float,
    ai_influence: float,
    weights: GovernanceWeights = DEFAULT_GOVERNANCE,
) -> float:
    """Readiness minus the penalized trust/automation gap, clamped to [0, 1]."""
    readiness = clamp01(civic_trust / weights.trust_threshold)
    gap = max(0.0, ai_influence - civic_trust - weights.gap_margin)
    return clamp01(readiness - gap * weights.gap_penalty)


def decarbonization_score(current_emissions: float, baseline_emissions: float) -> float:
    """Fraction of baseline emissions eliminated, clamped to [0, 1]."""
    return clamp01(1 - current_emissions / max(1.0, baseline_emissions))


def _tier_phrase(component: str, value: float) -> str:
    strong, fair = COMPONENT_TIER_BOUNDS[component]
    phrases = COMPONENT_TIER_PHRASES[component]
    if value > strong:
        return phrases[0]
    if value > fair:
        return phrases[1]
    return phrases[2]


def compute_composite_score(
    current: Snapshot | None,
    baseline: Snapshot | None,
    weights: GovernanceWeights = DEFAULT_GOVERNANCE,
) -> ScoreBreakdown | None:
    """Score *current* against *baseline*.

    Returns None when either snapshot is missing, e.g. a trajectory index
    beyond the end of a shorter scenario. Callers hide the score in that case.
    """
    if current is None or baseline is None:
        return None

    g = oriented("gini", current.gini)
    t = oriented("civic_trust", current.civic_trust)
    r = oriented("resilience_score", current.resilience_score)
    e = decarbonization_score(current.annual_emissions, baseline.annual_emissions)
    a = governance_score(current.civic_trust, current.ai_influence, weights)

    total = round_half_up(float(np.mean([g, t, r, e, a])) * 100)
    rating = rating_for(total)

    components = [
        ScoreComponent(
            key="equality",
            label="Equality",
            value=g,
            points=round_half_up(g * 100),
            explanation=f"GINI is {current.gini:.3f} - {_tier_phrase('equality', g)}",
        ),
        ScoreComponent(
            key="trust",
            label="Civic trust",
            value=t,
            points=round_half_up(t * 100),
            explanation=f"Trust at {current.civic_trust:.3f} - {_tier_phrase('trust', t)}",
        ),
        ScoreComponent(
            key="resilience",
            label="Resilience",
            value=r,
            points=round_half_up(r * 100),
            explanation=(
                f"Score {current.resilience_score:.3f} - {_tier_phrase('resilience', r)}"
            ),
        ),
        ScoreComponent(
            key="decarbonization",
            label="Decarbonization",
            value=e,
            points=round_half_up(e * 100),
            explanation=(
                f"Emissions {current.annual_emissions:.2f} Gt vs "
                f"{baseline.annual_emissions:.2f} Gt baseline - "
                f"{_tier_phrase('decarbonization', e)}"
            ),
        ),
        ScoreComponent(
            key="ai_governance",
            label="AI governance",
            value=a,
            points=round_half_up(a * 100),
            explanation=(
                f"AI at {current.ai_influence:.3f}, trust at {current.civic_trust:.3f} - "
                f"{_tier_phrase('ai_governance', a)}"
            ),
        ),
    ]

    logger.debug("Composite score for %s: %d (%s)", current.year, total, rating)
    return ScoreBreakdown(total=total, rating=rating, components=components)
