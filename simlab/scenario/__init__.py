"""Scenario trajectory scoring.

Models for pre-computed policy scenarios plus the pure functions that score
a snapshot, classify its era, and compare branches.
"""

from simlab.scenario.models import (
    ClimateState,
    EconomyState,
    PolicyBranch,
    Scenario,
    SimulationDataset,
    Snapshot,
)
from simlab.scenario.scorer import (
    GovernanceWeights,
    ScoreBreakdown,
    ScoreComponent,
    compute_composite_score,
    rating_for,
)
from simlab.scenario.eras import Era, classify_era, era_for
from simlab.scenario.divergence import (
    BaselineDelta,
    MetricDivergence,
    baseline_deltas,
    compare,
    compare_at,
    overlay_series,
)
from simlab.scenario.branches import (
    branch_label,
    contrast_scenario,
    find_inaction_scenario,
    find_max_action_scenario,
    intensity_tier,
    intervention_intensity,
)
from simlab.scenario.data_loader import load_dataset

__all__ = [
    "ClimateState",
    "EconomyState",
    "PolicyBranch",
    "Scenario",
    "SimulationDataset",
    "Snapshot",
    "GovernanceWeights",
    "ScoreBreakdown",
    "ScoreComponent",
    "compute_composite_score",
    "rating_for",
    "Era",
    "classify_era",
    "era_for",
    "BaselineDelta",
    "MetricDivergence",
    "baseline_deltas",
    "compare",
    "compare_at",
    "overlay_series",
    "branch_label",
    "contrast_scenario",
    "find_inaction_scenario",
    "find_max_action_scenario",
    "intensity_tier",
    "intervention_intensity",
    "load_dataset",
]
