"""Era classifier - buckets elapsed simulated years into narrative phases.

Report language shifts tone as a scenario ages: early years cannot claim
outcomes that have not had time to compound.
"""

from __future__ import annotations

from enum import Enum

from simlab.scenario.constants import ERA_UPPER_BOUNDS
from simlab.scenario.models import Snapshot


class Era(str, Enum):
    """Narrative phase of a trajectory.

    dawn:    0-5 years after baseline
    diverge: 6-15
    mature:  16-30
    legacy:  31+
    """
    dawn = "dawn"
    diverge = "diverge"
    mature = "mature"
    legacy = "legacy"

    @property
    def label(self) -> str:
        return _ERA_LABELS[self]


_ERA_LABELS: dict[Era, str] = {
    Era.dawn: "Dawn",
    Era.diverge: "Divergence",
    Era.mature: "Maturity",
    Era.legacy: "Legacy",
}


def classify_era(elapsed_years: int) -> Era:
    """Map elapsed years since baseline to an era. Negative input reads as dawn."""
    for upper, name in ERA_UPPER_BOUNDS:
        if elapsed_years <= upper:
            return Era(name)
    return Era.legacy


def elapsed_years(snapshot: Snapshot, baseline: Snapshot) -> int:
    return snapshot.year - baseline.year


def era_for(snapshot: Snapshot, baseline: Snapshot) -> Era:
    return classify_era(elapsed_years(snapshot, baseline))
