"""Pydantic v2 models for pre-computed scenario trajectories.

Mirrors the dataset document: a ``scenarios`` array where each scenario
carries its policy levers (``branch``) and a year-ordered ``trajectory`` of
snapshots with an ``economy`` and a ``climate`` block.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class EconomyState(BaseModel):
    """Economic block of a snapshot. All values nominally in [0, 1]."""
    model_config = ConfigDict(frozen=True)

    gini: float
    civic_trust: float
    ai_influence: float


class ClimateState(BaseModel):
    """Climate block of a snapshot."""
    model_config = ConfigDict(frozen=True)

    annual_emissions: float  # Gt CO2e, no fixed upper bound
    resilience_score: float


class Snapshot(BaseModel):
    """One simulated year of one scenario."""
    model_config = ConfigDict(frozen=True)

    year: int
    economy: EconomyState
    climate: ClimateState

    @property
    def gini(self) -> float:
        return self.economy.gini

    @property
    def civic_trust(self) -> float:
        return self.economy.civic_trust

    @property
    def ai_influence(self) -> float:
        return self.economy.ai_influence

    @property
    def annual_emissions(self) -> float:
        return self.climate.annual_emissions

    @property
    def resilience_score(self) -> float:
        return self.climate.resilience_score

    def metric(self, key: str) -> float:
        """Return a metric by key; unknown keys read as 0.0."""
        if key in ("gini", "civic_trust", "ai_influence"):
            return getattr(self.economy, key)
        if key in ("annual_emissions", "resilience_score"):
            return getattr(self.climate, key)
        return 0.0

    def metrics(self) -> dict[str, float]:
        """All five metric values keyed by metric name."""
        return {
            "gini": self.gini,
            "civic_trust": self.civic_trust,
            "annual_emissions": self.annual_emissions,
            "resilience_score": self.resilience_score,
            "ai_influence": self.ai_influence,
        }


class PolicyBranch(BaseModel):
    """Policy levers that distinguish one scenario from another.

    Only used as report text inputs and for intervention intensity,
    never for the composite score.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    civic_dividend_rate: float = 0.0
    ai_charter_enabled: bool = Field(
        default=False,
        validation_alias=AliasChoices("ai_charter_enabled", "ai_charter"),
    )
    climate_capex_share: float = 0.0


class Scenario(BaseModel):
    """An immutable, pre-computed policy path."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    icon: str = ""
    color: str = ""
    description: str = ""
    branch: PolicyBranch = Field(default_factory=PolicyBranch)
    trajectory: list[Snapshot] = Field(default_factory=list)

    @field_validator("trajectory")
    @classmethod
    def validate_year_order(cls, v: list[Snapshot]) -> list[Snapshot]:
        for prev, cur in zip(v, v[1:]):
            if cur.year != prev.year + 1:
                raise ValueError(
                    f"Trajectory must hold one snapshot per year ({prev.year} -> {cur.year})"
                )
        return v

    @property
    def start_year(self) -> int | None:
        return self.trajectory[0].year if self.trajectory else None

    def snapshot_at(self, index: int) -> Snapshot | None:
        """Return the snapshot at a trajectory position, or None if out of range."""
        if 0 <= index < len(self.trajectory):
            return self.trajectory[index]
        return None


class SimulationDataset(BaseModel):
    """The full, read-only set of scenarios for a session."""
    scenarios: list[Scenario] = Field(default_factory=list)

    @field_validator("scenarios")
    @classmethod
    def validate_shared_start(cls, v: list[Scenario]) -> list[Scenario]:
        starts = {s.start_year for s in v if s.start_year is not None}
        if len(starts) > 1:
            raise ValueError(f"Scenarios must share a starting year, got {sorted(starts)}")
        return v

    @property
    def baseline(self) -> Snapshot | None:
        """First scenario's first snapshot, the reference for every score."""
        if not self.scenarios:
            return None
        return self.scenarios[0].snapshot_at(0)

    def get(self, scenario_id: str) -> Scenario | None:
        for scenario in self.scenarios:
            if scenario.id == scenario_id:
                return scenario
        return None

    def index_of(self, scenario_id: str) -> int | None:
        for i, scenario in enumerate(self.scenarios):
            if scenario.id == scenario_id:
                return i
        return None
