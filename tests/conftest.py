"""Shared test fixtures for the SimLab test suite."""

import os
import pathlib

import pytest

# Ensure test environment variables are set before any settings import
os.environ.setdefault("SIMLAB_LOG_LEVEL", "DEBUG")
os.environ.setdefault("SIMLAB_DEFAULT_REPORT_SCENARIO", "moderate")

from simlab.scenario.models import PolicyBranch, Scenario, SimulationDataset, Snapshot

DATA_DIR = pathlib.Path(__file__).resolve().parent.parent / "data"


def make_snapshot(
    year: int,
    gini: float = 0.42,
    civic_trust: float = 0.45,
    ai_influence: float = 0.10,
    annual_emissions: float = 52.0,
    resilience_score: float = 0.35,
) -> Snapshot:
    """Build a snapshot from flat metric values."""
    return Snapshot.model_validate({
        "year": year,
        "economy": {"gini": gini, "civic_trust": civic_trust, "ai_influence": ai_influence},
        "climate": {"annual_emissions": annual_emissions, "resilience_score": resilience_score},
    })


def make_trajectory(first: Snapshot, last: Snapshot) -> list[Snapshot]:
    """Yearly snapshots from *first* to *last*, metrics interpolated linearly."""
    span = last.year - first.year
    if span <= 0:
        return [first]
    trajectory = [first]
    for step in range(1, span):
        f = step / span
        values = {
            key: first.metric(key) + (last.metric(key) - first.metric(key)) * f
            for key in first.metrics()
        }
        trajectory.append(make_snapshot(first.year + step, **values))
    trajectory.append(last)
    return trajectory


def make_scenario(
    scenario_id: str,
    trajectory: list[Snapshot],
    dividend: float = 0.0,
    charter: bool = False,
    capex: float = 0.0,
    name: str | None = None,
) -> Scenario:
    return Scenario(
        id=scenario_id,
        name=name or scenario_id.title(),
        branch=PolicyBranch(
            civic_dividend_rate=dividend,
            ai_charter_enabled=charter,
            climate_capex_share=capex,
        ),
        trajectory=trajectory,
    )


@pytest.fixture
def baseline():
    """The 2026 starting point shared by every branch."""
    return make_snapshot(2026)


@pytest.fixture
def aggressive_2041():
    return make_snapshot(
        2041,
        gini=0.32,
        civic_trust=0.70,
        ai_influence=0.55,
        annual_emissions=20.0,
        resilience_score=0.65,
    )


@pytest.fixture
def status_quo_2041():
    return make_snapshot(
        2041,
        gini=0.47,
        civic_trust=0.38,
        ai_influence=0.45,
        annual_emissions=50.0,
        resilience_score=0.30,
    )


@pytest.fixture
def aggressive_scenario(baseline, aggressive_2041):
    return make_scenario(
        "aggressive",
        make_trajectory(baseline, aggressive_2041),
        dividend=0.2,
        charter=True,
        capex=0.35,
        name="Aggressive Action",
    )


@pytest.fixture
def bau_scenario(baseline, status_quo_2041):
    return make_scenario(
        "bau",
        make_trajectory(baseline, status_quo_2041),
        dividend=0.0,
        charter=False,
        capex=0.1,
        name="Business as Usual",
    )


@pytest.fixture
def moderate_scenario(baseline):
    return make_scenario(
        "moderate",
        make_trajectory(baseline, make_snapshot(2041, gini=0.38, civic_trust=0.55, ai_influence=0.42,
                                                annual_emissions=36.0, resilience_score=0.47)),
        dividend=0.1,
        charter=True,
        capex=0.2,
        name="Moderate Reform",
    )


@pytest.fixture
def scenario_set(bau_scenario, moderate_scenario, aggressive_scenario):
    """Ordered least to most intervention."""
    return [bau_scenario, moderate_scenario, aggressive_scenario]


@pytest.fixture
def sample_dataset_path():
    return DATA_DIR / "simulation.json"


@pytest.fixture
def sample_dataset(sample_dataset_path):
    with open(sample_dataset_path, encoding="utf-8") as f:
        return SimulationDataset.model_validate_json(f.read())


@pytest.fixture
def snapshot_factory():
    return make_snapshot


@pytest.fixture
def scenario_factory():
    return make_scenario


@pytest.fixture
def trajectory_factory():
    return make_trajectory
