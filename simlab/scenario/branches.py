"""Branch analysis - how aggressive a scenario's policy levers are.

Intensity normalizes each lever across the scenario set, so the same branch
can rank differently in a different comparison set.
"""

from __future__ import annotations

from simlab.scenario.constants import INTENSITY_TIERS
from simlab.scenario.models import PolicyBranch, Scenario


def _min_max(value: float, lo: float, hi: float) -> float:
    return (value - lo) / (hi - lo) if hi > lo else 0.0


def intervention_intensity(scenario: Scenario, scenarios: list[Scenario]) -> float:
    """Mean of normalized dividend rate, climate capex share and charter flag."""
    if not scenarios:
        return 0.0
    divs = [s.branch.civic_dividend_rate for s in scenarios]
    caps = [s.branch.climate_capex_share for s in scenarios]
    b = scenario.branch
    div_norm = _min_max(b.civic_dividend_rate, min(divs), max(divs))
    cap_norm = _min_max(b.climate_capex_share, min(caps), max(caps))
    charter_norm = 1.0 if b.ai_charter_enabled else 0.0
    return (div_norm + cap_norm + charter_norm) / 3


def intensity_tier(intensity: float) -> str:
    for lower_bound, label in INTENSITY_TIERS:
        if intensity >= lower_bound:
            return label
    return INTENSITY_TIERS[-1][1]


def same_levers(a: PolicyBranch, b: PolicyBranch) -> bool:
    return (
        a.civic_dividend_rate == b.civic_dividend_rate
        and a.ai_charter_enabled == b.ai_charter_enabled
        and a.climate_capex_share == b.climate_capex_share
    )


def find_inaction_scenario(scenarios: list[Scenario]) -> Scenario | None:
    """Lowest dividend, no charter, lowest capex; else the first scenario."""
    if not scenarios:
        return None
    min_div = min(s.branch.civic_dividend_rate for s in scenarios)
    min_cap = min(s.branch.climate_capex_share for s in scenarios)
    for s in scenarios:
        b = s.branch
        if (
            b.civic_dividend_rate == min_div
            and not b.ai_charter_enabled
            and b.climate_capex_share == min_cap
        ):
            return s
    return scenarios[0]


def find_max_action_scenario(scenarios: list[Scenario]) -> Scenario | None:
    """Highest dividend, charter on, highest capex; else the last scenario."""
    if not scenarios:
        return None
    max_div = max(s.branch.civic_dividend_rate for s in scenarios)
    max_cap = max(s.branch.climate_capex_share for s in scenarios)
    for s in scenarios:
        b = s.branch
        if (
            b.civic_dividend_rate == max_div
            and b.ai_charter_enabled
            and b.climate_capex_share == max_cap
        ):
            return s
    return scenarios[-1]


def contrast_scenario(selected: Scenario | None, scenarios: list[Scenario]) -> Scenario | None:
    """Scenario to set against *selected* in the report's comparison section.

    Normally the status-quo branch; when *selected* already is the status
    quo, the boldest branch instead.
    """
    if selected is None:
        return None
    inaction = find_inaction_scenario(scenarios)
    if inaction is None:
        return None
    if same_levers(selected.branch, inaction.branch):
        return find_max_action_scenario(scenarios)
    return inaction


def branch_label(branch: PolicyBranch) -> str:
    """Compact lever summary, e.g. "Dividend 20% · Charter ON · Climate 35%"."""
    charter = "ON" if branch.ai_charter_enabled else "OFF"
    return (
        f"Dividend {branch.civic_dividend_rate * 100:.0f}% · Charter {charter} · "
        f"Climate {branch.climate_capex_share * 100:.0f}%"
    )
