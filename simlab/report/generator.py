"""Report Assembler.

Turns a scenario position into a multi-section report. All numbers are
computed once into ``ReportFacts``; each section then picks its phrasing
from the (scenario, era) template tables and fills it from the same
pre-formatted mapping. Output depends only on the inputs.
"""

from __future__ import annotations

import logging
from typing import Optional

from simlab.report.models import (
    OpposingFacts,
    ReportFacts,
    ReportSection,
    ScenarioReport,
    SectionKey,
)
from simlab.report.renderers import render_markdown
from simlab.report.templates import select_template
from simlab.scenario.divergence import MetricDivergence, compare, format_delta
from simlab.scenario.eras import classify_era, elapsed_years
from simlab.scenario.models import Scenario, Snapshot
from simlab.scenario.scorer import DEFAULT_GOVERNANCE, GovernanceWeights, compute_composite_score
from simlab.settings import get_settings

logger = logging.getLogger(__name__)


def build_facts(
    scenario: Scenario,
    snapshot: Snapshot,
    baseline: Snapshot,
    opposing_snapshot: Optional[Snapshot] = None,
    weights: GovernanceWeights = DEFAULT_GOVERNANCE,
) -> ReportFacts:
    """Compute every number the report will mention."""
    elapsed = elapsed_years(snapshot, baseline)
    breakdown = compute_composite_score(snapshot, baseline, weights)
    emissions_pct = (
        (snapshot.annual_emissions - baseline.annual_emissions)
        / max(1.0, baseline.annual_emissions)
        * 100
    )

    opposing = None
    if opposing_snapshot is not None:
        opposing = OpposingFacts(
            gini=opposing_snapshot.gini,
            civic_trust=opposing_snapshot.civic_trust,
            annual_emissions=opposing_snapshot.annual_emissions,
            resilience_score=opposing_snapshot.resilience_score,
            ai_influence=opposing_snapshot.ai_influence,
            divergence=compare(snapshot, opposing_snapshot) or [],
        )

    branch = scenario.branch
    return ReportFacts(
        scenario_id=scenario.id,
        scenario_name=scenario.name,
        year=snapshot.year,
        baseline_year=baseline.year,
        elapsed_years=elapsed,
        era=classify_era(elapsed),
        gini=snapshot.gini,
        civic_trust=snapshot.civic_trust,
        annual_emissions=snapshot.annual_emissions,
        resilience_score=snapshot.resilience_score,
        ai_influence=snapshot.ai_influence,
        baseline_gini=baseline.gini,
        baseline_civic_trust=baseline.civic_trust,
        baseline_annual_emissions=baseline.annual_emissions,
        baseline_resilience_score=baseline.resilience_score,
        baseline_ai_influence=baseline.ai_influence,
        gini_delta=snapshot.gini - baseline.gini,
        trust_delta=snapshot.civic_trust - baseline.civic_trust,
        emissions_delta=snapshot.annual_emissions - baseline.annual_emissions,
        resilience_delta=snapshot.resilience_score - baseline.resilience_score,
        ai_delta=snapshot.ai_influence - baseline.ai_influence,
        emissions_pct_change=emissions_pct,
        ai_governance_gap=snapshot.ai_influence - snapshot.civic_trust,
        score=breakdown.total if breakdown else None,
        rating=breakdown.rating if breakdown else "",
        civic_dividend_rate=branch.civic_dividend_rate,
        ai_charter_enabled=branch.ai_charter_enabled,
        climate_capex_share=branch.climate_capex_share,
        opposing=opposing,
    )


def _divergence_part(d: MetricDivergence) -> str:
    digits = 1 if d.metric == "annual_emissions" else 3
    return f"{d.label} ({format_delta(d.delta, digits)})"


def _divergence_bullet(facts: ReportFacts) -> Optional[str]:
    """One line naming where this branch is ahead of and behind the contrast."""
    if facts.opposing is None or not facts.opposing.divergence:
        return None
    ahead = [d for d in facts.opposing.divergence if d.judged_good]
    behind = [d for d in facts.opposing.divergence if not d.judged_good and d.delta != 0]

    parts = []
    if ahead:
        parts.append("ahead on " + ", ".join(_divergence_part(d) for d in ahead))
    if behind:
        parts.append("behind on " + ", ".join(_divergence_part(d) for d in behind))
    if not parts:
        return f"In {facts.year} the two branches are level on every tracked metric."
    return f"Against the contrast branch in {facts.year}, this branch is " + "; ".join(parts) + "."


def _build_section(
    key: SectionKey,
    facts: ReportFacts,
    values: dict[str, str],
    default_scenario: str,
) -> ReportSection:
    template_scenario, lines = select_template(key, facts.scenario_id, facts.era, default_scenario)
    text = [line.format(**values) for line in lines]

    section = ReportSection(key=key, heading=key.heading, template_scenario=template_scenario)
    if key is SectionKey.summary:
        section.paragraphs = text
    else:
        section.bullets = text
        if key is SectionKey.status_quo:
            extra = _divergence_bullet(facts)
            if extra:
                section.bullets.append(extra)
    return section


def build_report(
    scenario: Scenario,
    snapshot: Snapshot,
    baseline: Snapshot,
    opposing_snapshot: Optional[Snapshot] = None,
    *,
    default_scenario: Optional[str] = None,
    weights: Optional[GovernanceWeights] = None,
) -> ScenarioReport:
    """Assemble the structured report for *scenario* at *snapshot*.

    The Status Quo Comparison section is included only when an opposing
    snapshot is supplied. Scenario ids without bespoke phrasing for a
    section fall back to *default_scenario* for the same era. Unset
    *default_scenario* and *weights* come from the global settings.
    """
    if default_scenario is None or weights is None:
        settings = get_settings()
        default_scenario = default_scenario or settings.default_report_scenario
        weights = weights or settings.governance

    facts = build_facts(scenario, snapshot, baseline, opposing_snapshot, weights)
    values = facts.placeholders()

    sections = []
    for key in SectionKey:
        if key is SectionKey.status_quo and facts.opposing is None:
            continue
        sections.append(_build_section(key, facts, values, default_scenario))

    logger.debug(
        "Built report for %s year %d (era=%s, score=%s)",
        scenario.id, snapshot.year, facts.era.value, facts.score,
    )
    return ScenarioReport(facts=facts, sections=sections)


def generate_report(
    scenario: Scenario,
    snapshot: Snapshot,
    baseline: Snapshot,
    opposing_snapshot: Optional[Snapshot] = None,
    *,
    default_scenario: Optional[str] = None,
    weights: Optional[GovernanceWeights] = None,
) -> str:
    """Generate the Markdown report text."""
    report = build_report(
        scenario,
        snapshot,
        baseline,
        opposing_snapshot,
        default_scenario=default_scenario,
        weights=weights,
    )
    return render_markdown(report)
