"""Pydantic v2 models for scenario report assembly.

``ReportFacts`` holds every number a report mentions. It is computed once per
report and every section reads from ``ReportFacts.placeholders()`` so no two
sections can disagree on a delta.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from simlab.scenario.divergence import MetricDivergence, format_delta
from simlab.scenario.eras import Era


class SectionKey(str, Enum):
    """Report sections in rendering order."""
    summary = "summary"
    status_quo = "status_quo"
    baseline = "baseline"
    actions = "actions"
    employment = "employment"
    energy = "energy"
    political = "political"
    ai = "ai"
    next_steps = "next_steps"

    @property
    def heading(self) -> str:
        return SECTION_HEADINGS[self]


SECTION_HEADINGS: dict[SectionKey, str] = {
    SectionKey.summary: "Summary",
    SectionKey.status_quo: "Status Quo Comparison",
    SectionKey.baseline: "Baseline Comparison",
    SectionKey.actions: "Actions",
    SectionKey.employment: "Employment & Economy",
    SectionKey.energy: "Energy & Infrastructure",
    SectionKey.political: "Political Climate",
    SectionKey.ai: "AI Influence",
    SectionKey.next_steps: "Next Steps",
}


class OpposingFacts(BaseModel):
    """Metrics of the contrast branch at the same year."""
    gini: float
    civic_trust: float
    annual_emissions: float
    resilience_score: float
    ai_influence: float
    divergence: list[MetricDivergence] = Field(default_factory=list)


class ReportFacts(BaseModel):
    """Numeric facts shared by every section of one report."""
    scenario_id: str
    scenario_name: str
    year: int
    baseline_year: int
    elapsed_years: int
    era: Era

    gini: float
    civic_trust: float
    annual_emissions: float
    resilience_score: float
    ai_influence: float

    baseline_gini: float
    baseline_civic_trust: float
    baseline_annual_emissions: float
    baseline_resilience_score: float
    baseline_ai_influence: float

    gini_delta: float
    trust_delta: float
    emissions_delta: float
    resilience_delta: float
    ai_delta: float
    emissions_pct_change: float
    ai_governance_gap: float

    score: int | None = None
    rating: str = ""

    civic_dividend_rate: float = 0.0
    ai_charter_enabled: bool = False
    climate_capex_share: float = 0.0

    opposing: OpposingFacts | None = None

    def placeholders(self) -> dict[str, str]:
        """Pre-formatted values for template substitution."""
        values: dict[str, str] = {
            "scenario_name": self.scenario_name,
            "year": str(self.year),
            "baseline_year": str(self.baseline_year),
            "elapsed": str(self.elapsed_years),
            "era": self.era.value,
            "era_label": self.era.label,
            "gini": f"{self.gini:.3f}",
            "trust": f"{self.civic_trust:.3f}",
            "emissions": f"{self.annual_emissions:.1f}",
            "resilience": f"{self.resilience_score:.3f}",
            "ai": f"{self.ai_influence:.3f}",
            "baseline_gini": f"{self.baseline_gini:.3f}",
            "baseline_trust": f"{self.baseline_civic_trust:.3f}",
            "baseline_emissions": f"{self.baseline_annual_emissions:.1f}",
            "baseline_resilience": f"{self.baseline_resilience_score:.3f}",
            "baseline_ai": f"{self.baseline_ai_influence:.3f}",
            "gini_delta": format_delta(self.gini_delta),
            "trust_delta": format_delta(self.trust_delta),
            "emissions_delta": format_delta(self.emissions_delta, 1),
            "resilience_delta": format_delta(self.resilience_delta),
            "ai_delta": format_delta(self.ai_delta),
            "emissions_pct": f"{self.emissions_pct_change:+.1f}%",
            "emissions_cut_pct": f"{max(0.0, -self.emissions_pct_change):.0f}%",
            "ai_gap": format_delta(self.ai_governance_gap),
            "score": str(self.score) if self.score is not None else "n/a",
            "rating": self.rating or "Unrated",
            "dividend_pct": f"{self.civic_dividend_rate * 100:.0f}%",
            "capex_pct": f"{self.climate_capex_share * 100:.0f}%",
            "charter": "in force" if self.ai_charter_enabled else "absent",
        }
        if self.opposing is not None:
            o = self.opposing
            values.update({
                "opp_gini": f"{o.gini:.3f}",
                "opp_trust": f"{o.civic_trust:.3f}",
                "opp_emissions": f"{o.annual_emissions:.1f}",
                "opp_resilience": f"{o.resilience_score:.3f}",
                "opp_ai": f"{o.ai_influence:.3f}",
            })
        return values


class ReportSection(BaseModel):
    key: SectionKey
    heading: str
    paragraphs: list[str] = Field(default_factory=list)
    bullets: list[str] = Field(default_factory=list)
    template_scenario: str = ""   # scenario whose phrasing was used


class ScenarioReport(BaseModel):
    """A fully assembled report, ready for rendering."""
    facts: ReportFacts
    sections: list[ReportSection]

    def section(self, key: SectionKey | str) -> ReportSection | None:
        key = SectionKey(key)
        for s in self.sections:
            if s.key == key:
                return s
        return None
