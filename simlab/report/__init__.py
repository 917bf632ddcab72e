"""Scenario report assembly and rendering."""

from simlab.report.models import (
    ReportFacts,
    ReportSection,
    ScenarioReport,
    SectionKey,
)
from simlab.report.generator import build_facts, build_report, generate_report
from simlab.report.renderers import parse_report_sections, render_markdown

__all__ = [
    "ReportFacts",
    "ReportSection",
    "ScenarioReport",
    "SectionKey",
    "build_facts",
    "build_report",
    "generate_report",
    "parse_report_sections",
    "render_markdown",
]
