"""Tests for report Markdown rendering and section parsing."""

from simlab.report.generator import build_report
from simlab.report.models import SectionKey
from simlab.report.renderers import parse_report_sections, render_markdown


class TestRenderMarkdown:
    def test_headings_in_order(self, aggressive_scenario, aggressive_2041, baseline, status_quo_2041):
        report = build_report(aggressive_scenario, aggressive_2041, baseline, status_quo_2041)
        text = render_markdown(report)
        headings = [line[3:] for line in text.splitlines() if line.startswith("## ")]
        assert headings == [
            "Summary",
            "Status Quo Comparison",
            "Baseline Comparison",
            "Actions",
            "Employment & Economy",
            "Energy & Infrastructure",
            "Political Climate",
            "AI Influence",
            "Next Steps",
        ]

    def test_bullets_prefixed(self, aggressive_scenario, aggressive_2041, baseline):
        report = build_report(aggressive_scenario, aggressive_2041, baseline)
        text = render_markdown(report)
        for bullet in report.section(SectionKey.actions).bullets:
            assert f"- {bullet}" in text


class TestParseReportSections:
    def test_round_trip(self, aggressive_scenario, aggressive_2041, baseline, status_quo_2041):
        report = build_report(aggressive_scenario, aggressive_2041, baseline, status_quo_2041)
        parsed = parse_report_sections(render_markdown(report))
        assert parsed["summary"] == report.section("summary").paragraphs
        for section in report.sections[1:]:
            assert parsed[section.key.value] == section.bullets

    def test_heading_aliases(self):
        text = "\n".join([
            "## If we don't act",
            "- Emissions keep rising.",
            "## The Political Climate",
            "- Trust erodes.",
            "## Governance",
            "- Audits lapse.",
            "## Energy & Compute",
            "- Grids strain.",
        ])
        parsed = parse_report_sections(text)
        assert parsed["status_quo"] == ["Emissions keep rising."]
        assert parsed["political"] == ["Trust erodes.", "Audits lapse."]
        assert parsed["energy"] == ["Grids strain."]

    def test_continuation_lines_join_previous_bullet(self):
        text = "## Actions\n- Fund the grid\n  before demand peaks.\n- Pay the dividend."
        assert parse_report_sections(text)["actions"] == [
            "Fund the grid before demand peaks.",
            "Pay the dividend.",
        ]

    def test_summary_paragraphs_split_on_blank_lines(self):
        text = "## Summary\n\nFirst line\nwraps here.\n\nSecond paragraph.\n"
        assert parse_report_sections(text)["summary"] == [
            "First line wraps here.",
            "Second paragraph.",
        ]

    def test_unknown_heading_dropped(self):
        text = "## Space Colonies\n- Mars base.\n## Next Steps\n- Keep going."
        parsed = parse_report_sections(text)
        assert parsed == {"next_steps": ["Keep going."]}

    def test_text_before_first_heading_ignored(self):
        assert parse_report_sections("preamble\n- stray") == {}
