"""Markdown export of a saved lab note."""

from __future__ import annotations

from datetime import datetime

from simlab.labnotes.models import ExportedDocument, LabNote
from simlab.scenario.constants import METRIC_LABELS, METRIC_UNITS

NO_ANNOTATION = "No annotation."
NO_REPORT = "*No scenario report was generated for this snapshot.*"


def export_filename(note: LabNote) -> str:
    return f"snapshot-{note.scenario_id}-year{note.year}.md"


def _format_timestamp(timestamp: str) -> str:
    try:
        dt = datetime.fromisoformat(timestamp)
    except ValueError:
        return timestamp
    return dt.strftime("%Y-%m-%d %H:%M %Z").strip()


def render_lab_note_markdown(note: LabNote) -> str:
    """Render a lab note as a standalone Markdown document."""
    m = note.metrics
    lines: list[str] = []

    lines.append(f"# Lab Note: {note.title}")
    lines.append("")
    lines.append(f"> {note.annotation or NO_ANNOTATION}")
    lines.append("")
    lines.append(f"**Date saved:** {_format_timestamp(note.timestamp)}")
    lines.append(f"**Scenario:** {note.scenario_name}")
    if note.branch_label:
        lines.append(f"**Branch:** {note.branch_label}")
    lines.append(f"**Year:** {note.year}")
    lines.append(f"**Trajectory score:** {note.composite_score}/100 ({note.rating})")
    lines.append("")

    lines.append("## Metrics")
    lines.append("")
    lines.append("| Metric | Value |")
    lines.append("|--------|-------|")
    lines.append(f"| {METRIC_LABELS['gini']} | {m.gini:.3f} |")
    lines.append(f"| {METRIC_LABELS['civic_trust']} | {m.civic_trust:.3f} |")
    unit = METRIC_UNITS["annual_emissions"]
    lines.append(f"| {METRIC_LABELS['annual_emissions']} | {m.annual_emissions:.2f} {unit} |")
    lines.append(f"| {METRIC_LABELS['resilience_score']} | {m.resilience_score:.3f} |")
    lines.append(f"| {METRIC_LABELS['ai_influence']} | {m.ai_influence:.3f} |")
    lines.append("")

    lines.append("## Scenario Report")
    lines.append("")
    lines.append(note.report.strip("\n") if note.report.strip() else NO_REPORT)
    lines.append("")

    return "\n".join(lines)


def export_note(note: LabNote) -> ExportedDocument:
    return ExportedDocument(
        filename=export_filename(note),
        content=render_lab_note_markdown(note),
    )
