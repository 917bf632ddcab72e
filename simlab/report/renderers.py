"""Output renderers for scenario reports.

``render_markdown`` produces the report text; ``parse_report_sections``
reads Markdown report text (ours, or an older hand-edited one) back into
per-section lists.
"""

from __future__ import annotations

from simlab.report.models import ScenarioReport, SectionKey

# Lower-cased heading text -> section. Includes the older headings still
# found in saved notes.
HEADING_ALIASES: dict[str, SectionKey] = {
    "summary": SectionKey.summary,
    "status quo comparison": SectionKey.status_quo,
    "status quo projection": SectionKey.status_quo,
    "if we don't act": SectionKey.status_quo,
    "without action": SectionKey.status_quo,
    "baseline comparison": SectionKey.baseline,
    "actions": SectionKey.actions,
    "actions taken": SectionKey.actions,
    "employment & economy": SectionKey.employment,
    "employment, economy & the wealth gap": SectionKey.employment,
    "energy & infrastructure": SectionKey.energy,
    "energy & data infrastructure": SectionKey.energy,
    "energy sources & data infrastructure": SectionKey.energy,
    "energy & compute": SectionKey.energy,
    "political climate": SectionKey.political,
    "the political climate": SectionKey.political,
    "governance": SectionKey.political,
    "ai influence": SectionKey.ai,
    "next steps": SectionKey.next_steps,
}


def render_markdown(report: ScenarioReport) -> str:
    """Render a report as Markdown.

    Each section becomes a ``## Heading``; the summary is written as
    paragraphs separated by blank lines, every other section as ``- `` bullets.
    """
    lines: list[str] = []

    for section in report.sections:
        lines.append(f"## {section.heading}")
        lines.append("")
        if section.key is SectionKey.summary:
            for para in section.paragraphs:
                lines.append(para)
                lines.append("")
        else:
            for bullet in section.bullets:
                lines.append(f"- {bullet}")
            lines.append("")

    return "\n".join(lines).rstrip("\n") + "\n"


def parse_report_sections(text: str) -> dict[str, list[str]]:
    """Split Markdown report text into ``{section_key: [items]}``.

    Summary items are paragraphs; other sections' items are bullets, with
    wrapped continuation lines joined onto the preceding bullet. Content
    under an unrecognized heading is dropped.
    """
    result: dict[str, list[str]] = {}
    section: SectionKey | None = None
    buf: list[str] = []

    def flush() -> None:
        if buf:
            result.setdefault(SectionKey.summary.value, []).append(" ".join(buf).strip())
            buf.clear()

    for raw in text.splitlines():
        line = raw.strip()
        if line.startswith("## "):
            flush()
            section = HEADING_ALIASES.get(line[3:].strip().lower())
            if section is not None:
                result.setdefault(section.value, [])
            continue
        if section is None:
            continue
        if not line:
            if section is SectionKey.summary:
                flush()
            continue
        if section is SectionKey.summary:
            buf.append(line)
            continue

        items = result[section.value]
        if line.startswith("- "):
            items.append(line[2:].strip())
        elif items:
            items[-1] += " " + line

    flush()
    return result
