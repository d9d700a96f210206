"""Plain-text rendering of report sections."""

from __future__ import annotations

from core.orchestrator import Report
from probes.base_probe import Fact


def format_section(name: str, facts: list[Fact]) -> list[str]:
    """Section header, one bullet per fact, trailing blank line."""
    lines = [f"[{name}]"]
    lines.extend(f"- {label}: {value}" for label, value in facts)
    lines.append("")
    return lines


def format_report(report: Report) -> str:
    lines = [
        report.title,
        f"Generated: {report.generated}",
        f"Purpose: {report.purpose}",
        "",
    ]
    for section in report.sections:
        lines.extend(format_section(section.name, section.facts))
    lines.append(report.footer)
    return "\n".join(lines) + "\n"
