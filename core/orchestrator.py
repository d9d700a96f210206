"""Top-level report orchestrator."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from core.config import ReportConfig, load_effective_config
from executor.command_executor import CommandRunner
from probes.base_probe import Fact, Probe, ProbeContext
from probes.probe_registry import ProbeRegistry, build_default_registry

logger = logging.getLogger("dc.orchestrator")

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S %Z"


@dataclass
class Section:
    """One titled block of facts."""

    name: str
    facts: list[Fact] = field(default_factory=list)


@dataclass
class Report:
    """Everything printed for one invocation."""

    title: str
    generated: str
    purpose: str
    footer: str
    sections: list[Section] = field(default_factory=list)


class Orchestrator:
    """Wires config, command runner and probes, and runs them once."""

    def __init__(
        self,
        root: Path | None = None,
        config: ReportConfig | None = None,
        context: ProbeContext | None = None,
        registry: ProbeRegistry | None = None,
    ) -> None:
        self.config = config or (context.config if context else load_effective_config(root))
        self.context = context or ProbeContext(runner=CommandRunner(), config=self.config)
        self.registry = registry or build_default_registry()

    def build_report(self, now: datetime | None = None) -> Report:
        """Run every probe in registration order and collect the sections."""
        stamp = (now or datetime.now()).astimezone()
        settings = self.config.report
        report = Report(
            title=settings.title,
            generated=stamp.strftime(TIMESTAMP_FORMAT).strip(),
            purpose=settings.purpose,
            footer=settings.footer,
        )
        for probe in self.registry.list_probes():
            report.sections.append(Section(name=probe.name, facts=self._run_probe(probe)))
        return report

    def _run_probe(self, probe: Probe) -> list[Fact]:
        try:
            facts = probe.collect(self.context)
        except Exception as exc:
            logger.warning("Probe %s failed: %s", probe.name, exc, exc_info=True)
            return [("Status", "Unavailable")]
        if not facts:
            return [("Status", "No data")]
        return facts
