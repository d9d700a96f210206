"""Shared fixtures: a scripted command runner and a probe context builder."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import ReportConfig
from executor.command_executor import CommandResult, CommandRunner


class FakeRunner(CommandRunner):
    """Answers commands from a table keyed by the joined argument list."""

    def __init__(self, installed: set[str] | None = None, responses: dict[str, object] | None = None) -> None:
        super().__init__()
        self.installed = set(installed or ())
        self.responses = dict(responses or {})
        self.calls: list[tuple[list[str], float | None]] = []

    def exists(self, name: str) -> bool:
        return name in self.installed

    def run(self, args: list[str], timeout: float | None = None) -> CommandResult:
        self.calls.append((list(args), timeout))
        response = self.responses.get(" ".join(args))
        if response is None:
            return CommandResult(returncode=1, stdout="", stderr="unscripted")
        if isinstance(response, CommandResult):
            return response
        return CommandResult(returncode=0, stdout=str(response), stderr="")


@pytest.fixture
def make_context(tmp_path: Path):
    from probes.base_probe import ProbeContext

    def _build(
        installed: set[str] | None = None,
        responses: dict[str, object] | None = None,
        env: dict[str, str] | None = None,
        system: str = "Linux",
        cwd: Path | None = None,
    ) -> ProbeContext:
        home = tmp_path / "home"
        home.mkdir(exist_ok=True)
        work = cwd or tmp_path / "work"
        work.mkdir(exist_ok=True)
        return ProbeContext(
            runner=FakeRunner(installed=installed, responses=responses),
            config=ReportConfig(),
            cwd=work,
            home=home,
            env=env or {},
            system=system,
        )

    return _build
