"""Shared probe shape and helpers."""

from __future__ import annotations

import os
import platform
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from core.config import ReportConfig
from executor.command_executor import CommandRunner, is_fallback

Fact = tuple[str, str]

NOT_INSTALLED = "Not installed"
NOT_FOUND = "Not found"
NONE_FOUND = "None found"
UNKNOWN = "Unknown"


@dataclass
class ProbeContext:
    """Everything a probe may look at. Tests build one with fakes."""

    runner: CommandRunner
    config: ReportConfig = field(default_factory=ReportConfig)
    cwd: Path = field(default_factory=Path.cwd)
    home: Path = field(default_factory=Path.home)
    env: Mapping[str, str] = field(default_factory=lambda: dict(os.environ))
    system: str = field(default_factory=platform.system)


@dataclass
class Probe:
    """Named routine producing the ordered facts for one report section."""

    name: str
    collect: Callable[[ProbeContext], list[Fact]]


def present_names(base: Path, names: list[str], is_dir: bool = False) -> list[str]:
    """Return the entries of `names` that exist directly under `base`, in order."""
    found: list[str] = []
    for name in names:
        target = base / name
        if (target.is_dir() if is_dir else target.exists()):
            found.append(name)
    return found


def join_or(items: list[str], placeholder: str = NONE_FOUND) -> str:
    return ", ".join(items) if items else placeholder


def first_line(text: str) -> str:
    lines = text.strip().splitlines()
    return lines[0].strip() if lines else ""


def query(ctx: ProbeContext, args: list[str], timeout: float | None = None) -> str | None:
    """Run a tool only when it is installed; None on absence, failure or empty output."""
    if not ctx.runner.exists(args[0]):
        return None
    out = ctx.runner.output(args, timeout=timeout)
    if is_fallback(out) or not out:
        return None
    return out
