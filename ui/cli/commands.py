"""Typer command handlers."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import typer

from core.formatter import format_report
from core.orchestrator import Orchestrator

LOG_LEVEL_ENV = "DEVCONTEXT_LOG_LEVEL"


def configure_logging() -> None:
    """Send diagnostics to stderr so the report on stdout stays clean."""
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def report(root: Path | None = None) -> None:
    """Run every probe once and print the report."""
    configure_logging()
    orchestrator = Orchestrator(root=root)
    typer.echo(format_report(orchestrator.build_report()), nl=False)
