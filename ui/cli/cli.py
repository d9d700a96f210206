"""CLI entrypoint for devcontext."""

from __future__ import annotations

import typer

from ui.cli import commands

USAGE = """Print a condensed development-environment report for an LLM assistant.

Runs the SYSTEM, SHELL, PYTHON, DOCKER, KUBERNETES, PROJECT and NETWORK
probes once and writes plain text to standard output. Missing tools are
reported as placeholders, never as errors. Only existence of project files
is checked; secrets such as PYTHONPATH or proxy values are never printed.
"""

HELP_OPTIONS = {"help_option_names": ["-h", "--help"]}

app = typer.Typer(add_completion=False)


@app.command(help=USAGE, context_settings=HELP_OPTIONS)
def report_cmd() -> None:
    commands.report()


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
