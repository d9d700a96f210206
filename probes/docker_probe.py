"""Docker engine, daemon, container and compose facts."""

from __future__ import annotations

import re

from probes.base_probe import NOT_INSTALLED, Fact, ProbeContext, first_line, join_or, present_names, query

CONTAINER_NAME_LIMIT = 5

_VERSION_RE = re.compile(r"version\s+v?([^\s,]+)", re.IGNORECASE)


def parse_version(raw: str) -> str:
    """Extract the version token from `<tool> version X, build Y` style output."""
    line = first_line(raw)
    match = _VERSION_RE.search(line)
    return match.group(1) if match else line


def _compose(ctx: ProbeContext, docker_installed: bool) -> str:
    standalone = query(ctx, ["docker-compose", "--version"])
    if standalone:
        return parse_version(standalone)
    if docker_installed:
        plugin = query(ctx, ["docker", "compose", "version", "--short"])
        if plugin:
            return f"{first_line(plugin).lstrip('v')} (plugin)"
    return NOT_INSTALLED


def collect_docker(ctx: ProbeContext) -> list[Fact]:
    """Return docker facts; container facts only when the daemon answers."""
    facts: list[Fact] = []
    installed = ctx.runner.exists("docker")

    if not installed:
        facts.append(("Docker", NOT_INSTALLED))
    else:
        raw = query(ctx, ["docker", "--version"])
        facts.append(("Docker", parse_version(raw) if raw else "Unknown"))
        info = ctx.runner.run(
            ["docker", "info", "--format", "{{.ServerVersion}}"],
            timeout=ctx.config.timeouts.daemon_seconds,
        )
        if info.ok:
            facts.append(("Daemon", "Running"))
            listing = query(ctx, ["docker", "ps", "--format", "{{.Names}}"]) or ""
            names = [line.strip() for line in listing.splitlines() if line.strip()]
            facts.append(("Running containers", str(len(names))))
            facts.append(("Container names", join_or(names[:CONTAINER_NAME_LIMIT], "None")))
        else:
            facts.append(("Daemon", "Not running"))

    facts.append(("Compose", _compose(ctx, installed)))
    facts.append(("Docker files", join_or(present_names(ctx.cwd, ctx.config.docker.files))))
    return facts
