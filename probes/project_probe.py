"""Git and project-layout facts for the working directory."""

from __future__ import annotations

import logging

from core.privacy import sanitize_url
from probes.base_probe import (
    NOT_INSTALLED,
    UNKNOWN,
    Fact,
    ProbeContext,
    first_line,
    join_or,
    present_names,
    query,
)

logger = logging.getLogger("dc.project")

KEY_DIR_LIMIT = 5


def _git(ctx: ProbeContext, *args: str) -> list[str]:
    return ["git", "-C", str(ctx.cwd), *args]


def _git_facts(ctx: ProbeContext) -> list[Fact]:
    if not ctx.runner.exists("git"):
        return [("Git", NOT_INSTALLED)]
    inside = ctx.runner.run(_git(ctx, "rev-parse", "--is-inside-work-tree"))
    if not inside.ok or inside.stdout.strip() != "true":
        return [("Git", "Not a repository")]

    facts: list[Fact] = [("Git", "Repository")]
    branch = query(ctx, _git(ctx, "branch", "--show-current"))
    facts.append(("Branch", first_line(branch) if branch else "(detached)"))

    # Porcelain output lists staged and unstaged changes alike.
    status = ctx.runner.run(_git(ctx, "status", "--porcelain"))
    if not status.ok:
        facts.append(("Status", UNKNOWN))
    else:
        facts.append(("Status", "Uncommitted changes" if status.stdout.strip() else "Clean"))

    remote = query(ctx, _git(ctx, "remote", "get-url", "origin"))
    facts.append(("Remote", sanitize_url(first_line(remote)) if remote else "None"))

    last_commit = query(ctx, _git(ctx, "log", "-1", "--format=%h %s"))
    facts.append(("Last commit", first_line(last_commit) if last_commit else "None"))
    return facts


def count_directories(ctx: ProbeContext) -> int:
    try:
        return sum(
            1 for entry in ctx.cwd.iterdir() if entry.is_dir() and not entry.name.startswith(".")
        )
    except OSError as exc:
        logger.debug("Cannot list %s: %s", ctx.cwd, exc)
        return 0


def collect_project(ctx: ProbeContext) -> list[Fact]:
    """Return git state and which well-known project files exist."""
    settings = ctx.config.project
    facts = _git_facts(ctx)
    facts.append(("Directories", str(count_directories(ctx))))
    key_dirs = present_names(ctx.cwd, settings.key_dirs, is_dir=True)[:KEY_DIR_LIMIT]
    facts.append(("Key directories", join_or(key_dirs)))
    facts.append(("Entry points", join_or(present_names(ctx.cwd, settings.entry_points))))
    facts.append(("Config files", join_or(present_names(ctx.cwd, settings.config_files))))
    return facts
