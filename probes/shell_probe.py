"""Shell, working directory and environment-variable facts."""

from __future__ import annotations

import logging
from pathlib import PurePath

from core.privacy import presence
from probes.base_probe import UNKNOWN, Fact, ProbeContext

logger = logging.getLogger("dc.shell")

PATH_ENTRY_LIMIT = 5

# (directory under $HOME, framework name), checked in order.
_FRAMEWORK_DIRS = [
    (".oh-my-zsh", "Oh My Zsh"),
    (".zprezto", "Prezto"),
    (".oh-my-bash", "Oh My Bash"),
    (".bash_it", "Bash-it"),
]
_RC_FILES = [".zshrc", ".bashrc"]


def path_head(path_value: str | None, limit: int = PATH_ENTRY_LIMIT) -> str:
    """First `limit` non-empty PATH entries, original order, colon-joined."""
    entries = [entry for entry in (path_value or "").split(":") if entry]
    if not entries:
        return "Empty"
    return ":".join(entries[:limit])


def _virtual_env(ctx: ProbeContext) -> str:
    venv = ctx.env.get("VIRTUAL_ENV")
    if venv:
        return PurePath(venv).name
    if ctx.env.get("CONDA_DEFAULT_ENV") and ctx.env.get("CONDA_PREFIX"):
        return PurePath(ctx.env["CONDA_PREFIX"]).name
    return "None"


def _framework(ctx: ProbeContext) -> str:
    for dirname, label in _FRAMEWORK_DIRS:
        if (ctx.home / dirname).is_dir():
            return label
    for rc_name in _RC_FILES:
        rc_path = ctx.home / rc_name
        if not rc_path.is_file():
            continue
        try:
            text = rc_path.read_text(encoding="utf-8", errors="ignore")
        except OSError as exc:
            logger.debug("Cannot read %s: %s", rc_path, exc)
            continue
        if "starship init" in text:
            return "Starship"
    return "None detected"


def collect_shell(ctx: ProbeContext) -> list[Fact]:
    """Return shell facts. PYTHONPATH is reported as set/unset only."""
    return [
        ("Shell", ctx.env.get("SHELL") or UNKNOWN),
        ("Working directory", str(ctx.cwd)),
        ("Virtual env", _virtual_env(ctx)),
        ("PYTHONPATH", presence(ctx.env.get("PYTHONPATH"))),
        ("PATH (first 5)", path_head(ctx.env.get("PATH"))),
        ("Framework", _framework(ctx)),
    ]
