"""Python interpreter, pip and project marker facts."""

from __future__ import annotations

from probes.base_probe import NOT_FOUND, Fact, ProbeContext, first_line, join_or, present_names, query


def _first_available(ctx: ProbeContext, names: list[str]) -> str | None:
    for name in names:
        if ctx.runner.exists(name):
            return name
    return None


def _pip_version(raw: str) -> str:
    # "pip 24.0 from /usr/lib/python3/dist-packages/pip (python 3.12)"
    parts = first_line(raw).split()
    if len(parts) >= 2 and parts[0] == "pip":
        return f"pip {parts[1]}"
    return first_line(raw)


def collect_python(ctx: ProbeContext) -> list[Fact]:
    facts: list[Fact] = []

    interpreter = _first_available(ctx, ["python3", "python"])
    version = query(ctx, [interpreter, "--version"]) if interpreter else None
    facts.append(("Python", first_line(version) if version else NOT_FOUND))

    pip = _first_available(ctx, ["pip3", "pip"])
    pip_raw = query(ctx, [pip, "--version"]) if pip else None
    facts.append(("pip", _pip_version(pip_raw) if pip_raw else NOT_FOUND))
    if pip_raw:
        listing = query(ctx, [pip, "list", "--format=freeze"]) or ""
        count = sum(1 for line in listing.splitlines() if line.strip())
        facts.append(("Installed packages", str(count)))

    markers = present_names(ctx.cwd, ctx.config.python.marker_files)
    facts.append(("Project files", join_or(markers)))
    return facts
