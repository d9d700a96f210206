"""Host operating system, memory, disk and CPU facts."""

from __future__ import annotations

import platform

from probes.base_probe import UNKNOWN, Fact, ProbeContext, first_line, query

_GIB = 1024**3


def _os_name(ctx: ProbeContext) -> str:
    if ctx.system == "Darwin":
        name = query(ctx, ["sw_vers", "-productName"])
        version = query(ctx, ["sw_vers", "-productVersion"])
        if name and version:
            return f"{first_line(name)} {first_line(version)}"
        return UNKNOWN
    return first_line(query(ctx, ["uname", "-sr"]) or "") or UNKNOWN


def _memory_gb(ctx: ProbeContext) -> str:
    total_bytes: int | None = None
    if ctx.system == "Darwin":
        out = query(ctx, ["sysctl", "-n", "hw.memsize"])
        if out and first_line(out).isdigit():
            total_bytes = int(first_line(out))
    else:
        out = query(ctx, ["free", "-b"])
        for line in (out or "").splitlines():
            parts = line.split()
            if parts and parts[0] == "Mem:" and len(parts) > 1 and parts[1].isdigit():
                total_bytes = int(parts[1])
                break
    if total_bytes is None:
        return UNKNOWN
    return f"{total_bytes // _GIB} GB"


def _disk_available(ctx: ProbeContext) -> str:
    # -P keeps each filesystem on one line.
    out = query(ctx, ["df", "-hP", str(ctx.cwd)])
    if not out:
        return UNKNOWN
    rows = out.splitlines()
    if len(rows) < 2:
        return UNKNOWN
    cols = rows[-1].split()
    return cols[3] if len(cols) > 3 else UNKNOWN


def _architecture(ctx: ProbeContext) -> str:
    out = query(ctx, ["uname", "-m"])
    if out:
        return first_line(out)
    return platform.machine() or UNKNOWN


def collect_system(ctx: ProbeContext) -> list[Fact]:
    """Return OS, memory, disk and architecture facts."""
    return [
        ("OS", _os_name(ctx)),
        ("Memory", _memory_gb(ctx)),
        ("Disk available", _disk_available(ctx)),
        ("Architecture", _architecture(ctx)),
    ]
