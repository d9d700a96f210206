"""Kubernetes CLI, context, cluster and manifest facts."""

from __future__ import annotations

import re
from pathlib import Path

from probes.base_probe import NOT_INSTALLED, Fact, ProbeContext, first_line, query

_GIT_VERSION_RE = re.compile(r'GitVersion:"([^"]+)"')
_MANIFEST_SUFFIXES = {".yaml", ".yml"}


def parse_client_version(raw: str) -> str:
    match = _GIT_VERSION_RE.search(raw)
    if match:
        return match.group(1)
    line = first_line(raw)
    prefix = "Client Version:"
    if line.startswith(prefix):
        return line[len(prefix):].strip()
    return line


def local_cluster(ctx: ProbeContext) -> str:
    """First installed local-cluster tool in priority order."""
    for name in ctx.config.kubernetes.local_clusters:
        if ctx.runner.exists(name):
            return name
    return "None detected"


def count_manifests(base: Path, candidate_dirs: list[str]) -> int:
    seen: set[Path] = set()
    for dirname in candidate_dirs:
        root = base / dirname
        if not root.is_dir():
            continue
        for path in root.rglob("*"):
            if path.suffix in _MANIFEST_SUFFIXES and path.is_file():
                seen.add(path.resolve())
    return len(seen)


def collect_kubernetes(ctx: ProbeContext) -> list[Fact]:
    facts: list[Fact] = []
    if not ctx.runner.exists("kubectl"):
        facts.append(("kubectl", NOT_INSTALLED))
    else:
        raw = query(ctx, ["kubectl", "version", "--client"])
        facts.append(("kubectl", parse_client_version(raw) if raw else "Unknown"))

        context = query(ctx, ["kubectl", "config", "current-context"])
        facts.append(("Context", first_line(context) if context else "None"))

        namespace = query(
            ctx, ["kubectl", "config", "view", "--minify", "-o", "jsonpath={..namespace}"]
        )
        facts.append(("Namespace", first_line(namespace) if namespace else "default"))

        reachable = ctx.runner.run(
            ["kubectl", "cluster-info", "--request-timeout=3s"],
            timeout=ctx.config.timeouts.cluster_seconds,
        )
        facts.append(("Cluster reachable", "Yes" if reachable.ok else "No"))

    facts.append(("Local cluster", local_cluster(ctx)))
    manifests = count_manifests(ctx.cwd, ctx.config.kubernetes.manifest_dirs)
    facts.append(("Manifest files", str(manifests)))
    return facts
