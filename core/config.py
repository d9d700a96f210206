"""Configuration loading for the report probes."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

# Checkout root, or site-packages when installed; config/ ships as package data.
DEFAULT_ROOT = Path(__file__).resolve().parents[1]


class ReportSettings(BaseModel):
    """Banner and purpose lines."""

    title: str = "=== DEVELOPMENT CONTEXT REPORT ==="
    footer: str = "=== END OF REPORT ==="
    purpose: str = "Development environment context for proof-of-concept assistance"


class TimeoutSettings(BaseModel):
    """Deadlines, in seconds, for the probes that may block on the network."""

    internet_seconds: float = 3.0
    daemon_seconds: float = 5.0
    cluster_seconds: float = 5.0


class PythonSettings(BaseModel):
    marker_files: list[str] = Field(
        default_factory=lambda: [
            "requirements.txt",
            "pyproject.toml",
            "setup.py",
            "setup.cfg",
            "Pipfile",
            "poetry.lock",
            "uv.lock",
            "environment.yml",
            "tox.ini",
        ]
    )


class DockerSettings(BaseModel):
    files: list[str] = Field(
        default_factory=lambda: [
            "Dockerfile",
            "docker-compose.yml",
            "docker-compose.yaml",
            "compose.yml",
            "compose.yaml",
            ".dockerignore",
        ]
    )


class KubernetesSettings(BaseModel):
    # Priority order: the first installed one wins.
    local_clusters: list[str] = Field(
        default_factory=lambda: ["minikube", "kind", "k3d", "microk8s", "k3s"]
    )
    manifest_dirs: list[str] = Field(
        default_factory=lambda: [
            "k8s",
            "kubernetes",
            "manifests",
            "deploy",
            "deployment",
            "helm",
            "charts",
            ".k8s",
        ]
    )


class ProjectSettings(BaseModel):
    key_dirs: list[str] = Field(
        default_factory=lambda: [
            "src",
            "app",
            "lib",
            "tests",
            "test",
            "docs",
            "scripts",
            "config",
            "api",
            "frontend",
            "backend",
            "infra",
        ]
    )
    entry_points: list[str] = Field(
        default_factory=lambda: [
            "main.py",
            "app.py",
            "manage.py",
            "server.py",
            "run.py",
            "cli.py",
            "wsgi.py",
            "asgi.py",
            "__main__.py",
            "index.js",
            "main.go",
        ]
    )
    config_files: list[str] = Field(
        default_factory=lambda: [
            ".env",
            ".env.example",
            ".envrc",
            "config.yaml",
            "config.yml",
            "config.json",
            "settings.py",
            ".editorconfig",
            "Makefile",
        ]
    )


class NetworkSettings(BaseModel):
    ports: list[int] = Field(
        default_factory=lambda: [3000, 5000, 5432, 6379, 8000, 8080, 8888, 27017]
    )
    internet_url: str = "https://www.google.com"
    proxy_vars: list[str] = Field(
        default_factory=lambda: ["HTTP_PROXY", "HTTPS_PROXY", "http_proxy", "https_proxy"]
    )


class ReportConfig(BaseModel):
    """Effective configuration for one report run."""

    report: ReportSettings = Field(default_factory=ReportSettings)
    timeouts: TimeoutSettings = Field(default_factory=TimeoutSettings)
    python: PythonSettings = Field(default_factory=PythonSettings)
    docker: DockerSettings = Field(default_factory=DockerSettings)
    kubernetes: KubernetesSettings = Field(default_factory=KubernetesSettings)
    project: ProjectSettings = Field(default_factory=ProjectSettings)
    network: NetworkSettings = Field(default_factory=NetworkSettings)


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when missing."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_effective_config(root: Path | None = None) -> ReportConfig:
    """Load config/default.yaml under `root` on top of the built-in defaults."""
    config_dir = (root or DEFAULT_ROOT) / "config"
    defaults = ReportConfig().model_dump()
    merged = merge_dicts(defaults, load_yaml(config_dir / "default.yaml"))
    return ReportConfig.model_validate(merged)
