"""Probe registry and default section wiring."""

from __future__ import annotations

from probes.base_probe import Probe
from probes.docker_probe import collect_docker
from probes.kubernetes_probe import collect_kubernetes
from probes.network_probe import collect_network
from probes.project_probe import collect_project
from probes.python_probe import collect_python
from probes.shell_probe import collect_shell
from probes.system_probe import collect_system

SECTION_ORDER = ["SYSTEM", "SHELL", "PYTHON", "DOCKER", "KUBERNETES", "PROJECT", "NETWORK"]


class ProbeRegistry:
    """Ordered, in-memory probe registry."""

    def __init__(self) -> None:
        self._probes: dict[str, Probe] = {}

    def register(self, probe: Probe) -> None:
        if probe.name in self._probes:
            raise ValueError(f"Probe already registered: {probe.name}")
        self._probes[probe.name] = probe

    def list_probes(self) -> list[Probe]:
        return list(self._probes.values())


def build_default_registry() -> ProbeRegistry:
    """Register the seven report probes in section order."""
    registry = ProbeRegistry()
    collectors = {
        "SYSTEM": collect_system,
        "SHELL": collect_shell,
        "PYTHON": collect_python,
        "DOCKER": collect_docker,
        "KUBERNETES": collect_kubernetes,
        "PROJECT": collect_project,
        "NETWORK": collect_network,
    }
    for name in SECTION_ORDER:
        registry.register(Probe(name=name, collect=collectors[name]))
    return registry
