"""Local port usage, internet reachability and proxy facts."""

from __future__ import annotations

import logging
import threading

import httpx

from probes.base_probe import Fact, ProbeContext

logger = logging.getLogger("dc.network")

PORT_TOOL = "lsof"


def _head(url: str, timeout: float, transport: httpx.BaseTransport | None, outcome: dict[str, bool]) -> None:
    try:
        with httpx.Client(timeout=timeout, transport=transport, follow_redirects=False) as client:
            client.head(url)
    except (httpx.HTTPError, httpx.InvalidURL, ValueError, OSError) as exc:
        logger.debug("Internet check against %s failed: %s", url, exc)
        outcome["ok"] = False
        return
    outcome["ok"] = True


def check_internet(url: str, timeout: float, transport: httpx.BaseTransport | None = None) -> bool:
    """True when `url` answers an HTTP request within `timeout` seconds in total.

    httpx applies its timeout per connect/read step and DNS has none, so the
    request runs on a daemon thread joined against one wall-clock deadline.
    An abandoned request never delays interpreter exit.
    """
    outcome: dict[str, bool] = {}
    worker = threading.Thread(
        target=_head,
        args=(url, timeout, transport, outcome),
        name="dc-internet-check",
        daemon=True,
    )
    worker.start()
    worker.join(timeout)
    if worker.is_alive():
        logger.debug("Internet check against %s exceeded %ss deadline", url, timeout)
        return False
    return outcome.get("ok", False)


def port_state(ctx: ProbeContext, port: int) -> str:
    if not ctx.runner.exists(PORT_TOOL):
        return f"Cannot check (no {PORT_TOOL})"
    result = ctx.runner.run([PORT_TOOL, "-nP", f"-iTCP:{port}", "-sTCP:LISTEN", "-t"])
    # lsof exits 1 when nothing matches.
    if result.ok and result.stdout.strip():
        return "In use"
    return "Available"


def collect_network(ctx: ProbeContext) -> list[Fact]:
    settings = ctx.config.network
    facts: list[Fact] = [(f"Port {port}", port_state(ctx, port)) for port in settings.ports]

    online = check_internet(settings.internet_url, ctx.config.timeouts.internet_seconds)
    facts.append(("Internet", "Connected" if online else "Limited or no connectivity"))

    proxy_set = any(name in ctx.env for name in settings.proxy_vars)
    facts.append(("Proxy", "Configured" if proxy_set else "Not configured"))
    return facts
