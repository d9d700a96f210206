"""Command execution wrapper."""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger("dc.executor")

ERROR_PREFIX = "Error executing:"


@dataclass
class CommandResult:
    """Outcome of one external command invocation."""

    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_command(
    command: list[str], cwd: Path | None = None, timeout: float | None = None
) -> tuple[int, str, str]:
    """Run command and return (exit_code, stdout, stderr).

    Never raises: a missing executable maps to 127, any other OS failure or
    an expired deadline maps to -1 with the reason in stderr.
    """
    try:
        proc = subprocess.run(
            command,
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError as exc:
        logger.debug("Command not found: %s (%s)", command[0], exc)
        return 127, "", str(exc)
    except subprocess.TimeoutExpired:
        logger.debug("Command timed out after %ss: %s", timeout, " ".join(command))
        return -1, "", f"timed out after {timeout}s"
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("Command failed to start: %s (%s)", " ".join(command), exc)
        return -1, "", str(exc)
    return proc.returncode, proc.stdout or "", proc.stderr or ""


class CommandRunner:
    """Guarded access to external command-line tools."""

    def __init__(self, cwd: Path | None = None) -> None:
        self.cwd = cwd

    def exists(self, name: str) -> bool:
        """Return True when `name` resolves on the executable search path."""
        return shutil.which(name) is not None

    def run(self, args: list[str], timeout: float | None = None) -> CommandResult:
        code, out, err = run_command(args, cwd=self.cwd, timeout=timeout)
        if code != 0:
            logger.debug("%s exited with %d: %s", " ".join(args), code, err.strip()[:200])
        return CommandResult(returncode=code, stdout=out, stderr=err)

    def output(self, args: list[str], timeout: float | None = None) -> str:
        """Return stripped stdout, or the fixed fallback string on failure."""
        result = self.run(args, timeout=timeout)
        if not result.ok:
            return fallback_text(args)
        return result.stdout.strip()


def fallback_text(args: list[str]) -> str:
    return f"{ERROR_PREFIX} {' '.join(args)}"


def is_fallback(text: str) -> bool:
    """True when `text` is the guarded-execution fallback string."""
    return text.startswith(ERROR_PREFIX)
