"""Blocking wrappers around external tool invocations."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path

from luject.errors import ToolExecutionError
from luject.utils.logging import get_logger

log = get_logger(__name__)


def _argv(argv: Sequence[str | Path]) -> list[str]:
    return [str(a) for a in argv]


def run_tool(
    argv: Sequence[str | Path],
    verbose: bool = False,
    cwd: str | Path | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run an external program to completion.

    With ``verbose`` the child writes straight to the terminal, otherwise
    its output is captured and only surfaced when it fails.
    """
    cmd = _argv(argv)
    log.debug("run_tool", cmd=" ".join(cmd), cwd=str(cwd) if cwd else None)

    try:
        if verbose:
            result = subprocess.run(cmd, cwd=cwd, text=True)
        else:
            result = subprocess.run(cmd, cwd=cwd, capture_output=True, text=True)
    except OSError as exc:
        raise ToolExecutionError(cmd, -1, str(exc)) from exc

    if result.returncode != 0:
        stderr = result.stderr or result.stdout or ""
        log.error("tool_failed", cmd=cmd[0], returncode=result.returncode, stderr=stderr[:500])
        raise ToolExecutionError(cmd, result.returncode, stderr)
    return result


def probe_output(argv: Sequence[str | Path]) -> str | None:
    """Return the stdout of a probe command, or None if it could not run."""
    cmd = _argv(argv)
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as exc:
        log.debug("probe_failed", cmd=cmd[0], error=str(exc))
        return None
    if result.returncode != 0:
        log.debug("probe_failed", cmd=cmd[0], returncode=result.returncode)
        return None
    return result.stdout


def can_execute(argv: Sequence[str | Path]) -> bool:
    """True when the program could be launched and ran to exit.

    The exit status is not inspected: ``zipalign -c`` reports an unaligned
    archive through it, which still proves the tool works.
    """
    cmd = _argv(argv)
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as exc:
        log.debug("tool_check_failed", cmd=cmd[0], error=str(exc))
        return False
    return result.returncode >= 0
