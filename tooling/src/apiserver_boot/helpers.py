"""Shared helpers for apiserver_boot (command formatting, process spawning, stale files).

Used by build and gen modules.
"""

from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
from pathlib import Path

from apiserver_boot.errors import BuildError

log = logging.getLogger(__name__)

# Shell convention for "command not found"; spawn failures are reported with it.
SPAWN_FAILED = 127


# --- Command ---


def format_command(cmd: list[str]) -> str:
    """Render argv as a single shell-quoted line for logs."""
    return " ".join(shlex.quote(part) for part in cmd)


def run_command(
    cmd: list[str],
    *,
    cwd: Path,
    env: dict[str, str] | None = None,
) -> int:
    """Run cmd in cwd, streaming its stdout/stderr to ours. Returns the exit code.

    A tool that cannot be spawned (missing from PATH, not executable) is logged
    and reported as SPAWN_FAILED so callers treat it like any non-zero exit.
    """
    log.info("%s", format_command(cmd))
    try:
        r = subprocess.run(cmd, cwd=str(cwd), env=env, check=False)
    except OSError as e:
        log.error("failed to run %s: %s", cmd[0], e)
        return SPAWN_FAILED
    return r.returncode


# --- Files ---


def remove_stale(paths: list[Path]) -> list[Path]:
    """Delete each path if present; missing paths are not an error. Returns the removed ones.

    Raises BuildError when a present path cannot be removed.
    """
    removed: list[Path] = []
    for p in paths:
        try:
            if p.is_dir() and not p.is_symlink():
                shutil.rmtree(p)
            else:
                p.unlink()
        except FileNotFoundError:
            continue
        except OSError as e:
            msg = f"remove {p} failed: {e}"
            raise BuildError(msg) from e
        log.debug("removed stale %s", p)
        removed.append(p)
    return removed
