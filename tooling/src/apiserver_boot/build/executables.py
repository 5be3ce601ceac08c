"""`build executables`: prepare sources, then build with the go toolchain or Bazel."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from apiserver_boot.build.bazel import bazel_build
from apiserver_boot.build.go import go_build
from apiserver_boot.errors import BuildError
from apiserver_boot.gen.sources import prepare_sources as default_prepare_sources
from apiserver_boot.helpers import format_command, run_command

log = logging.getLogger(__name__)


def build_executables(
    config: dict[str, Any],
    project_root: Path,
    *,
    runner: Callable[..., int] = run_command,
    prepare_sources: Callable[[dict[str, Any], Path], None] = default_prepare_sources,
    environ: Mapping[str, str] | None = None,
) -> list[Path]:
    """Run prepare_sources, then bazel_build or go_build per config["bazel"].

    Returns the produced binaries. Raises BuildError on the first failure.
    """
    prepare_sources(config, project_root)
    if config["bazel"]:
        return bazel_build(config, project_root, runner=runner)
    return go_build(config, project_root, runner=runner, environ=environ)


def run(
    config: dict[str, Any],
    project_root: Path,
    *,
    runner: Callable[..., int] = run_command,
    prepare_sources: Callable[[dict[str, Any], Path], None] = default_prepare_sources,
    environ: Mapping[str, str] | None = None,
) -> int:
    """build_executables, reporting failure instead of raising. Returns 0 or 1."""
    try:
        build_executables(
            config,
            project_root,
            runner=runner,
            prepare_sources=prepare_sources,
            environ=environ,
        )
    except BuildError as e:
        log.error("%s", e)
        if e.cmd:
            log.error("command: %s", format_command(e.cmd))
        print(f"❌ {e}", file=sys.stderr)
        return 1
    return 0
