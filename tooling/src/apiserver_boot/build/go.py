"""Direct-toolchain build: `go build -o <output>/<artifact> cmd/<dir>/main.go` per target."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from apiserver_boot.build.environment import build_env, env_overrides
from apiserver_boot.build.targets import (
    go_artifact_path,
    go_main_path,
    selected_targets,
    stale_artifact_paths,
)
from apiserver_boot.errors import BuildError
from apiserver_boot.helpers import remove_stale, run_command

log = logging.getLogger(__name__)


def go_build_command(output_dir: str | Path, target: str) -> list[str]:
    return [
        "go",
        "build",
        "-o",
        str(go_artifact_path(output_dir, target)),
        str(go_main_path(target)),
    ]


def go_build(
    config: dict[str, Any],
    project_root: Path,
    *,
    runner: Callable[..., int] = run_command,
    environ: Mapping[str, str] | None = None,
) -> list[Path]:
    """Build each selected target with the go toolchain. Returns the artifact paths.

    Stale binaries for both targets are removed first, selected or not.
    Raises BuildError on the first failing target; later targets are not attempted.
    """
    output_dir = config["output"]
    remove_stale([project_root / p for p in stale_artifact_paths(output_dir)])

    built: list[Path] = []
    for target in selected_targets(config["targets"]):
        cmd = go_build_command(output_dir, target)
        for k, v in env_overrides(
            target, goos=config["goos"], goarch=config["goarch"], environ=environ
        ).items():
            log.info("%s=%s", k, v)
        env = build_env(target, goos=config["goos"], goarch=config["goarch"], environ=environ)
        print(f"🔨 Building {target}...")
        rc = runner(cmd, cwd=project_root, env=env)
        if rc != 0:
            msg = f"go build for {target} failed (exit {rc})"
            raise BuildError(msg, cmd=cmd, returncode=rc)
        artifact = project_root / go_artifact_path(output_dir, target)
        print(f"✅ Built {target}: {go_artifact_path(output_dir, target)}")
        built.append(artifact)
    return built
