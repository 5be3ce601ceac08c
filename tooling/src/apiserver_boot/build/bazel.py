"""Bazel build: optional Gazelle regeneration, `bazel build`, copy outputs to bin/.

Gazelle (with --gazelle):
  1. if go.mod exists: `bazel run //:gazelle -- update-repos --from_file=go.mod ...`
     (writes go_repositories into repos.bzl)
  2. `bazel run //:gazelle` (regenerate BUILD files)

Then `bazel build cmd/apiserver cmd/manager` (selected targets only) and copy
bazel-bin/cmd/<dir>/<dir>_/<dir> to bin/<dir>.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import Any

from apiserver_boot.build.targets import (
    BAZEL_COPY_DIR,
    bazel_copy_path,
    bazel_output_path,
    bazel_package_dir,
    selected_targets,
    stale_artifact_paths,
)
from apiserver_boot.errors import BuildError
from apiserver_boot.helpers import remove_stale, run_command

log = logging.getLogger(__name__)

GAZELLE_TARGET = "//:gazelle"

GAZELLE_UPDATE_REPOS_CMD: list[str] = [
    "bazel",
    "run",
    GAZELLE_TARGET,
    "--",
    "update-repos",
    "--from_file=go.mod",
    "--to_macro=repos.bzl%go_repositories",
    "--build_file_generation=on",
    "--build_file_proto_mode=disable",
    "--prune",
]

GAZELLE_CMD: list[str] = ["bazel", "run", GAZELLE_TARGET]


def bazel_build_command(targets: list[str]) -> list[str]:
    return ["bazel", "build", *[str(bazel_package_dir(t)) for t in selected_targets(targets)]]


def _run_or_raise(
    runner: Callable[..., int], cmd: list[str], project_root: Path, what: str
) -> None:
    rc = runner(cmd, cwd=project_root, env=None)
    if rc != 0:
        msg = f"{what} failed (exit {rc})"
        raise BuildError(msg, cmd=cmd, returncode=rc)


def run_gazelle(project_root: Path, *, runner: Callable[..., int] = run_command) -> None:
    """Update go_repositories from go.mod (when present), then regenerate BUILD files."""
    if (project_root / "go.mod").is_file():
        print("🔨 Updating Bazel go_repositories from go.mod...")
        _run_or_raise(runner, list(GAZELLE_UPDATE_REPOS_CMD), project_root, "gazelle update-repos")
    else:
        log.info("no go.mod in %s; skipping gazelle update-repos", project_root)
    print("🔨 Regenerating BUILD files with gazelle...")
    _run_or_raise(runner, list(GAZELLE_CMD), project_root, "gazelle")


def copy_bazel_outputs(
    config: dict[str, Any],
    project_root: Path,
) -> list[Path]:
    """Copy Bazel outputs of selected targets into bin/. Targets without output are skipped."""
    copied: list[Path] = []
    for target in selected_targets(config["targets"]):
        src = project_root / bazel_output_path(config["bazel_bin"], target)
        dst = project_root / bazel_copy_path(target)
        if not src.is_file():
            log.warning("bazel output for %s not found: %s", target, src)
            continue
        log.info("cp %s %s", src, dst)
        try:
            dst.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(src, dst)
            dst.chmod(0o755)
        except OSError as e:
            msg = f"copy {src} -> {dst} failed: {e}"
            raise BuildError(msg) from e
        print(f"📦 Copying {target}: {src.name} -> {bazel_copy_path(target)}")
        copied.append(dst)
    return copied


def bazel_build(
    config: dict[str, Any],
    project_root: Path,
    *,
    runner: Callable[..., int] = run_command,
) -> list[Path]:
    """Gazelle (optional), bazel build, then copy outputs to bin/. Returns copied paths. Raises BuildError."""
    if config["gazelle"]:
        run_gazelle(project_root, runner=runner)

    print("🔨 Building with bazel...")
    _run_or_raise(runner, bazel_build_command(config["targets"]), project_root, "bazel build")

    remove_stale([project_root / p for p in stale_artifact_paths(BAZEL_COPY_DIR)])

    copied = copy_bazel_outputs(config, project_root)
    print(f"✅ Copied {len(copied)} binaries to {BAZEL_COPY_DIR}/")
    return copied
