"""Buildable targets (apiserver, controller) and their conventional paths."""

from __future__ import annotations

from pathlib import Path

APISERVER_TARGET = "apiserver"
CONTROLLER_TARGET = "controller"
ALL_TARGETS: tuple[str, ...] = (APISERVER_TARGET, CONTROLLER_TARGET)

# target -> cmd/<dir> holding main.go (and the Bazel package of the same name)
TARGET_CMD_DIRS: dict[str, str] = {
    APISERVER_TARGET: "apiserver",
    CONTROLLER_TARGET: "manager",
}

# target -> binary name written by `go build -o`
TARGET_ARTIFACTS: dict[str, str] = {
    APISERVER_TARGET: "apiserver",
    CONTROLLER_TARGET: "controller-manager",
}

# Bazel copies land here regardless of --output.
BAZEL_COPY_DIR = "bin"


def build_apiserver(targets: list[str]) -> bool:
    return APISERVER_TARGET in targets


def build_controller(targets: list[str]) -> bool:
    return CONTROLLER_TARGET in targets


def selected_targets(targets: list[str]) -> list[str]:
    """Known targets present in targets, in build order (apiserver first). Unknown names are ignored."""
    return [t for t in ALL_TARGETS if t in targets]


def go_main_path(target: str) -> Path:
    """cmd/<dir>/main.go, relative to project root."""
    return Path("cmd") / TARGET_CMD_DIRS[target] / "main.go"


def go_artifact_path(output_dir: str | Path, target: str) -> Path:
    return Path(output_dir) / TARGET_ARTIFACTS[target]


def stale_artifact_paths(output_dir: str | Path) -> list[Path]:
    """Both direct-path binaries under output_dir, whatever the selection."""
    return [go_artifact_path(output_dir, t) for t in ALL_TARGETS]


def bazel_package_dir(target: str) -> Path:
    return Path("cmd") / TARGET_CMD_DIRS[target]


def bazel_output_path(bazel_bin: str | Path, target: str) -> Path:
    """Bazel go_binary output: <bazel-bin>/cmd/<dir>/<dir>_/<dir>."""
    name = TARGET_CMD_DIRS[target]
    return Path(bazel_bin) / "cmd" / name / f"{name}_" / name


def bazel_copy_path(target: str) -> Path:
    """bin/apiserver or bin/manager."""
    return Path(BAZEL_COPY_DIR) / TARGET_CMD_DIRS[target]
