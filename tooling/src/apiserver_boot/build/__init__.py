"""Build the apiserver and controller-manager executables (go toolchain or Bazel)."""

from apiserver_boot.errors import BuildError

from .bazel import bazel_build, run_gazelle
from .config import (
    DEFAULT_BUILD_CONFIG,
    load_build_config,
    resolve_build_config,
)
from .environment import build_env, env_overrides
from .executables import build_executables
from .executables import run as run_build_executables
from .go import go_build
from .targets import build_apiserver, build_controller

__all__ = [
    "DEFAULT_BUILD_CONFIG",
    "BuildError",
    "bazel_build",
    "build_apiserver",
    "build_controller",
    "build_env",
    "build_executables",
    "env_overrides",
    "go_build",
    "load_build_config",
    "resolve_build_config",
    "run_build_executables",
    "run_gazelle",
]
