"""Build configuration for `build executables` (defaults, YAML file, overrides).

Config file format (apiserver-boot.yaml in the project root, all keys optional):

    build:
      goos: linux
      goarch: arm64
      output: bin
      bazel: false
      gazelle: false
      targets: [apiserver, controller]
      vendor_dir: ""
      bazel_bin: bazel-bin
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from apiserver_boot.build.targets import ALL_TARGETS

DEFAULT_CONFIG_NAME = "apiserver-boot.yaml"

# Empty goos/goarch mean "native": no GOOS/GOARCH override on the child.
DEFAULT_BUILD_CONFIG: dict[str, Any] = {
    "goos": "",
    "goarch": "",
    "output": "bin",
    "bazel": False,
    "gazelle": False,
    "targets": list(ALL_TARGETS),
    "vendor_dir": "",
    "bazel_bin": "bazel-bin",
}

_BOOL_KEYS = ("bazel", "gazelle")


def resolve_build_config(overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    """Return config dict with defaults filled. Unknown keys and None values are ignored.

    Raises ValueError if bazel or gazelle is not a bool.
    """
    out = dict(DEFAULT_BUILD_CONFIG)
    out["targets"] = list(DEFAULT_BUILD_CONFIG["targets"])
    if not overrides:
        return out
    for k, v in overrides.items():
        if k not in out or v is None:
            continue
        if k == "targets":
            if isinstance(v, str):
                v = [v]
            out[k] = [str(t) for t in v]
        elif k in _BOOL_KEYS:
            if not isinstance(v, bool):
                msg = f"'{k}' must be true or false, got {v!r}"
                raise ValueError(msg)
            out[k] = v
        else:
            out[k] = str(v)
    return out


def load_build_config(config_path: Path) -> dict[str, Any]:
    """Load the `build:` section of a YAML config. Missing file -> {}. Raises ValueError if malformed."""
    if not config_path.is_file():
        return {}
    try:
        with config_path.open() as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        msg = f"Invalid YAML in {config_path}: {e}"
        raise ValueError(msg) from e
    if not isinstance(data, dict):
        msg = f"Expected a mapping at top level of {config_path}"
        raise ValueError(msg)
    section = data.get("build") or {}
    if not isinstance(section, dict):
        msg = f"Expected 'build' to be a mapping in {config_path}"
        raise ValueError(msg)
    targets = section.get("targets")
    if targets is not None and not isinstance(targets, (list, str)):
        msg = f"'build.targets' must be a list of strings in {config_path}"
        raise ValueError(msg)
    for key in _BOOL_KEYS:
        value = section.get(key)
        if value is not None and not isinstance(value, bool):
            msg = f"'build.{key}' must be true or false in {config_path}, got {value!r}"
            raise ValueError(msg)
    return section
