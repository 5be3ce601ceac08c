"""Child environment for `go build`: CGO_ENABLED, GOOS/GOARCH, controller cache vars."""

from __future__ import annotations

import os
from collections.abc import Mapping

from apiserver_boot.build.targets import APISERVER_TARGET, CONTROLLER_TARGET

# Windows per-user data dir; the go toolchain needs it (with GOCACHE) to locate its cache.
LOCAL_APP_DATA = "LocalAppData"


def env_overrides(
    target: str,
    goos: str = "",
    goarch: str = "",
    environ: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Keys set on top of the ambient environment for target, in application order."""
    if environ is None:
        environ = os.environ
    out: dict[str, str] = {}
    if target == APISERVER_TARGET or not environ.get("CGO_ENABLED"):
        out["CGO_ENABLED"] = "0"
    if goos:
        out["GOOS"] = goos
    if goarch:
        out["GOARCH"] = goarch
    if target == CONTROLLER_TARGET:
        local_app_data = environ.get(LOCAL_APP_DATA, "")
        if local_app_data:
            out["GOCACHE"] = environ.get("GOCACHE", "")
            out[LOCAL_APP_DATA] = local_app_data
    return out


def build_env(
    target: str,
    goos: str = "",
    goarch: str = "",
    environ: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Ambient environment (default os.environ) with env_overrides applied."""
    if environ is None:
        environ = os.environ
    env = dict(environ)
    env.update(env_overrides(target, goos=goos, goarch=goarch, environ=environ))
    return env
