"""Pytest fixtures for apiserver-boot tooling tests."""

from pathlib import Path

import pytest


class RecordingRunner:
    """Stands in for helpers.run_command: records calls, returns scripted exit codes.

    returncodes maps the first two argv words (e.g. "go build", "bazel run") or a
    full command string to an exit code; unmatched commands return 0.
    """

    def __init__(self, returncodes: dict[str, int] | None = None) -> None:
        self.returncodes = returncodes or {}
        self.calls: list[dict] = []

    def __call__(self, cmd: list[str], *, cwd: Path, env: dict[str, str] | None = None) -> int:
        self.calls.append({"cmd": list(cmd), "cwd": cwd, "env": env})
        full = " ".join(cmd)
        if full in self.returncodes:
            return self.returncodes[full]
        return self.returncodes.get(" ".join(cmd[:2]), 0)

    @property
    def commands(self) -> list[list[str]]:
        return [c["cmd"] for c in self.calls]


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Minimal apiserver-builder project: cmd/apiserver/main.go, cmd/manager/main.go."""
    for d in ("apiserver", "manager"):
        (tmp_path / "cmd" / d).mkdir(parents=True)
        (tmp_path / "cmd" / d / "main.go").write_text("package main\n\nfunc main() {}\n")
    return tmp_path


@pytest.fixture
def make_runner():
    """Factory for RecordingRunner with scripted exit codes."""
    return RecordingRunner
