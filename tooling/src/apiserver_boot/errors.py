"""Build failure carrying the failing command and its exit code."""

from __future__ import annotations


class BuildError(Exception):
    def __init__(
        self,
        message: str,
        *,
        cmd: list[str] | None = None,
        returncode: int | None = None,
    ) -> None:
        super().__init__(message)
        self.cmd = cmd
        self.returncode = returncode
