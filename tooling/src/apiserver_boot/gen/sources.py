"""Code-generation precondition run before every build.

Generating the API code itself is done by the project's generators; this hook
only checks what the build needs from that step.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from apiserver_boot.errors import BuildError

log = logging.getLogger(__name__)


def resolve_vendor_dir(config: dict[str, Any], project_root: Path) -> Path | None:
    """config["vendor_dir"] relative to project_root, or None when unset."""
    vendor_dir = config.get("vendor_dir") or ""
    if not vendor_dir:
        return None
    p = Path(vendor_dir)
    return p if p.is_absolute() else project_root / p


def prepare_sources(config: dict[str, Any], project_root: Path) -> None:
    """Check generated-code inputs before building. Raises BuildError if vendor_dir is set but missing."""
    vendor = resolve_vendor_dir(config, project_root)
    if vendor is None:
        log.debug("no vendor dir configured; using module dependencies")
        return
    if not vendor.is_dir():
        msg = f"vendor dir not found: {vendor}"
        raise BuildError(msg)
    log.info("using vendor dir %s", vendor)
