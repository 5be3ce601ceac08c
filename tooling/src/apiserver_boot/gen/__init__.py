"""Code generation hooks run before building."""

from apiserver_boot.gen.sources import prepare_sources, resolve_vendor_dir

__all__ = [
    "prepare_sources",
    "resolve_vendor_dir",
]
