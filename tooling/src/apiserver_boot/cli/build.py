"""`apiserver-boot build executables`: go toolchain or Bazel (+ gazelle)."""

import sys
from pathlib import Path

from apiserver_boot.build.config import (
    DEFAULT_CONFIG_NAME,
    load_build_config,
    resolve_build_config,
)
from apiserver_boot.build.executables import run as run_build_executables
from apiserver_boot.build.targets import ALL_TARGETS

EXAMPLES = """\
examples:
  # Generate code and build the apiserver and controller binaries in bin/
  apiserver-boot build executables

  # Cross compile into linux/ for linux:amd64
  apiserver-boot build executables --goos linux --goarch amd64 --output linux/

  # Regenerate Bazel BUILD files, then build with bazel (needs bazel and gazelle)
  apiserver-boot build executables --bazel --gazelle

  # Run bazel without regenerating BUILD files
  apiserver-boot build executables --bazel
"""


def parse_build_executables_args(argv: list[str]):
    import argparse

    ap = argparse.ArgumentParser(
        prog="apiserver-boot build executables",
        description="Builds the source into executables to run on the local machine",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument(
        "--vendor-dir",
        default=None,
        help="Location of directory containing vendor files.",
    )
    ap.add_argument("--goos", default=None, help="if specified, set this GOOS")
    ap.add_argument("--goarch", default=None, help="if specified, set this GOARCH")
    ap.add_argument(
        "--output",
        default=None,
        help="if set, write the binaries to this directory (default: bin)",
    )
    ap.add_argument(
        "--bazel",
        action="store_true",
        default=None,
        help="if set, use bazel to build. May require updating build rules with gazelle.",
    )
    ap.add_argument(
        "--gazelle",
        action="store_true",
        default=None,
        help="if set, run gazelle before running bazel.",
    )
    ap.add_argument(
        "--targets",
        action="append",
        default=None,
        metavar="TARGET",
        help=f"A target binary to build; repeat for more (default: {', '.join(ALL_TARGETS)})",
    )
    ap.add_argument(
        "--project-root",
        type=Path,
        default=Path.cwd(),
        help="Project root (default: cwd)",
    )
    ap.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Build config YAML (default: <project-root>/{DEFAULT_CONFIG_NAME})",
    )
    return ap.parse_args(argv)


def run_build_argv(argv: list[str] | None = None) -> None:
    """Parse argv (after 'build') and run the build subcommand. Exits 0/1."""
    if argv is None:
        argv = sys.argv[2:] if len(sys.argv) > 2 else []  # skip 'apiserver-boot build'
    if not argv:
        print("Usage: apiserver-boot build <subcommand> [flags]", file=sys.stderr)
        print("Subcommands:", file=sys.stderr)
        print(
            "  executables  - Build apiserver and controller-manager binaries",
            file=sys.stderr,
        )
        sys.exit(1)
    subcommand, rest = argv[0], argv[1:]
    if subcommand != "executables":
        print(f"Error: Unknown build subcommand: {subcommand}", file=sys.stderr)
        sys.exit(1)

    args = parse_build_executables_args(rest)
    project_root = args.project_root.resolve()
    config_path = args.config or project_root / DEFAULT_CONFIG_NAME
    try:
        file_config = load_build_config(config_path)
    except ValueError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)

    cli_overrides = {
        k: v
        for k, v in {
            "vendor_dir": args.vendor_dir,
            "goos": args.goos,
            "goarch": args.goarch,
            "output": args.output,
            "bazel": args.bazel,
            "gazelle": args.gazelle,
            "targets": args.targets,
        }.items()
        if v is not None
    }
    config = resolve_build_config({**file_config, **cli_overrides})
    rc = run_build_executables(config, project_root)
    sys.exit(rc)
