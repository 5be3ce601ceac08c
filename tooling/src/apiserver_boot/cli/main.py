"""Main CLI entry point for apiserver-boot."""

import logging
import sys

from apiserver_boot.cli import build as build_cli


def _configure_logging(argv: list[str]) -> list[str]:
    """Set up root logging; strips -v/--verbose before the command word and returns the rest."""
    verbose = False
    while argv and argv[0] in ("-v", "--verbose"):
        verbose = True
        argv = argv[1:]
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    return argv


def main() -> None:
    """Main CLI entry point."""
    argv = _configure_logging(sys.argv[1:])
    if not argv:
        print("Usage: apiserver-boot [-v] <command> [args...]", file=sys.stderr)
        print("Commands:", file=sys.stderr)
        print(
            "  build executables  - Build apiserver and controller-manager (go or bazel)",
            file=sys.stderr,
        )
        sys.exit(1)

    command = argv[0]

    if command == "build":
        build_cli.run_build_argv(argv[1:])
    else:
        print(f"Error: Unknown command: {command}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
