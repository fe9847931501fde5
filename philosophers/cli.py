"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys

from .args import ArgumentError, parse_settings
from .table import Table


def main(argv: list[str] | None = None) -> int:
    """Run the simulation and return the process exit status."""
    args = sys.argv[1:] if argv is None else argv
    try:
        settings = parse_settings(args)
    except ArgumentError as error:
        message = str(error)
        if message:
            sys.stderr.write(message + "\n")
        return 1
    try:
        Table(settings, sys.stdout).run()
    except RuntimeError:
        sys.stderr.write("failed create thread\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())