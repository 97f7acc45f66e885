"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from philo.parsing import ArgumentError, parse_args
from philo.table import Table


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation with the given arguments and return an exit code."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        args = parse_args(argv)
    except ArgumentError as error:
        sys.stderr.write(f"{error}\n")
        return 1
    try:
        Table(args, sys.stdout).run()
    except RuntimeError:
        sys.stderr.write("Error initializing\n")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())