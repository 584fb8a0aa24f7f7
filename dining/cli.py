"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .parsing import ArgumentError, parse_arguments
from .simulation import Color, Simulation


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the arguments, run the simulation and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        config = parse_arguments(args)
    except ArgumentError as exc:
        print(f"{Color.RED.value}{exc}")
        return 1
    simulation = Simulation(config)
    try:
        simulation.run()
    except RuntimeError as exc:
        print(f"{Color.RED.value}Error: {exc}")
    return 0


if __name__ == "__main__":
    sys.exit(main())