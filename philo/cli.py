"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .args import ArgumentError, parse_config
from .simulation import MAGENTA, RST, WHITE, Simulation


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation from command-line arguments; return the exit status.

    ``argv`` holds the arguments after the program name: number of
    philosophers, time to die, time to eat, time to sleep and, optionally,
    the number of meals each philosopher must have.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        config = parse_config(args)
    except ArgumentError as error:
        sys.stdout.write(f"{error}\n\n")
        sys.stdout.flush()
        return 1

    died = Simulation(config).run()
    if config.limit_meals and not died:
        sys.stdout.write(
            f"{MAGENTA}Philo's has eaten at least {config.meals_to_have}\n{RST}"
        )
    sys.stdout.write(f"{WHITE}Simulation has ended\n{RST}")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())