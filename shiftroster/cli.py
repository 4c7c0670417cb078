"""Command line entry point: build and print a month's shift schedule."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

from .doctors import DoctorRegistry
from .schedule import format_conflicts, generate_schedule

_PREFERENCE_1 = [
    [1, 1, 1],
    [0, 0, 0],
    [1, 1, 1],
    [1, 1, 1],
    [1, 1, 1],
    [1, 1, 1],
    [1, 1, 0],
]
_PREFERENCE_2 = [
    [1, 1, 1],
    [1, 1, 1],
    [0, 1, 1],
    [0, 0, 0],
    [1, 1, 1],
    [1, 1, 1],
    [1, 1, 0],
]
_PREFERENCE_3 = [
    [0, 1, 1],
    [1, 1, 1],
    [1, 1, 1],
    [1, 1, 1],
    [1, 1, 1],
    [1, 1, 0],
    [0, 0, 0],
]


def sample_registry() -> DoctorRegistry:
    """The built-in roster of five doctors."""
    registry = DoctorRegistry()
    registry.add(1, "Doni", 6, _PREFERENCE_1)
    registry.add(2, "Rena", 5, _PREFERENCE_2)
    registry.add(3, "Levi", 4, _PREFERENCE_3)
    registry.add(4, "Alvi", 4, _PREFERENCE_2)
    registry.add(5, "Vely", 5, _PREFERENCE_3)
    return registry


def main(argv: Sequence[str] | None = None) -> int:
    """Print a 30-day schedule for the built-in roster and its preference conflicts."""
    parser = argparse.ArgumentParser(
        prog="shiftroster", description="Generate a monthly doctor shift schedule."
    )
    parser.add_argument("--seed", type=int, help="seed for a reproducible schedule")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    schedule = generate_schedule(sample_registry(), rng)
    print(schedule.format())
    print(format_conflicts(schedule.conflicts()), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())