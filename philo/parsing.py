"""Command-line argument parsing for the dining philosophers simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

_DIGITS = frozenset("0123456789")
_UINT_MODULUS = 1 << 32

INVALID_ARGS = "Invalid args"
ZERO_MEALS = "They can't eat 0 times"


class ArgumentError(ValueError):
    """Raised when the simulation arguments are malformed or out of range."""


@dataclass(frozen=True)
class Args:
    """Settings of one simulation run; times are in milliseconds."""

    num_philos: int
    time_die: int
    time_eat: int
    time_sleep: int
    must_eat: Optional[int] = None


def parse_number(text: str) -> int:
    """Parse a string of ASCII digits as an unsigned 32-bit number.

    An empty string reads as 0 and values wrap around modulo 2**32.
    Any other character raises ArgumentError.
    """
    if not set(text) <= _DIGITS:
        raise ArgumentError(INVALID_ARGS)
    if not text:
        return 0
    return int(text) % _UINT_MODULUS


def parse_args(argv: Sequence[str]) -> Args:
    """Build Args from the arguments that follow the program name.

    Expects number_of_philosophers, time_to_die, time_to_eat,
    time_to_sleep and optionally number_of_times_each_philosopher_must_eat.
    """
    if len(argv) not in (4, 5):
        raise ArgumentError(INVALID_ARGS)
    num_philos, time_die, time_eat, time_sleep, *rest = (
        parse_number(arg) for arg in argv
    )
    must_eat = rest[0] if rest else None
    if must_eat == 0:
        raise ArgumentError(ZERO_MEALS)
    if 0 in (num_philos, time_die, time_eat, time_sleep):
        raise ArgumentError(INVALID_ARGS)
    return Args(num_philos, time_die, time_eat, time_sleep, must_eat)