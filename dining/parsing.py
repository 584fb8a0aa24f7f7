"""Command-line argument parsing for the dining philosophers simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

PH_MAX = 200
"""Largest number of philosophers the simulation accepts."""

INT_MAX = 2**31 - 1
LONG_MAX = 2**63 - 1

_WHITESPACE = " \t\n\v\f\r"


class ArgumentError(ValueError):
    """Raised when the command-line arguments are not acceptable."""


@dataclass(frozen=True)
class Config:
    """Validated simulation settings; times are in milliseconds."""

    philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals_required: Optional[int] = None


def parse_long(text: str) -> int:
    """Read a leading signed integer from ``text``, C ``atol`` style.

    Leading whitespace is skipped, one sign is accepted and reading stops at
    the first non-digit. A positive value that overflows a 64-bit long gives
    -1, a negative one gives 0. Text without digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        result = result * 10 + (ord(char) - ord("0"))
        if result > LONG_MAX:
            return -1 if sign == 1 else 0
    return result * sign


def is_numeric(text: Optional[str]) -> bool:
    """Tell whether ``text`` is an unsigned number, optionally ``+``-prefixed
    and padded with spaces."""
    if not text:
        return False
    body = text.strip(" ")
    if body.startswith("+"):
        body = body[1:]
    return bool(body) and all("0" <= char <= "9" for char in body)


def _checked(text: str, message: str, *, minimum: int, maximum: int) -> int:
    value = parse_long(text)
    if value < minimum or value > maximum or not is_numeric(text):
        raise ArgumentError(message)
    return value


def parse_arguments(args: Sequence[str]) -> Config:
    """Validate the four or five simulation arguments and build a Config.

    ``args`` excludes the program name: number of philosophers, time to die,
    time to eat, time to sleep and, optionally, the number of meals each
    philosopher must eat.
    """
    if len(args) not in (4, 5):
        raise ArgumentError("Input Error!")
    philosophers = _checked(
        args[0], "Error : Invalid philos number", minimum=1, maximum=PH_MAX
    )
    time_to_die = _checked(
        args[1], "Error : Invalid time to die", minimum=1, maximum=INT_MAX
    )
    time_to_eat = _checked(
        args[2], "Error : Invalid time to eat", minimum=1, maximum=INT_MAX
    )
    time_to_sleep = _checked(
        args[3], "Error : Invalid time to sleep", minimum=1, maximum=INT_MAX
    )
    meals_required = None
    if len(args) == 5:
        meals_required = _checked(
            args[4], "Error : Invalid meals count", minimum=0, maximum=INT_MAX
        )
    return Config(
        philosophers=philosophers,
        time_to_die=time_to_die,
        time_to_eat=time_to_eat,
        time_to_sleep=time_to_sleep,
        meals_required=meals_required,
    )