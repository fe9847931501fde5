"""Command-line argument parsing for the simulation."""

from __future__ import annotations

from dataclasses import dataclass

INT_MAX = 2147483647
_BLANKS = " \t\n\v\f\r"


class ArgumentError(ValueError):
    """Raised when the simulation arguments are unusable.

    An empty message means the error is reported by exit status alone.
    """


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    count: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals: int | None = None


def _scan(text: str) -> int:
    """Read a decimal number; 0 means malformed, -1 means too large."""
    rest = text.lstrip(_BLANKS)
    if rest.startswith("+"):
        rest = rest[1:]
    if rest.startswith("-"):
        return 0
    value = 0
    pos = 0
    for pos, char in enumerate(rest):
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
        if value > INT_MAX:
            return -1
    else:
        pos = len(rest)
    if rest[pos:].strip(_BLANKS):
        return 0
    return value


def parse_number(text: str) -> int:
    """Parse a strictly positive integer no larger than INT_MAX."""
    value = _scan(text)
    if value <= 0:
        raise ArgumentError("Enter valid argument")
    return value


def parse_settings(args: list[str]) -> Settings:
    """Build settings from the arguments that follow the program name."""
    args = list(args)
    if len(args) not in (4, 5):
        raise ArgumentError("Enter 4 or 5 arguments")
    numbers = []
    for position, text in enumerate(args, start=1):
        if position == 5 and _scan(text) == 0:
            raise ArgumentError("")
        numbers.append(parse_number(text))
    count, die, eat, sleep = numbers[:4]
    meals = numbers[4] if len(numbers) == 5 else None
    return Settings(count, die, eat, sleep, meals)