"""Command-line argument checking and the simulation configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

INT_MAX = 2_147_483_647
MAX_PHILOSOPHERS = 200
MIN_DURATION_MS = 60
MAX_DIGITS = 10


class ArgumentError(Exception):
    """Base class for every problem with the command-line arguments."""

    message = "Invalid arguments"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)


class ArgumentCountError(ArgumentError):
    """Raised when the wrong number of arguments is given."""

    message = "Invalid number of args"


class ArgumentFormatError(ArgumentError):
    """Raised when an argument is not a plain non-negative number."""

    message = "Args provided is invalid"


class ArgumentValueError(ArgumentError):
    """Raised when an argument is well formed but out of range."""

    message = "Args provided has invalid values"


def is_space(char: str) -> bool:
    """Return True for ASCII whitespace: tab through carriage return, or space."""
    return char == " " or "\t" <= char <= "\r"


def is_digit(char: str) -> bool:
    """Return True for an ASCII decimal digit."""
    return "0" <= char <= "9"


def is_valid_format(text: str) -> bool:
    """Check that ``text`` is an optionally '+'-signed run of 1 to 10 digits.

    Leading and trailing whitespace is allowed; a '-' sign is not.
    """
    rest = text.lstrip(" \t\n\v\f\r")
    if rest[:1] == "-":
        return False
    if rest[:1] == "+":
        rest = rest[1:]
    digits = len(rest) - len(_strip_leading_digits(rest))
    rest = rest[digits:].lstrip(" \t\n\v\f\r")
    return not rest and 0 < digits <= MAX_DIGITS


def _strip_leading_digits(text: str) -> str:
    for position, char in enumerate(text):
        if not is_digit(char):
            return text[position:]
    return ""


def check_input(args: Sequence[str]) -> None:
    """Raise ArgumentFormatError unless every argument has a valid format."""
    if not all(is_valid_format(arg) for arg in args):
        raise ArgumentFormatError()


def parse_long(text: str) -> int:
    """Read the leading number of ``text``; return -1 if it exceeds INT_MAX.

    Whitespace and a single '+' are skipped; parsing stops at the first
    non-digit, so text without digits reads as 0.
    """
    rest = text.lstrip(" \t\n\v\f\r")
    if rest[:1] == "+":
        rest = rest[1:]
    digits = rest[: len(rest) - len(_strip_leading_digits(rest))]
    number = int(digits) if digits else 0
    return -1 if number > INT_MAX else number


@dataclass
class Config:
    """Simulation parameters; durations are in milliseconds."""

    num_of_philos: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals_to_have: Optional[int] = None

    @property
    def limit_meals(self) -> bool:
        """Whether the simulation stops once everyone has eaten enough."""
        return self.meals_to_have is not None

    def validate(self) -> None:
        """Raise ArgumentValueError if any parameter is out of range."""
        if not 1 <= self.num_of_philos <= MAX_PHILOSOPHERS:
            raise ArgumentValueError()
        if min(self.time_to_die, self.time_to_eat, self.time_to_sleep) < MIN_DURATION_MS:
            raise ArgumentValueError()
        if self.limit_meals and self.meals_to_have == 0:
            raise ArgumentValueError()


def parse_config(args: Sequence[str]) -> Config:
    """Build a validated Config from the arguments after the program name."""
    if len(args) not in (4, 5):
        raise ArgumentCountError()
    check_input(args)
    numbers = [parse_long(arg) for arg in args]
    config = Config(
        num_of_philos=numbers[0],
        time_to_die=numbers[1],
        time_to_eat=numbers[2],
        time_to_sleep=numbers[3],
        meals_to_have=numbers[4] if len(numbers) == 5 else None,
    )
    config.validate()
    return config