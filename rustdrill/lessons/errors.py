"""Error-handling exercises: name tags, token costs and positive integers."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)
_I32 = (-(2**31), 2**31 - 1)
_I64 = (-(2**63), 2**63 - 1)

PROCESSING_FEE = 1
COST_PER_ITEM = 5


def _parse_int(text: str, bounds: tuple[int, int]) -> int:
    """Parse a signed integer strictly, within the given inclusive bounds."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    low, high = bounds
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the name tag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost in tokens of the typed quantity: 5 per item plus a fee of 1."""
    quantity = _parse_int(item_quantity, _I32)
    cost = quantity * COST_PER_ITEM + PROCESSING_FEE
    low, high = _I32
    if not low <= cost <= high:
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


def tokens_left(tokens: int, user_input: str) -> int:
    """Buy the typed quantity if affordable and return the tokens remaining."""
    cost = total_cost(user_input)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationError(ValueError):
    """A positive non-zero integer could not be created."""


class NegativeValue(CreationError):
    """The value was negative."""

    def __init__(self, message: str = "number is negative") -> None:
        super().__init__(message)


class ZeroValue(CreationError):
    """The value was zero."""

    def __init__(self, message: str = "number is zero") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer that is strictly greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise NegativeValue()
        if self.value == 0:
            raise ZeroValue()


class ParsePosNonzeroError(ValueError):
    """Text could not be turned into a positive non-zero integer.

    ``cause`` holds the underlying error: a CreationError, or the
    ValueError raised while reading the number.
    """

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause

    @property
    def is_creation(self) -> bool:
        return isinstance(self.cause, CreationError)

    @property
    def is_parse_int(self) -> bool:
        return not isinstance(self.cause, CreationError)


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger or raise ParsePosNonzeroError."""
    try:
        value = _parse_int(text, _I64)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err