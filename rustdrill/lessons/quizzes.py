"""Quiz solutions: apple pricing, a string transformer and report cards."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


def calculate_price_of_apples(number: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    if number > 40:
        return number
    return number * 2


@dataclass(frozen=True)
class Uppercase:
    """Convert the string to upper case."""


@dataclass(frozen=True)
class Trim:
    """Strip surrounding whitespace."""


@dataclass(frozen=True)
class Append:
    """Append "bar" the given number of times."""

    times: int


Command = Uppercase | Trim | Append


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string and return the results in order."""
    output = []
    for text, command in items:
        match command:
            case Uppercase():
                output.append(text.upper())
            case Trim():
                output.append(text.strip())
            case Append(times=times):
                output.append(text + "bar" * times)
            case _:
                raise TypeError(f"unknown command: {command!r}")
    return output


@dataclass
class ReportCard:
    """A student's report card with a numeric or alphabetic grade."""

    grade: Any
    student_name: str
    student_age: int

    def __post_init__(self) -> None:
        if not 0 <= self.student_age <= 255:
            raise ValueError(f"student age out of range: {self.student_age}")

    def render(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )