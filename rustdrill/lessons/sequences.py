"""Sequence exercises: arrays and lists, mapping, and a generic wrapper."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed tuple and a list holding the same elements."""
    a = (10, 20, 30, 40)
    return a, list(a)


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of the list in place and return it."""
    values[:] = [n * 2 for n in values]
    return values


def vec_map(values: list[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [n * 2 for n in values]


@dataclass
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T