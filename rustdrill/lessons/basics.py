"""Basic exercises: conditionals, functions and strings."""

from __future__ import annotations


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    if a > b:
        return a
    return b


def foo_if_fizz(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar" and anything else to "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def call_me(num: int) -> None:
    """Print one ring line per call."""
    for i in range(num):
        print(f"Ring! Call number {i + 1}")


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    if is_even(price):
        return price - 10
    return price - 3


def square(num: int) -> int:
    return num * num


def current_favorite_color() -> str:
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    return attempt in ("green", "blue", "red")


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!"."""
    return text + " world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")