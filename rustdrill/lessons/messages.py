"""Message processing: a small state machine driven by message variants."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    """A position on the board."""

    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    """Set the state's colour."""

    color: tuple[int, int, int]


@dataclass(frozen=True)
class Echo:
    """Print a line of text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Mark the state as finished."""


Message = ChangeColor | Echo | Move | Quit


@dataclass
class State:
    """Colour, position and quit flag, updated by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(color=color):
                self.color = color
            case Echo(text=text):
                print(text)
            case Move(point=point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")