"""Mapping exercises: fruit baskets and a football scores table."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_U8 = re.compile(r"\+?[0-9]+", re.ASCII)
_U8_MAX = 255


def fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds and five pieces of fruit."""
    return {"banana": 2, "apple": 1, "strawberries": 2}


class Fruit(enum.Enum):
    """Kinds of fruit that may go into a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add two of every fruit kind not yet in the basket, leaving others alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 2)


@dataclass(frozen=True)
class Team:
    """A team's name with the goals it scored and conceded."""

    name: str
    goals_scored: int
    goals_conceded: int


def _goals(text: str) -> int:
    if not _U8.fullmatch(text):
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError(f"goal count too large: {text!r}")
    return value


def _checked(total: int) -> int:
    if total > _U8_MAX:
        raise OverflowError("goal total does not fit in 0..=255")
    return total


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def build_scores_table(results: str) -> dict[str, Team]:
    """Build the scores table from lines of "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}

    def record(name: str, scored: int, conceded: int) -> None:
        entry = scores.get(name)
        if entry is None:
            scores[name] = Team(name, scored, conceded)
        else:
            scores[name] = Team(
                entry.name,
                _checked(entry.goals_scored + scored),
                _checked(entry.goals_conceded + conceded),
            )

    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        score_1, score_2 = _goals(fields[2]), _goals(fields[3])
        record(team_1, score_1, score_2)
        record(team_2, score_2, score_1)
    return scores