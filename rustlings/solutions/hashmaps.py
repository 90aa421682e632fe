"""Solutions to the hash map exercises."""

from __future__ import annotations

import re
from collections.abc import MutableMapping
from dataclasses import dataclass
from enum import Enum

_U8 = re.compile(r"\+?[0-9]+")


def _parse_u8(text: str) -> int:
    """Parse an unsigned 8-bit integer strictly."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _U8.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > 255:
        raise ValueError("number too large to fit in target type")
    return value


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and at least five fruits."""
    return {"banana": 2, "mango": 1, "apple": 2}


class Fruit(Enum):
    """Kinds of fruit for the fruit cake."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add ten of every kind of fruit not already in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 10)


@dataclass
class Team:
    """Goals a team scored and conceded."""

    goals_scored: int
    goals_conceded: int


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a scores table from lines of "team1,team2,goals1,goals2".

    Each line replaces what an earlier line recorded for the same team.
    """
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_u8(fields[2])
        team_2_score = _parse_u8(fields[3])
        scores[team_1_name] = Team(goals_scored=team_1_score, goals_conceded=team_2_score)
        scores[team_2_name] = Team(goals_scored=team_2_score, goals_conceded=team_1_score)
    return scores