# src/montyhall/game/schemas.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal, Tuple


Strategy = Literal["stay", "switch"]
Result = Literal["WIN", "LOSE"]
Arrangement = Tuple[str, str, str]


@dataclass(frozen=True)
class GameLabels:
    """
    Canonical labels for one Monty Hall game and the result frames built from it.
    Keep these stable: summaries, stats and plots all key on them.
    """
    CAR: Final[str] = "car"
    GOAT: Final[str] = "goat"

    STAY: Final[str] = "stay"
    SWITCH: Final[str] = "switch"

    WIN: Final[str] = "WIN"
    LOSE: Final[str] = "LOSE"

    # result frame columns
    GAME: Final[str] = "game"
    STRATEGY: Final[str] = "strategy"
    OUTCOME: Final[str] = "outcome"

    @property
    def strategies(self) -> Tuple[str, str]:
        return (self.STAY, self.SWITCH)

    @property
    def outcomes(self) -> Tuple[str, str]:
        # alphabetical, matches crosstab column order
        return (self.LOSE, self.WIN)

    @property
    def round_columns(self) -> Tuple[str, str]:
        return (self.STRATEGY, self.OUTCOME)

    @property
    def batch_columns(self) -> Tuple[str, str, str]:
        return (self.GAME, self.STRATEGY, self.OUTCOME)


LABELS = GameLabels()

DOORS: Tuple[int, int, int] = (1, 2, 3)
PRIZES: Tuple[str, str, str] = (LABELS.GOAT, LABELS.GOAT, LABELS.CAR)
