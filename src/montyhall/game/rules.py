# src/montyhall/game/rules.py
from __future__ import annotations

from typing import Optional, Sequence, Union

import numpy as np

from montyhall.common.utils import make_rng
from montyhall.game.schemas import DOORS, LABELS, PRIZES, Arrangement, Result, Strategy
from montyhall.game.validation import (
    GameStateError,
    validate_arrangement,
    validate_door,
    validate_stay,
)


# ============================================================
# One Monty Hall game, step by step:
#   create_game -> select_door -> open_goat_door -> change_door -> determine_winner
# Every random step takes an explicit numpy Generator.
# ============================================================


def create_game(rng: Optional[np.random.Generator] = None) -> Arrangement:
    """
    Hide one car and two goats behind doors 1..3.
    Each of the three car positions is equally likely.
    """
    rng = make_rng(rng)
    shuffled = rng.permutation(len(PRIZES))
    return tuple(PRIZES[i] for i in shuffled)  # type: ignore[return-value]


def select_door(rng: Optional[np.random.Generator] = None) -> int:
    """Contestant's first pick, uniform over doors 1..3."""
    rng = make_rng(rng)
    return int(rng.integers(DOORS[0], DOORS[-1] + 1))


def open_goat_door(
    arrangement: Sequence[str],
    a_pick: int,
    rng: Optional[np.random.Generator] = None,
) -> int:
    """
    The host opens a goat door that the contestant did not pick.

    If the contestant already holds the car, both other doors hide goats and the
    host picks one of them at random. Otherwise exactly one door is neither the
    car nor the pick, and the host is forced to open it.
    """
    game = validate_arrangement(arrangement)
    a_pick = validate_door(a_pick, "a_pick")

    # validate_arrangement guarantees one car, so both candidate lists below
    # have the expected size: 2 goats when a_pick is the car, else 1 door
    if game[a_pick - 1] == LABELS.CAR:
        goat_doors = [d for d in DOORS if game[d - 1] != LABELS.CAR]
        rng = make_rng(rng)
        return goat_doors[int(rng.integers(len(goat_doors)))]

    return next(d for d in DOORS if game[d - 1] != LABELS.CAR and d != a_pick)


def change_door(stay: Union[bool, Strategy], opened_door: int, a_pick: int) -> int:
    """
    Final pick: keep a_pick, or move to the one door neither picked nor opened.

    `stay` is a bool or a strategy label ("stay"/"switch"). The host never opens
    the contestant's door, so opened_door == a_pick fails for either strategy.
    """
    stay = validate_stay(stay)
    opened_door = validate_door(opened_door, "opened_door")
    a_pick = validate_door(a_pick, "a_pick")

    if opened_door == a_pick:
        raise GameStateError(
            f"Host opened the contestant's own door: opened_door={opened_door} a_pick={a_pick}"
        )

    if stay:
        return a_pick

    remaining = [d for d in DOORS if d != opened_door and d != a_pick]
    return remaining[0]


def determine_winner(final_pick: int, arrangement: Sequence[str]) -> Result:
    game = validate_arrangement(arrangement)
    final_pick = validate_door(final_pick, "final_pick")
    return LABELS.WIN if game[final_pick - 1] == LABELS.CAR else LABELS.LOSE  # type: ignore[return-value]
