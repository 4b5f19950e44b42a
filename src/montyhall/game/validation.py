# src/montyhall/game/validation.py
from __future__ import annotations

from typing import Any, Iterable, Sequence

import numpy as np
import pandas as pd

from montyhall.game.schemas import DOORS, LABELS, Arrangement


class InvalidArgumentError(ValueError):
    pass


class GameStateError(RuntimeError):
    """Raised when the host or contestant is left with zero or several candidate doors."""


def _is_int_like(x: Any) -> bool:
    # bool is an int subclass; a door is never True/False
    return isinstance(x, (int, np.integer)) and not isinstance(x, (bool, np.bool_))


def validate_door(door: Any, name: str = "door") -> int:
    if not _is_int_like(door):
        raise InvalidArgumentError(f"{name} must be an integer door number, got {door!r}")
    if int(door) not in DOORS:
        raise InvalidArgumentError(f"{name} must be one of {list(DOORS)}, got {door!r}")
    return int(door)


def validate_stay(stay: Any) -> bool:
    """True/False, or a strategy label ("stay"/"switch")."""
    if isinstance(stay, (bool, np.bool_)):
        return bool(stay)
    if isinstance(stay, str) and stay in LABELS.strategies:
        return stay == LABELS.STAY
    raise InvalidArgumentError(
        f"stay must be a bool or one of {list(LABELS.strategies)}, got {stay!r}"
    )


def validate_arrangement(arrangement: Sequence[str]) -> Arrangement:
    """
    Ensures a game holds exactly three doors, all labelled car/goat, with one car.
    Returns the arrangement normalized to a tuple of plain str.
    """
    try:
        doors = tuple(str(x) for x in arrangement)
    except TypeError:
        raise InvalidArgumentError(f"arrangement must be a sequence of labels, got {arrangement!r}") from None

    if len(doors) != len(DOORS):
        raise InvalidArgumentError(f"arrangement must have {len(DOORS)} doors, got {len(doors)}")

    unknown = sorted({x for x in doors if x not in (LABELS.CAR, LABELS.GOAT)})
    if unknown:
        raise InvalidArgumentError(f"Unknown door labels in arrangement: {unknown}")

    n_cars = doors.count(LABELS.CAR)
    if n_cars != 1:
        raise InvalidArgumentError(f"arrangement must hold exactly one {LABELS.CAR!r}, found {n_cars}")

    return doors  # type: ignore[return-value]


def validate_n_games(n: Any) -> int:
    if not _is_int_like(n):
        raise InvalidArgumentError(f"n must be an integer, got {n!r}")
    if int(n) < 1:
        raise InvalidArgumentError(f"n must be >= 1, got {n}")
    return int(n)


def validate_required_columns(df: pd.DataFrame, required: Iterable[str]) -> None:
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise InvalidArgumentError(f"Missing required columns: {missing}")


def validate_results_df(df: pd.DataFrame) -> None:
    validate_required_columns(df, LABELS.round_columns)
    if len(df) == 0:
        raise InvalidArgumentError("No games to summarize (empty results).")

    bad_strategy = sorted(set(df[LABELS.STRATEGY]) - set(LABELS.strategies))
    if bad_strategy:
        raise InvalidArgumentError(f"Unknown strategies in results: {bad_strategy}")
    bad_outcome = sorted(set(df[LABELS.OUTCOME]) - set(LABELS.outcomes))
    if bad_outcome:
        raise InvalidArgumentError(f"Unknown outcomes in results: {bad_outcome}")
