from __future__ import annotations

from typing import Callable, List, Optional, Tuple

import numpy as np
import pandas as pd

from montyhall.common.utils import make_rng
from montyhall.game.rules import (
    change_door,
    create_game,
    determine_winner,
    open_goat_door,
    select_door,
)
from montyhall.game.schemas import LABELS, Result, Strategy
from montyhall.game.validation import validate_n_games


StopFn = Callable[[int], bool]


def _play_round(rng: np.random.Generator) -> List[Tuple[Strategy, Result]]:
    """
    One game, both strategies judged against the same doors, pick and reveal.
    Returns [(stay, outcome), (switch, outcome)].
    """
    new_game = create_game(rng)
    first_pick = select_door(rng)
    opened_door = open_goat_door(new_game, first_pick, rng)

    final_pick_stay = change_door(True, opened_door, first_pick)
    final_pick_switch = change_door(False, opened_door, first_pick)

    outcome_stay = determine_winner(final_pick_stay, new_game)
    outcome_switch = determine_winner(final_pick_switch, new_game)

    return [(LABELS.STAY, outcome_stay), (LABELS.SWITCH, outcome_switch)]


def play_game(rng: Optional[np.random.Generator] = None) -> pd.DataFrame:
    """
    Play a full game and report it once per strategy.

    Returns a 2-row frame with columns strategy/outcome: stay first, switch second.
    """
    rows = _play_round(make_rng(rng))
    return pd.DataFrame(rows, columns=list(LABELS.round_columns))


def play_n_games(
    n: int = 100,
    rng: Optional[np.random.Generator] = None,
    should_stop: Optional[StopFn] = None,
) -> pd.DataFrame:
    """
    Play n independent games.

    Returns a frame with columns game/strategy/outcome and 2*n rows
    (n per strategy). `game` numbers rounds from 1 so stay/switch rows of the
    same round stay paired.

    should_stop(games_played) is checked before every round; returning True
    ends the batch early with the rounds completed so far.
    Any error inside a round aborts the whole batch.

    Printing the summary is not done here; see montyhall.reporting.summary.
    """
    n = validate_n_games(n)
    rng = make_rng(rng)

    rows: List[Tuple[int, Strategy, Result]] = []
    for game_no in range(1, n + 1):
        if should_stop is not None and should_stop(game_no - 1):
            break
        rows.extend((game_no, strategy, outcome) for strategy, outcome in _play_round(rng))

    return pd.DataFrame(rows, columns=list(LABELS.batch_columns))
