from __future__ import annotations

import math
from typing import Dict

import numpy as np
import pandas as pd

from montyhall.game.schemas import LABELS
from montyhall.game.validation import InvalidArgumentError, validate_required_columns, validate_results_df


def expected_win_rates() -> Dict[str, float]:
    """
    Closed-form answer for three doors and an informed host.
    Staying wins only when the first pick was the car (1 in 3).
    """
    return {LABELS.STAY: 1.0 / 3.0, LABELS.SWITCH: 2.0 / 3.0}


def _normcdf(x: float) -> float:
    # standard normal CDF via erf
    return 0.5 * (1.0 + math.erf(x / math.sqrt(2.0)))


def paired_ztest(x: np.ndarray, y: np.ndarray) -> Dict[str, float]:
    """
    Paired z-test on d = y - x (normal approximation, fine for large n).
    Returns means, effect (mean d), z, two-sided p_value and lift relative to x.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    if x.shape != y.shape:
        raise InvalidArgumentError("paired_ztest expects arrays of equal length")
    if len(x) < 2:
        raise InvalidArgumentError("paired_ztest needs at least 2 pairs")

    d = y - x
    mx, my = float(x.mean()), float(y.mean())
    effect = float(d.mean())
    se = float(d.std(ddof=1)) / math.sqrt(len(d))

    lift = effect / mx if mx != 0 else float("nan")
    if se == 0:
        return {"mx": mx, "my": my, "effect": effect, "z": float("nan"), "p_value": float("nan"), "lift_pct": lift}

    z = effect / se
    p = 2 * (1 - _normcdf(abs(z)))
    return {"mx": mx, "my": my, "effect": effect, "z": float(z), "p_value": float(p), "lift_pct": float(lift)}


def compare_strategies(results: pd.DataFrame) -> Dict[str, float]:
    """
    Switch vs stay on the same games.

    Each game contributes one win indicator per strategy; the test runs on the
    per-game difference, so shared doors/picks cancel out of the noise.
    """
    validate_results_df(results)
    validate_required_columns(results, [LABELS.GAME])

    wins = (
        results.assign(_win=(results[LABELS.OUTCOME] == LABELS.WIN).astype(float))
        .pivot(index=LABELS.GAME, columns=LABELS.STRATEGY, values="_win")
        .reindex(columns=list(LABELS.strategies))
        .dropna()
    )

    stay = wins[LABELS.STAY].to_numpy()
    switch = wins[LABELS.SWITCH].to_numpy()
    res = paired_ztest(stay, switch)

    return {
        "n_games": int(len(wins)),
        "win_rate_stay": res["mx"],
        "win_rate_switch": res["my"],
        "effect": res["effect"],
        "z": res["z"],
        "p_value": res["p_value"],
        "lift_pct": res["lift_pct"],
    }
