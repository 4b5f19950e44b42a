# src/montyhall/reporting/plots.py
from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt

from montyhall.experiments.design import expected_win_rates
from montyhall.game.schemas import LABELS
from montyhall.game.validation import validate_required_columns, validate_results_df


# -------------------------
# Helpers
# -------------------------

def _ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)

def _save(fig: plt.Figure, out: Path, also_pdf: bool = False, dpi: int = 170) -> None:
    fig.tight_layout()
    fig.savefig(out, dpi=dpi, bbox_inches="tight")
    if also_pdf:
        fig.savefig(out.with_suffix(".pdf"), bbox_inches="tight")
    plt.close(fig)


# -------------------------
# Running win rate per strategy
# -------------------------

def running_win_rates(results: pd.DataFrame) -> pd.DataFrame:
    """Cumulative win rate after each game, one column per strategy."""
    validate_results_df(results)
    validate_required_columns(results, [LABELS.GAME])

    wins = (
        results.assign(_win=(results[LABELS.OUTCOME] == LABELS.WIN).astype(float))
        .pivot(index=LABELS.GAME, columns=LABELS.STRATEGY, values="_win")
        .reindex(columns=list(LABELS.strategies))
        .sort_index()
    )
    return wins.expanding().mean()


def fig_running_win_rate(
    results: pd.DataFrame,
    out: Path = Path("reports/figures/running_win_rate.png"),
    also_pdf: bool = False,
) -> Path:
    out = Path(out)
    _ensure_dir(out.parent)

    rates = running_win_rates(results)
    expected = expected_win_rates()

    fig = plt.figure()
    ax = fig.add_subplot(1, 1, 1)

    for strategy in LABELS.strategies:
        ax.plot(rates.index, rates[strategy], label=f"{strategy} (observed)")
        ax.axhline(expected[strategy], linestyle="--", linewidth=1)

    ax.set_ylim(0, 1)
    ax.set_title(f"Monty Hall: running win rate over {len(rates):,} games")
    ax.set_xlabel("Games played")
    ax.set_ylabel("Win rate")
    ax.legend(loc="best")

    _save(fig, out, also_pdf=also_pdf)
    return out
