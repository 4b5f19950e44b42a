# src/montyhall/reporting/summary.py
from __future__ import annotations

from typing import Any, Dict

import pandas as pd

from montyhall.game.schemas import LABELS
from montyhall.game.validation import InvalidArgumentError, validate_results_df


# ============================================================
# Summary table
# - pure: builds the strategy x outcome proportion table
# - printing is a separate, explicit call
# ============================================================

def summarize_results(results: pd.DataFrame, decimals: int = 2) -> pd.DataFrame:
    """
    Row proportions of WIN/LOSE per strategy.

    Index: strategy (stay, switch). Columns: LOSE, WIN.
    An outcome never observed for a strategy shows up as 0.0.
    """
    validate_results_df(results)
    if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
        raise InvalidArgumentError(f"decimals must be a non-negative integer, got {decimals!r}")

    table = pd.crosstab(results[LABELS.STRATEGY], results[LABELS.OUTCOME], normalize="index")
    table = table.reindex(index=list(LABELS.strategies), columns=list(LABELS.outcomes))
    # strategy rows absent from a partial batch stay NaN, missing outcomes are 0
    present = table.index.isin(results[LABELS.STRATEGY].unique())
    table.loc[present] = table.loc[present].fillna(0.0)

    table = table.astype(float).round(decimals)
    table.index.name = LABELS.STRATEGY
    table.columns.name = LABELS.OUTCOME
    return table


def summary_to_dict(table: pd.DataFrame) -> Dict[str, Dict[str, Any]]:
    """{strategy: {outcome: proportion}} for JSON reports."""
    return {
        str(strategy): {str(k): (None if pd.isna(v) else float(v)) for k, v in row.items()}
        for strategy, row in table.iterrows()
    }


def format_summary(table: pd.DataFrame, fmt: str = "markdown") -> str:
    if fmt == "markdown":
        # needs `tabulate`
        return table.to_markdown()
    if fmt == "plain":
        return table.to_string()
    raise InvalidArgumentError(f"Unknown summary format: {fmt!r} (expected 'markdown' or 'plain')")


def print_summary(table: pd.DataFrame, fmt: str = "markdown") -> str:
    text = format_summary(table, fmt=fmt)
    print(text, flush=True)
    return text
