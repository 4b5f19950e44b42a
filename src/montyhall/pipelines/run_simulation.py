from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from montyhall.common.io import write_json
from montyhall.common.utils import make_rng
from montyhall.experiments.design import compare_strategies, expected_win_rates
from montyhall.reporting.plots import fig_running_win_rate
from montyhall.reporting.summary import print_summary, summarize_results, summary_to_dict
from montyhall.simulation.parallel import play_n_games_parallel
from montyhall.simulation.play import play_n_games


@dataclass(frozen=True)
class SimulationConfig:
    n_games: int = 100
    seed: Optional[int] = None
    workers: int = 1

    # Presentation
    decimals: int = 2
    table_format: str = "markdown"

    # Optional outputs
    out_json: Optional[Path] = None      # e.g. reports/monty_hall_results.json
    out_figure: Optional[Path] = None    # e.g. reports/figures/running_win_rate.png

    verbose: bool = True


def _log(msg: str, verbose: bool = True) -> None:
    if verbose:
        print(msg, flush=True)


def run_simulation(cfg: SimulationConfig) -> Dict[str, Any]:
    v = cfg.verbose
    _log("=== Monty Hall simulation ===", v)

    _log(f"[1/4] Playing {cfg.n_games:,} games (workers={cfg.workers}, seed={cfg.seed})", v)
    if cfg.workers != 1:
        results = play_n_games_parallel(cfg.n_games, workers=cfg.workers, seed=cfg.seed)
    else:
        results = play_n_games(cfg.n_games, rng=make_rng(cfg.seed))

    _log("[2/4] Summarizing outcomes by strategy", v)
    table = summarize_results(results, decimals=cfg.decimals)
    if v:
        print_summary(table, fmt=cfg.table_format)

    _log("[3/4] Paired comparison: switch vs stay", v)
    comparison = compare_strategies(results) if cfg.n_games >= 2 else {}
    if comparison:
        _log(
            f"switch - stay = {comparison['effect']:+.4f} "
            f"(z={comparison['z']:.2f}, p={comparison['p_value']:.3g})",
            v,
        )

    out: Dict[str, Any] = {
        "n_games": int(cfg.n_games),
        "seed": cfg.seed,
        "workers": int(cfg.workers),
        "summary": summary_to_dict(table),
        "comparison": comparison,
        "expected": expected_win_rates(),
    }

    _log("[4/4] Writing outputs", v)
    if cfg.out_figure is not None:
        fig_path = fig_running_win_rate(results, cfg.out_figure)
        out["figure"] = str(fig_path)
        _log(f"✅ Wrote: {fig_path}", v)
    if cfg.out_json is not None:
        write_json(cfg.out_json, out)
        _log(f"✅ Wrote: {cfg.out_json}", v)

    return out


def _parse_args(argv: Optional[List[str]] = None) -> SimulationConfig:
    ap = argparse.ArgumentParser(description="Simulate the Monty Hall game and compare stay vs switch.")
    ap.add_argument("--n-games", type=int, default=100)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--workers", type=int, default=1)
    ap.add_argument("--decimals", type=int, default=2)
    ap.add_argument("--format", dest="table_format", choices=["markdown", "plain"], default="markdown")
    ap.add_argument("--out-json", type=Path, default=None)
    ap.add_argument("--figure", dest="out_figure", type=Path, default=None)
    ap.add_argument("--quiet", action="store_true")
    args = ap.parse_args(argv)

    return SimulationConfig(
        n_games=args.n_games,
        seed=args.seed,
        workers=args.workers,
        decimals=args.decimals,
        table_format=args.table_format,
        out_json=args.out_json,
        out_figure=args.out_figure,
        verbose=not args.quiet,
    )


def main(argv: Optional[List[str]] = None) -> None:
    run_simulation(_parse_args(argv))


if __name__ == "__main__":
    main()
