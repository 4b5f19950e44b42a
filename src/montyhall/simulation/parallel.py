from __future__ import annotations

import multiprocessing as mp
from typing import List, Optional, Tuple

import numpy as np
import pandas as pd

from montyhall.common.utils import spawn_seeds
from montyhall.game.schemas import LABELS
from montyhall.game.validation import InvalidArgumentError, validate_n_games
from montyhall.simulation.play import StopFn, play_n_games


def _run_chunk(job: Tuple[int, np.random.SeedSequence]) -> pd.DataFrame:
    # module-level so the pool can pickle it
    n, seed = job
    return play_n_games(n, rng=np.random.default_rng(seed))


def _chunk_sizes(n: int, workers: int) -> List[int]:
    base, extra = divmod(n, workers)
    return [base + (1 if i < extra else 0) for i in range(workers)]


def play_n_games_parallel(
    n: int = 100,
    workers: Optional[int] = None,
    seed: Optional[int] = None,
    should_stop: Optional[StopFn] = None,
) -> pd.DataFrame:
    """
    Same result shape as play_n_games, with rounds spread over worker processes.

    Each worker draws from its own stream spawned from one SeedSequence, so no
    generator state is shared between processes and a fixed (seed, workers)
    pair reproduces the same frame.

    should_stop(games_played) is checked between rounds when workers == 1;
    with a pool it is checked before dispatch and after each chunk is collected
    (in worker order). Returning True terminates the pool and returns only the
    completed rounds, renumbered from 1.
    """
    n = validate_n_games(n)
    if workers is None:
        workers = mp.cpu_count()
    if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
        raise InvalidArgumentError(f"workers must be an integer >= 1, got {workers!r}")
    workers = min(workers, n)

    sizes = _chunk_sizes(n, workers)
    seeds = spawn_seeds(seed, workers)

    chunks: List[pd.DataFrame] = []
    if workers == 1:
        # in-process: cancellation acts between rounds
        chunks.append(play_n_games(sizes[0], rng=np.random.default_rng(seeds[0]), should_stop=should_stop))
    elif should_stop is None or not should_stop(0):
        played = 0
        with mp.Pool(processes=workers) as pool:
            # leaving the block terminates chunks still running
            for chunk in pool.imap(_run_chunk, list(zip(sizes, seeds))):
                chunks.append(chunk)
                played += len(chunk) // len(LABELS.strategies)
                if should_stop is not None and should_stop(played):
                    break

    if not chunks:
        return pd.DataFrame([], columns=list(LABELS.batch_columns))

    out = pd.concat(chunks, ignore_index=True)
    # renumber rounds across chunks; every round contributes 2 rows
    n_played = len(out) // len(LABELS.strategies)
    out[LABELS.GAME] = np.repeat(np.arange(1, n_played + 1), len(LABELS.strategies))
    return out
