from __future__ import annotations

from typing import List, Optional, Union

import numpy as np


SeedLike = Union[None, int, np.random.SeedSequence, np.random.Generator]


def make_rng(seed: SeedLike = None) -> np.random.Generator:
    """
    Single entry point for randomness.
    A Generator passes through untouched so callers can share one stream;
    anything else seeds a fresh PCG64 stream (None = OS entropy).
    """
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def spawn_seeds(seed: Optional[int], k: int) -> List[np.random.SeedSequence]:
    """Independent child seeds, one per worker, from one root seed."""
    if k < 1:
        raise ValueError("k must be >= 1")
    return np.random.SeedSequence(seed).spawn(k)
