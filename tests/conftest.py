# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd
import pytest


@pytest.fixture()
def sandbox(tmp_path: Path) -> Path:
    """Per-test filesystem sandbox."""
    return tmp_path


@pytest.fixture()
def project_root() -> Path:
    """Repo root (where pyproject.toml lives)."""
    # tests/ -> repo root
    return Path(__file__).resolve().parents[1]


@pytest.fixture()
def chdir_sandbox(monkeypatch, sandbox: Path):
    """
    Run code as-if repo root is sandbox so relative outputs
    like reports/... resolve inside sandbox.
    """
    monkeypatch.chdir(sandbox)
    return sandbox


@pytest.fixture()
def rng() -> np.random.Generator:
    """Fixed-seed generator so every run draws the same games."""
    return np.random.default_rng(12345)


@pytest.fixture()
def car_first() -> tuple:
    return ("car", "goat", "goat")


@pytest.fixture()
def car_middle() -> tuple:
    return ("goat", "car", "goat")


@pytest.fixture()
def all_arrangements() -> list:
    return [
        ("car", "goat", "goat"),
        ("goat", "car", "goat"),
        ("goat", "goat", "car"),
    ]


@pytest.fixture()
def small_results_df() -> pd.DataFrame:
    """
    Hand-built batch of 4 games.
    Car found on the first pick in game 1 only -> stay 1/4, switch 3/4.
    """
    return pd.DataFrame(
        {
            "game": [1, 1, 2, 2, 3, 3, 4, 4],
            "strategy": ["stay", "switch"] * 4,
            "outcome": ["WIN", "LOSE", "LOSE", "WIN", "LOSE", "WIN", "LOSE", "WIN"],
        }
    )
