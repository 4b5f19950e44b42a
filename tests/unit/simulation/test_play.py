from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from montyhall.game.validation import GameStateError, InvalidArgumentError
from montyhall.simulation.play import play_game, play_n_games


def test_play_game_returns_one_row_per_strategy(rng):
    for _ in range(50):
        df = play_game(rng)
        assert list(df.columns) == ["strategy", "outcome"]
        assert df["strategy"].tolist() == ["stay", "switch"]
        assert set(df["outcome"]) <= {"WIN", "LOSE"}


def test_play_game_strategies_are_paired(rng):
    """
    Same doors, pick and reveal for both strategies: with three doors exactly
    one of stay/switch wins every game.
    """
    for _ in range(200):
        df = play_game(rng)
        assert sorted(df["outcome"]) == ["LOSE", "WIN"]


def test_play_game_without_rng():
    assert len(play_game()) == 2


@pytest.mark.parametrize("n", [1, 7, 100])
def test_play_n_games_shape(n, rng):
    df = play_n_games(n, rng=rng)
    assert list(df.columns) == ["game", "strategy", "outcome"]
    assert len(df) == 2 * n
    counts = df["strategy"].value_counts()
    assert counts["stay"] == n
    assert counts["switch"] == n
    assert df["game"].tolist() == [g for g in range(1, n + 1) for _ in range(2)]


def test_play_n_games_default_is_100():
    assert len(play_n_games()) == 200


def test_play_n_games_is_deterministic_for_a_seed():
    a = play_n_games(250, rng=np.random.default_rng(2024))
    b = play_n_games(250, rng=np.random.default_rng(2024))
    pd.testing.assert_frame_equal(a, b)


@pytest.mark.parametrize("n", [0, -1, 2.5, "100"])
def test_play_n_games_rejects_bad_n(n):
    with pytest.raises(InvalidArgumentError):
        play_n_games(n)


def test_play_n_games_switch_beats_stay(rng):
    df = play_n_games(20_000, rng=rng)
    win = df.assign(win=df["outcome"] == "WIN").groupby("strategy")["win"].mean()
    assert abs(win["switch"] - 2 / 3) < 0.02
    assert abs(win["stay"] - 1 / 3) < 0.02


def test_play_n_games_can_stop_early(rng):
    seen = []

    def stop_after_five(games_played: int) -> bool:
        seen.append(games_played)
        return games_played >= 5

    df = play_n_games(1_000, rng=rng, should_stop=stop_after_five)
    assert len(df) == 10
    assert df["game"].max() == 5
    assert seen == [0, 1, 2, 3, 4, 5]


def test_play_n_games_stop_immediately_gives_empty_frame(rng):
    df = play_n_games(10, rng=rng, should_stop=lambda _: True)
    assert len(df) == 0
    assert list(df.columns) == ["game", "strategy", "outcome"]


def test_play_n_games_aborts_on_round_error(monkeypatch, rng):
    import montyhall.simulation.play as play

    calls = {"n": 0}
    real = play.open_goat_door

    def flaky(game, a_pick, rng=None):
        calls["n"] += 1
        if calls["n"] == 3:
            raise GameStateError("boom")
        return real(game, a_pick, rng)

    monkeypatch.setattr(play, "open_goat_door", flaky)
    with pytest.raises(GameStateError):
        play_n_games(10, rng=rng)
    assert calls["n"] == 3
