from __future__ import annotations


def test_labels_object_exists():
    from montyhall.game import schemas

    assert hasattr(schemas, "LABELS"), "LABELS must exist in montyhall.game.schemas"


def test_labels_are_strings():
    from montyhall.game.schemas import LABELS

    for field in ["CAR", "GOAT", "STAY", "SWITCH", "WIN", "LOSE", "GAME", "STRATEGY", "OUTCOME"]:
        assert isinstance(getattr(LABELS, field), str), f"LABELS.{field} must be a str"


def test_prizes_hold_one_car_two_goats():
    from montyhall.game.schemas import DOORS, LABELS, PRIZES

    assert len(PRIZES) == len(DOORS) == 3
    assert PRIZES.count(LABELS.CAR) == 1
    assert PRIZES.count(LABELS.GOAT) == 2


def test_column_groups_are_consistent():
    from montyhall.game.schemas import LABELS

    assert LABELS.batch_columns == (LABELS.GAME,) + LABELS.round_columns
    assert LABELS.strategies == ("stay", "switch")
    assert LABELS.outcomes == ("LOSE", "WIN")
