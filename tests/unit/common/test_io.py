from __future__ import annotations

import json
from pathlib import Path

import numpy as np


def test_io_module_imports():
    import montyhall.common.io as io
    assert io is not None


def test_json_roundtrip(tmp_path: Path):
    from montyhall.common.io import read_json, write_json

    p = tmp_path / "nested" / "a.json"
    obj = {"x": 1, "y": "z", "rates": {"stay": 0.33, "switch": 0.67}}

    out = write_json(p, obj)
    assert out == p
    assert read_json(p) == obj


def test_write_json_handles_numpy_and_nan(tmp_path: Path):
    from montyhall.common.io import write_json

    p = tmp_path / "np.json"
    write_json(p, {"n": np.int64(3), "rate": np.float64(0.5), "z": float("nan"), "path": Path("a/b")})

    loaded = json.loads(p.read_text(encoding="utf-8"))
    assert loaded == {"n": 3, "rate": 0.5, "z": None, "path": "a/b"}
