import importlib.util
from pathlib import Path

import pytest

from crockid_core import ChecksumMismatch, Uid

REPO = Path(__file__).resolve().parents[1]
EXAMPLE = "aacy7965prs7631zgtk6100gzagmvv7x2"


def _load(rel: str):
    path = REPO / rel
    spec = importlib.util.spec_from_file_location(path.stem, path)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


def test_distribution_summary():
    pytest.importorskip("pandas")
    mod = _load("tools/id_distribution.py")
    ids = mod.generate_ids(2000)
    freq = mod.symbol_frequencies(ids)
    assert freq.shape == (32, 32)
    assert int(freq.sum().sum()) == 2000 * 32
    assert (freq.sum(axis=1) == 2000).all()

    summary = mod.summarize(ids)
    assert summary["count"] == 2000
    assert summary["duplicates"] == 0
    assert summary["max_relative_deviation"] < mod.DEFAULT_TOLERANCE


def test_distribution_flags_duplicates():
    pytest.importorskip("pandas")
    mod = _load("tools/id_distribution.py")
    ids = mod.generate_ids(10, random=lambda n: b"\x00" * n)
    with pytest.warns(UserWarning):
        summary = mod.summarize(ids)
    assert summary["duplicates"] == 9


def test_corrupt_one_char_breaks_checksum():
    mod = _load("scripts/corrupt_one_char.py")
    for index in (0, 15, 31):
        bad = mod.corrupt(EXAMPLE, index)
        assert bad != EXAMPLE
        assert len(bad) == len(EXAMPLE)
        with pytest.raises(ChecksumMismatch):
            Uid.from_str(bad)


def test_corrupt_one_char_rejects_check_position():
    mod = _load("scripts/corrupt_one_char.py")
    with pytest.raises(ValueError):
        mod.corrupt(EXAMPLE, 32)
