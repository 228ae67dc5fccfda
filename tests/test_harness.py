import csv
import json
from pathlib import Path

import pytest
from wordsieve.engine import Guess, UnknownStateNotAllowed, Word
from wordsieve.harness import GuessHistory, replay, replay_batch, write_csv, write_manifest

POOL = [Word(w) for w in ["paint", "taint", "saint", "print", "brain"]]


def test_history_append_and_pop():
    h = GuessHistory()
    g1 = Guess.from_pattern("saint", "-GGGG")
    g2 = h.add("print:G-GGG")
    h.append(g1)
    assert len(h) == 2 and h.snapshot() == (g2, g1)
    assert h.pop() == g1
    assert list(h) == [g2]
    h.clear()
    with pytest.raises(IndexError):
        h.pop()


def test_history_rejects_unvalidated_input():
    h = GuessHistory()
    with pytest.raises(TypeError):
        h.append("saint:-GGGG")
    with pytest.raises(UnknownStateNotAllowed):
        h.add("saint:-G?GG")
    assert len(h) == 0


def test_history_snapshot_is_detached():
    h = GuessHistory([Guess.from_pattern("saint", "-GGGG")])
    snap = h.snapshot()
    h.add("print:G-GGG")
    assert len(snap) == 1 and len(h) == 2


def test_replay_records_feedback_and_narrowing():
    r = replay("paint", ["saint", "print", "paint"], POOL)
    assert r["solved"] is True and r["steps"] == 3
    assert r["history"] == [("saint", "-GGGG"), ("print", "G-GGG"), ("paint", "GGGGG")]
    assert r["remaining"] == [2, 1, 1]


def test_replay_stops_when_solved():
    r = replay("paint", ["paint", "saint"], POOL)
    assert r["steps"] == 1 and r["remaining"] == [1]
    r = replay("paint", ["paint", "saint"], POOL, stop_when_solved=False)
    assert r["steps"] == 2


def test_replay_batch_sample():
    rs = replay_batch(POOL, ["brain"], POOL, sample=3)
    assert [r["secret"] for r in rs] == ["paint", "taint", "saint"]
    assert all(r["remaining"][0] >= 1 for r in rs)


def test_write_csv_and_manifest(tmp_path: Path):
    rs = replay_batch(["paint"], ["saint", "print"], POOL)
    out = write_csv(rs, str(tmp_path / "out" / "replay.csv"), max_steps=2)
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["secret"] == "paint"
    assert rows[0]["patt_1"] == "'-GGGG" and rows[0]["left_2"] == "1"

    m = write_manifest({"num_cases": 1}, str(tmp_path / "m.json"))
    assert json.loads(Path(m).read_text(encoding="utf-8")) == {"num_cases": 1}
