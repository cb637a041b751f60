import csv
from pathlib import Path

import pytest
from packages.harness import core
from packages.harness import all_possible, format_outcome, run_pattern, run_session, write_csv

WORDS = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop"]
PATTERNS = ["GGGGG", "GGGGY", "GG?", "GQGGG", "x****"]


def test_run_pattern_captures_bad_input():
    assert run_pattern(WORDS, "crane", "GGGGG").result.words == ["crane"]
    bad = run_pattern(WORDS, "crane", "GG?")
    assert not bad.ok and "length" in bad.error
    bad = run_pattern(WORDS, "crane", "GQGGG")
    assert not bad.ok and "'Q'" in bad.error


def test_run_session_isolates_failures():
    out = run_session(WORDS, "crane", PATTERNS)
    assert [o.pattern for o in out] == PATTERNS
    assert out[0].possible and out[0].result.words == ["crane"]
    assert out[1].ok and out[1].result.count == 0 and not out[1].possible
    assert not out[2].ok and not out[3].ok
    assert out[4].result.words == ["stare", "trace", "scoop"]
    assert all_possible(out) is False
    assert all_possible([out[0], out[4]]) is True


@pytest.mark.parametrize("kwargs", [
    {"strategy": "index"},
    {"workers": 2},
    {"progress": "plain"},
])
def test_run_session_strategies_agree(kwargs):
    assert run_session(WORDS, "crane", PATTERNS, **kwargs) == run_session(WORDS, "crane", PATTERNS)


def test_run_session_rejects_bad_options():
    with pytest.raises(ValueError):
        run_session(WORDS, "crane", PATTERNS, strategy="guess")
    with pytest.raises(ValueError):
        run_session(WORDS, "crane", PATTERNS, workers=0)
    with pytest.raises(ValueError):
        run_session(WORDS, "crane", PATTERNS, progress="loud")


def test_format_outcome():
    out = run_session(WORDS, "crane", PATTERNS, limit=2)
    assert format_outcome(out[0]) == "Possible solutions for pattern GGGGG:\n  crane"
    assert format_outcome(out[1]) == "No possible solutions found for pattern GGGGY."
    assert format_outcome(out[2]).startswith("Invalid pattern GG?:")
    assert format_outcome(out[4], show=2) == (
        "Possible solutions for pattern X****:\n  stare\n  trace\n  (and 1 others)"
    )


def test_write_csv(tmp_path: Path):
    out = run_session(WORDS, "crane", PATTERNS)
    path = write_csv(out, str(tmp_path / "s.csv"), secret="crane")
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["pattern"] for r in rows] == ["'GGGGG", "'GGGGY", "'GG?", "'GQGGG", "'X****"]
    assert rows[4]["count"] == "3" and rows[4]["words"] == "stare trace scoop"
    assert rows[2]["ok"] == "False" and rows[2]["error"]


@pytest.mark.parametrize("strategy", ["scan", "index"])
def test_run_session_reports_wrong_length_words(strategy):
    out = run_session(WORDS + ["cranes"], "crane", ["GGGGG", "*****"], strategy=strategy)
    assert [o.pattern for o in out] == ["GGGGG", "*****"]
    assert all(not o.ok and "word length mismatch" in o.error for o in out)


def test_run_session_normalizes_secret():
    assert run_session(WORDS, " Crane ", ["GGGGG"]) == run_session(WORDS, "crane", ["GGGGG"])


def test_run_session_shuts_down_worker_pool_on_error(monkeypatch):
    events = []

    class FailingPool:
        def __init__(self, n):
            events.append(("init", n))

        def __enter__(self):
            return self

        def __exit__(self, *exc):
            events.append("exit")
            return False

        def map(self, fn, args):
            raise RuntimeError("cannot dispatch")

    monkeypatch.setattr(core, "ProcessPoolExecutor", FailingPool)
    with pytest.raises(RuntimeError):
        run_session(WORDS, "crane", PATTERNS, workers=2)
    assert events == [("init", 2), "exit"]
