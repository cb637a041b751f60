import json
from pathlib import Path

import pytest
from apps.cli.run import main


@pytest.fixture
def wordlist(tmp_path: Path) -> Path:
    p = tmp_path / "wordlist.txt"
    p.write_text("crane\nraise\nstare\ntrace\ncared\nracer\nscoop\n", encoding="utf-8")
    return p


def test_cli_all_possible(wordlist, capsys):
    rc = main(["--secret", "CRANE", "--wordlist", str(wordlist),
               "--pattern", "GGGGG", "--pattern", "X****", "--show", "2"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Possible solutions for pattern GGGGG:\n  crane" in out
    assert "  stare\n  trace\n  (and 1 others)" in out
    assert "Some patterns" not in out


def test_cli_reports_impossible_patterns(wordlist, tmp_path, capsys):
    pf = tmp_path / "patterns.txt"
    pf.write_text("GGGGG\n\nGGGGY\nGQGGG\n", encoding="utf-8")
    rc = main(["--secret", "crane", "--wordlist", str(wordlist), "--patterns-file", str(pf),
               "--strategy", "index"])
    out = capsys.readouterr().out
    assert rc == 1
    assert "No possible solutions found for pattern GGGGY." in out
    assert "Invalid pattern GQGGG" in out
    assert "Some patterns have no possible solutions. :(" in out


def test_cli_writes_outputs(wordlist, tmp_path, capsys):
    outdir = tmp_path / "reports"
    rc = main(["--secret", "crane", "--wordlist", str(wordlist), "--pattern", "*****",
               "--outdir", str(outdir)])
    assert rc == 0
    manifests = list(outdir.glob("search_*_manifest.json"))
    assert len(manifests) == 1 and len(list(outdir.glob("search_*.csv"))) == 1
    m = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert m["num_patterns"] == 1 and m["num_possible"] == 1
    assert m["wordlist"]["passed"] is True


@pytest.mark.parametrize("argv", [
    ["--secret", "cr4ne", "--pattern", "GGGGG"],
    ["--secret", "crane"],
    ["--secret", "crane", "--pattern", "GGGGG", "--wordlist", "/nonexistent/wordlist.txt"],
])
def test_cli_unusable_input(argv, capsys):
    assert main(argv) == 2
