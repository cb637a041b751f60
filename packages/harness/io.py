"""
I/O utilities for search sessions.

Responsibilities:
- format_outcome: console text for one pattern outcome.
- write_csv:      one row per pattern (count, exemplars, error).
- write_manifest: dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Patterns are prefixed with an apostrophe to keep Excel from interpreting
  strings like "*GY?X" as formulas (which would display as #NAME?).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Sequence
import csv
import json
import subprocess
import datetime as dt

from .core import PatternOutcome


def _excel_safe_pattern(patt: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "*GY?X" -> "'*GY?X"
    """
    return "'" + patt if patt else patt


def format_outcome(outcome: PatternOutcome, show: int = 1) -> str:
    """
    Render one outcome for the console, e.g.

        Possible solutions for pattern ??*??:
          adieu
          (and 41 others)
    """
    if not outcome.ok:
        return f"Invalid pattern {outcome.pattern}: {outcome.error}"

    r = outcome.result
    if r.count == 0:
        return f"No possible solutions found for pattern {r.pattern}."

    lines = [f"Possible solutions for pattern {r.pattern}:"]
    shown = r.words[:max(1, show)]
    lines += [f"  {w}" for w in shown]
    if r.count > len(shown):
        lines.append(f"  (and {r.count - len(shown)} others)")
    return "\n".join(lines)


def write_csv(outcomes: Sequence[PatternOutcome], path: str, secret: str) -> str:
    """
    Serialize a session to CSV.

    Schema (columns):
      secret, pattern, ok, count, first, words, error

    `words` holds the (possibly capped) exemplars separated by spaces.
    Returns the path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["secret", "pattern", "ok", "count", "first", "words", "error"]
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for o in outcomes:
            r = o.result
            w.writerow({
                "secret": secret,
                "pattern": _excel_safe_pattern(r.pattern if r else o.pattern),
                "ok": o.ok,
                "count": r.count if r else "",
                "first": (r.first or "") if r else "",
                "words": " ".join(r.words) if r else "",
                "error": o.error or "",
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with session configuration and wordlist report.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (secret, patterns, wordlist, strategy, ...)
      - wordlist: output of datasets.validate_wordlist(...)
      - num_patterns, num_possible
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
