# apps/cli/run.py
"""
CLI entry point for reverse-Wordle pattern searches.

This script:
  1) Validates the wordlist (prints counts + SHA) and loads it for N = len(secret).
  2) Collects target patterns from --pattern flags and/or a --patterns-file block.
  3) Searches each pattern against the secret and prints, per pattern, the
     first matching word(s) and how many others exist.
  4) Optionally writes:
       - CSV:  one row per pattern (count, exemplars, error)
       - JSON: manifest with config, wordlist hash, git commit, etc.

Exit status: 0 if every pattern is possible, 1 if any is not (or was
malformed), 2 if the run could not start.

Example:
    python -m apps.cli.run --secret ideal --pattern "??*??" --pattern "?XXX?" \
        --pattern GGGGG --show 3
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from packages.datasets import load_wordlist, pretty_summary, read_lines, validate_wordlist
from packages.engine import normalize_word, parse_patterns
from packages.harness import all_possible, format_outcome, run_session
from packages.harness.core import PROGRESS_MODES, STRATEGIES
from packages.harness.io import git_commit_or_unknown, timestamp_id, write_csv, write_manifest

DEFAULT_WORDLIST = "packages/datasets/data/wordlist.txt"


def _collect_patterns(args) -> List[str]:
    """--pattern values first, then lines from --patterns-file, in order."""
    patterns = [p for p in (args.pattern or []) if p.strip()]
    if args.patterns_file:
        patterns += parse_patterns("\n".join(read_lines(args.patterns_file)))
    return patterns


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Find guesses that produce given Wordle feedback patterns for a secret.",
        epilog="Pattern symbols: G=green, Y=yellow, X=gray, ?=green or yellow, *=anything.",
    )
    ap.add_argument("--secret", required=True, help="the solution word to score guesses against")
    ap.add_argument("--pattern", action="append",
                    help="target pattern, e.g. '??*??' (repeatable)")
    ap.add_argument("--patterns-file",
                    help="text file with one pattern per line (blank lines ignored)")
    ap.add_argument("--wordlist", default=DEFAULT_WORDLIST,
                    help="path to wordlist (one word per line)")
    ap.add_argument("--show", type=int, default=1,
                    help="matching words to print per pattern")
    ap.add_argument("--strategy", choices=STRATEGIES, default="scan",
                    help="scan: rescan per pattern; index: score each word once")
    ap.add_argument("--workers", type=int, default=1,
                    help="processes for the scan strategy")
    ap.add_argument("--progress", choices=PROGRESS_MODES, default="off",
                    help="show search progress on stderr (auto=bar on a TTY)")
    ap.add_argument("--outdir", help="if set, write CSV + manifest here")
    return ap


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    secret = normalize_word(args.secret)
    if not secret.isalpha():
        print(f"Secret must be alphabetic; got {args.secret!r}", file=sys.stderr)
        return 2
    N = len(secret)

    try:
        patterns = _collect_patterns(args)
    except FileNotFoundError as e:
        print(f"Patterns file not found: {e}", file=sys.stderr)
        return 2
    if not patterns:
        print("No patterns given (use --pattern or --patterns-file).", file=sys.stderr)
        return 2

    # 1) Validate and load the wordlist (advisory report, cleaned list)
    rep = validate_wordlist(N, args.wordlist)
    print(pretty_summary(rep))
    try:
        wordlist = load_wordlist(args.wordlist, N)
    except FileNotFoundError:
        print(f"Failed to load wordlist: {args.wordlist} not found.", file=sys.stderr)
        return 2
    if not wordlist:
        print("No words found in wordlist.", file=sys.stderr)
        return 2

    # 2) Search every pattern; malformed ones are reported, not fatal
    limit = None if args.outdir else max(1, args.show)
    try:
        outcomes = run_session(
            wordlist, secret, patterns,
            limit=limit, strategy=args.strategy, workers=args.workers, progress=args.progress,
        )
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2

    for o in outcomes:
        print(format_outcome(o, show=args.show))

    possible = all_possible(outcomes)
    if not possible:
        print("Some patterns have no possible solutions. :(")

    # 3) Optional outputs (CSV + manifest)
    if args.outdir:
        run_id = timestamp_id()
        outdir = Path(args.outdir)
        csv_path = outdir / f"search_{run_id}.csv"
        manifest_path = outdir / f"search_{run_id}_manifest.json"

        write_csv(outcomes, str(csv_path), secret=secret)
        write_manifest({
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "wordlist": rep,
            "num_patterns": len(outcomes),
            "num_possible": sum(o.possible for o in outcomes),
        }, str(manifest_path))

        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")

    return 0 if possible else 1


if __name__ == "__main__":
    sys.exit(main())
