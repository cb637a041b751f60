"""
Session runner: one secret, many target patterns.

- run_pattern:  parse, validate and search a single pattern line.
- run_session:  run many pattern lines, each independently, in input order.
- all_possible: did every pattern find at least one word?

A malformed pattern (bad symbol, wrong length) becomes a PatternOutcome with
`error` set; it never aborts the other patterns. An empty result is not an
error either, it is a PatternOutcome with count 0.

Patterns may be fanned out over worker processes. The wordlist is read-only
and every search owns its result, so nothing is shared between workers.
"""

from __future__ import annotations

import sys
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from tqdm import tqdm

from packages.engine import FeedbackIndex, SearchResult, check_query, normalize_word, parse_pattern, \
    search

STRATEGIES = ("scan", "index")
PROGRESS_MODES = ("auto", "bar", "plain", "off")


@dataclass(frozen=True)
class PatternOutcome:
    pattern: str                           # pattern text as given by the caller
    result: Optional[SearchResult] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def possible(self) -> bool:
        return self.result is not None and self.result.count > 0


def run_pattern(
        wordlist: Sequence[str],
        secret: str,
        pattern_text: str,
        *,
        limit: Optional[int] = None,
        index: Optional[FeedbackIndex] = None,
) -> PatternOutcome:
    """
    Search one pattern line. ValueErrors (InvalidSymbol, LengthMismatch,
    empty pattern) are captured in the outcome rather than raised.

    If `index` is given it must have been built for `secret`; the lookup then
    replaces the linear scan.
    """
    text = pattern_text.strip()
    secret = normalize_word(secret)
    try:
        pattern = parse_pattern(text)
        check_query(secret, pattern, len(secret))
        if index is not None:
            result = index.lookup(pattern, limit=limit)
        else:
            result = search(wordlist, secret, pattern, limit=limit)
    except ValueError as e:
        return PatternOutcome(pattern=text, error=str(e))
    return PatternOutcome(pattern=text, result=result)


def _run_pattern_args(args) -> PatternOutcome:
    # Workaround to pass a single argument through executor.map
    wordlist, secret, text, limit = args
    return run_pattern(wordlist, secret, text, limit=limit)


def _progress_mode(mode: str) -> str:
    if mode not in PROGRESS_MODES:
        raise ValueError(f"progress must be one of {PROGRESS_MODES}; got {mode!r}")
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def _collect(outcomes: Iterable[PatternOutcome], total: int, mode: str) -> List[PatternOutcome]:
    """Drain `outcomes` in order, reporting progress on stderr."""
    if mode == "bar":
        outcomes = tqdm(outcomes, total=total, ncols=80, desc="Searching", unit="pattern")

    results: List[PatternOutcome] = []
    start = time.time()
    last_print = 0.0
    for idx, outcome in enumerate(outcomes, 1):
        results.append(outcome)
        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                sys.stderr.write(f"\r[{idx}/{total}] patterns | elapsed {now - start:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain" and total:
        sys.stderr.write("\n"); sys.stderr.flush()
    return results


def run_session(
        wordlist: Sequence[str],
        secret: str,
        patterns: Sequence[str],
        *,
        limit: Optional[int] = None,
        strategy: str = "scan",
        workers: int = 1,
        progress: str = "off",
) -> List[PatternOutcome]:
    """
    Run every pattern line against `secret` and return one outcome per line,
    in the order given.

    Args:
        wordlist: ordered, unique words (see datasets.load_wordlist)
        secret:   the hidden word
        patterns: raw pattern lines, e.g. ["??*??", "GGGGG"]
        limit:    cap on exemplar words kept per result (count is never capped)
        strategy: "scan" rescans the list per pattern; "index" scores each word
                  once and answers every pattern from a FeedbackIndex
        workers:  >1 spreads "scan" patterns over that many processes
        progress: "auto" | "bar" | "plain" | "off" (written to stderr)
    """
    if strategy not in STRATEGIES:
        raise ValueError(f"strategy must be one of {STRATEGIES}; got {strategy!r}")
    if workers < 1:
        raise ValueError(f"workers must be >= 1; got {workers}")
    mode = _progress_mode(progress)

    secret = normalize_word(secret)
    if strategy == "index":
        try:
            index = FeedbackIndex(wordlist, secret)
        except ValueError as e:
            # A wordlist the index cannot score fails every pattern alike
            return [PatternOutcome(pattern=p.strip(), error=str(e)) for p in patterns]
        return _collect((run_pattern(wordlist, secret, p, limit=limit, index=index)
                         for p in patterns), len(patterns), mode)

    if workers > 1 and len(patterns) > 1:
        with ProcessPoolExecutor(min(workers, len(patterns))) as executor:
            arglist = ((wordlist, secret, p, limit) for p in patterns)
            return _collect(executor.map(_run_pattern_args, arglist), len(patterns), mode)

    return _collect((run_pattern(wordlist, secret, p, limit=limit) for p in patterns),
                    len(patterns), mode)


def all_possible(outcomes: Sequence[PatternOutcome]) -> bool:
    """True iff every pattern parsed and matched at least one word."""
    return all(o.possible for o in outcomes)
