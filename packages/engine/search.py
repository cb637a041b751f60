"""
Solution search: which wordlist entries produce a target pattern?

Given:
  - a wordlist (ordered, unique, uniform length; see datasets.load_wordlist)
  - a secret word
  - a target pattern (possibly with wildcards)

Return:
  - a SearchResult with the true match count and the matching words in
    wordlist order (optionally capped for display).

This is a plain linear scan: O(len(wordlist) * N) per pattern, which is
fine for Wordle-sized lists (~13k words). FeedbackIndex in index.py trades
one up-front pass for cheaper repeated lookups against the same secret.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from .errors import LengthMismatch
from .patterns import PatternSymbol, matches, pattern_to_str
from .scoring import compute_feedback


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one (secret, pattern) search. count == 0 is a valid answer."""
    pattern: str
    count: int
    words: List[str] = field(default_factory=list)  # wordlist order, maybe capped

    @property
    def truncated(self) -> bool:
        return self.count > len(self.words)

    @property
    def first(self) -> Optional[str]:
        return self.words[0] if self.words else None


def cap_words(words: List[str], limit: Optional[int]) -> List[str]:
    if limit is None:
        return words
    if limit < 0:
        raise ValueError(f"limit must be >= 0; got {limit}")
    return words[:limit]


def search(
        wordlist: Iterable[str],
        secret: str,
        pattern: Sequence[PatternSymbol],
        *,
        limit: Optional[int] = None,
) -> SearchResult:
    """
    Scan `wordlist` in order and collect every word whose feedback against
    `secret` satisfies `pattern`.

    Args:
      wordlist : words to score (read-only; never mutated)
      secret   : the hidden word
      pattern  : parsed target pattern, same length as `secret`
      limit    : cap on result.words; result.count is always the full total

    Raises:
      LengthMismatch if the pattern or any wordlist word differs in length
      from `secret`
    """
    secret = secret.lower()
    N = len(secret)
    if len(pattern) != N:
        raise LengthMismatch("pattern", N, len(pattern))

    found: List[str] = []
    for w in wordlist:
        if len(w) != N:
            raise LengthMismatch("word", N, len(w))
        if matches(pattern, compute_feedback(secret, w)):
            found.append(w)

    return SearchResult(pattern=pattern_to_str(pattern), count=len(found),
                        words=cap_words(found, limit))
