"""
Feedback index: score every word once, answer many patterns.

For a fixed secret, bucket the wordlist by the feedback each word produces.
A pattern lookup then collects the buckets whose feedback the pattern admits,
instead of rescoring the whole list. Candidates come either from expanding
the pattern into concrete feedbacks or from filtering the observed buckets,
whichever is smaller. Results are merged back into wordlist order so a
lookup is indistinguishable from search().
"""

from __future__ import annotations

from collections import defaultdict
from heapq import merge
from math import prod
from typing import Dict, Iterable, List, Optional, Sequence

from .errors import LengthMismatch
from .patterns import PatternSymbol, expand_pattern, matches, pattern_to_str
from .scoring import Feedback, compute_feedback
from .search import SearchResult, cap_words


class FeedbackIndex:
    def __init__(self, wordlist: Iterable[str], secret: str):
        self.secret = secret.lower()
        self.N = len(self.secret)
        self.words: List[str] = []
        # feedback -> ascending positions into self.words
        self._buckets: Dict[Feedback, List[int]] = defaultdict(list)

        for w in wordlist:
            if len(w) != self.N:
                raise LengthMismatch("word", self.N, len(w))
            self._buckets[compute_feedback(self.secret, w)].append(len(self.words))
            self.words.append(w)

    def __len__(self) -> int:
        return len(self.words)

    def _admitted(self, pattern: Sequence[PatternSymbol]) -> List[Feedback]:
        # Expansion is 3**N for "*"-heavy patterns; never exceed the bucket count.
        if prod(len(p.admits) for p in pattern) > len(self._buckets):
            return [fb for fb in self._buckets if matches(pattern, fb)]
        return [fb for fb in expand_pattern(pattern) if fb in self._buckets]

    def lookup(self, pattern: Sequence[PatternSymbol], *,
               limit: Optional[int] = None) -> SearchResult:
        if len(pattern) != self.N:
            raise LengthMismatch("pattern", self.N, len(pattern))

        hits = [self._buckets[fb] for fb in self._admitted(pattern)]
        # Each bucket is sorted and buckets are disjoint, so a k-way merge
        # restores wordlist order without duplicates.
        found = [self.words[i] for i in merge(*hits)]
        return SearchResult(pattern=pattern_to_str(pattern), count=len(found),
                            words=cap_words(found, limit))
