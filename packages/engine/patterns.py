"""
Target patterns and the pattern matcher.

A pattern is what a search asks for; feedback is what scoring observed.
They are kept as separate types so a wildcard can never leak into a
concrete result.

Pattern alphabet (case-insensitive):
  - 'G', 'Y', 'X' : match exactly that feedback symbol
  - '?'           : any colored tile (G or Y, never X)
  - '*'           : anything

Multi-line blocks hold one pattern per line, e.g.

    ??*??
    ?XXX?
    GGGGG
"""

from __future__ import annotations

from enum import Enum
from itertools import product
from typing import FrozenSet, Iterable, Iterator, List, Sequence, Tuple

from .errors import InvalidSymbol, LengthMismatch
from .scoring import Feedback, FeedbackSymbol


class PatternSymbol(Enum):
    CORRECT = "G"
    PRESENT = "Y"
    ABSENT = "X"
    ANY_COLORED = "?"
    ANY_AT_ALL = "*"

    @property
    def admits(self) -> FrozenSet[FeedbackSymbol]:
        """Feedback symbols this pattern symbol accepts."""
        return _ADMITS[self]


_ADMITS = {
    PatternSymbol.CORRECT: frozenset({FeedbackSymbol.CORRECT}),
    PatternSymbol.PRESENT: frozenset({FeedbackSymbol.PRESENT}),
    PatternSymbol.ABSENT: frozenset({FeedbackSymbol.ABSENT}),
    PatternSymbol.ANY_COLORED: frozenset({FeedbackSymbol.CORRECT, FeedbackSymbol.PRESENT}),
    PatternSymbol.ANY_AT_ALL: frozenset(FeedbackSymbol),
}

_BY_CHAR = {s.value: s for s in PatternSymbol}
_ALPHABET = "".join(_BY_CHAR)
_FEEDBACK_ORDER = list(FeedbackSymbol)

Pattern = Tuple[PatternSymbol, ...]


def parse_pattern(text: str) -> Pattern:
    """
    Parse a single pattern line such as "g?x*y".

    Raises:
      ValueError     if the line is empty after stripping
      InvalidSymbol  on any character outside G/Y/X/?/*
    """
    line = text.strip().upper()
    if not line:
        raise ValueError("Pattern is empty")
    out: List[PatternSymbol] = []
    for i, ch in enumerate(line):
        sym = _BY_CHAR.get(ch)
        if sym is None:
            raise InvalidSymbol(ch, i, _ALPHABET)
        out.append(sym)
    return tuple(out)


def parse_patterns(block: str) -> List[str]:
    """Split a multi-line block into pattern lines, dropping blank ones."""
    return [ln.strip() for ln in block.splitlines() if ln.strip()]


def pattern_to_str(pattern: Iterable[PatternSymbol]) -> str:
    return "".join(s.value for s in pattern)


def matches(pattern: Sequence[PatternSymbol], feedback: Feedback) -> bool:
    """
    True iff every position of `feedback` is admitted by the pattern symbol
    at the same position. Lengths must agree (LengthMismatch otherwise).
    """
    if len(pattern) != len(feedback):
        raise LengthMismatch("feedback", len(pattern), len(feedback))
    return all(f in p.admits for p, f in zip(pattern, feedback))


def expand_pattern(pattern: Sequence[PatternSymbol]) -> Iterator[Feedback]:
    """
    Yield every concrete feedback the pattern admits.

    Output size is the product of the per-position choices, so "*****"
    expands to 3**5 = 243 feedbacks.
    """
    # sorted() keeps the expansion order stable across runs
    choices = [sorted(p.admits, key=_FEEDBACK_ORDER.index) for p in pattern]
    for combo in product(*choices):
        yield tuple(combo)

