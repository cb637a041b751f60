"""
Wordle-style scoring (feedback) for a single (secret, guess) pair.

Conventions:
  - 'G' : green  = correct letter in the correct position
  - 'Y' : yellow = correct letter in the wrong position
  - 'X' : gray   = letter not present (or present fewer times than guessed)

This implementation is:
  - N-aware (any word length)
  - duplicate-safe (respects true letter multiplicities in the secret)
  - deterministic (same inputs -> same outputs)

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all greens and consumes one unit of that letter from
     a per-letter pool built from the secret.
  2) Second pass marks yellows only if the letter still has remaining count.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Iterable, Tuple

from .errors import LengthMismatch


class FeedbackSymbol(Enum):
    CORRECT = "G"
    PRESENT = "Y"
    ABSENT = "X"


# One symbol per letter position. Only compute_feedback builds these.
Feedback = Tuple[FeedbackSymbol, ...]


def compute_feedback(secret: str, guess: str) -> Feedback:
    """
    Compute Wordle feedback for `guess` scored against `secret`.

    Preconditions:
      - len(secret) == len(guess), else LengthMismatch

    Examples:
      feedback_to_str(compute_feedback("level", "belle")) -> "XGYYY"
      feedback_to_str(compute_feedback("amuse", "wizzo")) -> "XXXXX"
    """
    # Wordle is case-insensitive but canonicalizes to lowercase
    secret = secret.lower()
    guess = guess.lower()
    if len(secret) != len(guess):
        raise LengthMismatch("guess", len(secret), len(guess))

    feedback = [FeedbackSymbol.ABSENT] * len(guess)
    available = Counter(secret)

    # Pass 1: exact matches consume their letter from the pool.
    for i, (s, g) in enumerate(zip(secret, guess)):
        if g == s:
            feedback[i] = FeedbackSymbol.CORRECT
            available[g] -= 1

    # Pass 2: misplaced letters, capped by what the pool still holds.
    for i, g in enumerate(guess):
        if feedback[i] is FeedbackSymbol.CORRECT:
            continue
        if available[g] > 0:
            feedback[i] = FeedbackSymbol.PRESENT
            available[g] -= 1

    return tuple(feedback)


def feedback_to_str(feedback: Iterable[FeedbackSymbol]) -> str:
    """Render feedback as a compact string, e.g. 'GYXXG'."""
    return "".join(s.value for s in feedback)
