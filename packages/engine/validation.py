"""
Lightweight query validation, run upstream of the search.

This module answers the question: "Can this (secret, pattern) be searched
against an N-letter wordlist?" The engine functions fail fast on length
mismatches anyway; checking here gives the caller one clear error before
any scanning happens.
"""

from __future__ import annotations

from typing import Sequence

from .errors import LengthMismatch
from .patterns import PatternSymbol


def normalize_word(word: str) -> str:
    return word.strip().lower()


def is_valid_word(word: str, N: int) -> bool:
    """True iff `word` is an alphabetic token of exact length N."""
    if not isinstance(word, str):
        return False
    w = normalize_word(word)
    return len(w) == N and w.isalpha()


def check_query(secret: str, pattern: Sequence[PatternSymbol], N: int) -> None:
    """
    Raise if the query cannot be searched against N-letter words.

    Raises:
      ValueError      secret is not alphabetic
      LengthMismatch  secret or pattern length differs from N
    """
    s = normalize_word(secret)
    if not s.isalpha():
        raise ValueError(f"Secret must be alphabetic; got {secret!r}")
    if len(s) != N:
        raise LengthMismatch("secret", N, len(s))
    if len(pattern) != N:
        raise LengthMismatch("pattern", N, len(pattern))
