from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def clean_words(lines: Iterable[str], N: int) -> List[str]:
    """
    Lowercase, keep alphabetic tokens of length N, drop repeats.
    First occurrence wins, so the input order is preserved.
    """
    seen = set()
    out: List[str] = []
    for ln in lines:
        w = ln.strip().lower()
        if len(w) != N or not w.isalpha() or w in seen:
            continue
        seen.add(w)
        out.append(w)
    return out


def load_wordlist(p: Path | str, N: int) -> List[str]:
    """
    Load the search wordlist: one word per line, cleaned by clean_words.
    The returned list is unique and uniform-length, which the search relies on.
    """
    return clean_words(read_lines(p), N)
