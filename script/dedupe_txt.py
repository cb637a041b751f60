"""
Clean a local wordlist in place (or to --out).

- Lowercases and keeps only alphabetic words of length N.
- Drops repeats, keeping the first occurrence (stable order by default).
- Optional sorting AFTER dedupe.

The search reports matches in wordlist order and counts each entry once,
so a list with repeats would report the same word twice.

Usage:
    python -m script.dedupe_txt --in packages/datasets/data/wordlist.txt --N 5
"""

import argparse
from pathlib import Path

from packages.datasets import clean_words, read_lines, write_lines


def main():
    ap = argparse.ArgumentParser(description="Normalize and de-duplicate a wordlist.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--N", type=int, default=5, help="word length to keep")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    out = clean_words(lines, args.N)
    if args.sort:
        out = sorted(out)

    write_lines(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} words)")

if __name__ == "__main__":
    main()
