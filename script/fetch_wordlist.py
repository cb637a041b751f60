"""
Download a wordlist and write a clean copy for the search.

What it does:
- Downloads the URL (a raw .txt list, or an HTML page listing words).
- For HTML, takes the visible text via BeautifulSoup; for plain text, the body.
- Splits on whitespace, keeps alphabetic tokens of length N, lowercases,
  de-duplicates while preserving source order, and writes one word per line.

Usage:
    python -m script.fetch_wordlist --url <wordlist url> \
        --out packages/datasets/data/wordlist.txt
    # or alphabetically sorted:
    python -m script.fetch_wordlist --url <url> --sort
"""

import argparse

import requests
from bs4 import BeautifulSoup  # pip install beautifulsoup4 requests

from packages.datasets import clean_words, write_lines


def fetch_words(url: str, N: int = 5) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    if "html" in r.headers.get("Content-Type", ""):
        text = BeautifulSoup(r.text, "html.parser").get_text("\n", strip=True)
    else:
        text = r.text
    return clean_words(text.split(), N)


def main():
    ap = argparse.ArgumentParser(description="Fetch and clean a Wordle wordlist")
    ap.add_argument("--url", required=True)
    ap.add_argument("--N", type=int, default=5, help="word length to keep")
    ap.add_argument("--out", default="packages/datasets/data/wordlist.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = fetch_words(args.url, args.N)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique {args.N}-letter words -> {args.out}")

if __name__ == "__main__":
    main()
