"""
Download a Scrabble word list to use as the solver's dictionary.

What it does:
- Downloads the plain-text word list (one word per line).
- Drops blank lines and surrounding whitespace; keeps file order.
- Optionally upper-cases every word so it matches the hive even with
  --case-sensitive solving.
- Writes the result to dictionary.txt (the solver's default name).

The NY Times uses its own curated list, so not every word found with this
dictionary will be accepted by the game, but most will.

Usage:
    python -m script.fetch_dictionary
    python -m script.fetch_dictionary --upper --out data/scrabble.txt
"""

import argparse
import logging

import requests

from beesolver.datasets import write_lines
from beesolver.engine import DEFAULT_DICTIONARY

URL = "https://raw.githubusercontent.com/jonbcard/scrabble-bot/master/src/dictionary.txt"

logger = logging.getLogger(__name__)


def fetch_words(url: str = URL, upper: bool = False) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    words = [ln.strip() for ln in r.text.splitlines() if ln.strip()]
    if upper:
        words = [w.upper() for w in words]
    logger.info("downloaded %d words from %s", len(words), url)
    return words


def main():
    ap = argparse.ArgumentParser(description="Download a word list for the Spelling Bee solver")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default=DEFAULT_DICTIONARY)
    ap.add_argument("--upper", action="store_true", help="upper-case every word")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    words = fetch_words(args.url, upper=args.upper)
    write_lines(words, args.out)
    print(f"Wrote {len(words)} words -> {args.out}")


if __name__ == "__main__":
    main()
