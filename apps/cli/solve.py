# apps/cli/solve.py
"""
CLI entry point for the Spelling Bee solver.

With no arguments this runs the interactive session:
  1) asks for a dictionary file (enter = dictionary.txt)
  2) asks for the hive letters, middle letter first
  3) reports how many words were found and offers to save or print them

Any of the questions can be answered up front with flags, e.g.

    python -m apps.cli.solve --dictionary dictionary.txt --letters GAMNORT --print
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from typing import List, Optional

from beesolver.datasets import is_readable, write_lines
from beesolver.engine import DEFAULT_CONFIG, Hive
from beesolver.harness import (
    check_dictionary, deliver_results, prompt_dictionary, prompt_hive, scan_file,
)

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="beesolver — find every word for a Spelling Bee hive")
    ap.add_argument("--dictionary",
                    help=f"word list, one word per line (default: ask; enter = "
                         f"{DEFAULT_CONFIG.default_dictionary})")
    ap.add_argument("--letters", help="hive letters, middle letter first (default: ask)")
    out = ap.add_mutually_exclusive_group()
    out.add_argument("--out", help="write found words to this file instead of asking")
    out.add_argument("--print", dest="print_words", action="store_true",
                     help="print found words instead of asking")
    ap.add_argument("--case-sensitive", action="store_true",
                    help="compare dictionary words as-is (lower-case entries never match)")
    ap.add_argument("--min-length", type=int, default=DEFAULT_CONFIG.min_length,
                    help="shortest acceptable word (default: %(default)s)")
    ap.add_argument("--progress", action="store_true", help="show a progress bar while scanning")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                    help="logging threshold (default: %(default)s)")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, gather whatever is missing interactively, scan, and deliver.
    """
    ap = _build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    # 1) Configuration from flags
    try:
        config = replace(DEFAULT_CONFIG, min_length=args.min_length,
                         fold_case=not args.case_sensitive)
    except ValueError as e:
        ap.error(str(e))

    # 2) Dictionary: flag (must be readable) or prompt
    if args.dictionary is not None:
        if not is_readable(args.dictionary):
            ap.error(f"dictionary file \"{args.dictionary}\" does not exist")
        dictionary = args.dictionary
    else:
        dictionary = prompt_dictionary(config)
    logger.info("using dictionary %s", dictionary)
    check_dictionary(dictionary, config)

    # 3) Hive: flag or prompt
    if args.letters is not None:
        try:
            hive = Hive.from_input(args.letters)
        except ValueError as e:
            ap.error(f"--letters: {e}")
    else:
        hive = prompt_hive()
    logger.info("hive %s", hive)

    # 4) Scan (an unreadable default dictionary scans as empty)
    try:
        words = scan_file(dictionary, hive, config, progress=args.progress).words
    except OSError as e:
        logger.warning("dictionary %s unavailable (%s); nothing to scan", dictionary, e)
        words = []

    # 5) Deliver
    if args.out:
        write_lines(words, args.out)
        print(f"{len(words)} words written to {args.out}")
    elif args.print_words:
        for w in words:
            print(w)
    else:
        deliver_results(words)
    print("Have a nice day!")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
