"""
Dictionary scan: run the matcher over every line of a word source.

- scan:      filter any iterable of lines (open file, list, generator).
- scan_file: open a dictionary on disk and stream it through `scan`.

Accepted words come back in dictionary order with no deduplication, so two
scans of the same source with the same hive always agree.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import AbstractSet, Iterable, List, NamedTuple

from tqdm import tqdm

from beesolver.datasets import iter_lines
from beesolver.engine import Hive, SolverConfig, DEFAULT_CONFIG, is_valid_word

logger = logging.getLogger(__name__)


class ScanResult(NamedTuple):
    count: int
    words: List[str]


def scan(
        source: Iterable[str],
        letters: AbstractSet[str],
        middle: str,
        config: SolverConfig = DEFAULT_CONFIG,
) -> ScanResult:
    """
    Keep the lines of `source` that are valid words for (`letters`, `middle`).

    Trailing CR/LF is stripped from each line. With `config.fold_case` the
    word is upper-cased for the comparison only; results keep the
    dictionary's spelling.

    Returns:
      ScanResult(count, words), words in source order.
    """
    out: List[str] = []

    for line in source:
        word = line.rstrip("\r\n")
        key = word.upper() if config.fold_case else word
        if is_valid_word(key, letters, middle, config.min_length):
            out.append(word)

    return ScanResult(len(out), out)


def scan_file(
        path: Path | str,
        hive: Hive,
        config: SolverConfig = DEFAULT_CONFIG,
        *,
        progress: bool = False,
) -> ScanResult:
    """
    Scan the dictionary file at `path` for words matching `hive`.

    Raises FileNotFoundError if the dictionary is missing, rather than
    treating it as an empty word list.
    """
    lines = iter_lines(path)
    if progress:
        lines = tqdm(lines, ncols=80, desc="Scanning", unit="word")

    result = scan(lines, hive.letters, hive.middle, config)
    logger.info("hive %s: %d word(s) found in %s", hive, result.count, path)
    return result
