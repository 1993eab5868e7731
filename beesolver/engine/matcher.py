"""
Word acceptance rule for the Spelling Bee.

A word is accepted iff:
  1) it has at least `min_length` characters
  2) it contains the middle letter at least once (any position)
  3) every character is one of the hive letters

Checks run cheapest-first so most of a large dictionary is rejected on
length or on the middle letter before the per-character scan runs.
Comparison is exact; callers decide whether to fold case.
"""

from typing import AbstractSet

from .config import MIN_WORD_LENGTH


def is_valid_word(word: str, letters: AbstractSet[str], middle: str,
                  min_length: int = MIN_WORD_LENGTH) -> bool:
    """
    Return True if `word` is a valid answer for the hive (`letters`, `middle`).

    Args:
      word       : candidate word (may be empty)
      letters    : allowed characters (may be empty)
      middle     : the required character
      min_length : minimum accepted length (4 in the NYT game)
    """
    if len(word) < min_length:
        return False
    if middle not in word:
        return False

    for ch in word:
        if ch not in letters:
            return False

    return True
