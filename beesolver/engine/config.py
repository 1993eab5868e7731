"""
Solver configuration.

The puzzle constants live here as one immutable value that gets passed into
the matcher, the scanner and the interactive session, so nothing in the core
reads module globals or touches the file system to find them.
"""

from __future__ import annotations

from dataclasses import dataclass

# Spelling Bee rule: accepted words have at least 4 letters.
MIN_WORD_LENGTH = 4
DEFAULT_DICTIONARY = "dictionary.txt"


@dataclass(frozen=True)
class SolverConfig:
    """Immutable knobs for one solving session."""
    min_length: int = MIN_WORD_LENGTH          # shortest acceptable word
    default_dictionary: str = DEFAULT_DICTIONARY  # used when the prompt is left empty
    fold_case: bool = True                     # upper-case dictionary words before matching

    def __post_init__(self) -> None:
        if self.min_length < 1:
            raise ValueError(f"min_length must be >= 1; got {self.min_length}")
        if not self.default_dictionary:
            raise ValueError("default_dictionary must be a non-empty filename")


DEFAULT_CONFIG = SolverConfig()
