"""
The hive: allowed letters plus the required (middle) letter.

Users type the hive as one line, middle letter first, e.g. "GAMNORT".
Everything is upper-cased and stored in a frozenset, so duplicates and the
order of the outer letters don't matter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet


def _upper1(c: str) -> str:
    u = c.upper()
    return u if len(u) == 1 else c


@dataclass(frozen=True)
class Hive:
    letters: FrozenSet[str]
    middle: str

    def __post_init__(self) -> None:
        if len(self.middle) != 1:
            raise ValueError(f"middle must be a single character; got {self.middle!r}")
        if self.middle not in self.letters:
            raise ValueError(f"middle letter {self.middle!r} is not one of the hive letters")

    @classmethod
    def from_input(cls, text: str) -> "Hive":
        """
        Build a hive from a line of user input.

        Whitespace is ignored; the first remaining character is the middle
        letter. Characters whose upper case is more than one character
        ("ß" -> "SS") are kept as typed. Raises ValueError if no letters
        were given.
        """
        chars = [_upper1(c) for c in text if not c.isspace()]
        if not chars:
            raise ValueError("no letters given")
        return cls(letters=frozenset(chars), middle=chars[0])

    def __str__(self) -> str:
        outer = "".join(sorted(self.letters - {self.middle}))
        return f"[{self.middle}]{outer}"
