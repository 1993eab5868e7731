from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, Iterator, List

logger = logging.getLogger(__name__)


def is_readable(p: Path | str) -> bool:
    """
    True if `p` names an existing file we can open for reading.
    """
    p = Path(p)
    if not p.is_file():
        return False
    try:
        with p.open("rb"):
            pass
    except OSError:
        return False
    return True


def iter_lines(p: Path | str) -> Iterator[str]:
    """
    Lazily yield the lines of a UTF-8 text file with trailing CR/LF removed.
    Undecodable bytes are replaced with U+FFFD rather than raising.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    with p.open("r", encoding="utf-8", errors="replace") as f:
        for ln in f:
            yield ln.rstrip("\r\n")


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    return list(iter_lines(p))


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write one entry per line to a UTF-8 text file, each newline-terminated.
    An empty iterable produces an empty file. Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    n = 0
    with p.open("w", encoding="utf-8", newline="\n") as f:
        for ln in lines:
            f.write(ln + "\n")
            n += 1
    logger.info("wrote %d line(s) to %s", n, p)
    return str(p)
