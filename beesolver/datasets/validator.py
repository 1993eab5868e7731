"""
Dictionary health check.

What this module does:
- Inspect a dictionary file (one candidate word per line) before solving.
- Count blank lines, entries too short to ever match, entries with
  non-alphabetic characters, and lower-case entries.
- Detect duplicates; compute SHA-256 of the raw file in the same pass.
- Return a machine-readable dict and provide a pretty one-line summary.

Lower-case entries matter when case folding is off: the hive is always
upper-cased, so those entries can never be accepted.

Typical use:
    from beesolver.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("dictionary.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib

from beesolver.engine import SolverConfig, DEFAULT_CONFIG
from .io import is_readable


@dataclass
class DictionaryReport:
    """Per-file diagnostics and metadata."""
    path: str              # file path (as given)
    exists: bool           # did the file exist on disk?
    lines: int = 0         # total lines read
    blank_lines: int = 0   # empty/whitespace-only lines
    short_lines: int = 0   # non-blank entries shorter than min_length
    non_alpha_lines: int = 0
    lowercase_lines: int = 0  # entries with at least one lower-case letter
    unique_count: int = 0  # distinct non-blank entries
    sha256: str = ""       # SHA-256 of raw file bytes (empty string if missing)
    fold_case: bool = True
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def validate_dictionary(path: str, config: SolverConfig = DEFAULT_CONFIG) -> Dict:
    """
    Inspect the dictionary at `path`.

    Returns a JSON-serializable dict (see DictionaryReport). `passed` is True
    when the file exists, holds at least one usable entry, and (with case
    folding off) has no lower-case entries that could never match.
    """
    p = Path(path)
    rep = DictionaryReport(path=str(path), exists=p.is_file(), fold_case=config.fold_case)

    if not rep.exists:
        rep.issues.append(f"dictionary file not found: {path}")
        return asdict(rep)

    if not is_readable(p):
        rep.issues.append(f"dictionary file not readable: {path}")
        return asdict(rep)

    # One pass over the raw bytes: hash them and decode each line for the counts.
    # Undecodable bytes become U+FFFD, which no hive letter matches.
    seen = set()
    h = hashlib.sha256()
    with p.open("rb") as f:
        for raw in f:
            h.update(raw)
            rep.lines += 1
            w = raw.decode("utf-8", errors="replace").rstrip("\r\n")
            if not w.strip():
                rep.blank_lines += 1
                continue
            seen.add(w)
            if len(w) < config.min_length:
                rep.short_lines += 1
            if not w.isalpha():
                rep.non_alpha_lines += 1
            if w != w.upper():
                rep.lowercase_lines += 1

    rep.unique_count = len(seen)
    rep.sha256 = h.hexdigest()

    usable = rep.lines - rep.blank_lines
    if usable == 0:
        rep.issues.append("dictionary contains 0 entries")
    if rep.blank_lines:
        rep.issues.append(f"dictionary has {rep.blank_lines} blank line(s)")
    if rep.non_alpha_lines:
        rep.issues.append(f"dictionary has {rep.non_alpha_lines} non-alphabetic entries")
    if rep.unique_count != usable:
        rep.issues.append("dictionary contains duplicate lines")

    case_blocked = rep.lowercase_lines > 0 and not config.fold_case
    if case_blocked:
        rep.issues.append(
            f"{rep.lowercase_lines} lower-case entries can never match an upper-case hive "
            "(case folding is off)")

    rep.passed = usable > 0 and not case_blocked
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/logs.

    Example:
        dictionary.txt | lines=178691 (uniq=178691, short=1062, lower=0, sha=abc123...) | OK
    """
    if not report["exists"]:
        return f"{report['path']} | missing | FAIL"
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{report['path']} | lines={report['lines']} (uniq={report['unique_count']}, "
        f"short={report['short_lines']}, lower={report['lowercase_lines']}, sha={sha}) | {status}"
    )
