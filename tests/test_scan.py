from pathlib import Path

import pytest
from beesolver.engine import Hive, SolverConfig
from beesolver.harness import ScanResult, scan, scan_file

LETTERS = frozenset("AGMNORT")
LINES = ["GRAM", "GRAMMAR", "AT", "ORGAN", "organ"]


def test_scan_case_sensitive_example():
    r = scan(LINES, LETTERS, "G", SolverConfig(fold_case=False))
    assert r == ScanResult(3, ["GRAM", "GRAMMAR", "ORGAN"])


def test_scan_folds_case_by_default():
    r = scan(LINES, LETTERS, "G")
    # reported as spelled in the dictionary
    assert r.words == ["GRAM", "GRAMMAR", "ORGAN", "organ"]
    assert r.count == 4


def test_scan_preserves_order_and_duplicates():
    lines = ["TANG", "GRAM", "TANG", "AGORA"]
    r = scan(lines, LETTERS, "G")
    assert r.words == ["TANG", "GRAM", "TANG", "AGORA"]


def test_scan_strips_line_terminators():
    r = scan(["GRAM\n", "ORGAN\r\n", "AT\n"], LETTERS, "G")
    assert r.words == ["GRAM", "ORGAN"]


def test_scan_is_repeatable():
    cfg = SolverConfig(fold_case=False)
    assert scan(LINES, LETTERS, "G", cfg) == scan(LINES, LETTERS, "G", cfg)


def test_scan_empty_letter_set():
    r = scan(LINES + [""], frozenset(), "G")
    assert r == ScanResult(0, [])


def test_scan_file(tmp_path: Path):
    d = tmp_path / "dictionary.txt"
    d.write_text("\n".join(LINES) + "\n", encoding="utf-8")
    hive = Hive.from_input("GAMNORT")
    r = scan_file(d, hive, SolverConfig(fold_case=False))
    assert r.words == ["GRAM", "GRAMMAR", "ORGAN"]


def test_scan_file_with_progress(tmp_path: Path):
    d = tmp_path / "dictionary.txt"
    d.write_text("GRAM\nORGAN\n", encoding="utf-8")
    r = scan_file(d, Hive.from_input("GAMNORT"), progress=True)
    assert r.count == 2


def test_scan_file_missing_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        scan_file(tmp_path / "nope.txt", Hive.from_input("G"))
