from pathlib import Path
from beesolver.datasets import validate_dictionary, pretty_summary, read_lines, write_lines, is_readable
from beesolver.engine import SolverConfig


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_dictionary_happy_path(tmp_path: Path):
    d = tmp_path / "dictionary.txt"
    _write(d, ["GRAM", "GRAMMAR", "ORGAN", "AT"])

    rep = validate_dictionary(str(d))
    assert rep["passed"] is True
    assert rep["lines"] == 4
    assert rep["short_lines"] == 1
    assert rep["unique_count"] == 4
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "lines=4" in s and s.endswith("OK")


def test_validate_dictionary_flags_case_mismatch(tmp_path: Path):
    d = tmp_path / "dictionary.txt"
    _write(d, ["GRAM", "organ"])

    folded = validate_dictionary(str(d))
    assert folded["passed"] is True
    assert folded["lowercase_lines"] == 1

    strict = validate_dictionary(str(d), SolverConfig(fold_case=False))
    assert strict["passed"] is False
    assert any("lower-case" in msg for msg in strict["issues"])


def test_validate_dictionary_flags_hygiene(tmp_path: Path):
    d = tmp_path / "dictionary.txt"
    d.write_text("GRAM\n\nGRAM\nDON'T\n", encoding="utf-8")

    rep = validate_dictionary(str(d))
    assert rep["blank_lines"] == 1
    assert rep["non_alpha_lines"] == 1
    assert any("duplicate" in msg for msg in rep["issues"])
    assert any("blank" in msg for msg in rep["issues"])


def test_validate_dictionary_missing(tmp_path: Path):
    rep = validate_dictionary(str(tmp_path / "missing.txt"))
    assert rep["exists"] is False
    assert rep["passed"] is False
    assert "missing" in pretty_summary(rep)


def test_validate_dictionary_empty(tmp_path: Path):
    d = tmp_path / "empty.txt"
    d.write_text("", encoding="utf-8")
    rep = validate_dictionary(str(d))
    assert rep["passed"] is False
    assert any("0 entries" in msg for msg in rep["issues"])


def test_write_then_read_lines(tmp_path: Path):
    out = tmp_path / "sub" / "words.txt"
    write_lines(["GRAM", "ORGAN"], out)
    assert out.read_text(encoding="utf-8") == "GRAM\nORGAN\n"
    assert read_lines(out) == ["GRAM", "ORGAN"]


def test_write_lines_empty(tmp_path: Path):
    out = tmp_path / "words.txt"
    write_lines([], out)
    assert out.read_text(encoding="utf-8") == ""


def test_is_readable(tmp_path: Path):
    f = tmp_path / "words.txt"
    assert is_readable(f) is False
    f.write_text("GRAM\n", encoding="utf-8")
    assert is_readable(f) is True
    assert is_readable(tmp_path) is False


def test_validate_dictionary_undecodable_bytes(tmp_path: Path):
    d = tmp_path / "dictionary.txt"
    d.write_bytes(b"GRAM\n\xff\xfeORGAN\n")
    rep = validate_dictionary(str(d))
    assert rep["lines"] == 2
    assert rep["non_alpha_lines"] == 1
    assert len(rep["sha256"]) == 64


def test_validate_dictionary_sha256_matches_raw_bytes(tmp_path: Path):
    import hashlib
    d = tmp_path / "dictionary.txt"
    d.write_bytes(b"GRAM\r\nORGAN\n")
    rep = validate_dictionary(str(d))
    assert rep["sha256"] == hashlib.sha256(b"GRAM\r\nORGAN\n").hexdigest()


def test_validate_dictionary_directory(tmp_path: Path):
    rep = validate_dictionary(str(tmp_path))
    assert rep["exists"] is False
    assert rep["passed"] is False


def test_iter_lines_replaces_undecodable_bytes(tmp_path: Path):
    d = tmp_path / "words.txt"
    d.write_bytes(b"GRAM\n\xffX\n")
    assert read_lines(d) == ["GRAM", "\ufffdX"]
