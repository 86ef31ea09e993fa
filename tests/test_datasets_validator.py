from pathlib import Path
from packages.datasets import inspect_wordlists, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_inspect_wordlists_happy_path(tmp_path: Path):
    words = tmp_path / "words.txt"
    dictionary = tmp_path / "dictionary.txt"
    _write(words, ["1\tcrane\t50", "2\tslate\t40", "3\tab\t9", "4\tcrane\t3"])
    _write(dictionary, ["Crane", "  trace ", "12345"])

    rep = inspect_wordlists(str(words), str(dictionary))
    assert rep["passed"] is True
    assert rep["words"]["count"] == 3
    assert rep["words"]["unique_count"] == 2
    assert rep["words"]["invalid_lines"] == 1
    assert rep["dictionary"]["count"] == 2
    assert rep["dictionary"]["invalid_lines"] == 1
    assert rep["overlap"] == 1
    assert len(rep["words"]["sha256"]) == 64
    s = pretty_summary(rep)
    assert "words=3" in s and "overlap=1" in s and s.endswith("OK")


def test_inspect_wordlists_flags_bad_frequency(tmp_path: Path):
    words = tmp_path / "words.txt"
    dictionary = tmp_path / "dictionary.txt"
    _write(words, ["1\tcrane\tlots", "2\tslate\t40"])
    _write(dictionary, ["crane"])

    rep = inspect_wordlists(str(words), str(dictionary))
    assert rep["passed"] is False
    assert rep["words"]["bad_frequencies"] == 1
    assert any("non-integer" in msg for msg in rep["issues"])


def test_inspect_wordlists_missing_file(tmp_path: Path):
    dictionary = tmp_path / "dictionary.txt"
    _write(dictionary, ["crane"])

    rep = inspect_wordlists(str(tmp_path / "nope.txt"), str(dictionary))
    assert rep["passed"] is False
    assert rep["words"]["exists"] is False
    assert rep["dictionary"]["exists"] is True
    assert any("not found" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("FAIL")


def test_inspect_wordlists_empty_dictionary(tmp_path: Path):
    words = tmp_path / "words.txt"
    dictionary = tmp_path / "dictionary.txt"
    _write(words, ["1\tcrane\t5"])
    _write(dictionary, ["toolong", "ab"])

    rep = inspect_wordlists(str(words), str(dictionary))
    assert rep["passed"] is False
    assert "dictionary contains 0 valid words" in rep["issues"]
