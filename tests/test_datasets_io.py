from pathlib import Path

import pytest
from packages.datasets import (
    WordListFormatError, load_word_frequencies, load_dictionary, frequency_map,
    parse_frequency, write_lines,
)


def test_load_word_frequencies_normalizes_and_skips(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text(
        "1\tCrane\t120\n"
        "2\t slate \t80\n"
        "3\tab\tnot-a-number\n"   # invalid word: frequency never parsed
        "4\t12345\t7\n"
        "no tabs here\n"
        "5\tcrane\t3\r\n",
        encoding="utf-8",
    )
    words, freqs = load_word_frequencies(p)
    assert words == ["crane", "slate", "crane"]
    assert freqs == [120, 80, 3]


def test_load_word_frequencies_bad_integer_is_fatal(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("1\tcrane\t120\n2\tslate\teighty\n", encoding="utf-8")
    with pytest.raises(WordListFormatError) as exc:
        load_word_frequencies(p)
    assert exc.value.lineno == 2
    assert "words.txt:2" in str(exc.value)


def test_load_word_frequencies_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_word_frequencies(tmp_path / "missing.txt")


def test_load_dictionary(tmp_path: Path):
    p = tmp_path / "dict.txt"
    p.write_bytes(b"  Apple \nBREAD\n12345\nab\ncaf\xe9s\nbread\n")
    assert load_dictionary(p) == ["apple", "bread", "bread"]


def test_load_dictionary_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_dictionary(tmp_path / "missing.txt")


def test_frequency_map_first_occurrence_wins():
    assert frequency_map(["crane", "slate", "crane"], [5, 4, 99]) == {"crane": 5, "slate": 4}


def test_write_lines_creates_parent_and_trailing_newline(tmp_path: Path):
    out = write_lines(["crane", "slate"], tmp_path / "sub" / "out.txt")
    assert Path(out).read_text(encoding="utf-8") == "crane\nslate\n"


@pytest.mark.parametrize("text,expected", [
    ("120", 120),
    (" 7 ", 7),
    ("+7", 7),
    ("-3", -3),
    ("42\r", 42),
])
def test_parse_frequency(text, expected):
    assert parse_frequency(text) == expected


@pytest.mark.parametrize("text", ["1_000", "", "12abc", "1.5", "٣", "eighty"])
def test_parse_frequency_rejects_non_integers(text):
    with pytest.raises(ValueError):
        parse_frequency(text)


def test_load_word_frequencies_underscore_grouping_is_fatal(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("1\tcrane\t1_000\n", encoding="utf-8")
    with pytest.raises(WordListFormatError) as exc:
        load_word_frequencies(p)
    assert exc.value.lineno == 1
