"""
Word-list inspection.

What this module does:
- Inspect the two inputs: the tab-separated frequency list and the spelling
  dictionary.
- Count valid words (after normalization), unique words and lines that fail
  validation; compute SHA-256 of the raw files.
- Return a machine-readable dict and provide a pretty one-line summary.

Unlike the loaders, inspection never raises on content: a frequency field
that isn't an integer is counted as an invalid line and reported in
`issues`, so a bad file can be diagnosed before a run.

Typical use:
    from packages.datasets import inspect_wordlists, pretty_summary
    rep = inspect_wordlists("eng_news_2023_1M-words.txt", "english-dictionary.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Set, Tuple
import hashlib

from packages.engine.validation import normalize_word
from .io import parse_frequency


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after normalization
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words
    invalid_lines: int   # lines skipped by validation
    bad_frequencies: int = 0  # valid words with a non-integer frequency


@dataclass
class InspectionReport:
    """Top-level result for the (word list, dictionary) pair."""
    words: FileReport
    dictionary: FileReport
    overlap: int         # unique words present in both files
    passed: bool
    issues: List[str]


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _scan_frequency_list(path: Path) -> Tuple[List[str], int, int]:
    """Returns (valid_words, invalid_lines, bad_frequencies)."""
    valid: List[str] = []
    invalid = 0
    bad_freq = 0
    with path.open("r", encoding="utf-8", errors="replace") as f:
        for raw in f:
            fields = raw.rstrip("\r\n").split("\t")
            word = normalize_word(fields[1]) if len(fields) >= 3 else None
            if word is None:
                invalid += 1
                continue
            try:
                parse_frequency(fields[2])
            except ValueError:
                bad_freq += 1
                continue
            valid.append(word)
    return valid, invalid, bad_freq


def _scan_dictionary(path: Path) -> Tuple[List[str], int]:
    """Returns (valid_words, invalid_lines)."""
    valid: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8", errors="replace") as f:
        for raw in f:
            word = normalize_word(raw)
            if word is None:
                invalid += 1
            else:
                valid.append(word)
    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def inspect_wordlists(words_path: str, dictionary_path: str) -> Dict:
    """
    Inspect the frequency list and dictionary.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see InspectionReport schema) with
        per-file counts and hashes, the overlap between the two, a `passed`
        flag (both exist, both non-empty, no bad frequencies) and `issues`.
    """
    issues: List[str] = []

    w_p = Path(words_path)
    d_p = Path(dictionary_path)

    if not w_p.exists() or not d_p.exists():
        if not w_p.exists():
            issues.append(f"word list not found: {words_path}")
        if not d_p.exists():
            issues.append(f"dictionary not found: {dictionary_path}")
        rep = InspectionReport(
            words=FileReport(words_path, w_p.exists(), 0, "", 0, 0),
            dictionary=FileReport(dictionary_path, d_p.exists(), 0, "", 0, 0),
            overlap=0,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    words, w_invalid, bad_freq = _scan_frequency_list(w_p)
    dict_words, d_invalid = _scan_dictionary(d_p)

    words_set: Set[str] = set(words)
    dict_set: Set[str] = set(dict_words)

    w_report = FileReport(
        path=str(w_p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(w_p),
        unique_count=len(words_set),
        invalid_lines=w_invalid,
        bad_frequencies=bad_freq,
    )
    d_report = FileReport(
        path=str(d_p),
        exists=True,
        count=len(dict_words),
        sha256=_sha256_file(d_p),
        unique_count=len(dict_set),
        invalid_lines=d_invalid,
    )

    if w_report.count == 0:
        issues.append("word list contains 0 valid words")
    if d_report.count == 0:
        issues.append("dictionary contains 0 valid words")
    if bad_freq:
        issues.append(f"word list has {bad_freq} line(s) with a non-integer frequency")

    overlap = len(words_set & dict_set)
    passed = w_report.count > 0 and d_report.count > 0 and bad_freq == 0

    rep = InspectionReport(
        words=w_report,
        dictionary=d_report,
        overlap=overlap,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/logs.

    Example:
        words=5213 (uniq=5213, skipped=994787, sha=abc123...) | dictionary=9972 (uniq=9972, skipped=360000, sha=def456...) | overlap=4100 | OK
    """
    a = report["words"]
    b = report["dictionary"]
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"words={a['count']} (uniq={a['unique_count']}, skipped={a['invalid_lines']}, sha={a_sha}) "
        f"| dictionary={b['count']} (uniq={b['unique_count']}, skipped={b['invalid_lines']}, sha={b_sha}) "
        f"| overlap={report['overlap']} | {status}"
    )
