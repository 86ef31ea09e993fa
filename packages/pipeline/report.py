"""
Plain-text rendering of a PipelineResult.

Layout (one item per line):
  word list count / dictionary word count
  stage counts
  ==== Sorted by letter frequency
  ==== Sorted by word frequency
  ==== Best start word
"""

from __future__ import annotations

from typing import List

from .core import PipelineResult


def format_report(result: PipelineResult, dictionary_count: int) -> str:
    """Render `result` as the newline-terminated console report."""
    lines: List[str] = [
        f"word list count: {result.word_count}",
        f"dictionary word count: {dictionary_count}",
        f"found {result.match_count} possible matches.",
        f"found {result.dictionary_match_count} dictionary matches.",
        "==== Sorted by letter frequency",
        *result.by_letter_score,
        "==== Sorted by word frequency",
        *result.by_word_frequency,
        "==== Best start word",
    ]
    if result.best_start_word is not None:
        lines.append(result.best_start_word)
    return "\n".join(lines) + "\n"
