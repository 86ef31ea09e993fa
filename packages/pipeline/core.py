"""
Candidate pipeline primitives.

- prune_to_dictionary:     drop solver output missing from a spelling dictionary.
- rank_by_letter_score:    top-N by letter-frequency score.
- rank_by_word_frequency:  top-N by corpus usage frequency.
- best_start_word:         highest-scoring word of the whole unfiltered list.
- run_pipeline:            solve -> prune -> rank -> best start, in one call.

These functions are UI-agnostic; the CLI only loads files and prints the
PipelineResult.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence

import numpy as np

from packages.engine import Constraint, score, score_many, solve

log = logging.getLogger(__name__)

# Number of entries reported per ranking.
TOP_N = 15

# Wraps the word iterable during solving (e.g. a tqdm factory).
ProgressFactory = Callable[[Sequence[str]], Iterable[str]]


@dataclass
class PipelineResult:
    word_count: int              # entries in the primary list (duplicates included)
    match_count: int             # words passing every constraint
    dictionary_match_count: int  # matches left after dictionary pruning
    by_letter_score: List[str] = field(default_factory=list)
    by_word_frequency: List[str] = field(default_factory=list)
    best_start_word: Optional[str] = None


def prune_to_dictionary(words: Iterable[str], dictionary: Iterable[str]) -> List[str]:
    """
    Keep only words present in `dictionary` (exact string match), then
    deduplicate and sort lexicographically.
    """
    valid = dictionary if isinstance(dictionary, (set, frozenset)) else set(dictionary)
    return sorted({w for w in words if w in valid})


def _check_top(top: int) -> int:
    if top < 0:
        raise ValueError(f"top must be >= 0; got {top}")
    return top


def rank_by_letter_score(words: Sequence[str], top: int = TOP_N) -> List[str]:
    """
    Top `top` words by letter-frequency score, highest first.
    The sort is stable, so ties keep their incoming order.
    """
    return sorted(words, key=score, reverse=True)[:_check_top(top)]


def rank_by_word_frequency(words: Sequence[str], frequencies: Dict[str, int],
                           top: int = TOP_N) -> List[str]:
    """
    Top `top` words by usage frequency, highest first. Words missing from
    `frequencies` count as 0. Ties keep their incoming order.
    """
    return sorted(words, key=lambda w: frequencies.get(w, 0), reverse=True)[:_check_top(top)]


def best_start_word(words: Sequence[str]) -> Optional[str]:
    """
    The highest-scoring word of `words`; on ties the earliest one wins.
    Returns None for an empty list.
    """
    if not words:
        return None
    scores = score_many(words)
    # argmax returns the first maximal index
    return words[int(np.argmax(scores))]


def run_pipeline(
        constraints: Iterable[Constraint],
        words: Sequence[str],
        frequencies: Dict[str, int],
        dictionary: Iterable[str],
        *,
        top: int = TOP_N,
        progress: ProgressFactory | None = None,
) -> PipelineResult:
    """
    Run the full narrowing and ranking over in-memory inputs.

    Args:
        constraints: constraints every surviving word must satisfy
        words:       the primary (unfiltered) word list, in file order
        frequencies: word -> usage frequency
        dictionary:  spelling dictionary used to prune solver output
        top:         entries per ranking
        progress:    optional wrapper around `words` while solving

    Returns:
        PipelineResult with stage counts, both rankings and the best start word.
    """
    source = progress(words) if progress is not None else words
    legal = solve(constraints, source)
    log.info("found %s possible matches", len(legal))

    candidates = prune_to_dictionary(legal, dictionary)
    log.info("found %s dictionary matches", len(candidates))

    return PipelineResult(
        word_count=len(words),
        match_count=len(legal),
        dictionary_match_count=len(candidates),
        by_letter_score=rank_by_letter_score(candidates, top),
        by_word_frequency=rank_by_word_frequency(candidates, frequencies, top),
        best_start_word=best_start_word(words),
    )
