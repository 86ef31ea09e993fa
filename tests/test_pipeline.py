import pytest
from packages.engine import NotPresent, Present, Perfect, solve
from packages.pipeline import (
    prune_to_dictionary, rank_by_letter_score, rank_by_word_frequency,
    best_start_word, run_pipeline, format_report,
)

CONSTRAINTS = [
    NotPresent("s"), NotPresent("t"), NotPresent("n"),
    Present("e", frozenset({0, 2, 4})),
    Perfect("l", 4),
    NotPresent("w"), NotPresent("h"), NotPresent("o"), NotPresent("q"),
    NotPresent("u"), NotPresent("a"), NotPresent("i"),
]
WORDS = ["level", "rebel", "bevel", "repel", "excel", "model", "xebel"]
FREQS = {"level": 500, "rebel": 300, "bevel": 10, "repel": 300,
         "excel": 900, "model": 800, "xebel": 5}
DICTIONARY = {"level", "rebel", "bevel", "repel", "excel", "model", "crane"}


def test_prune_is_subset_sorted_and_deduplicated():
    legal = ["rebel", "xebel", "level", "rebel"]
    pruned = prune_to_dictionary(legal, DICTIONARY)
    assert pruned == ["level", "rebel"]
    assert set(pruned) <= set(legal) and set(pruned) <= DICTIONARY

def test_prune_accepts_any_iterable_dictionary():
    assert prune_to_dictionary(["crane", "slate"], ["slate"]) == ["slate"]

def test_rank_by_letter_score():
    # repel 23900, rebel 23800, bevel 18800, level 17200
    assert rank_by_letter_score(["bevel", "level", "rebel", "repel"]) == ["repel", "rebel", "bevel", "level"]

def test_rank_ties_keep_incoming_order():
    assert rank_by_letter_score(["abcde", "edcba", "bacde"]) == ["abcde", "edcba", "bacde"]
    ranked = rank_by_word_frequency(["bevel", "level", "rebel", "repel"], FREQS)
    assert ranked == ["level", "rebel", "repel", "bevel"]

def test_rank_missing_frequency_counts_as_zero():
    assert rank_by_word_frequency(["aaaaa", "level"], {"level": 1}) == ["level", "aaaaa"]

def test_rank_top_limit():
    words = [f"{c}rane" for c in "abcdefghijklmnopqrstuvwxyz"]
    assert len(rank_by_letter_score(words)) == 15
    assert len(rank_by_word_frequency(words, {}, top=3)) == 3

def test_best_start_word_first_maximum_wins():
    assert best_start_word(WORDS) == "model"
    assert best_start_word(["zzzzz", "abcde", "edcba"]) == "abcde"
    assert best_start_word([]) is None

def test_run_pipeline_end_to_end():
    result = run_pipeline(CONSTRAINTS, WORDS, FREQS, DICTIONARY)
    assert result.word_count == 7
    assert result.match_count == 5            # xebel passes but isn't a dictionary word
    assert result.dictionary_match_count == 4
    assert result.by_letter_score == ["repel", "rebel", "bevel", "level"]
    assert result.by_word_frequency == ["level", "rebel", "repel", "bevel"]
    assert result.best_start_word == "model"  # computed over the unfiltered list

def test_run_pipeline_result_is_subset_of_solver_and_dictionary():
    result = run_pipeline(CONSTRAINTS, WORDS, FREQS, DICTIONARY)
    solved = set(solve(CONSTRAINTS, WORDS))
    assert set(result.by_letter_score) <= solved & DICTIONARY

def test_run_pipeline_uses_progress_wrapper():
    seen = []

    def progress(ws):
        seen.append(len(ws))
        return iter(ws)

    run_pipeline(CONSTRAINTS, WORDS, FREQS, DICTIONARY, progress=progress)
    assert seen == [7]

def test_report_is_deterministic():
    first = format_report(run_pipeline(CONSTRAINTS, WORDS, FREQS, DICTIONARY), 7)
    second = format_report(run_pipeline(CONSTRAINTS, WORDS, FREQS, DICTIONARY), 7)
    assert first == second
    assert first.splitlines() == [
        "word list count: 7",
        "dictionary word count: 7",
        "found 5 possible matches.",
        "found 4 dictionary matches.",
        "==== Sorted by letter frequency",
        "repel", "rebel", "bevel", "level",
        "==== Sorted by word frequency",
        "level", "rebel", "repel", "bevel",
        "==== Best start word",
        "model",
    ]

def test_rank_negative_top_is_rejected():
    words = ["abcde", "fghij", "klmno", "pqrst"]
    with pytest.raises(ValueError):
        rank_by_letter_score(words, -1)
    with pytest.raises(ValueError):
        rank_by_word_frequency(words, {}, top=-1)
