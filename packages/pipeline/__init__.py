from .core import (
    TOP_N, PipelineResult, prune_to_dictionary, rank_by_letter_score,
    rank_by_word_frequency, best_start_word, run_pipeline,
)
from .report import format_report

__all__ = [
    "TOP_N", "PipelineResult", "prune_to_dictionary", "rank_by_letter_score",
    "rank_by_word_frequency", "best_start_word", "run_pipeline", "format_report",
]
