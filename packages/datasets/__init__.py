from .validator import inspect_wordlists, pretty_summary
from .io import (
    WordListFormatError, load_word_frequencies, load_dictionary, frequency_map,
    parse_frequency, write_lines,
)

__all__ = [
    "inspect_wordlists", "pretty_summary",
    "WordListFormatError", "load_word_frequencies", "load_dictionary", "frequency_map",
    "parse_frequency", "write_lines",
]
