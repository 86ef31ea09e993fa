# apps/cli/run.py
"""
CLI entry point for narrowing and ranking five-letter candidates.

This script:
  1) Inspects the word lists (logs counts + SHA at INFO).
  2) Loads the frequency list and the spelling dictionary.
  3) Filters the list against the given constraints (with a progress bar),
     prunes against the dictionary, and prints both top-N rankings plus the
     best start word of the whole list.

Constraints come from --constraint (absent:s, present:e:0,2,4, perfect:l:4)
and/or --guess (crane:--Y-G); all of them are applied together.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from tqdm import tqdm

from packages.datasets import (
    WordListFormatError, inspect_wordlists, pretty_summary,
    load_word_frequencies, load_dictionary, frequency_map,
)
from packages.engine import Constraint, parse_constraint, parse_guess
from packages.pipeline import TOP_N, run_pipeline, format_report

DEFAULT_WORDS_PATH = "eng_news_2023_1M/eng_news_2023_1M-words.txt"
DEFAULT_DICTIONARY_PATH = "english-dictionary.txt"

log = logging.getLogger(__name__)


def _constraint_arg(text: str) -> Constraint:
    try:
        return parse_constraint(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _guess_arg(text: str) -> List[Constraint]:
    try:
        return parse_guess(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _top_arg(text: str) -> int:
    try:
        top = int(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"--top must be an integer; got {text!r}") from e
    if top < 0:
        raise argparse.ArgumentTypeError(f"--top must be >= 0; got {top}")
    return top


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="wordle-candidates — narrow a five-letter word list and rank the survivors")
    ap.add_argument("--words", default=DEFAULT_WORDS_PATH,
                    help="tab-separated frequency list (<id>\\t<word>\\t<frequency>)")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY_PATH,
                    help="spelling dictionary, one word per line")
    ap.add_argument("--constraint", dest="constraints", action="append", default=[],
                    type=_constraint_arg, metavar="CONSTRAINT",
                    help="absent:<l> | present:<l>[:<i>,<i>...] | perfect:<l>:<i> (repeatable)")
    ap.add_argument("--guess", dest="guesses", action="append", default=[],
                    type=_guess_arg, metavar="GUESS:PATTERN",
                    help="guess feedback such as crane:--Y-G (G=green, Y=yellow, -=gray; repeatable)")
    ap.add_argument("--top", type=_top_arg, default=TOP_N, help="entries per ranking")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="Show solve progress (auto=bar when stderr is a terminal)."
    )
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                    help="logging verbosity (logs go to stderr)")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Parse CLI args, load the word lists, run the pipeline and print the report.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    constraints: List[Constraint] = list(args.constraints)
    for derived in args.guesses:
        constraints.extend(derived)
    log.info("applying %s constraint(s)", len(constraints))

    # 1) Inspect wordlists (counts, SHAs); loading below is what fails hard.
    # Inspection re-reads both files, so only pay for it when it is shown.
    if log.isEnabledFor(logging.INFO):
        log.info(pretty_summary(inspect_wordlists(args.words, args.dictionary)))

    # 2) Load lists into memory
    print("loading word data")
    try:
        words, freqs = load_word_frequencies(args.words)
        dictionary_words = load_dictionary(args.dictionary)
    except FileNotFoundError as e:
        raise SystemExit(f"error: input file not found: {e}") from e
    except WordListFormatError as e:
        raise SystemExit(f"error: {e}") from e

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "off"
    progress = None
    if mode == "bar":
        def progress(ws):
            return tqdm(ws, ncols=80, desc="Solving", unit="word")

    # 4) Solve, prune, rank
    result = run_pipeline(
        constraints,
        words,
        frequency_map(words, freqs),
        set(dictionary_words),
        top=args.top,
        progress=progress,
    )

    sys.stdout.write(format_report(result, dictionary_count=len(dictionary_words)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
