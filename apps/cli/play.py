# apps/cli/play.py
"""
Interactive terminal game.

This script:
  1) Loads the root-word list (fatal if missing) and builds the dictionary.
  2) Starts a game and prints the root word.
  3) Reads one candidate per line and prints the verdict and running score.

Commands typed instead of a word:
  :reset  new root word, history and score cleared
  :words  list accepted words (most recent first)
  :quit   leave (Ctrl-D works too)
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordscramble import config
from wordscramble.datasets import load_root_words
from wordscramble.dictionary import create_dictionary, get_dictionary_ids
from wordscramble.errors import WordScrambleError
from wordscramble.game import Game

log = logging.getLogger("wordscramble.cli")


def build_dictionary(args):
    """Instantiate the provider selected on the command line."""
    if args.dictionary == "lexicon":
        if not args.lexicon:
            raise SystemExit("--lexicon PATH is required with --dictionary lexicon")
        return create_dictionary("lexicon", path=args.lexicon, language=args.language)
    if args.dictionary == "wordfreq":
        return create_dictionary("wordfreq", min_zipf=args.min_zipf)
    return create_dictionary(args.dictionary)


def positive_float(text: str) -> float:
    """argparse type: a float strictly greater than zero."""
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive; got {text}")
    return value


def add_common_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--start-words", default=str(config.DEFAULT_START_WORDS),
                    help="root-word list (one lowercase word per line)")
    ap.add_argument("--dictionary", default=config.DEFAULT_DICTIONARY,
                    choices=get_dictionary_ids(), help="recognition oracle")
    ap.add_argument("--lexicon", help="word list for --dictionary lexicon")
    ap.add_argument("--language", default=config.DEFAULT_LANGUAGE, help="language tag for lookups")
    ap.add_argument("--min-zipf", type=positive_float, default=config.DEFAULT_MIN_ZIPF,
                    help="wordfreq threshold for a word to count as real")
    ap.add_argument("--seed", type=int, help="RNG seed for root-word choice")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])


def _banner(game: Game) -> str:
    s = game.state
    return f"Root word: {s.root_word.upper()}  |  score {s.score}"


def main(argv=None, stdin=None, stdout=None) -> int:
    ap = argparse.ArgumentParser(description="wordscramble: spell words from a root word")
    add_common_args(ap)
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    try:
        words = load_root_words(args.start_words)
        dictionary = build_dictionary(args)
    except (WordScrambleError, ValueError) as e:
        log.error("%s", e)
        return 2

    game = Game(word_source=words, dictionary=dictionary, language=args.language, seed=args.seed)
    game.start()
    print(_banner(game), file=stdout)

    for line in stdin:
        cmd = line.strip()
        if not cmd:
            continue
        if cmd == ":quit":
            break
        if cmd == ":reset":
            game.reset()
            print(_banner(game), file=stdout)
            continue
        if cmd == ":words":
            for w in game.state.used_words:
                print(f"  {len(w)}  {w}", file=stdout)
            continue

        outcome = game.submit(cmd)
        if outcome.accepted:
            print(f"+{outcome.points} {outcome.word}  (score {game.state.score})", file=stdout)
        else:
            print(f"{outcome.title}: {outcome.message}", file=stdout)

    print(f"Final score: {game.state.score}", file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
