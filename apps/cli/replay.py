# apps/cli/replay.py
"""
Replay a file of candidate words against one game.

This script:
  1) Validates the root-word list (prints counts + SHA).
  2) Starts a seeded game and submits every candidate in order with a
     progress bar.
  3) Writes:
       - CSV:  one row per submission (verdict, points, running score)
       - JSON: manifest with config, root word, final state, git commit
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from wordscramble import config
from wordscramble.datasets import clean_root_words, load_root_words, read_lines, validate_root_words, \
    pretty_summary
from wordscramble.errors import WordScrambleError
from wordscramble.game import Game
from wordscramble.session import play_session, write_csv, write_manifest, timestamp_id, \
    git_commit_or_unknown

from apps.cli.play import add_common_args, build_dictionary

log = logging.getLogger("wordscramble.cli")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="wordscramble: replay candidate words")
    add_common_args(ap)
    ap.add_argument("--candidates", required=True, help="file with one candidate per line")
    ap.add_argument("--root", help="force this root word instead of drawing one")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="disable the progress bar")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    # 1) A forced root must be usable as-is; otherwise validate the list it would come from
    rep = None
    if args.root is not None:
        forced = clean_root_words([args.root])
        if not forced:
            log.error("unusable --root %r: need %d+ letters a-z", args.root, config.MIN_WORD_LENGTH)
            return 2
    else:
        rep = validate_root_words(args.start_words)
        print(pretty_summary(rep))

    # 2) Load inputs; any missing source is fatal here
    try:
        words = forced if args.root is not None else load_root_words(args.start_words)
        candidates = [c for c in read_lines(args.candidates) if c.strip()]
        dictionary = build_dictionary(args)
    except (WordScrambleError, OSError, ValueError) as e:
        log.error("%s", e)
        return 2

    game = Game(word_source=words, dictionary=dictionary, language=args.language, seed=args.seed)
    root = game.start().root_word

    # 3) Replay with progress
    iterator = tqdm(candidates, ncols=80, desc="Replaying", unit="word", disable=args.no_progress)
    records = play_session(game, iterator)

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(records, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "start_words": rep,
        "root_word": root,
        "final_state": game.state.to_dict(),
        "num_submissions": len(records),
        "num_accepted": sum(1 for r in records if r["accepted"]),
    }, str(manifest_path))

    print(f"Root word: {root} | score {game.state.score}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
