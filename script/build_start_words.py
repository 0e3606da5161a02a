"""
Build a root-word list from the wordfreq frequency lexicon.

What it does:
- Takes the N most frequent words of a language from wordfreq.
- Keeps lowercase alphabetic words of exactly --length letters.
- De-duplicates while preserving frequency order (or sorts with --sort).
- Writes one word per line, ready for --start-words.

Usage:
    python -m script.build_start_words --out wordscramble/datasets/data/start.txt
    # six-letter roots, alphabetically:
    python -m script.build_start_words --length 6 --sort --out start_6.txt
"""

import argparse

from tqdm import tqdm
from wordfreq import top_n_list

from wordscramble.datasets import write_lines


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def select_root_words(words, length: int, limit: int | None = None) -> list[str]:
    """Filter a frequency-ordered word list down to usable root words."""
    picked = [w for w in tqdm(words, desc="Filtering", unit="word", leave=False)
              if len(w) == length and w.isalpha() and w == w.lower()]
    picked = unique_preserve_order(picked)
    return picked[:limit] if limit else picked


def main():
    ap = argparse.ArgumentParser(description="Build a root-word list from wordfreq.")
    ap.add_argument("--out", required=True, help="output .txt file")
    ap.add_argument("--language", default="en", help="wordfreq language tag")
    ap.add_argument("--length", type=int, default=8, help="root word length")
    ap.add_argument("--top", type=int, default=50000, help="how many frequent words to scan")
    ap.add_argument("--limit", type=int, help="keep at most this many roots")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically (otherwise keep frequency order)")
    args = ap.parse_args()

    words = select_root_words(top_n_list(args.language, args.top), args.length, args.limit)
    if args.sort:
        words = sorted(words)

    path = write_lines(words, args.out)
    print(f"Scanned {args.top} words -> {path} ({len(words)} roots of length {args.length})")


if __name__ == "__main__":
    main()
