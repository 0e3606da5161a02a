from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from wordscramble import config
from wordscramble.errors import WordSourceError

log = logging.getLogger(__name__)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def clean_root_words(lines: Iterable[str]) -> List[str]:
    """
    Normalize raw word-list lines into usable root words.

    Keeps lowercase alphabetic entries of at least MIN_WORD_LENGTH letters,
    in input order. Blank lines are dropped silently; anything else that
    fails the rules is counted and logged.
    """
    words: List[str] = []
    skipped = 0
    for raw in lines:
        w = raw.strip().lower()
        if not w:
            continue
        if not w.isalpha() or len(w) < config.MIN_WORD_LENGTH:
            skipped += 1
            continue
        words.append(w)
    if skipped:
        log.debug("skipped %d unusable root-word entries", skipped)
    return words


def load_root_words(p: Path | str | None = None) -> List[str]:
    """
    Load the root-word list used to start games.

    Defaults to the bundled start.txt. A missing or unreadable file is a
    configuration error and raises WordSourceError; an empty file loads as
    an empty list (the controller falls back to the default root word).
    """
    p = Path(p) if p is not None else config.DEFAULT_START_WORDS
    try:
        lines = read_lines(p)
    except FileNotFoundError as e:
        raise WordSourceError(f"root-word list not found: {p}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise WordSourceError(f"could not read root-word list {p}: {e}") from e

    words = clean_root_words(lines)
    log.info("loaded %d root words from %s", len(words), p)
    return words
