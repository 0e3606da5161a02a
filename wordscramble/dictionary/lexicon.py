"""
Lexicon dictionary.

Recognizes a word iff it appears in an in-memory word set. The set comes from
an iterable of words or from a newline-separated file (e.g. a bundled word
list or /usr/share/dict/words). A lexicon speaks exactly one language.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Set

from wordscramble import config
from wordscramble.datasets.io import read_lines
from wordscramble.errors import DictionaryUnavailable
from .base import DictionaryProvider, register

log = logging.getLogger(__name__)


@register
class LexiconDictionary(DictionaryProvider):
    id = "lexicon"
    name = "Lexicon"

    def __init__(self, words: Iterable[str] | None = None, *, path: Path | str | None = None,
                 language: str = config.DEFAULT_LANGUAGE):
        if words is None and path is None:
            raise ValueError("LexiconDictionary needs `words` or `path`")

        if path is not None:
            try:
                words = read_lines(path)
            except FileNotFoundError as e:
                raise DictionaryUnavailable(f"lexicon file not found: {path}") from e
            except (OSError, UnicodeDecodeError) as e:
                raise DictionaryUnavailable(f"could not read lexicon {path}: {e}") from e

        self.language = language.lower()
        self._words: Set[str] = {w.strip().lower() for w in words if w.strip()}
        log.info("lexicon dictionary ready: %d words (%s)", len(self._words), self.language)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return word.strip().lower() in self._words

    def is_recognized_word(self, word: str, language: str) -> bool:
        if language.lower() != self.language:
            raise DictionaryUnavailable(
                f"lexicon is {self.language!r}, cannot check {language!r} words")
        return word in self
