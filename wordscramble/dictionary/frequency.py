"""
Frequency-lexicon dictionary backed by `wordfreq`.

wordfreq is built from web text, so its vocabulary includes plenty of
fragments, initialisms and typos with non-trivial frequencies ("lst",
"nle", "eln"). Recognition therefore has two gates:

  - words of up to SHORT_WORD_MAX_LENGTH letters must be in the bundled
    allow-list for the language (short_words_<lang>.txt);
  - longer words must reach `min_zipf` in wordfreq's list for the language.

Only single alphabetic tokens are ever recognized.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Set

from wordfreq import available_languages, zipf_frequency

from wordscramble import config
from wordscramble.datasets.io import read_lines
from wordscramble.errors import DictionaryUnavailable
from .base import DictionaryProvider, register

log = logging.getLogger(__name__)


@register
class WordfreqDictionary(DictionaryProvider):
    id = "wordfreq"
    name = "wordfreq"

    def __init__(self, *, min_zipf: float = config.DEFAULT_MIN_ZIPF,
                 short_word_max: int = config.SHORT_WORD_MAX_LENGTH,
                 short_words: Dict[str, Iterable[str]] | None = None,
                 data_dir: Path | str = config.DATA_DIR):
        if min_zipf <= 0:
            raise ValueError(f"min_zipf must be positive; got {min_zipf}")
        self.min_zipf = float(min_zipf)
        self.short_word_max = int(short_word_max)
        self.data_dir = Path(data_dir)
        self._languages = set(available_languages())
        self._short: Dict[str, Set[str]] = {
            lang.lower(): {w.strip().lower() for w in words if w.strip()}
            for lang, words in (short_words or {}).items()
        }

    def resolve_language(self, language: str) -> str:
        """Map a tag like 'EN' or 'en-US' onto a wordfreq language code."""
        tag = language.strip().lower().replace("_", "-")
        if tag in self._languages:
            return tag
        base = tag.split("-")[0]
        if base in self._languages:
            return base
        raise DictionaryUnavailable(f"wordfreq has no word list for {language!r}")

    def short_words(self, language: str) -> Set[str]:
        lang = self.resolve_language(language)
        if lang not in self._short:
            path = self.data_dir / config.SHORT_WORDS_TEMPLATE.format(language=lang)
            try:
                lines = read_lines(path)
            except (OSError, UnicodeDecodeError) as e:
                raise DictionaryUnavailable(f"no short-word list for {lang!r}: {path}") from e
            self._short[lang] = {w.strip().lower() for w in lines if w.strip()}
            log.info("loaded %d short words for %s", len(self._short[lang]), lang)
        return self._short[lang]

    def zipf(self, word: str, language: str) -> float:
        return zipf_frequency(word, self.resolve_language(language))

    def is_recognized_word(self, word: str, language: str) -> bool:
        w = word.strip().lower()
        if not w.isalpha():
            return False
        if len(w) <= self.short_word_max:
            return w in self.short_words(language)
        return self.zipf(w, language) >= self.min_zipf
