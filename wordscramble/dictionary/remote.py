"""
Remote dictionary over HTTP.

Looks words up against a dictionary API (dictionaryapi.dev by default):
  - 200        -> recognized
  - 404        -> not a word
  - anything else, or a transport error -> DictionaryUnavailable

Verdicts are cached per (language, word) for the provider's lifetime, so a
replayed or repeated candidate costs one request.
"""

from __future__ import annotations

import logging
from typing import Dict, Tuple

import requests

from wordscramble import config
from wordscramble.errors import DictionaryUnavailable
from .base import DictionaryProvider, register

log = logging.getLogger(__name__)


@register
class RemoteDictionary(DictionaryProvider):
    id = "remote"
    name = "Remote API"

    def __init__(self, *, url: str = config.REMOTE_DICTIONARY_URL,
                 timeout: float = config.DEFAULT_HTTP_TIMEOUT,
                 session: requests.Session | None = None):
        self.url = url
        self.timeout = float(timeout)
        self.session = session or requests.Session()
        self._cache: Dict[Tuple[str, str], bool] = {}

    def is_recognized_word(self, word: str, language: str) -> bool:
        key = (language.lower(), word.strip().lower())
        if key in self._cache:
            return self._cache[key]

        url = self.url.format(language=key[0], word=key[1])
        try:
            r = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise DictionaryUnavailable(f"dictionary request failed: {e}") from e

        if r.status_code == 200:
            found = True
        elif r.status_code == 404:
            found = False
        else:
            raise DictionaryUnavailable(f"dictionary answered HTTP {r.status_code} for {url}")

        log.debug("remote lookup %s/%s -> %s", key[0], key[1], found)
        self._cache[key] = found
        return found
