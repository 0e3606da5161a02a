"""
Game lifecycle.

Pure functions:
  - start_game: pick a root word, empty history, zero score.
  - submit:     validate a candidate and apply the verdict.
  - reset:      start over with a freshly picked root word.

`Game` wraps them for front-ends that want to hold a single mutable game,
serializing submissions so a slow dictionary lookup can never interleave
with another submission's state update.
"""

from __future__ import annotations

import logging
import random
import threading
from typing import Sequence, Tuple

from wordscramble import config
from wordscramble.datasets.io import clean_root_words
from wordscramble.engine import normalize, validate
from wordscramble.errors import GameNotStarted, WordSourceError
from .state import GameState, Outcome

log = logging.getLogger(__name__)


def pick_root_word(word_source: Sequence[str] | None, rng: random.Random | None = None) -> str:
    """
    Choose a root word uniformly at random from `word_source`.

    No source at all is fatal (WordSourceError). A source with no usable
    entry falls back to DEFAULT_ROOT_WORD.
    """
    if word_source is None:
        raise WordSourceError("no root-word source configured")
    rng = rng or random.Random()

    words = clean_root_words(word_source)
    if not words:
        log.warning("root-word source is empty; falling back to %r", config.DEFAULT_ROOT_WORD)
        return config.DEFAULT_ROOT_WORD
    return rng.choice(words)


def start_game(word_source: Sequence[str] | None, rng: random.Random | None = None) -> GameState:
    state = GameState(root_word=pick_root_word(word_source, rng))
    log.info("new game: root word %r", state.root_word)
    return state


def reset(word_source: Sequence[str] | None, rng: random.Random | None = None) -> GameState:
    return start_game(word_source, rng)


def submit(
        candidate: str,
        state: GameState,
        dictionary,
        language: str = config.DEFAULT_LANGUAGE,
) -> Tuple[GameState, Outcome]:
    """
    Run the validation engine on `candidate` and apply the verdict.

    Returns:
      (new_state, Outcome). On rejection new_state is `state` itself.
    """
    verdict = validate(candidate, state.root_word, state.used_words, dictionary, language)
    if not verdict.ok:
        log.debug("rejected %r: %s", candidate, verdict.reason.value)
        return state, Outcome.reject(normalize(candidate), verdict.reason, state.root_word)

    word = verdict.accepted.word
    log.debug("accepted %r (+%d)", word, verdict.accepted.length)
    return state.with_word(word), Outcome.accept(word)


class Game:
    """
    One player's game: owns the current GameState and its collaborators.
    """

    def __init__(self, *, word_source: Sequence[str] | None, dictionary,
                 language: str = config.DEFAULT_LANGUAGE, seed: int | None = None,
                 rng: random.Random | None = None):
        self.word_source = word_source
        self.dictionary = dictionary
        self.language = language
        self.rng = rng or random.Random(seed)
        self._state: GameState | None = None
        self._lock = threading.Lock()

    @property
    def started(self) -> bool:
        return self._state is not None

    @property
    def state(self) -> GameState:
        if self._state is None:
            raise GameNotStarted("call start() before using the game")
        return self._state

    def start(self) -> GameState:
        with self._lock:
            self._state = start_game(self.word_source, self.rng)
            return self._state

    def reset(self) -> GameState:
        with self._lock:
            self._state = reset(self.word_source, self.rng)
            return self._state

    def submit(self, candidate: str) -> Outcome:
        with self._lock:
            new_state, outcome = submit(candidate, self.state, self.dictionary, self.language)
            self._state = new_state
            return outcome
