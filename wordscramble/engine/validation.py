"""
Submission validation.

This module answers the question: "Is this word acceptable right now?"
Checks run in a fixed order and the first failure decides the verdict:

  1) TOO_SHORT          fewer than MIN_WORD_LENGTH letters
  2) ALREADY_USED       accepted earlier this game
  3) IS_ROOT_WORD       the root word itself
  4) NOT_CONSTRUCTIBLE  needs letters (or copies of letters) the root lacks
  5) NOT_A_REAL_WORD    the dictionary does not recognize it

When the dictionary cannot answer at all the verdict is
DICTIONARY_UNAVAILABLE, so the player can simply retry.

`validate` never mutates its inputs; the controller owns game state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

from wordscramble import config
from wordscramble.errors import DictionaryUnavailable
from .letters import normalize, is_possible

log = logging.getLogger(__name__)


class Rejection(str, Enum):
    TOO_SHORT = "too_short"
    ALREADY_USED = "already_used"
    IS_ROOT_WORD = "is_root_word"
    NOT_CONSTRUCTIBLE = "not_constructible"
    NOT_A_REAL_WORD = "not_a_real_word"
    DICTIONARY_UNAVAILABLE = "dictionary_unavailable"


# (title, message) shown to the player; '{root}' is filled with the root word.
MESSAGES = {
    Rejection.TOO_SHORT: ("Short word", f"The word must have at least {config.MIN_WORD_LENGTH} letters"),
    Rejection.ALREADY_USED: ("Word used already", "Be more original"),
    Rejection.IS_ROOT_WORD: ("Word root", "You can't use the root word"),
    Rejection.NOT_CONSTRUCTIBLE: ("Word not possible", "You can't spell that word from '{root}'!"),
    Rejection.NOT_A_REAL_WORD: ("Word not recognized", "You can't just make them up, you know!"),
    Rejection.DICTIONARY_UNAVAILABLE: ("Dictionary unavailable", "Couldn't check that word right now. Try again."),
}


def rejection_message(reason: Rejection, root_word: str) -> Tuple[str, str]:
    title, message = MESSAGES[reason]
    return title, message.replace("{root}", root_word)


@dataclass(frozen=True)
class AcceptedWord:
    word: str
    length: int


@dataclass(frozen=True)
class Verdict:
    """Either `accepted` or `reason` is set, never both."""
    accepted: Optional[AcceptedWord] = None
    reason: Optional[Rejection] = None

    @property
    def ok(self) -> bool:
        return self.accepted is not None


def is_real(word: str, dictionary, language: str) -> bool:
    """Delegate recognition to the dictionary provider."""
    return dictionary.is_recognized_word(word, language)


def validate(
        candidate: str,
        root_word: str,
        used_words: Iterable[str],
        dictionary,
        language: str = config.DEFAULT_LANGUAGE,
) -> Verdict:
    """
    Decide whether `candidate` may be added to the game.

    Args:
      candidate  : raw player input (normalized here)
      root_word  : the current game's root word
      used_words : words already accepted this game
      dictionary : object with is_recognized_word(word, language) -> bool
      language   : language tag passed to the dictionary

    Returns:
      Verdict with either an AcceptedWord or a Rejection.
    """
    word = normalize(candidate)

    if len(word) < config.MIN_WORD_LENGTH:
        return Verdict(reason=Rejection.TOO_SHORT)
    if word in set(used_words):
        return Verdict(reason=Rejection.ALREADY_USED)
    if word == root_word:
        return Verdict(reason=Rejection.IS_ROOT_WORD)
    if not is_possible(word, root_word):
        return Verdict(reason=Rejection.NOT_CONSTRUCTIBLE)

    try:
        real = is_real(word, dictionary, language)
    except DictionaryUnavailable as e:
        log.warning("dictionary unavailable while checking %r: %s", word, e)
        return Verdict(reason=Rejection.DICTIONARY_UNAVAILABLE)
    if not real:
        return Verdict(reason=Rejection.NOT_A_REAL_WORD)

    return Verdict(accepted=AcceptedWord(word=word, length=len(word)))
