"""
Game state and submission outcomes.

GameState is a frozen value: the controller returns a new one for every
accepted word and hands back the very same object on rejection.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from wordscramble import config
from wordscramble.engine import Rejection, is_possible, rejection_message


@dataclass(frozen=True)
class GameState:
    root_word: str
    used_words: Tuple[str, ...] = field(default_factory=tuple)  # most recent first
    score: int = 0

    def with_word(self, word: str) -> "GameState":
        return GameState(
            root_word=self.root_word,
            used_words=(word,) + self.used_words,
            score=self.score + len(word),
        )

    def to_dict(self) -> Dict:
        return {"root_word": self.root_word, "used_words": list(self.used_words), "score": self.score}

    @classmethod
    def from_dict(cls, data: Dict, dictionary=None,
                  language: str = config.DEFAULT_LANGUAGE) -> "GameState":
        """
        Rebuild a state, refusing payloads that no sequence of accepted
        submissions could have produced. With a `dictionary`, every used word
        must also be recognized.
        """
        root = str(data["root_word"])
        used = tuple(str(w) for w in data.get("used_words", ()))
        score = int(data.get("score", 0))

        if len(root) < config.MIN_WORD_LENGTH or root != root.lower() or not root.isalpha():
            raise ValueError(f"invalid root word: {root!r}")
        if len(set(used)) != len(used):
            raise ValueError("used_words contains duplicates")
        if root in used:
            raise ValueError("used_words contains the root word")
        for w in used:
            if len(w) < config.MIN_WORD_LENGTH or w != w.lower():
                raise ValueError(f"invalid used word: {w!r}")
            if not is_possible(w, root):
                raise ValueError(f"{w!r} cannot be spelled from {root!r}")
            if dictionary is not None and not dictionary.is_recognized_word(w, language):
                raise ValueError(f"{w!r} is not a recognized word")
        if score != sum(len(w) for w in used):
            raise ValueError(f"score {score} does not match used_words")
        return cls(root_word=root, used_words=used, score=score)


@dataclass(frozen=True)
class Outcome:
    accepted: bool
    word: str
    points: int = 0
    reason: Optional[Rejection] = None
    title: str = ""
    message: str = ""

    @classmethod
    def accept(cls, word: str) -> "Outcome":
        return cls(accepted=True, word=word, points=len(word))

    @classmethod
    def reject(cls, word: str, reason: Rejection, root_word: str) -> "Outcome":
        title, message = rejection_message(reason, root_word)
        return cls(accepted=False, word=word, reason=reason, title=title, message=message)
