"""
Session replay primitives.

- play_session: feed a sequence of candidates into a started Game and record
  what happened to each one.

UI-agnostic so the interactive CLI, the batch replayer and tests share it.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from wordscramble.game import Game


def play_session(game: Game, candidates: Iterable[str]) -> List[Dict]:
    """
    Submit every candidate in order (starting the game first if needed).

    Returns:
        one dict per submission with keys:
            turn, candidate, accepted, word, points, reason, title, message, score
        where `score` is the running total after that submission.
    """
    if not game.started:
        game.start()

    records: List[Dict] = []
    for turn, candidate in enumerate(candidates, start=1):
        outcome = game.submit(candidate)
        records.append({
            "turn": turn,
            "candidate": candidate,
            "accepted": outcome.accepted,
            "word": outcome.word,
            "points": outcome.points,
            "reason": outcome.reason.value if outcome.reason else "",
            "title": outcome.title,
            "message": outcome.message,
            "score": game.state.score,
        })
    return records
