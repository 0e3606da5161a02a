from .state import GameState, Outcome
from .controller import Game, pick_root_word, start_game, submit, reset

__all__ = ["GameState", "Outcome", "Game", "pick_root_word", "start_game", "submit", "reset"]
