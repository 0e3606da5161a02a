from .errors import WordScrambleError, WordSourceError, DictionaryUnavailable, GameNotStarted

__version__ = "0.1.0"

__all__ = ["WordScrambleError", "WordSourceError", "DictionaryUnavailable", "GameNotStarted"]
