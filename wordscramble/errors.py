"""Exception hierarchy shared across the package."""


class WordScrambleError(Exception):
    """Base class for every error raised by wordscramble."""


class WordSourceError(WordScrambleError):
    """The root-word source is missing or unreadable. Fatal at game start."""


class DictionaryUnavailable(WordScrambleError):
    """A dictionary provider could not answer a lookup."""


class GameNotStarted(WordScrambleError):
    """A game was used before start() was called."""
