"""
Letter-level predicates.

`is_possible` is the multiset-subset test at the heart of the game: a word
can be spelled from the root iff, for every letter, the word uses no more
copies than the root holds. Letter order is irrelevant.

Examples:
  is_possible("silk", "silkworm")  -> True
  is_possible("silkk", "silkworm") -> False   (only one 'k')
  is_possible("worms", "silkworm") -> True
"""

from collections import Counter


def normalize(word: str) -> str:
    """Canonical form of a candidate: trimmed, lowercase."""
    return word.strip().lower()


def is_possible(word: str, root_word: str) -> bool:
    """
    True if `word` can be spelled from the letters of `root_word`, each used
    at most as many times as it appears there.
    """
    remaining = Counter(root_word)
    for ch in word:
        if remaining[ch] <= 0:
            return False
        remaining[ch] -= 1  # consume one instance
    return True
