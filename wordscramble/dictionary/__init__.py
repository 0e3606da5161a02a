from __future__ import annotations
from typing import List
from .base import DictionaryProvider, REGISTRY, register

from .lexicon import LexiconDictionary
from .frequency import WordfreqDictionary
from .remote import RemoteDictionary


def create_dictionary(dictionary_id: str, **options) -> DictionaryProvider:
    """
    Factory: instantiate a registered dictionary provider by id.
    """
    try:
        cls = REGISTRY[dictionary_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown dictionary id: {dictionary_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**options)


def get_dictionary_ids() -> List[str]:
    """
    Return all registered dictionary ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = ["DictionaryProvider", "REGISTRY", "register", "create_dictionary",
           "get_dictionary_ids", "LexiconDictionary", "WordfreqDictionary", "RemoteDictionary"]
