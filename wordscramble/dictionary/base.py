from __future__ import annotations
from typing import Dict, Type

# ---- Global dictionary-provider registry ----
REGISTRY: Dict[str, Type["DictionaryProvider"]] = {}


def register(cls: Type["DictionaryProvider"]) -> Type["DictionaryProvider"]:
    """
    Decorator: @register on a provider class adds it to REGISTRY by its `id`.
    """
    pid = getattr(cls, "id", None)
    if not pid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if pid in REGISTRY:
        raise ValueError(f"Duplicate dictionary id: {pid}")
    REGISTRY[pid] = cls
    return cls


# ---- Base class that providers inherit ----
class DictionaryProvider:
    """
    Recognition oracle: answers "is this a real word in `language`?".

    Providers return a plain bool and raise DictionaryUnavailable when they
    cannot answer (missing data, unsupported language, network failure).
    """
    id = "base"
    name = "Base"

    def is_recognized_word(self, word: str, language: str) -> bool:
        raise NotImplementedError("Override in subclass")
