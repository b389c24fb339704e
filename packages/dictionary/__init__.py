from __future__ import annotations
from typing import List
from .base import BaseDictionary, REGISTRY, register

from . import wordlist  # noqa: F401
from . import frequency  # noqa: F401
from . import lexicon  # noqa: F401

from .wordlist import WordListDictionary
from .frequency import FrequencyDictionary, DEFAULT_MIN_ZIPF
from .lexicon import LexiconDictionary

DEFAULT_DICTIONARY = "lexicon"


def create_dictionary(dictionary_id: str, **kwargs) -> BaseDictionary:
    """
    Factory: instantiate a registered dictionary backend by id.
    Keyword arguments are passed to the backend's constructor.
    """
    try:
        cls = REGISTRY[dictionary_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown dictionary id: {dictionary_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def build_dictionary(dictionary_id: str, *, language: str, path: str | None = None,
                     min_zipf: float = DEFAULT_MIN_ZIPF) -> BaseDictionary:
    """
    Build a backend from CLI-style settings, passing each one only the options it takes.
    """
    if dictionary_id == "wordlist":
        if not path:
            raise ValueError("a word-list path is required for the 'wordlist' dictionary")
        return create_dictionary("wordlist", path=path, language=language)
    if dictionary_id == "wordfreq":
        return create_dictionary("wordfreq", min_zipf=min_zipf, language=language)
    return create_dictionary(dictionary_id, language=language)


def get_dictionary_ids() -> List[str]:
    """
    Return all registered dictionary ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "BaseDictionary", "REGISTRY", "register", "create_dictionary", "build_dictionary",
    "get_dictionary_ids", "DEFAULT_DICTIONARY",
    "WordListDictionary", "FrequencyDictionary", "LexiconDictionary", "DEFAULT_MIN_ZIPF",
]
