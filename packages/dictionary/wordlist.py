"""
Word-list dictionary.

A word is known iff it is a member of a local list (one word per line when
loaded from a file). The list belongs to a single language; lookups for any
other language tag report the word as unknown.

Handy for tests and offline play: deterministic, no third-party data.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Set

from packages.datasets.io import load_words
from packages.engine import DEFAULT_LANGUAGE
from .base import BaseDictionary, register


@register
class WordListDictionary(BaseDictionary):
    id = "wordlist"
    name = "Local word list"
    version = "1.0.0"

    def __init__(self, words: Iterable[str] | None = None, *,
                 path: Path | str | None = None, language: str = DEFAULT_LANGUAGE):
        pool = list(words or [])
        if path is not None:
            # explicit path must exist; read_lines raises FileNotFoundError
            pool += load_words(path)
        self.language = language
        self._words: Set[str] = {w.strip().lower() for w in pool if w.strip()}

    def __len__(self) -> int:
        return len(self._words)

    def is_known_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        if language != self.language:
            return False
        return word in self._words
