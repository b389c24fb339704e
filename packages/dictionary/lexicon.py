"""
Lexicon dictionary (nltk 'words' corpus).

A word is real iff the lexicon lists it, the way a spell checker would:
frequency is irrelevant, so web abbreviations like 'lmk' or 'rms' stay out.

Rules on top of plain membership:
  - only lowercase corpus entries count (capitalized ones are proper nouns)
  - single letters other than 'a' and 'i' are not words
  - regular plurals: 'worms' is known when 'worm' is, for stems of 3+ letters
    ('-s' and '-es'); the corpus lists base forms only

The corpus is English-only. It is downloaded on first use if missing.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import FrozenSet, Iterable

import nltk
from nltk.corpus import words as words_corpus

from packages.engine import DEFAULT_LANGUAGE
from .base import BaseDictionary, register

logger = logging.getLogger(__name__)

SUPPORTED_LANGUAGES = ("en",)
SINGLE_LETTER_WORDS = frozenset({"a", "i"})
MIN_PLURAL_STEM = 3


@lru_cache(maxsize=1)
def load_english_lexicon() -> FrozenSet[str]:
    """
    Lowercase entries of nltk's English word list.
    Raises LookupError if the corpus is missing and cannot be downloaded.
    """
    try:
        entries = words_corpus.words("en")
    except LookupError:
        logger.info("nltk 'words' corpus not found; downloading")
        nltk.download("words", quiet=True)
        entries = words_corpus.words("en")
    lexicon = frozenset(w for w in entries if w.isalpha() and w.islower())
    logger.debug("loaded %d lexicon entries", len(lexicon))
    return lexicon


@register
class LexiconDictionary(BaseDictionary):
    id = "lexicon"
    name = "nltk words corpus"
    version = "1.0.0"

    def __init__(self, words: Iterable[str] | None = None, *, language: str = DEFAULT_LANGUAGE):
        if words is None:
            if language not in SUPPORTED_LANGUAGES:
                raise ValueError(
                    f"nltk lexicon has no '{language}' word list. Supported: {list(SUPPORTED_LANGUAGES)}")
            self._lexicon = load_english_lexicon()
        else:
            self._lexicon = frozenset(w.strip().lower() for w in words if w.strip())
        self.language = language

    def _listed(self, word: str) -> bool:
        if len(word) == 1:
            return word in SINGLE_LETTER_WORDS
        return word in self._lexicon

    def is_known_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        if language != self.language or not word.isalpha():
            return False
        if self._listed(word):
            return True
        # regular plurals
        for suffix in ("s", "es"):
            stem = word[: -len(suffix)]
            if word.endswith(suffix) and len(stem) >= MIN_PLURAL_STEM and stem in self._lexicon:
                return True
        return False
