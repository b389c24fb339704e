"""
wordfreq-backed dictionary.

A word counts as "real" when it is alphabetic and wordfreq has seen it often
enough in the requested language. Frequency is not spelling: abbreviations
and web slang score high too, so this backend suits lenient play; the
default game uses the lexicon backend.

Zipf scale reminder (wordfreq):
  - 0      : never seen
  - ~1     : once per 100M words
  - ~3     : once per 1M words
  - 7+     : 'the', 'of', ...
"""

from __future__ import annotations

import logging

from wordfreq import zipf_frequency

from packages.engine import DEFAULT_LANGUAGE
from .base import BaseDictionary, register

logger = logging.getLogger(__name__)

DEFAULT_MIN_ZIPF = 1.0


@register
class FrequencyDictionary(BaseDictionary):
    id = "wordfreq"
    name = "wordfreq (Zipf threshold)"
    version = "1.1.0"

    def __init__(self, min_zipf: float = DEFAULT_MIN_ZIPF, *, language: str = DEFAULT_LANGUAGE):
        self.min_zipf = float(min_zipf)
        self.language = language
        # fail at startup, not on the first constructible word
        try:
            zipf_frequency("a", language)
        except LookupError as e:
            raise ValueError(f"wordfreq has no word list for language '{language}'") from e

    def is_known_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        if not word.isalpha():
            return False
        try:
            z = zipf_frequency(word, language)
        except LookupError:
            logger.warning("wordfreq has no word list for language %r; %r treated as unknown",
                           language, word)
            return False
        logger.debug("zipf(%r, %s) = %.2f", word, language, z)
        return z >= self.min_zipf
