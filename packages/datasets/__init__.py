from .validator import validate_root_words, pretty_summary
from .io import read_lines, write_lines, load_words
from .wordlist import (
    WordListSource, pick_root_word, DEFAULT_ROOT_WORD, FALLBACK_ROOT_WORDS, DEFAULT_START_WORDS,
)

__all__ = [
    "validate_root_words", "pretty_summary", "read_lines", "write_lines", "load_words",
    "WordListSource", "pick_root_word", "DEFAULT_ROOT_WORD", "FALLBACK_ROOT_WORDS",
    "DEFAULT_START_WORDS",
]
