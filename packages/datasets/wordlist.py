"""
Root-word pool for new rounds.

The pool is a newline-delimited text file (one root word per line). A copy
ships with the package at packages/datasets/data/start.txt.

The game must always be able to start, so:
  - a missing/unreadable file falls back to FALLBACK_ROOT_WORDS (with a warning)
  - an empty pool falls back to DEFAULT_ROOT_WORD when picking
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List, Sequence

from .io import load_words

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_START_WORDS = DATA_DIR / "start.txt"

DEFAULT_ROOT_WORD = "silkworm"

FALLBACK_ROOT_WORDS = [
    "silkworm", "notebook", "elephant", "mountain", "sunshine",
    "treasure", "keyboard", "painting", "dinosaur", "blizzard",
]


def pick_root_word(words: Sequence[str], rng: random.Random | None = None) -> str:
    """Uniform choice from `words`; DEFAULT_ROOT_WORD if the pool is empty."""
    if not words:
        return DEFAULT_ROOT_WORD
    rng = rng or random.Random()
    return words[rng.randrange(len(words))]


class WordListSource:
    """
    Supplies the pool of candidate root words.

    Args:
      path: text file to read; None means the bundled start.txt.
    """

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path is not None else DEFAULT_START_WORDS

    def load(self) -> List[str]:
        try:
            words = load_words(self.path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("could not read root words from %s (%s); using %d fallback words",
                           self.path, e, len(FALLBACK_ROOT_WORDS))
            return list(FALLBACK_ROOT_WORDS)
        logger.debug("loaded %d root words from %s", len(words), self.path)
        return words

    def __repr__(self) -> str:
        return f"WordListSource(path={str(self.path)!r})"
