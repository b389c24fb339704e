"""
Word validation for one round of the scramble game.

This module answers the question: "May this word be accepted right now?"
A candidate is accepted iff, checked in this order:
  1) it hasn't been used yet this round          (ALREADY_USED)
  2) it isn't the root word itself               (IS_ROOT_WORD)
  3) it can be spelled from the root's letters   (NOT_CONSTRUCTIBLE)
  4) the dictionary knows it                     (NOT_A_WORD)

The first failing check decides the reason the player sees. The dictionary
lookup runs last, so a word failing any local check never reaches it.

Nothing here mutates round state: updating the used-word list and score is
the session's job (see packages.session).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .letters import is_constructible

DEFAULT_LANGUAGE = "en"


class RejectReason(Enum):
    ALREADY_USED = "already_used"
    IS_ROOT_WORD = "is_root_word"
    NOT_CONSTRUCTIBLE = "not_constructible"
    NOT_A_WORD = "not_a_word"


@dataclass(frozen=True)
class Verdict:
    """Outcome of validate_word; `reason` is None for an accepted word."""
    reason: Optional[RejectReason] = None

    @property
    def accepted(self) -> bool:
        return self.reason is None


ACCEPT = Verdict()


def normalize_entry(raw: str) -> str:
    """Lowercase and trim a raw player entry, e.g. '  Silk\\n' -> 'silk'."""
    return raw.lower().strip()


def is_original(word: str, used_words: Sequence[str]) -> bool:
    return word not in used_words


def is_not_root(word: str, root_word: str) -> bool:
    return word != root_word


def is_real(word: str, dictionary, language: str = DEFAULT_LANGUAGE) -> bool:
    return bool(dictionary.is_known_word(word, language))


def validate_word(
        candidate: str,
        root_word: str,
        used_words: Sequence[str],
        dictionary,
        language: str = DEFAULT_LANGUAGE,
) -> Verdict:
    """
    Run the four checks on an already-normalized candidate.

    Args:
      candidate  : lowercased, trimmed, non-empty entry
      root_word  : the round's root word
      used_words : words accepted so far this round
      dictionary : object with is_known_word(word, language) -> bool
      language   : language tag handed to the dictionary

    Returns:
      ACCEPT, or a Verdict carrying the first RejectReason hit.

    Raises:
      ValueError if `candidate` is empty (callers drop empty entries first).
    """
    if not candidate:
        raise ValueError("candidate must be non-empty; drop empty entries before validating")

    if not is_original(candidate, used_words):
        return Verdict(RejectReason.ALREADY_USED)

    if not is_not_root(candidate, root_word):
        return Verdict(RejectReason.IS_ROOT_WORD)

    if not is_constructible(candidate, root_word):
        return Verdict(RejectReason.NOT_CONSTRUCTIBLE)

    # Only now pay for the external lookup
    if not is_real(candidate, dictionary, language):
        return Verdict(RejectReason.NOT_A_WORD)

    return ACCEPT
