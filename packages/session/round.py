"""
Round orchestration.

- start_round:       pick a root word and return a fresh RoundState.
- apply_submission:  normalize one raw entry, validate it, return the next state.
- RoundSession:      stateful convenience wrapper for front-ends
                     (holds the current state, the dictionary and the RNG).

All rule decisions live in packages.engine; this module only applies them.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Literal, Optional, Tuple

from packages.datasets import WordListSource, pick_root_word
from packages.engine import DEFAULT_LANGUAGE, RejectReason, normalize_entry, validate_word
from .state import RoundState

logger = logging.getLogger(__name__)

Status = Literal["accepted", "rejected", "ignored"]


@dataclass(frozen=True)
class Submission:
    """What happened to one raw entry."""
    entry: str                              # as typed
    word: str                               # normalized form ('' for ignored entries)
    status: Status
    reason: Optional[RejectReason] = None   # set only when rejected
    points: int = 0                         # score delta

    @property
    def accepted(self) -> bool:
        return self.status == "accepted"


def start_round(source: WordListSource, rng: random.Random | None = None) -> RoundState:
    """Fresh round: random root word from `source`, no used words, score 0."""
    root = pick_root_word(source.load(), rng)
    logger.info("new round, root word %r", root)
    return RoundState(root_word=root)


def apply_submission(
        state: RoundState,
        entry: str,
        dictionary,
        language: str = DEFAULT_LANGUAGE,
) -> Tuple[RoundState, Submission]:
    """
    Apply one raw player entry to `state`.

    Returns:
      (next_state, submission). next_state is `state` itself unless the word
      was accepted.
    """
    word = normalize_entry(entry)

    # Empty input is a no-op, not a rejection
    if not word:
        return state, Submission(entry=entry, word="", status="ignored")

    verdict = validate_word(word, state.root_word, state.used_words, dictionary, language)
    if not verdict.accepted:
        logger.debug("rejected %r: %s", word, verdict.reason.value)
        return state, Submission(entry=entry, word=word, status="rejected", reason=verdict.reason)

    nxt = state.with_word(word)
    logger.debug("accepted %r (+%d, score %d)", word, len(word), nxt.score)
    return nxt, Submission(entry=entry, word=word, status="accepted", points=len(word))


class RoundSession:
    """
    One player's game. Owns the current RoundState and replaces it on every
    accepted word or new round; not meant to be shared between callers.
    """

    def __init__(self, dictionary, *, source: WordListSource | None = None,
                 language: str = DEFAULT_LANGUAGE, seed: int | None = None):
        self.dictionary = dictionary
        self.source = source or WordListSource()
        self.language = language
        self.rng = random.Random(seed)
        self._state: RoundState | None = None
        self._history: List[Submission] = []

    @property
    def state(self) -> RoundState:
        if self._state is None:
            self.new_round()
        return self._state

    @property
    def history(self) -> List[Submission]:
        """Submissions of the current round, oldest first."""
        return list(self._history)

    def new_round(self, root_word: str | None = None) -> RoundState:
        """Start over; an explicit root_word bypasses the word list."""
        if root_word is not None:
            self._state = RoundState(root_word=normalize_entry(root_word))
        else:
            self._state = start_round(self.source, self.rng)
        self._history = []
        return self._state

    def submit(self, entry: str) -> Submission:
        self._state, sub = apply_submission(self.state, entry, self.dictionary, self.language)
        if sub.status != "ignored":
            self._history.append(sub)
        return sub
