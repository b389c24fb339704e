"""
Round state as an immutable, serializable value.

A RoundState is never edited in place: accepting a word produces a new state
(see with_word). That keeps the validator and the session functions pure and
lets a front-end keep/compare/serialize snapshots freely.

Invariants:
  - root_word is non-empty and never appears in used_words
  - used_words is most-recent-first
  - score == sum(len(w) for w in used_words)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class RoundState:
    root_word: str
    used_words: Tuple[str, ...] = field(default_factory=tuple)
    score: int = 0

    def __post_init__(self):
        if not self.root_word:
            raise ValueError("root_word must be non-empty")
        # accept any sequence, store a tuple
        object.__setattr__(self, "used_words", tuple(self.used_words))
        if self.root_word in self.used_words:
            raise ValueError(f"root word {self.root_word!r} cannot be in used_words")
        expected = sum(len(w) for w in self.used_words)
        if self.score != expected:
            raise ValueError(f"score {self.score} does not match used_words (expected {expected})")

    def with_word(self, word: str) -> "RoundState":
        """New state with `word` at the head of used_words and its length scored."""
        return RoundState(
            root_word=self.root_word,
            used_words=(word,) + self.used_words,
            score=self.score + len(word),
        )

    def to_dict(self) -> Dict:
        return {
            "root_word": self.root_word,
            "used_words": list(self.used_words),
            "score": self.score,
        }

    @classmethod
    def from_dict(cls, payload: Dict) -> "RoundState":
        """
        Rebuild a state from to_dict() output.
        Raises ValueError if the payload breaks a round invariant (see __post_init__).
        """
        return cls(
            root_word=str(payload["root_word"]),
            used_words=tuple(payload.get("used_words", ())),
            score=int(payload.get("score", 0)),
        )
