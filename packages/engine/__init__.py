from .letters import is_constructible, letter_counts
from .validation import (
    ACCEPT,
    DEFAULT_LANGUAGE,
    RejectReason,
    Verdict,
    is_not_root,
    is_original,
    is_real,
    normalize_entry,
    validate_word,
)

__all__ = [
    "ACCEPT", "DEFAULT_LANGUAGE", "RejectReason", "Verdict",
    "is_constructible", "letter_counts", "is_not_root", "is_original",
    "is_real", "normalize_entry", "validate_word",
]
