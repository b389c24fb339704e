"""
Letter-multiset helpers for a single (candidate, root word) pair.

Conventions:
  - Both words are already normalized (lowercase, trimmed).
  - A candidate is "constructible" from a root word when its letters form a
    sub-multiset of the root word's letters: each letter may be used at most
    as many times as it appears in the root word.

Algorithm (single pass, fail-fast):
  1) Count the root word's letters once.
  2) Walk the candidate left to right, consuming one instance per letter.
     The first letter with no remaining instance fails the check.
"""

from collections import Counter


def letter_counts(word: str) -> Counter:
    """
    Return the letter multiset of `word`.

    Examples:
      letter_counts("silkworm")["k"] -> 1
      letter_counts("letter")["t"]   -> 2
    """
    return Counter(word)


def is_constructible(candidate: str, root_word: str) -> bool:
    """
    True if `candidate` can be spelled with the letters of `root_word`.

    Examples:
      is_constructible("silk", "silkworm")   -> True
      is_constructible("worms", "silkworm")  -> True
      is_constructible("silkkk", "silkworm") -> False  (only one 'k')
      is_constructible("zzzz", "silkworm")   -> False
    """
    remaining = letter_counts(root_word)
    for ch in candidate:
        if remaining[ch] <= 0:
            return False
        remaining[ch] -= 1  # consume one instance
    return True
