"""
Replay harness primitives.

- play_script: run a scripted list of raw entries through one fresh round.

Like the rest of packages/, this is UI-agnostic so the CLI runner, a notebook,
or tests can drive a round without a terminal.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List

from packages.engine import DEFAULT_LANGUAGE
from packages.session import RoundState, apply_submission


def play_script(
        entries: Iterable[str],
        *,
        root_word: str,
        dictionary,
        language: str = DEFAULT_LANGUAGE,
) -> Dict:
    """
    Play every entry in order against `root_word`.

    Args:
        entries:     raw player entries (blank ones are ignored, as in play)
        root_word:   the round's root word (already lowercase)
        dictionary:  DictionaryChecker used for the realness check
        language:    language tag passed to the dictionary

    Returns:
        dict with keys:
            root_word (str), score (int), used_words (list[str], newest first),
            submissions (list[dict]), accepted (int), rejected (int), time_ms (float)
    """
    state = RoundState(root_word=root_word)
    submissions: List[Dict] = []

    t0 = time.perf_counter_ns()
    for entry in entries:
        state, sub = apply_submission(state, entry, dictionary, language)
        if sub.status == "ignored":
            continue
        submissions.append({
            "entry": sub.entry,
            "word": sub.word,
            "status": sub.status,
            "reason": sub.reason.value if sub.reason else None,
            "points": sub.points,
            "running_score": state.score,
        })
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    accepted = sum(1 for s in submissions if s["status"] == "accepted")
    return {
        "root_word": state.root_word,
        "score": state.score,
        "used_words": list(state.used_words),
        "submissions": submissions,
        "accepted": accepted,
        "rejected": len(submissions) - accepted,
        "time_ms": dt,
    }
