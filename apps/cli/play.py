# apps/cli/play.py
"""
Interactive terminal game.

Type words made from the root word's letters. Commands:
  :new   start a new round (new root word)
  :quit  leave (Ctrl-D works too)

Empty input is ignored. Everything rule-related happens in packages.session.
"""

from __future__ import annotations

import argparse

from packages.datasets import DEFAULT_START_WORDS, WordListSource
from packages.dictionary import (
    DEFAULT_DICTIONARY, DEFAULT_MIN_ZIPF, build_dictionary, get_dictionary_ids,
)
from packages.engine import DEFAULT_LANGUAGE
from packages.session import RoundSession, alert_for


def _show_round(session: RoundSession) -> None:
    st = session.state
    print()
    print(f"=== {st.root_word.upper()} ===")
    if st.used_words:
        for w in st.used_words:
            print(f"  ({len(w)}) {w}")
    print(f"Your current score is: {st.score}")


def main():
    ap = argparse.ArgumentParser(description="wordscramble — make words from the root word")
    ap.add_argument("--start-words", default=str(DEFAULT_START_WORDS),
                    help="root-word list (one word per line)")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY,
                    help=f"dictionary id (one of: {', '.join(get_dictionary_ids())})")
    ap.add_argument("--dict-path", help="word list for --dictionary wordlist")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE, help="dictionary language tag")
    ap.add_argument("--min-zipf", type=float, default=DEFAULT_MIN_ZIPF,
                    help="wordfreq threshold for a word to count as real")
    ap.add_argument("--seed", type=int, help="RNG seed for root-word picks")
    args = ap.parse_args()

    dictionary = build_dictionary(args.dictionary, language=args.language,
                                  path=args.dict_path, min_zipf=args.min_zipf)

    session = RoundSession(dictionary, source=WordListSource(args.start_words),
                           language=args.language, seed=args.seed)
    session.new_round()
    _show_round(session)

    while True:
        try:
            entry = input("Enter your word: ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        cmd = entry.strip().lower()
        if cmd == ":quit":
            break
        if cmd == ":new":
            session.new_round()
            _show_round(session)
            continue

        sub = session.submit(entry)
        if sub.status == "ignored":
            continue
        if sub.status == "rejected":
            alert = alert_for(sub.reason)
            print(f"[{alert.title}] {alert.message}")
            continue
        _show_round(session)

    print(f"Final score: {session.state.score}")


if __name__ == "__main__":
    main()
