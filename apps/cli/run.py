# apps/cli/run.py
"""
CLI entry point for replaying a scripted round.

This script:
  1) Validates the root-word list (prints counts + SHA).
  2) Picks the root word (--root, or a seeded draw from the list) and builds the dictionary.
  3) Replays every line of --entries as a player submission with a live progress
     indicator and writes:
       - CSV:  one row per submission (status, reason, running score)
       - JSON: manifest with config, root-word list hash, git commit, totals
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path
from typing import Iterable, Iterator

from tqdm import tqdm

from packages.datasets import (
    DEFAULT_START_WORDS, WordListSource, pick_root_word, pretty_summary, read_lines,
    validate_root_words,
)
from packages.dictionary import (
    DEFAULT_DICTIONARY, DEFAULT_MIN_ZIPF, build_dictionary, get_dictionary_ids,
)
from packages.engine import DEFAULT_LANGUAGE, normalize_entry
from packages.harness import play_script
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


def _plain_progress(entries: Iterable[str], total: int) -> Iterator[str]:
    """Yield entries while writing a once-per-second progress line to stderr."""
    start = time.time()
    last_print = 0.0
    for idx, e in enumerate(entries, 1):
        yield e
        now = time.time()
        if (now - last_print >= 1.0) or (idx == total):
            pct = 100.0 * idx / max(1, total)
            sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {now - start:6.1f}s")
            sys.stderr.flush()
            last_print = now
    sys.stderr.write("\n"); sys.stderr.flush()


def main():
    """
    Parse CLI args, validate the root-word list, replay entries, and write outputs.
    """
    ap = argparse.ArgumentParser(description="wordscramble — replay a scripted round")
    ap.add_argument("--entries", required=True, help="text file, one submission per line")
    ap.add_argument("--root", help="root word (default: random pick from --start-words)")
    ap.add_argument("--start-words", default=str(DEFAULT_START_WORDS),
                    help="root-word list (one word per line)")
    ap.add_argument("--N", type=int, default=8, help="expected root-word length for validation")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY,
                    help=f"dictionary id (one of: {', '.join(get_dictionary_ids())})")
    ap.add_argument("--dict-path", help="word list for --dictionary wordlist")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE, help="dictionary language tag")
    ap.add_argument("--min-zipf", type=float, default=DEFAULT_MIN_ZIPF,
                    help="wordfreq threshold for a word to count as real")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for the root-word pick")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args()

    # 1) Validate the root-word list and print a one-liner summary
    rep = validate_root_words(args.start_words, N=args.N)
    print(pretty_summary(rep))

    # 2) Root word + dictionary
    if args.root:
        root = normalize_entry(args.root)
    else:
        root = pick_root_word(WordListSource(args.start_words).load(), random.Random(args.seed))
    dictionary = build_dictionary(args.dictionary, language=args.language,
                                  path=args.dict_path, min_zipf=args.min_zipf)
    print(f"Root word: {root}")

    # 3) Entries (blank lines are kept; the round ignores them)
    entries = read_lines(args.entries)
    total = len(entries)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"
    if mode == "bar":
        iterator = tqdm(entries, ncols=80, desc="Replaying", unit="word")
    elif mode == "plain":
        iterator = _plain_progress(entries, total)
    else:
        iterator = entries

    result = play_script(iterator, root_word=root, dictionary=dictionary, language=args.language)

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"round_{run_id}.csv"
    manifest_path = outdir / f"round_{run_id}_manifest.json"

    write_csv(result, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "root_words": rep,
        "root_word": result["root_word"],
        "score": result["score"],
        "accepted": result["accepted"],
        "rejected": result["rejected"],
        "dictionary_id": dictionary.id,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Score: {result['score']} ({result['accepted']} accepted, {result['rejected']} rejected)")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
