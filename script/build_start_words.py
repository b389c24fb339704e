"""
Build a root-word list (start.txt) from wordfreq.

Features:
- Pulls the N most frequent words for a language from wordfreq.
- Keeps only pure alphabetic words of the requested length, lowercased.
- Stable dedupe (wordfreq order = most common first).
- Optional alphabetical sort; optional cap on the number of words written.

Usage:
    python -m script.build_start_words --out packages/datasets/data/start.txt \
        --length 8 --n-top 50000 --limit 500 --sort
"""

import argparse
from pathlib import Path

from wordfreq import top_n_list

from packages.datasets import validate_root_words, pretty_summary, write_lines


def unique_preserve_order(lines: list[str]) -> list[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def select_root_words(words: list[str], length: int) -> list[str]:
    keep = [w.strip().lower() for w in words]
    keep = [w for w in keep if len(w) == length and w.isascii() and w.isalpha()]
    return unique_preserve_order(keep)


def main():
    ap = argparse.ArgumentParser(description="Build a root-word list from wordfreq.")
    ap.add_argument("--out", required=True, help="output .txt file")
    ap.add_argument("--language", default="en", help="wordfreq language tag")
    ap.add_argument("--length", type=int, default=8, help="root-word length")
    ap.add_argument("--n-top", type=int, default=50000, help="how many frequent words to scan")
    ap.add_argument("--limit", type=int, help="write at most this many words")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically (otherwise frequency order)")
    args = ap.parse_args()

    words = select_root_words(top_n_list(args.language, args.n_top), args.length)
    if args.limit:
        words = words[: args.limit]
    if args.sort:
        words = sorted(words)

    outp = Path(args.out)
    write_lines(words, outp)
    print(f"Scanned top {args.n_top} '{args.language}' words -> {outp} ({len(words)} root words)")
    print(pretty_summary(validate_root_words(str(outp), N=args.length)))


if __name__ == "__main__":
    main()
