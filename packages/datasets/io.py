from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_lines(p: Path | str) -> List[str]:
    """
    Lines of a UTF-8 word file with line endings removed (blank lines kept).
    FileNotFoundError for a missing file, so callers can choose a fallback.
    """
    with Path(p).open("r", encoding="utf-8", newline=None) as f:
        return [ln.rstrip("\n") for ln in f]


def load_words(p: Path | str) -> List[str]:
    """
    Read a newline-separated word list: lowercase, trimmed, blanks dropped,
    file order kept (duplicates too; callers dedupe if they care).
    """
    return [w.strip().lower() for w in read_lines(p) if w.strip()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Save one word per line (parent directories created), newline-terminated.
    Returns the path as a string for CLI messages.
    """
    out = Path(p)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8", newline="\n") as f:
        for line in lines:
            f.write(f"{line}\n")
    return str(out)
