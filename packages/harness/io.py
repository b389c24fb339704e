"""
I/O utilities for replay runs.

Responsibilities:
- write_csv:      flatten a replayed round into a tidy CSV (one row per submission).
- write_manifest: dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict
import csv
import json
import subprocess
import datetime as dt

CSV_FIELDS = ["root_word", "entry", "word", "status", "reason", "points", "running_score"]


def write_csv(result: Dict, path: str) -> str:
    """
    Serialize a play_script(...) result to CSV.

    Schema (columns):
      root_word, entry, word, status, reason, points, running_score

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()
        for s in result["submissions"]:
            w.writerow({
                "root_word": result["root_word"],
                "entry": s["entry"],
                "word": s["word"],
                "status": s["status"],
                "reason": s["reason"] or "",
                "points": s["points"],
                "running_score": s["running_score"],
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write the replay manifest as indented JSON.

    Keys written by apps/cli/run.py:
      - run_id, git_commit, dictionary_id
      - config: CLI args (entries, root, dictionary, language, seed, outdir)
      - root_words: output of datasets.validate_root_words(...)
      - root_word, score, accepted, rejected: the replayed round
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Short hash of HEAD, or 'unknown' outside a git checkout or without git."""
    try:
        proc = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            capture_output=True, text=True, check=False,
        )
    except OSError:
        return "unknown"
    return proc.stdout.strip() if proc.returncode == 0 else "unknown"
