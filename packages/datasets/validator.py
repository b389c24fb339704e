"""
Root-word list validator.

What this module does:
- Validate a root-word file (start.txt): one word per line, lowercase a–z,
  optionally an exact length N.
- Detect blank, malformed and duplicate lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_root_words, pretty_summary
    rep = validate_root_words("packages/datasets/data/start.txt", N=8)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import hashlib


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class RootWordsReport:
    """Diagnostics and metadata for one root-word file."""
    path: str            # file path (as given)
    N: Optional[int]     # required word length (None = any length)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    unique_count: int    # unique valid words
    invalid_lines: int   # blank or malformed lines
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _is_valid_root(w: str, N: Optional[int]) -> bool:
    # already lowercase, ascii a–z only, length rule if any
    if not w or w != w.lower() or not (w.isascii() and w.isalpha()):
        return False
    return N is None or len(w) == N


def _load_and_check(path: Path, N: Optional[int]) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if _is_valid_root(w, N):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_root_words(path: str, N: Optional[int] = None) -> Dict:
    """
    Validate a root-word list.

    Parameters
    ----------
    path : str
        Root-word file (one word per line).
    N : int, optional
        Required word length; None accepts any non-empty length.

    Returns
    -------
    Dict
        JSON-serializable RootWordsReport. `passed` is strict: the file exists,
        has at least one valid word, no invalid lines and no duplicates.
    """
    p = Path(path)
    issues: List[str] = []

    if not p.exists():
        issues.append(f"root-word file not found: {path}")
        rep = RootWordsReport(str(path), N, False, 0, 0, 0, "", False, issues)
        return asdict(rep)

    words, invalid = _load_and_check(p, N)
    unique = set(words)

    if not words:
        issues.append("root-word file contains 0 valid words")
    if invalid:
        issues.append(f"root-word file has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append("root-word file contains duplicate lines")

    passed = bool(words) and invalid == 0 and len(words) == len(unique)

    rep = RootWordsReport(
        path=str(p),
        N=N,
        exists=True,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        root words N=8 | count=60 (uniq=60, invalid=0, sha=abc123...) | OK
    """
    n = report["N"] if report["N"] is not None else "any"
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"root words N={n} | count={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
