"""
Root-word list validator.

What this module does:
- Validate a start-words file (the pool root words are drawn from).
- Enforce formatting rules (lowercase, a–z only, at least MIN_WORD_LENGTH
  letters, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordscramble.datasets import validate_root_words, pretty_summary
    rep = validate_root_words("wordscramble/datasets/data/start.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordscramble import config


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words
    invalid_lines: int   # number of invalid lines encountered
    min_length: int      # shortest valid word (0 if none)
    max_length: int      # longest valid word (0 if none)


@dataclass
class ValidationReport:
    """Top-level validation result for a root-word list."""
    start_words: FileReport
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


def _load_and_check(path: Path, min_length: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - at least `min_length` letters
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                invalid += 1
                continue
            wl = w.lower()
            if wl == w and wl.isalpha() and len(wl) >= min_length:
                valid.append(wl)
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_root_words(path: str, min_length: int = config.MIN_WORD_LENGTH) -> Dict:
    """
    Validate a root-word list.

    Parameters
    ----------
    path : str
        Path to the start-words file (one word per line).
    min_length : int
        Shortest acceptable root word.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with
        counts, SHA-256, duplicate/invalid diagnostics, a strict `passed`
        flag (non-empty, no invalid lines) and `issues`.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"start-words file not found: {path}")
        rep = ValidationReport(
            start_words=FileReport(str(path), False, 0, "", 0, 0, 0, 0),
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    words, invalid = _load_and_check(p, min_length)
    lengths = [len(w) for w in words]

    report = FileReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(set(words)),
        invalid_lines=invalid,
        min_length=min(lengths) if lengths else 0,
        max_length=max(lengths) if lengths else 0,
    )

    if report.count == 0:
        issues.append("start-words file contains 0 valid words")
    if invalid:
        issues.append(f"start-words has {invalid} invalid line(s)")
    # Duplicates skew the uniform pick, so flag them even though play still works.
    if report.count != report.unique_count:
        issues.append("start-words contains duplicate lines")

    passed = report.count > 0 and invalid == 0

    return asdict(ValidationReport(start_words=report, passed=passed, issues=issues))


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        start_words=250 (uniq=250, len=8..8, sha=abc123...) | OK
    """
    s = report["start_words"]
    status = "OK" if report["passed"] else "FAIL"
    sha = (s.get("sha256") or "")[:12]
    return (
        f"start_words={s['count']} (uniq={s['unique_count']}, "
        f"len={s['min_length']}..{s['max_length']}, sha={sha}) | {status}"
    )
