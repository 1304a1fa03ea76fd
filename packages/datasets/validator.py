"""
Deck validator for spelling sessions.

What this module does:
- Validate a word deck (JSON array of {word, tip, pattern} or one word per line).
- Count invalid entries (non-alphabetic, empty, wrong shape) and duplicate words.
- Compute the SHA-256 of the raw file so reports can pin the exact deck used.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_deck, pretty_summary
    rep = validate_deck("decks/spelling_words.json")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List
import hashlib

from .deck import parse_deck


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class DeckReport:
    """Deck diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID cards after parsing
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique words, compared case-insensitively
    invalid_entries: int # entries that could not become a card
    min_len: int         # shortest word (0 when empty)
    max_len: int         # longest word (0 when empty)
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


# -----------------------------
# Public API
# -----------------------------

def validate_deck(path: str) -> Dict:
    """
    Validate a word deck.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see DeckReport schema) with:
          - counts, SHA-256, invalid/duplicate diagnostics, word-length range
          - `passed` boolean (strict: non-empty, parseable, no invalids, no duplicates)
          - `issues` (list of strings) to surface any problems
    """
    p = Path(path)
    issues: List[str] = []

    if not p.exists():
        issues.append(f"deck file not found: {path}")
        return asdict(DeckReport(path, False, 0, "", 0, 0, 0, 0, False, issues))

    try:
        cards, invalid = parse_deck(p)
    except ValueError as e:  # includes json.JSONDecodeError
        issues.append(f"deck could not be parsed: {e}")
        return asdict(DeckReport(str(p), True, 0, _sha256_file(p), 0, 0, 0, 0, False, issues))

    words = [c.word.lower() for c in cards]
    unique = set(words)
    lengths = [len(w) for w in words]

    if not cards:
        issues.append("deck contains 0 valid words")
    if invalid:
        issues.append(f"deck has {invalid} invalid entr{'y' if invalid == 1 else 'ies'}")
    if len(unique) != len(words):
        # Surface a few examples to debug quickly (limit to 5 for brevity)
        seen, dupes = set(), []
        for w in words:
            if w in seen and w not in dupes:
                dupes.append(w)
            seen.add(w)
        issues.append(f"deck contains duplicate words (e.g., {dupes[:5]})")

    passed = bool(cards) and invalid == 0 and len(unique) == len(words)

    rep = DeckReport(
        path=str(p),
        exists=True,
        count=len(cards),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_entries=invalid,
        min_len=min(lengths) if lengths else 0,
        max_len=max(lengths) if lengths else 0,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        deck=words.json | words=120 (uniq=120, len=3..11, sha=abc123...) | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    name = Path(report["path"]).name
    return (
        f"deck={name} | words={report['count']} (uniq={report['unique_count']}, "
        f"len={report['min_len']}..{report['max_len']}, sha={sha}) "
        f"| invalid={report['invalid_entries']} | {status}"
    )
