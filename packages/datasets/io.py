from __future__ import annotations
import json
from pathlib import Path
from typing import Dict, List


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def read_jsonl(p: Path | str) -> List[Dict]:
    """
    Read one JSON object per non-blank line.
    Raises ValueError naming the offending line on malformed JSON.
    """
    out: List[Dict] = []
    for lineno, ln in enumerate(read_lines(p), start=1):
        if not ln.strip():
            continue
        try:
            out.append(json.loads(ln))
        except json.JSONDecodeError as e:
            raise ValueError(f"{p}:{lineno}: invalid JSON ({e.msg})") from e
    return out
