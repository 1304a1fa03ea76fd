"""
Offline replay of recorded spelling rounds.

- replay_round: push one recorded guess sequence through a Round.
- replay_batch: replay many transcript records in order.
- summarize:    aggregate solve rate, guesses and points over a batch.

A transcript record is a dict: {"target": "flower", "guesses": ["flour", "flower"]}
("word" is accepted as an alias of "target"). The card is flipped straight
to guessing; display timers play no part in a replay.

These functions are UI-agnostic so they can be reused by the CLI, a
notebook, or tests without changes.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Sequence, Union

import numpy as np

from packages.datasets.deck import WordCard
from packages.game import InvalidGuess, Phase, Round, SOLVED
from packages.game.config import MAX_ATTEMPTS

logger = logging.getLogger(__name__)


def replay_round(
        card: Union[WordCard, str],
        guesses: Sequence[str],
        *,
        max_attempts: int = MAX_ATTEMPTS,
) -> Dict:
    """
    Replay one round.

    Guesses the game would have rejected (empty, non-letters, too long) are
    counted in `skipped` and do not use up an attempt. Guesses recorded after
    the round resolved are ignored.

    Returns:
        dict with keys:
            answer (str), success (bool), outcome (str), guesses (int),
            score (int), skipped (int), history (list[(guess, pattern)])
    """
    r = Round(card, max_attempts=max_attempts)
    r.show()
    r.flip()

    skipped = 0
    for g in guesses:
        if r.phase is not Phase.GUESSING:
            break
        try:
            r.submit(g)
        except InvalidGuess as e:
            skipped += 1
            logger.warning("skipping guess for %r: %s", r.word, e)

    return {
        "answer": r.word,
        "success": r.outcome == SOLVED,
        "outcome": r.outcome or "unfinished",
        "guesses": len(r.history),
        "score": r.points,
        "skipped": skipped,
        "history": [(fb.guess, fb.pattern) for fb in r.history],
    }


def replay_batch(
        records: Iterable[Dict],
        *,
        max_attempts: int = MAX_ATTEMPTS,
        skip_invalid: bool = False,
) -> List[Dict]:
    """
    Replay every transcript record, in order.

    A record without a target word raises ValueError, or is logged and
    skipped when `skip_invalid` is set.
    """
    out: List[Dict] = []
    for idx, rec in enumerate(records, start=1):
        target = (rec.get("target") or rec.get("word")) if isinstance(rec, dict) else None
        if not isinstance(target, str) or not target.strip():
            if not skip_invalid:
                raise ValueError(f"record {idx}: missing target word")
            logger.warning("record %d has no target word; skipped", idx)
            continue
        out.append(replay_round(target.strip(), list(rec.get("guesses") or []),
                                max_attempts=max_attempts))
    return out


def summarize(results: List[Dict], max_attempts: int = MAX_ATTEMPTS) -> Dict:
    """
    Batch statistics.

    `solved_in` maps guess count -> number of rounds solved with that many
    guesses ("1".."max_attempts").
    """
    n = len(results)
    if n == 0:
        return {
            "rounds": 0, "solve_rate": 0.0, "mean_guesses_solved": 0.0,
            "mean_score": 0.0, "total_score": 0,
            "solved_in": {str(i): 0 for i in range(1, max_attempts + 1)},
        }

    solved = np.array([r["success"] for r in results], dtype=bool)
    guesses = np.array([r["guesses"] for r in results], dtype=int)
    scores = np.array([r["score"] for r in results], dtype=int)

    dist = np.bincount(guesses[solved], minlength=max_attempts + 1)

    return {
        "rounds": n,
        "solve_rate": float(solved.mean()),
        "mean_guesses_solved": float(guesses[solved].mean()) if solved.any() else 0.0,
        "mean_score": float(scores.mean()),
        "total_score": int(scores.sum()),
        "solved_in": {str(i): int(dist[i]) for i in range(1, max_attempts + 1)},
    }
