# apps/cli/replay.py
"""
CLI entry point for replaying recorded spelling rounds.

This script:
  1) Optionally validates the word deck (prints counts + SHA).
  2) Loads the transcripts (JSON lines: {"target": ..., "guesses": [...]}).
  3) Replays every round through the game rules with a live progress
     indicator and writes:
       - CSV:  per-round results + guess/pattern history columns
       - JSON: manifest with config, deck report, summary, git commit, etc.

Usage:
    python -m apps.cli.replay --transcripts sessions.jsonl --deck words.json
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import numpy as np
from tqdm import tqdm

from packages.datasets import pretty_summary, read_jsonl, validate_deck
from packages.game.config import MAX_ATTEMPTS
from packages.harness import replay_batch, summarize, write_csv, write_manifest
from packages.harness.io import git_commit_or_unknown, timestamp_id

logger = logging.getLogger("replay")


def main(argv=None):
    """
    Parse CLI args, validate the deck, replay with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="Replay recorded spelling rounds and score them")
    ap.add_argument("--transcripts", required=True,
                    help="JSON-lines file, one {target, guesses} object per round")
    ap.add_argument("--deck", help="word deck to validate and record in the manifest")
    ap.add_argument("--max-attempts", type=int, default=MAX_ATTEMPTS,
                    help="guesses allowed per word")
    ap.add_argument("--sample", type=int,
                    help="replay only a subset of rounds (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", action=argparse.BooleanOptionalAction, default=None,
                    help="show a progress bar (default: only when stderr is a terminal)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    # 1) Deck report (informational; a failing deck does not stop the replay)
    deck_report = None
    if args.deck:
        deck_report = validate_deck(args.deck)
        print(pretty_summary(deck_report))
        for issue in deck_report["issues"]:
            logger.warning("deck: %s", issue)

    # 2) Load transcripts
    records = read_jsonl(args.transcripts)
    if args.sample and args.sample < len(records):
        rng = np.random.default_rng(args.seed)
        picked = sorted(rng.choice(len(records), size=args.sample, replace=False))
        records = [records[i] for i in picked]
    logger.info("replaying %d round(s) from %s", len(records), args.transcripts)

    # 3) Replay
    show_bar = sys.stderr.isatty() if args.progress is None else args.progress
    results = replay_batch(
        tqdm(records, ncols=80, desc="Replaying", unit="round", disable=not show_bar),
        max_attempts=args.max_attempts,
        skip_invalid=True,
    )
    skipped_records = len(records) - len(results)
    if skipped_records:
        logger.warning("%d record(s) skipped", skipped_records)

    summary = summarize(results, max_attempts=args.max_attempts)

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_attempts=args.max_attempts)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "deck": deck_report,
        "num_rounds": len(results),
        "skipped_records": skipped_records,
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Solved {summary['solve_rate']:.1%} of {summary['rounds']} rounds, "
          f"{summary['total_score']} points")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
