from .core import replay_round, replay_batch, summarize
from .io import write_csv, write_manifest

__all__ = ["replay_round", "replay_batch", "summarize", "write_csv", "write_manifest"]
