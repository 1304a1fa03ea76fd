from .validator import validate_deck, pretty_summary
from .deck import HomophonePair, WordCard, load_deck, load_pairs, parse_deck
from .io import read_lines, read_jsonl

__all__ = ["validate_deck", "pretty_summary", "HomophonePair", "WordCard", "load_deck",
           "load_pairs", "parse_deck", "read_lines", "read_jsonl"]
