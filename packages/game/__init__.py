from .errors import GameError, InvalidGuess, InvalidSettings, InvalidTransition
from .homophones import MatchGame, MatchItem, MemoryCard, MemoryGame
from .leaderboard import Entry, Leaderboard
from .round import FAILED, SOLVED, Phase, Round, round_score
from .session import GameSettings, SpellingSession

__all__ = [
    "GameError", "InvalidGuess", "InvalidSettings", "InvalidTransition",
    "MatchGame", "MatchItem", "MemoryCard", "MemoryGame",
    "Entry", "Leaderboard", "FAILED", "SOLVED", "Phase", "Round", "round_score",
    "GameSettings", "SpellingSession",
]
