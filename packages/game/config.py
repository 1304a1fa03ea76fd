"""
Game constants. One tick of the external clock is one second.
"""

# Guesses allowed per card before the word is revealed.
MAX_ATTEMPTS = 3

# Base points per letter; each wrong attempt removes this share of the base.
POINTS_PER_LETTER = 25
PENALTY_PERCENT = 20

# Ticks the resolved card stays up (feedback + celebration) before the next one.
RESOLVE_TICKS = 3

# Session settings offered to the player.
DISPLAY_SECONDS_CHOICES = (5, 10, 15)
SESSION_MINUTES_CHOICES = (3, 5, 7)
DEFAULT_DISPLAY_SECONDS = 5
DEFAULT_SESSION_MINUTES = 3

LEADERBOARD_SIZE = 5

# Homophone games.
MEMORY_PAIRS = 4
MATCH_PAIRS = 6
PAIR_POINTS = 10
# Ticks a flipped pair stays face up: a match shows its tips longer.
MEMORY_MATCH_HOLD_TICKS = 3
MEMORY_MISS_HOLD_TICKS = 2
# Ticks a match/no-match message stays up in the two-column game.
MATCH_MESSAGE_TICKS = 1
