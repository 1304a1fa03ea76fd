"""Exceptions raised by the game layer. The scorer itself never raises."""


class GameError(ValueError):
    """Base class for rejected game operations."""


class InvalidGuess(GameError):
    pass


class InvalidTransition(GameError):
    """Operation not allowed in the current phase."""


class InvalidSettings(GameError):
    pass
