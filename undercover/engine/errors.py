"""Errors raised by the game engine."""


class GameError(ValueError):
    """Base class for rule violations reported by the engine."""


class InvalidSetupError(GameError):
    """Player names or faction counts cannot form a game."""


class InvalidVoteError(GameError):
    """A vote from or for a player who cannot take part in it."""


class PhaseError(GameError):
    """An action that the current phase does not accept."""


class UnknownPlayerError(GameError):
    """A player id that does not belong to the game."""


class InvalidGuessError(GameError):
    """A Mr. White guess that is empty."""
