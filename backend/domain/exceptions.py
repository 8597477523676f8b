"""
Error taxonomy for the bot.

Fatal conditions are raised here and turned into a process exit status
only by the entry point.
"""


class BotError(Exception):
    """Base class for all bot errors."""


class ConnectionUnavailable(BotError):
    """The connection could not be made active at startup."""


class ConnectionLost(BotError):
    """The transport failed after the session was established."""


class NoValidMove(BotError):
    """No direction leads to an empty cell inside the grid."""

    def __init__(self, name: str, position):
        self.name = name
        self.position = position
        super().__init__(f"{name}: no valid moves available from {tuple(position)}")
