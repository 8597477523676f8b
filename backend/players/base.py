"""
Base strategy interface for the bot.
"""

import random

from domain.game_state import GameState
from domain.player import Player


class Strategy:
    """
    Base class/interface for move selection.

    A strategy is a pure function of the snapshot, the bot's own player and
    the random source; it must not mutate the snapshot.
    """

    def decide_move(self, game_state: GameState, me: Player, rng: random.Random) -> str:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current snapshot of the round
            me: The bot's own player projection
            rng: Random source used for tie-breaking

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT"

        Raises:
            NoValidMove: If every direction is blocked
        """
        raise NotImplementedError
