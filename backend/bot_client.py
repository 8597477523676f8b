"""
Bot loop: pull the game state, decide a move, push it back.

Lifecycle:
    CONNECTING -> PLAYING -> TERMINATED

The client never exits the process itself. Fatal conditions are raised
(ConnectionUnavailable, NoValidMove) and mapped to an exit status by run_bot.
"""

import logging
import random
from typing import Optional

from domain.exceptions import ConnectionLost, ConnectionUnavailable, NoValidMove
from domain.game_state import GameState
from domain.player import Player
from players.base import Strategy
from players.distance_player import DistanceMaximizingStrategy
from services.connection import Connection

logger = logging.getLogger(__name__)

CONNECTING = "connecting"
PLAYING = "playing"
TERMINATED = "terminated"


class BotClient:
    """
    One bot session. Owns the connection, the latest snapshot, the bot's own
    player projection and the random source.

    Attributes:
        name: the bot's display name
        connection: server session
        strategy: move selection
        rng: random source, seeded once for the lifetime of the client
        game_state: latest snapshot, replaced every turn
        my_player: last known projection of the bot's own player
        state: lifecycle state (CONNECTING, PLAYING, TERMINATED)
        turns_played: number of moves sent
    """

    def __init__(
        self,
        name: str,
        connection: Connection,
        strategy: Optional[Strategy] = None,
        rng: Optional[random.Random] = None,
    ):
        self.name = name
        self.connection = connection
        self.strategy = strategy or DistanceMaximizingStrategy()
        # Random() with no seed draws from OS entropy
        self.rng = rng or random.Random()
        self.game_state: Optional[GameState] = None
        self.my_player: Optional[Player] = None
        self.state = CONNECTING
        self.turns_played = 0

    def start(self) -> None:
        """
        Join the round.

        Raises:
            ConnectionUnavailable: If the connection is not active after connecting
        """
        self.connection.connect(self.name)
        if not self.connection.is_active():
            self.state = TERMINATED
            self.connection.close()
            logger.critical(f"{self.name}: Connection failed")
            raise ConnectionUnavailable(f"{self.name}: Connection failed")
        self.state = PLAYING
        logger.info(f"{self.name}: Joined the round")

    def receive_game_state(self) -> None:
        self.game_state = self.connection.receive_game_state()
        me = self.game_state.get_player(self.name)
        if me is None:
            logger.warning(
                f"{self.name}: Own player missing from frame {self.game_state.frame_number}, "
                "keeping last known position"
            )
            return
        self.my_player = me
        logger.debug(f"{self.name}: Frame {self.game_state.frame_number}\n{self.game_state.print_board()}")

    def send_move(self) -> None:
        if self.my_player is None:
            logger.warning(f"{self.name}: Own position not known yet, skipping turn")
            return
        logger.debug(f"{self.name}: Sending move")
        move = self.strategy.decide_move(self.game_state, self.my_player, self.rng)
        self.connection.send_move(move)
        # A round that ends during the send leaves the move unaccepted
        if self.connection.is_active():
            self.turns_played += 1

    def run(self) -> None:
        """
        Play until the connection goes inactive.

        Raises:
            NoValidMove: If the bot is boxed in
        """
        if self.state == CONNECTING:
            self.start()

        try:
            while self.connection.is_active():
                self.receive_game_state()
                if not self.connection.is_active():
                    break
                self.send_move()
        except ConnectionLost as e:
            logger.info(f"{self.name}: Connection closed: {e}")
        except NoValidMove:
            logger.critical(f"{self.name}: No valid moves available")
            raise
        finally:
            self.state = TERMINATED
            self.connection.close()

        logger.info(f"{self.name}: Finished after {self.turns_played} turns")
