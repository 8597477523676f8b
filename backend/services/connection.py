"""
Connection to the game server.

`Connection` is the interface the bot loop depends on. `HttpConnection`
implements it over the server's JSON/HTTP API:

    POST /players                   {"name": ...}         -> join the round
    GET  /players/<name>/state      (long-poll)           -> next snapshot
    POST /players/<name>/move       {"direction": 0..3}   -> submit a move

A 410 response, or a snapshot with "active": false, means the round is over.
Any transport fault after joining is terminal: the connection goes inactive
and ConnectionLost is raised to the caller.
"""

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

import config
from domain.exceptions import ConnectionLost
from domain.game_state import GameState
from domain.geometry import get_direction_value

logger = logging.getLogger(__name__)

ROUND_OVER_STATUS = 410


class Connection:
    """
    A session with the game server for a single bot.
    """

    def connect(self, name: str) -> None:
        """Join the round under name. Failure leaves the connection inactive."""
        raise NotImplementedError("Subclasses should implement this method.")

    def is_active(self) -> bool:
        raise NotImplementedError("Subclasses should implement this method.")

    def receive_game_state(self) -> GameState:
        """Block until the next snapshot arrives."""
        raise NotImplementedError("Subclasses should implement this method.")

    def send_move(self, direction: str) -> None:
        raise NotImplementedError("Subclasses should implement this method.")

    def close(self) -> None:
        """Release transport resources. Safe to call more than once."""


class HttpConnection(Connection):
    def __init__(
        self,
        base_url: Optional[str] = None,
        request_timeout: Optional[float] = None,
        poll_timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or config.get_server_url()).rstrip("/")
        if request_timeout is None:
            request_timeout = config.get_request_timeout()
        if poll_timeout is None:
            poll_timeout = config.get_poll_timeout()
        self.request_timeout = request_timeout
        self.poll_timeout = poll_timeout
        self.session = session or requests.Session()
        self.name: Optional[str] = None
        self.player_id: Optional[int] = None
        self._active = False

    def _player_url(self, suffix: str) -> str:
        return f"{self.base_url}/players/{quote(self.name, safe='')}/{suffix}"

    def _fail(self, message: str) -> ConnectionLost:
        self._active = False
        logger.error(f"{self.name}: {message}")
        return ConnectionLost(message)

    def connect(self, name: str) -> None:
        self.name = name
        try:
            response = self.session.post(
                f"{self.base_url}/players",
                json={"name": name},
                timeout=self.request_timeout,
            )
            response.raise_for_status()
            body = response.json() if response.content else {}
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error(f"{name}: Failed to join game at {self.base_url}: {e}")
            self._active = False
            return

        if not isinstance(body, dict):
            logger.error(f"{name}: Unexpected join reply from {self.base_url}: {body!r}")
            self._active = False
            return

        self.player_id = body.get("player_id")
        self._active = True
        logger.info(f"{name}: Connected to {self.base_url} (player id {self.player_id})")

    def is_active(self) -> bool:
        return self._active

    def receive_game_state(self) -> GameState:
        if not self._active:
            raise ConnectionLost("Connection is not active")

        try:
            response = self.session.get(
                self._player_url("state"),
                timeout=(self.request_timeout, self.poll_timeout),
            )
        except requests.exceptions.RequestException as e:
            raise self._fail(f"Failed to receive game state: {e}")

        if response.status_code == ROUND_OVER_STATUS:
            self._active = False
            logger.info(f"{self.name}: Round is over")
            raise ConnectionLost("Round is over")
        if not response.ok:
            raise self._fail(f"Unexpected status {response.status_code} while receiving game state")

        try:
            payload: Dict[str, Any] = response.json()
            state = GameState.from_dict(payload)
        except ValueError as e:
            raise self._fail(f"Invalid game state from server: {e}")

        if not payload.get("active", True):
            self._active = False
            logger.info(f"{self.name}: Server reported the round as finished")

        return state

    def send_move(self, direction: str) -> None:
        if not self._active:
            raise ConnectionLost("Connection is not active")

        try:
            response = self.session.post(
                self._player_url("move"),
                json={"direction": get_direction_value(direction)},
                timeout=self.request_timeout,
            )
        except requests.exceptions.RequestException as e:
            raise self._fail(f"Failed to send move: {e}")

        if response.status_code == ROUND_OVER_STATUS:
            self._active = False
            logger.info(f"{self.name}: Round ended before the move was accepted")
            return
        if not response.ok:
            raise self._fail(f"Unexpected status {response.status_code} while sending move")

    def close(self) -> None:
        self._active = False
        self.session.close()
