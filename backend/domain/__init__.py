"""
Domain entities for the light-cycles bot.

This module contains the core game entities that are independent of
infrastructure concerns (network transport, process setup, etc.).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, ALL_DIRECTIONS, VALID_MOVES, EMPTY_CELL, SCORE_TOLERANCE,
)
from .geometry import Position, get_direction_vector, get_direction_from_value, get_direction_value
from .player import Player
from .game_state import GameState
from .exceptions import BotError, ConnectionUnavailable, ConnectionLost, NoValidMove

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'ALL_DIRECTIONS', 'VALID_MOVES', 'EMPTY_CELL',
    'SCORE_TOLERANCE',
    'Position', 'get_direction_vector', 'get_direction_from_value', 'get_direction_value',
    'Player',
    'GameState',
    'BotError', 'ConnectionUnavailable', 'ConnectionLost', 'NoValidMove',
]
