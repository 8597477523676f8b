"""
Strategy implementations for the light-cycles bot.

This module contains the strategy abstraction and the implementations
that decide the bot's movement each turn.
"""

from .base import Strategy
from .distance_player import DistanceMaximizingStrategy, decide_move

__all__ = [
    'Strategy',
    'DistanceMaximizingStrategy',
    'decide_move',
]
