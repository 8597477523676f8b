"""
Distance-maximizing strategy.

Picks the step that keeps the bot farthest from its closest opponent.
Only the immediate next cell is considered; ties are broken at random so the
bot is not predictable when several moves are equally good.
"""

import logging
import math
import random
from typing import Dict, List

from domain.constants import ALL_DIRECTIONS, EMPTY_CELL, SCORE_TOLERANCE
from domain.exceptions import NoValidMove
from domain.game_state import GameState
from domain.geometry import Position, get_direction_vector, get_direction_value
from domain.player import Player
from .base import Strategy

logger = logging.getLogger(__name__)


def valid_moves(game_state: GameState, me: Player) -> List[str]:
    """Directions whose destination is inside the grid and empty, in wire order."""
    moves: List[str] = []
    for direction in ALL_DIRECTIONS:
        new_pos = Position(*me.position) + get_direction_vector(direction)
        if not game_state.is_inside_grid(new_pos):
            continue
        if game_state.get_grid_cell(new_pos) != EMPTY_CELL:
            continue
        moves.append(direction)
    return moves


def min_distance_to_opponents(game_state: GameState, me: Player, position: Position) -> float:
    """Distance from position to the nearest player other than me; inf if alone."""
    min_dist = math.inf
    for player in game_state.players:
        if player.name == me.name:
            continue
        dist = position.distance_to(player.position)
        if dist < min_dist:
            min_dist = dist
    return min_dist


def score_moves(game_state: GameState, me: Player) -> Dict[str, float]:
    """Map every valid direction to its minimum distance to the opponents."""
    scores = {}
    for direction in valid_moves(game_state, me):
        new_pos = Position(*me.position) + get_direction_vector(direction)
        scores[direction] = min_distance_to_opponents(game_state, me, new_pos)
        logger.debug(
            f"{me.name}: Direction {get_direction_value(direction)} "
            f"has min distance {scores[direction]:.2f}"
        )
    return scores


def best_moves(scores: Dict[str, float]) -> List[str]:
    """Directions whose score is within tolerance of the best one."""
    best_score = max(scores.values())
    if math.isinf(best_score):
        return [d for d, s in scores.items() if math.isinf(s)]
    return [d for d, s in scores.items() if abs(s - best_score) < SCORE_TOLERANCE]


def decide_move(game_state: GameState, me: Player, rng: random.Random) -> str:
    """
    Choose the next direction for me.

    Raises:
        NoValidMove: If no direction leads to an empty in-bounds cell
    """
    scores = score_moves(game_state, me)
    if not scores:
        logger.error(f"{me.name}: No valid moves available")
        raise NoValidMove(me.name, me.position)

    candidates = best_moves(scores)
    choice = rng.choice(candidates)
    logger.debug(
        f"{me.name}: Selected direction {get_direction_value(choice)} "
        f"with min distance {scores[choice]:.2f}"
    )
    return choice


class DistanceMaximizingStrategy(Strategy):
    """
    Greedy one-step strategy maximizing the minimum distance to all opponents.
    """

    def decide_move(self, game_state: GameState, me: Player, rng: random.Random) -> str:
        return decide_move(game_state, me, rng)
