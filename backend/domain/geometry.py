"""
Position type and direction helpers.
"""

from typing import NamedTuple

from .constants import ALL_DIRECTIONS, DIRECTION_VECTORS, VALID_MOVES


class Position(NamedTuple):
    """Integer grid coordinate. x is the column, y the row."""

    x: int
    y: int

    def __add__(self, other) -> "Position":
        return Position(self.x + other[0], self.y + other[1])

    def distance_to(self, other) -> float:
        """Euclidean distance to another position."""
        dx = self.x - other[0]
        dy = self.y - other[1]
        return (dx * dx + dy * dy) ** 0.5


def get_direction_vector(direction: str) -> Position:
    """Return the unit offset for a direction."""
    return Position(*DIRECTION_VECTORS[direction])


def get_direction_from_value(value: int) -> str:
    """
    Map a wire code (0-3) to its direction.

    Raises:
        ValueError: If the value is not one of the four known codes
    """
    if not isinstance(value, int) or not 0 <= value < len(ALL_DIRECTIONS):
        raise ValueError(f"Unknown direction code: {value!r}")
    return ALL_DIRECTIONS[value]


def get_direction_value(direction: str) -> int:
    """
    Map a direction to its wire code.

    Raises:
        ValueError: If the direction is not one of the four known moves
    """
    if direction not in VALID_MOVES:
        raise ValueError(f"Unknown direction: {direction!r}")
    return ALL_DIRECTIONS.index(direction)
