"""
Player entity - one participant in the round.
"""

from dataclasses import dataclass
from typing import Optional

from .geometry import Position


@dataclass(frozen=True)
class Player:
    """
    A player as reported by the server for a single turn.

    Attributes:
        name: display name, unique and stable across turns
        position: current head position
        player_id: numeric id assigned by the server, if any
        color: display color assigned by the server, if any
    """

    name: str
    position: Position
    player_id: Optional[int] = None
    color: Optional[str] = None
