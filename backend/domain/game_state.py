"""
GameState entity - a snapshot of the round at one turn.
"""

from typing import Any, Dict, List, Optional

from .constants import EMPTY_CELL
from .geometry import Position
from .player import Player


class GameState:
    """
    A snapshot of the grid and all players at a specific turn.

    The snapshot is replaced wholesale every turn and is never patched.

    Attributes:
        width, height: grid dimensions, fixed for the whole round
        grid: row-major occupancy, grid[y][x]; 0 = empty, anything else is a wall
        players: players still in the round, in server order
        frame_number: server turn counter
    """

    def __init__(
        self,
        width: int,
        height: int,
        grid: List[List[int]],
        players: List[Player],
        frame_number: int = 0
    ):
        self.width = width
        self.height = height
        self.grid = grid
        self.players = players
        self.frame_number = frame_number

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "GameState":
        """
        Build a snapshot from the server's JSON payload.

        Raises:
            ValueError: If required fields are missing or the grid does not
                match the declared dimensions
        """
        try:
            width = int(payload["width"])
            height = int(payload["height"])
            grid = [[int(cell) for cell in row] for row in payload["grid"]]
            players = [
                Player(
                    name=str(entry["name"]),
                    position=Position(int(entry["position"][0]), int(entry["position"][1])),
                    player_id=entry.get("id"),
                    color=entry.get("color"),
                )
                for entry in payload.get("players", [])
            ]
        except (KeyError, TypeError, IndexError) as e:
            raise ValueError(f"Malformed game state payload: {e}") from e

        if len(grid) != height or any(len(row) != width for row in grid):
            raise ValueError(
                f"Grid does not match declared size {width}x{height}"
            )

        return cls(
            width=width,
            height=height,
            grid=grid,
            players=players,
            frame_number=int(payload.get("frame", 0)),
        )

    def is_inside_grid(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def get_grid_cell(self, pos: Position) -> int:
        """
        Return the occupancy marker at pos.

        Callers must check is_inside_grid first; negative coordinates would
        otherwise wrap around.
        """
        x, y = pos
        if not self.is_inside_grid(pos):
            raise IndexError(f"Position {tuple(pos)} is outside the {self.width}x{self.height} grid")
        return self.grid[y][x]

    def is_empty(self, pos: Position) -> bool:
        return self.is_inside_grid(pos) and self.get_grid_cell(pos) == EMPTY_CELL

    def get_player(self, name: str) -> Optional[Player]:
        for player in self.players:
            if player.name == name:
                return player
        return None

    def print_board(self) -> str:
        """
        Returns a string representation of the grid with:
        . = empty cell
        # = wall
        first letter of the player's name = player head
        (0,0) is the top left, x-axis labels at the bottom
        """
        board = [
            ['.' if cell == EMPTY_CELL else '#' for cell in row]
            for row in self.grid
        ]

        for player in self.players:
            if self.is_inside_grid(player.position):
                x, y = player.position
                board[y][x] = (player.name[:1] or '?')

        result = [f"{y:2d} {' '.join(row)}" for y, row in enumerate(board)]
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState frame={self.frame_number}, size={self.width}x{self.height}, "
            f"players={len(self.players)}>"
        )
