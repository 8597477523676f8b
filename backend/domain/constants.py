"""
Game constants for the light-cycles bot.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"

# Wire order: the index of a direction is the code the server expects
ALL_DIRECTIONS = (UP, RIGHT, DOWN, LEFT)
VALID_MOVES = set(ALL_DIRECTIONS)

# Unit offsets, y grows downward (row index)
DIRECTION_VECTORS = {
    UP:    (0, -1),
    RIGHT: (1, 0),
    DOWN:  (0, 1),
    LEFT:  (-1, 0),
}

# Grid markers
EMPTY_CELL = 0

# Scores closer than this to the best one are treated as equal
SCORE_TOLERANCE = 1e-6
