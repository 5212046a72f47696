"""
Game constants for the Snake server.
"""

# Movement directions (wire tags sent to and from the browser client)
UP = "Up"
DOWN = "Down"
LEFT = "Left"
RIGHT = "Right"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Evaluation order for the AI; earlier entries win distance ties
DIRECTION_ORDER = (UP, DOWN, LEFT, RIGHT)

# (dx, dy) per direction. y grows downward, so UP decrements y.
DIRECTION_DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Game settings
DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 20
LEADERBOARD_SIZE = 10

# Rejection-sampling draws before place_food falls back to scanning free cells
MAX_FOOD_ATTEMPTS = 1000
