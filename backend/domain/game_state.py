"""
GameState entity - a single Snake game on a bounded grid.
"""

import logging
import random
from collections import deque
from typing import Deque, Dict, Any, List, Optional

from .constants import (
    RIGHT, VALID_MOVES, DIRECTION_ORDER, MAX_FOOD_ATTEMPTS
)
from .errors import InvalidDimensions, InvalidDirection, BoardFull
from .point import Point

logger = logging.getLogger(__name__)


def parse_direction(value: Any) -> str:
    """
    Normalize a direction tag coming from a client.

    Accepts the canonical tags ("Up", "Down", "Left", "Right") in any case.

    Raises:
        InvalidDirection: if the value is not a known direction.
    """
    if not isinstance(value, str):
        raise InvalidDirection(f"Direction must be a string, got {value!r}.")
    tag = value.strip().capitalize()
    if tag not in VALID_MOVES:
        raise InvalidDirection(f"Unknown direction {value!r}.")
    return tag


class GameState:
    """
    The full state of one Snake game.

    Attributes:
        snake: deque of Point from head at index 0 to tail at the end
        food: Point the snake is chasing, never on the snake while active
        direction: current heading ("Up", "Down", "Left" or "Right")
        score: number of food items eaten
        game_over: once True, tick() and choose_ai_direction() do nothing
        width, height: board dimensions; cells are [0, width) x [0, height)
        death_reason: None while active, then 'wall', 'self' or 'board_full'
        ticks: number of ticks that moved the snake
    """

    def __init__(self, width: int, height: int, rng: Optional[random.Random] = None):
        if width <= 0 or height <= 0:
            raise InvalidDimensions(width, height)

        self.width = width
        self.height = height
        self.snake: Deque[Point] = deque([Point(width // 2, height // 2)])
        self.food = Point(0, 0)
        self.direction = RIGHT
        self.score = 0
        self.game_over = False
        self.death_reason: Optional[str] = None
        self.ticks = 0
        self._rng = rng or random.Random()

        self.place_food()

    @property
    def head(self) -> Point:
        """Return the head position (first element)."""
        return self.snake[0]

    def in_bounds(self, point: Point) -> bool:
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def set_direction(self, direction: str) -> "GameState":
        """
        Replace the current heading.

        A reversal into the neck is accepted; the next tick treats it as a
        self-collision.
        """
        self.direction = parse_direction(direction)
        return self

    def tick(self) -> "GameState":
        """
        Advance the snake one cell along its direction.

        Order of checks: walls, then own body (tail included, since it has
        not moved yet), then food.
        """
        if self.game_over:
            return self

        new_head = self.head.moved(self.direction)

        if not self.in_bounds(new_head):
            self._end("wall")
            return self

        if new_head in self.snake:
            self._end("self")
            return self

        self.snake.appendleft(new_head)
        self.ticks += 1

        if new_head == self.food:
            self.score += 1
            try:
                self.place_food()
            except BoardFull:
                # Snake covers every cell; food stays under the head.
                self._end("board_full")
        else:
            self.snake.pop()

        return self

    def place_food(self) -> Point:
        """
        Put food on a uniformly random cell not covered by the snake.

        Draws at random up to MAX_FOOD_ATTEMPTS times, then picks among the
        remaining free cells so the call always terminates.

        Raises:
            BoardFull: if the snake occupies every cell.
        """
        if len(self.snake) >= self.width * self.height:
            raise BoardFull(f"No free cell on a {self.width}x{self.height} board.")

        for _ in range(MAX_FOOD_ATTEMPTS):
            candidate = Point(
                self._rng.randrange(self.width),
                self._rng.randrange(self.height),
            )
            if candidate not in self.snake:
                self.food = candidate
                return self.food

        occupied = set(self.snake)
        free_cells = [
            Point(x, y)
            for y in range(self.height)
            for x in range(self.width)
            if (x, y) not in occupied
        ]
        self.food = self._rng.choice(free_cells)
        return self.food

    def choose_ai_direction(self) -> str:
        """
        Greedy heuristic: step to the safe neighbour closest to the food.

        A neighbour is safe if it is on the board and not on the snake.
        Ties go to the earlier direction in Up, Down, Left, Right order. If
        no neighbour is safe the direction is left as is. Does not tick.
        """
        if self.game_over:
            return self.direction

        best_move = None
        min_distance = float("inf")

        for direction in DIRECTION_ORDER:
            candidate = self.head.moved(direction)
            if not self.in_bounds(candidate) or candidate in self.snake:
                continue
            distance = candidate.distance_to(self.food)
            if distance < min_distance:
                min_distance = distance
                best_move = direction

        if best_move is not None:
            self.direction = best_move
        return self.direction

    def _end(self, reason: str) -> None:
        self.game_over = True
        self.death_reason = reason
        logger.debug(f"Game over ({reason}) with score {self.score} after {self.ticks} ticks")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the record sent to clients (snake is head first)."""
        return {
            "snake": [point.to_dict() for point in self.snake],
            "food": self.food.to_dict(),
            "direction": self.direction,
            "score": self.score,
            "game_over": self.game_over,
            "width": self.width,
            "height": self.height,
        }

    def render(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        S = snake body
        Row 0 is printed first, matching the client's top-down layout.
        """
        board: List[List[str]] = [['.' for _ in range(self.width)] for _ in range(self.height)]

        board[self.food.y][self.food.x] = 'F'
        for index, (x, y) in enumerate(self.snake):
            board[y][x] = 'H' if index == 0 else 'S'

        return "\n".join(f"{y:2d} {' '.join(row)}" for y, row in enumerate(board))

    def __repr__(self):
        return (
            f"<GameState {self.width}x{self.height} head={tuple(self.head)}, "
            f"length={len(self.snake)}, score={self.score}, game_over={self.game_over}>"
        )
