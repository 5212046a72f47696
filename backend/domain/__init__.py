"""
Domain entities for the Snake game engine.

This module contains the core game entities that are independent of
infrastructure concerns (HTTP, sessions, leaderboard).
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, DIRECTION_ORDER
from .errors import InvalidDimensions, InvalidDirection, BoardFull
from .point import Point
from .game_state import GameState, parse_direction

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'DIRECTION_ORDER',
    'InvalidDimensions', 'InvalidDirection', 'BoardFull',
    'Point',
    'GameState',
    'parse_direction',
]
