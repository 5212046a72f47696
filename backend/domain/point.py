"""
Point value type for board coordinates.
"""

from typing import NamedTuple

from .constants import DIRECTION_DELTAS


class Point(NamedTuple):
    x: int
    y: int

    def moved(self, direction: str) -> "Point":
        """Return the neighbouring cell one step along `direction`."""
        dx, dy = DIRECTION_DELTAS[direction]
        return Point(self.x + dx, self.y + dy)

    def distance_to(self, other: "Point") -> float:
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2) ** 0.5

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}
