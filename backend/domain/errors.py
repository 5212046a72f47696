"""
Exceptions raised by the game engine.
"""


class InvalidDimensions(ValueError):
    """Raised when a board is created with a non-positive width or height."""

    def __init__(self, width, height):
        super().__init__(f"Board dimensions must be positive, got {width}x{height}.")
        self.width = width
        self.height = height


class InvalidDirection(ValueError):
    """Raised for a direction tag that is not one of Up, Down, Left, Right."""


class BoardFull(RuntimeError):
    """Raised when there is no free cell left to place food on."""
