"""
Process-local services around the game engine: the session registry and
the leaderboard.
"""

from .session_store import SessionStore, SessionNotFound
from .leaderboard import Leaderboard, InvalidScore, ScoreEntry

__all__ = [
    'SessionStore',
    'SessionNotFound',
    'Leaderboard',
    'InvalidScore',
    'ScoreEntry',
]
