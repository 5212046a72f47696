"""
Top scores across all sessions, kept in process memory.
"""

import logging
import threading
from dataclasses import dataclass, asdict
from typing import List, Dict, Any

from domain.constants import LEADERBOARD_SIZE

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 32


class InvalidScore(ValueError):
    """Raised when a submitted leaderboard entry is malformed."""


@dataclass
class ScoreEntry:
    name: str
    score: int


class Leaderboard:
    """
    Keeps the best `size` scores, highest first.

    Ties keep submission order: an earlier entry stays above a later one
    with the same score.
    """

    def __init__(self, size: int = LEADERBOARD_SIZE):
        self.size = size
        self._entries: List[ScoreEntry] = []
        self._lock = threading.Lock()

    @staticmethod
    def validate(name: Any, score: Any) -> ScoreEntry:
        if not isinstance(name, str) or not name.strip():
            raise InvalidScore("Name must be a non-empty string.")
        name = name.strip()[:MAX_NAME_LENGTH]
        # bool is a subclass of int
        if isinstance(score, bool) or not isinstance(score, int) or score < 0:
            raise InvalidScore("Score must be a non-negative integer.")
        return ScoreEntry(name=name, score=score)

    def submit(self, name: Any, score: Any) -> List[Dict[str, Any]]:
        """
        Add an entry, re-rank and truncate.

        Returns:
            The leaderboard after the submission.

        Raises:
            InvalidScore: if name or score is malformed.
        """
        entry = self.validate(name, score)
        with self._lock:
            self._entries.append(entry)
            # sort() is stable, so equal scores keep submission order
            self._entries.sort(key=lambda e: e.score, reverse=True)
            del self._entries[self.size:]
            snapshot = [asdict(e) for e in self._entries]

        logger.info(f"Score submitted: {entry.name}={entry.score}")
        return snapshot

    def entries(self) -> List[Dict[str, Any]]:
        with self._lock:
            return [asdict(e) for e in self._entries]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
