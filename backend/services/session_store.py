"""
In-memory registry of running games, one GameState per session id.

The registry lock only guards insert/lookup/evict. Each session has its own
lock, so a tick on one game never waits on another game.
"""

import logging
import threading
import time
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Generator, Optional

from domain.game_state import GameState

logger = logging.getLogger(__name__)


class SessionNotFound(KeyError):
    """Raised when a session id is unknown or has been evicted."""


@dataclass
class _Session:
    game: GameState
    lock: threading.Lock = field(default_factory=threading.Lock)
    last_access: float = field(default_factory=time.monotonic)


class SessionStore:
    """
    Maps opaque session ids to independently lockable games.

    Args:
        default_width: board width used when create() gets none
        default_height: board height used when create() gets none
        idle_timeout: seconds without access before a session is evicted;
            None disables eviction
    """

    def __init__(
        self,
        default_width: int,
        default_height: int,
        idle_timeout: Optional[float] = None
    ):
        self.default_width = default_width
        self.default_height = default_height
        self.idle_timeout = idle_timeout
        self._sessions: Dict[str, _Session] = {}
        self._lock = threading.Lock()

    def create(self, width: Optional[int] = None, height: Optional[int] = None) -> str:
        """
        Start a new game and return its session id.

        Raises:
            InvalidDimensions: if the requested board size is not positive.
        """
        if self.idle_timeout:
            self.evict_idle()

        game = GameState(
            width if width is not None else self.default_width,
            height if height is not None else self.default_height,
        )
        session_id = str(uuid.uuid4())
        with self._lock:
            self._sessions[session_id] = _Session(game)
        logger.info(f"Created session {session_id} ({game.width}x{game.height})")
        return session_id

    def _lookup(self, session_id: str) -> _Session:
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFound(session_id)
        return session

    @contextmanager
    def locked(self, session_id: str) -> Generator[GameState, None, None]:
        """
        Hold the session's lock while the caller reads or mutates its game.

        Example:
            with store.locked(session_id) as game:
                game.tick()
        """
        session = self._lookup(session_id)
        with session.lock:
            session.last_access = time.monotonic()
            yield session.game

    def delete(self, session_id: str) -> None:
        with self._lock:
            if self._sessions.pop(session_id, None) is None:
                raise SessionNotFound(session_id)
        logger.info(f"Deleted session {session_id}")

    def evict_idle(self, now: Optional[float] = None) -> int:
        """
        Drop sessions that have not been touched within idle_timeout seconds.

        Returns:
            Number of sessions evicted.
        """
        if not self.idle_timeout:
            return 0
        if now is None:
            now = time.monotonic()

        cutoff = now - self.idle_timeout
        with self._lock:
            stale = [sid for sid, s in self._sessions.items() if s.last_access < cutoff]
            for sid in stale:
                del self._sessions[sid]

        if stale:
            logger.info(f"Evicted {len(stale)} idle session(s)")
        return len(stale)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            return session_id in self._sessions
