# Standard library imports
import logging
import secrets
import threading
from datetime import timedelta
from typing import Dict, Optional

# Local application imports
from ...domain.models.session import Session
from ...domain.repositories.session_store import SessionStore
from ...utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)


class MemorySessionStore(SessionStore):
    """In-process session store; expired sessions are dropped on lookup and on every login"""

    def __init__(self, ttl_seconds: int) -> None:
        if ttl_seconds <= 0:
            raise ValueError("Session TTL must be positive")
        self.ttl = timedelta(seconds=ttl_seconds)
        self._sessions: Dict[str, Session] = {}
        self._lock = threading.Lock()

    def create(self, username: str) -> Session:
        now = utc_now()
        session = Session(
            session_id=secrets.token_urlsafe(32),
            username=username,
            created_at=now,
            expires_at=now + self.ttl,
        )
        with self._lock:
            self._prune_expired(now)
            self._sessions[session.session_id] = session
        logger.info(f"Session opened for {username}")
        return session

    def _prune_expired(self, now) -> None:
        # Caller holds the lock
        expired = [sid for sid, s in self._sessions.items() if s.is_expired(now)]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            logger.info(f"Pruned {len(expired)} expired session(s)")

    def get(self, session_id: str) -> Optional[Session]:
        if not session_id:
            return None
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None
            if session.is_expired(utc_now()):
                del self._sessions[session_id]
                logger.info(f"Session for {session.username} expired")
                return None
            return session

    def delete(self, session_id: str) -> None:
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if session is not None:
            logger.info(f"Session closed for {session.username}")

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
