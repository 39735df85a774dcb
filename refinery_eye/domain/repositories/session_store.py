from abc import ABC, abstractmethod
from typing import Optional

from ..models.session import Session


class SessionStore(ABC):
    """Holds authenticated operator sessions until logout or TTL expiry"""

    @abstractmethod
    def create(self, username: str) -> Session:
        """Open a new session for an already verified user"""
        pass

    @abstractmethod
    def get(self, session_id: str) -> Optional[Session]:
        """Return the session if it exists and has not expired"""
        pass

    @abstractmethod
    def delete(self, session_id: str) -> None:
        """Invalidate a session; unknown ids are ignored"""
        pass
