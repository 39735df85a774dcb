# Standard library imports
from typing import Optional

# Local application imports
from ....core.config import Settings
from ....core.security import decode_session_token
from ....domain.models.session import Session
from ....domain.repositories.session_store import SessionStore


class GetCurrentSessionUseCase:
    """Use case for resolving a session cookie to an active session"""

    def __init__(self, session_store: SessionStore, settings: Settings) -> None:
        self.session_store = session_store
        self.settings = settings

    async def execute(self, token: Optional[str]) -> Optional[Session]:
        """
        Returns:
            The active session, or None when the token is missing, invalid,
            logged out or expired
        """
        if not token:
            return None
        try:
            payload = decode_session_token(
                token,
                self.settings.session_secret,
                self.settings.session_algorithm,
            )
        except ValueError:
            return None

        session = self.session_store.get(payload.get("sid", ""))
        if session is None or session.username != payload.get("sub"):
            return None
        return session
