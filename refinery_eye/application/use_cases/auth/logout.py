from typing import Optional

from ....domain.repositories.session_store import SessionStore


class LogoutUseCase:
    def __init__(self, session_store: SessionStore) -> None:
        self.session_store = session_store

    async def execute(self, session_id: Optional[str]) -> None:
        # Idempotent: logging out twice, or without a session, is not an error
        if session_id:
            self.session_store.delete(session_id)
