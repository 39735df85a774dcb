from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True)
class Session:
    """Authenticated operator session"""
    session_id: str
    username: str
    created_at: datetime
    expires_at: datetime

    def is_expired(self, at: Optional[datetime] = None) -> bool:
        at = at or datetime.now(timezone.utc)
        return at >= self.expires_at

    @property
    def authenticated(self) -> bool:
        return not self.is_expired()
