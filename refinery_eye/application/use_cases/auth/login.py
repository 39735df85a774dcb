# Standard library imports
import logging
from dataclasses import dataclass

# Local application imports
from ....core.config import Settings
from ....core.exceptions import InvalidCredentialsError
from ....core.security import create_session_token
from ....domain.models.session import Session
from ....domain.repositories.identity_verifier import IdentityVerifier
from ....domain.repositories.session_store import SessionStore
from ...dto.auth_dto import LoginRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IssuedSession:
    session: Session
    token: str


class LoginUseCase:
    """Use case for verifying operator credentials and opening a session"""

    def __init__(
        self,
        identity_verifier: IdentityVerifier,
        session_store: SessionStore,
        settings: Settings,
    ) -> None:
        self.identity_verifier = identity_verifier
        self.session_store = session_store
        self.settings = settings

    async def execute(self, request: LoginRequest) -> IssuedSession:
        """
        Authenticate the operator and issue a signed session cookie value

        Args:
            request: Login request with username and password

        Returns:
            The new session and its signed token

        Raises:
            InvalidCredentialsError: If the credentials are rejected
        """
        if not self.identity_verifier.verify(request.username, request.password):
            logger.warning(f"Rejected login for {request.username!r}")
            raise InvalidCredentialsError("Invalid username or password")

        session = self.session_store.create(request.username)
        token = create_session_token(
            {"sid": session.session_id, "sub": session.username},
            secret_key=self.settings.session_secret,
            expires_in_seconds=self.settings.session_ttl_seconds,
            algorithm=self.settings.session_algorithm,
        )
        return IssuedSession(session=session, token=token)
