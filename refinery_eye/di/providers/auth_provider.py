from typing import TYPE_CHECKING

from ...core.config import Settings
from ...domain.repositories.identity_verifier import IdentityVerifier
from ...domain.repositories.session_store import SessionStore
from ...infrastructure.auth.memory_session_store import MemorySessionStore
from ...infrastructure.auth.static_identity_verifier import StaticIdentityVerifier
from ...application.use_cases.auth.get_current_session import GetCurrentSessionUseCase
from ...application.use_cases.auth.login import LoginUseCase
from ...application.use_cases.auth.logout import LogoutUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication provider - registers session handling and auth use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Session store and identity verifier are singletons.
        Use cases are created on-demand via factories.
        """
        settings = container.get(Settings)

        container.register_singleton(
            SessionStore,
            MemorySessionStore(ttl_seconds=settings.session_ttl_seconds),
        )
        container.register_singleton(
            IdentityVerifier,
            StaticIdentityVerifier(
                username=settings.auth_username,
                password_hash=settings.auth_password_hash,
                password=settings.auth_password,
            ),
        )

        container.register_factory(
            LoginUseCase,
            lambda: LoginUseCase(
                identity_verifier=container.get(IdentityVerifier),
                session_store=container.get(SessionStore),
                settings=container.get(Settings),
            )
        )

        container.register_factory(
            LogoutUseCase,
            lambda: LogoutUseCase(session_store=container.get(SessionStore))
        )

        container.register_factory(
            GetCurrentSessionUseCase,
            lambda: GetCurrentSessionUseCase(
                session_store=container.get(SessionStore),
                settings=container.get(Settings),
            )
        )
