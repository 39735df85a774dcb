from .get_current_session import GetCurrentSessionUseCase
from .login import IssuedSession, LoginUseCase
from .logout import LogoutUseCase

__all__ = ["GetCurrentSessionUseCase", "IssuedSession", "LoginUseCase", "LogoutUseCase"]
