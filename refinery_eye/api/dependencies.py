# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends, Request

# Local application imports
from ..application.use_cases.auth.get_current_session import GetCurrentSessionUseCase
from ..core.config import Settings
from ..core.exceptions import UnauthorizedError
from ..di.container import get_container
from ..domain.models.session import Session


async def get_optional_session(request: Request) -> Optional[Session]:
    """
    FastAPI dependency resolving the session cookie, if any

    Returns:
        Active Session, or None when the cookie is missing, invalid or expired
    """
    container = get_container()
    token = request.cookies.get(container.get(Settings).session_cookie_name)
    get_current_session_use_case = container.get(GetCurrentSessionUseCase)
    return await get_current_session_use_case.execute(token)


async def get_current_session(
    session: Optional[Session] = Depends(get_optional_session),
) -> Session:
    """
    FastAPI dependency guarding every state-mutating route

    Raises:
        UnauthorizedError: If there is no active session
    """
    if session is None:
        raise UnauthorizedError("No active session")
    return session
