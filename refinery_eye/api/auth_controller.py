# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, Depends, Response

# Local application imports
from ..application.dto.auth_dto import AuthStatusResponse, LoginRequest, SuccessResponse
from ..application.use_cases.auth.login import LoginUseCase
from ..application.use_cases.auth.logout import LogoutUseCase
from ..core.config import Settings
from ..di.container import get_container
from ..domain.models.session import Session
from .dependencies import get_optional_session


router = APIRouter(tags=["authentication"])


@router.post("/login", response_model=SuccessResponse)
async def login(request: LoginRequest, response: Response) -> SuccessResponse:
    """
    Verify operator credentials and set the session cookie

    Args:
        request: Login request with username and password
        response: Outgoing response the cookie is attached to

    Returns:
        SuccessResponse; 401 for rejected credentials
    """
    container = get_container()
    settings = container.get(Settings)
    login_use_case = container.get(LoginUseCase)

    issued = await login_use_case.execute(request)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=issued.token,
        max_age=settings.session_ttl_seconds,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )
    return SuccessResponse()


@router.post("/logout", response_model=SuccessResponse)
async def logout(
    response: Response,
    session: Optional[Session] = Depends(get_optional_session),
) -> SuccessResponse:
    container = get_container()
    logout_use_case = container.get(LogoutUseCase)

    await logout_use_case.execute(session.session_id if session else None)
    response.delete_cookie(container.get(Settings).session_cookie_name)
    return SuccessResponse()


@router.get("/auth/status", response_model=AuthStatusResponse)
async def auth_status(session: Optional[Session] = Depends(get_optional_session)) -> AuthStatusResponse:
    if session is None:
        return AuthStatusResponse(authenticated=False)
    return AuthStatusResponse(authenticated=True, username=session.username)
