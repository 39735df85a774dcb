from typing import Optional

from pydantic import Field

from .api_model import ApiModel


class LoginRequest(ApiModel):
    """DTO for operator login request"""
    username: str = Field(min_length=1, max_length=200)
    password: str = Field(min_length=1, max_length=256)


class SuccessResponse(ApiModel):
    success: bool = True


class AuthStatusResponse(ApiModel):
    authenticated: bool
    username: Optional[str] = None
