from .config import Settings, get_settings
from .security import (
    hash_password,
    verify_password,
    create_session_token,
    decode_session_token,
)

__all__ = [
    "Settings",
    "get_settings",
    "hash_password",
    "verify_password",
    "create_session_token",
    "decode_session_token",
]
