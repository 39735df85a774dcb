"""
Credential hashing and signed session cookies.

Passwords are bcrypt hashes (salted, cost 12). The session cookie is a
short JWT naming the server-side session (``sid``) and its operator
(``sub``); the signature alone never grants access, the session must also
still exist in the SessionStore.
"""

# Standard library imports
import time
from typing import Any, Dict

# External package imports
import bcrypt
import jwt
from jwt.exceptions import PyJWTError

BCRYPT_ROUNDS = 12


def hash_password(plain_password: str) -> str:
    """Salted bcrypt hash of ``plain_password`` as text"""
    digest = bcrypt.hashpw(plain_password.encode("utf-8"), bcrypt.gensalt(rounds=BCRYPT_ROUNDS))
    return digest.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    # bcrypt rejects empty or malformed stored hashes with ValueError
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


def create_session_token(
    claims: Dict[str, Any],
    secret_key: str,
    expires_in_seconds: int,
    algorithm: str = "HS256",
) -> str:
    """
    Sign the session cookie value

    Args:
        claims: Session claims, ``sid`` and ``sub``
        secret_key: SESSION_SECRET
        expires_in_seconds: Cookie lifetime, matching the session TTL
        algorithm: SESSION_ALGORITHM

    Returns:
        Encoded token with ``iat``/``exp`` added
    """
    now = int(time.time())
    return jwt.encode(
        {**claims, "iat": now, "exp": now + expires_in_seconds},
        secret_key,
        algorithm=algorithm,
    )


def decode_session_token(token: str, secret_key: str, algorithm: str = "HS256") -> Dict[str, Any]:
    """
    Verify a session cookie value and return its claims

    Raises:
        ValueError: If the signature, format or expiry check fails
    """
    try:
        return jwt.decode(token, secret_key, algorithms=[algorithm])
    except PyJWTError as e:
        raise ValueError(f"Invalid token: {e}") from e
