# Standard library imports
import hmac
import logging

# Local application imports
from ...core.security import hash_password, verify_password
from ...domain.repositories.identity_verifier import IdentityVerifier

logger = logging.getLogger(__name__)


class StaticIdentityVerifier(IdentityVerifier):
    """
    Single configured operator credential.

    The password is held as a bcrypt hash. A plain password is hashed once at
    construction; with neither configured every login is rejected.
    """

    def __init__(self, username: str, password_hash: str = "", password: str = "") -> None:
        self.username = username
        if not password_hash and password:
            password_hash = hash_password(password)
        self.password_hash = password_hash
        if not self.password_hash:
            logger.warning(
                "No AUTH_PASSWORD_HASH or AUTH_PASSWORD configured; all logins will be rejected"
            )

    def verify(self, username: str, password: str) -> bool:
        if not self.password_hash or not username or not password:
            return False
        username_ok = hmac.compare_digest(username.encode("utf-8"), self.username.encode("utf-8"))
        password_ok = verify_password(password, self.password_hash)
        return username_ok and password_ok
