# utils/auth.py
import hmac
import logging
from typing import Optional

from passlib.context import CryptContext

from config import ADMIN_PASSWORD_HASH, ADMIN_USERNAME
from utils.errors import AdminAuthRequired

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


class CredentialVerifier:
    """Checks the shared admin credential against a configured password hash."""

    def __init__(self, username: str, password_hash: str):
        self.username = username
        self.password_hash = password_hash

    def verify(self, username: Optional[str], password: Optional[str]) -> bool:
        if not self.username or not self.password_hash:
            logger.warning("Admin credential not configured; set ADMIN_USERNAME and ADMIN_PASSWORD_HASH")
            return False
        if not username or not password:
            return False
        if not hmac.compare_digest(username.encode(), self.username.encode()):
            return False
        try:
            return pwd_context.verify(password, self.password_hash)
        except ValueError as e:
            logger.error(f"ADMIN_PASSWORD_HASH is not a recognised hash: {e}")
            return False


def get_verifier() -> CredentialVerifier:
    return CredentialVerifier(ADMIN_USERNAME, ADMIN_PASSWORD_HASH)


def require_admin(verifier, username: Optional[str], password: Optional[str]) -> None:
    if not verifier.verify(username, password):
        logger.warning(f"Admin check failed for user {username!r}")
        raise AdminAuthRequired()
