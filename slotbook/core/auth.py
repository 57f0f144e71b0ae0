"""Password hashing and bearer token handling."""

import logging
from datetime import timedelta

import bcrypt
import jwt

from slotbook.config import get_settings
from slotbook.core.clock import utcnow
from slotbook.core.errors import InvalidInputError
from slotbook.models.user import User

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes and bcrypt>=5 rejects longer input
MAX_PASSWORD_BYTES = 72


def check_password_length(password: str) -> None:
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise InvalidInputError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against its bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError as e:
        logger.error(f"Password verification failed: {e}")
        return False


class TokenAuth:
    """Issues and validates HS256 access tokens."""

    def __init__(self) -> None:
        self.settings = get_settings()

    def create_access_token(self, user: User) -> str:
        now = utcnow()
        claims = {
            "sub": str(user.id),
            "email": user.email,
            "iat": now,
            "exp": now + timedelta(minutes=self.settings.jwt_expire_minutes),
        }
        return jwt.encode(
            claims,
            self.settings.jwt_secret_key,
            algorithm=self.settings.jwt_algorithm,
        )

    def verify_token(self, token: str) -> dict:
        """Validate a token and return its claims.

        Raises:
            jwt.InvalidTokenError: If the token is invalid or expired
        """
        return jwt.decode(
            token,
            self.settings.jwt_secret_key,
            algorithms=[self.settings.jwt_algorithm],
        )


# Global instance
token_auth = TokenAuth()
