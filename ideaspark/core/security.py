import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt

from ideaspark.core.errors import InvalidTokenError, UnauthenticatedError

logger = logging.getLogger(__name__)

BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    """
    Encode a password for bcrypt.

    Safety: truncates to 72 bytes (bcrypt hard limit) without splitting a
    multi-byte character. Validation should reject longer passwords before
    this is reached.
    """
    password_bytes = password.encode("utf-8")
    if len(password_bytes) <= BCRYPT_MAX_BYTES:
        return password_bytes

    logger.warning("Password exceeds 72 bytes, truncating before hashing (validation should have caught this)")
    truncated = password_bytes[:BCRYPT_MAX_BYTES]
    # Drop a trailing partial UTF-8 sequence
    return truncated.decode("utf-8", errors="ignore").encode("utf-8")


def hash_password(password: str, rounds: int = 12) -> str:
    """
    Hash a password with bcrypt.

    Args:
        password: Plain text password
        rounds: bcrypt cost factor

    Returns:
        Hashed password string ($2b$ format)

    Raises:
        ValueError: If the password cannot be hashed
    """
    try:
        return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")
    except ValueError as e:
        logger.error(f"Password hashing failed (ValueError): {e}")
        raise ValueError("Invalid password") from e


def verify_password(password: str, hashed: Optional[str]) -> bool:
    """
    Verify a password against its bcrypt hash.

    Accepts $2a$/$2b$/$2y$ hashes. A missing or malformed hash never matches.
    """
    if not hashed:
        return False
    try:
        return bcrypt.checkpw(_password_bytes(password), hashed.encode("utf-8"))
    except (ValueError, TypeError) as e:
        logger.error(f"Password verification failed: {e}")
        return False


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a verified bearer token."""
    user_id: int
    email: str


class TokenService:
    """Issues and verifies signed, expiring bearer tokens (JWT)."""

    def __init__(self, secret_key: str, algorithm: str = "HS256", expires_hours: int = 24):
        if not secret_key:
            raise ValueError("SECRET_KEY not configured")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = timedelta(hours=expires_hours)

    def create_access_token(self, user_id: int, email: str, expires_delta: Optional[timedelta] = None) -> str:
        now = datetime.now(timezone.utc)
        claims = {
            "userId": user_id,
            "email": email,
            "iat": now,
            "exp": now + (expires_delta if expires_delta is not None else self.expires_delta),
        }
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: Optional[str]) -> TokenClaims:
        """
        Verify a bearer token.

        Raises:
            UnauthenticatedError: No token supplied
            InvalidTokenError: Malformed, expired, badly signed or missing claims
        """
        if not token:
            raise UnauthenticatedError()

        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            raise InvalidTokenError("Token has expired")
        except JWTError:
            raise InvalidTokenError()

        user_id = payload.get("userId")
        email = payload.get("email")
        if not isinstance(user_id, int) or isinstance(user_id, bool) or not isinstance(email, str):
            raise InvalidTokenError()

        return TokenClaims(user_id=user_id, email=email)
