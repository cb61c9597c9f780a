import logging
from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from ideaspark.core import config
from ideaspark.core.errors import AppError, InvalidTokenError
from ideaspark.core.security import TokenClaims, TokenService
from ideaspark.db.session import SessionLocal
from ideaspark.services.auth_service import AuthService

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


def get_db():
    """Database session dependency."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_token_service() -> TokenService:
    return TokenService(
        secret_key=config.SECRET_KEY,
        algorithm=config.ALGORITHM,
        expires_hours=config.ACCESS_TOKEN_EXPIRE_HOURS,
    )


def get_auth_service(
    db: Session = Depends(get_db),
    token_service: TokenService = Depends(get_token_service),
) -> AuthService:
    return AuthService(db, token_service, bcrypt_rounds=config.BCRYPT_ROUNDS)


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Token from an ``Authorization`` header value.

    Returns None only when the header is absent or blank. A header that is
    present but not ``Bearer <token>`` raises InvalidTokenError.
    """
    if authorization is None or not authorization.strip():
        return None

    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != BEARER_SCHEME or not token:
        raise InvalidTokenError()
    return token


def get_current_claims(
    authorization: Optional[str] = Header(None),
    token_service: TokenService = Depends(get_token_service),
) -> TokenClaims:
    """Verified token claims; 401 without a token, 403 for a bad one."""
    return token_service.verify_token(extract_bearer_token(authorization))


def get_optional_claims(
    authorization: Optional[str] = Header(None),
    token_service: TokenService = Depends(get_token_service),
) -> Optional[TokenClaims]:
    """
    Verified claims or None.

    Used where anonymous access is allowed: a missing, malformed or invalid
    Authorization header all mean "anonymous".
    """
    try:
        token = extract_bearer_token(authorization)
        if not token:
            return None
        return token_service.verify_token(token)
    except AppError as e:
        logger.info(f"Ignoring invalid bearer token, caller treated as anonymous: {e.message}")
        return None
