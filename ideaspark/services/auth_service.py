"""
Authentication service: sign-up, sign-in and profile lookup.

Passwords are stored as bcrypt hashes; successful sign-up and sign-in both
return a freshly issued bearer token.
"""
import logging
from typing import Optional, Tuple
from sqlalchemy.orm import Session

from ideaspark.core.errors import ConflictError, InvalidCredentialsError, NotFoundError
from ideaspark.core.security import TokenClaims, TokenService, hash_password, verify_password
from ideaspark.db.models.user import User
from ideaspark.services import user_service

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, db: Session, token_service: TokenService, bcrypt_rounds: int = 12):
        self.db = db
        self.token_service = token_service
        self.bcrypt_rounds = bcrypt_rounds

    def _issue_token(self, user: User) -> str:
        return self.token_service.create_access_token(user_id=user.id, email=user.email)

    def sign_up(self, email: str, password: str, full_name: Optional[str] = None) -> Tuple[User, str]:
        """
        Register a new email/password account.

        Raises:
            ConflictError: Email already registered
        """
        if user_service.get_user_by_email(self.db, email):
            logger.info(f"Signup rejected, email already registered: {email}")
            raise ConflictError()

        hashed = hash_password(password, rounds=self.bcrypt_rounds)
        user = user_service.create_user(self.db, email=email, password_hash=hashed, full_name=full_name)

        logger.info(f"User created: user_id={user.id}")
        return user, self._issue_token(user)

    def sign_in(self, email: str, password: str) -> Tuple[User, str]:
        """
        Check credentials and issue a token.

        Unknown email and wrong password raise the same error.
        """
        user = user_service.get_user_by_email(self.db, email)
        if not user or not verify_password(password, user.password_hash):
            logger.info("Sign-in failed: invalid credentials")
            raise InvalidCredentialsError()

        logger.info(f"User signed in: user_id={user.id}")
        return user, self._issue_token(user)

    def verify_token(self, token: Optional[str]) -> TokenClaims:
        return self.token_service.verify_token(token)

    def current_user(self, user_id: int) -> User:
        user = user_service.get_user_by_id(self.db, user_id)
        if not user:
            raise NotFoundError()
        return user
