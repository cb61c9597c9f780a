"""
User persistence helpers (credential store).
"""
import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ideaspark.core.errors import ConflictError
from ideaspark.db.models.user import User

logger = logging.getLogger(__name__)


def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def create_user(db: Session, email: str, password_hash: str, full_name: Optional[str] = None) -> User:
    """
    Insert a new user row.

    Raises:
        ConflictError: The email is already registered (unique index violation)
    """
    user = User(email=email, password_hash=password_hash, full_name=full_name)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info(f"Signup rejected by unique index: email={email}")
        raise ConflictError()
    db.refresh(user)
    return user
