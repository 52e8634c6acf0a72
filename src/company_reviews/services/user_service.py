"""CRUD-style helpers for managing users."""
from __future__ import annotations

import logging

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from company_reviews.core import security
from company_reviews.models.user import ROLE_USER, User
from company_reviews.schemas.user import RegisterRequest
from company_reviews.services.errors import ConflictError, NotFoundError

__all__ = [
    "authenticate_user",
    "get_user",
    "get_user_by_email",
    "register_user",
]

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: int) -> User:
    """Return a single user by primary key or raise ``NotFoundError``."""
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email.strip().lower()).first()


def register_user(db: Session, payload: RegisterRequest, role: str = ROLE_USER) -> User:
    """Create an account with a bcrypt-hashed password.

    Raises:
        ConflictError: If the username or email is already registered.
    """
    taken = db.query(User).filter(
        or_(User.username == payload.username, User.email == payload.email)
    ).first()
    if taken is not None:
        field = "Email" if taken.email == payload.email else "Username"
        raise ConflictError(f"{field} is already registered")

    user = User(
        username=payload.username,
        email=payload.email,
        password_hash=security.hash_password(payload.password),
        first_name=payload.first_name,
        last_name=payload.last_name,
        role=role,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as err:
        db.rollback()
        raise ConflictError("Username or email is already registered") from err
    db.refresh(user)
    logger.info("Registered user %s (%s)", user.id, user.username)
    return user


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Return the user when the credentials match, otherwise None."""
    user = get_user_by_email(db, email)
    if user is None or not security.verify_password(password, user.password_hash):
        return None
    return user
