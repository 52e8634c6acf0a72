"""Shared API dependencies for authentication and common functionality."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from company_reviews.core.security import decode_access_token
from company_reviews.db.session import get_db
from company_reviews.models import User
from company_reviews.services.errors import (
    ConflictError,
    ForbiddenError,
    InvalidVoteError,
    NotFoundError,
    ReviewServiceError,
)

# HTTP Bearer schemes for JWT authentication
bearer_scheme = HTTPBearer()
optional_bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]

_ERROR_STATUS: dict[type[ReviewServiceError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    InvalidVoteError: status.HTTP_400_BAD_REQUEST,
}


def http_error(err: ReviewServiceError) -> HTTPException:
    """Translate a service-layer error into an ``HTTPException``."""
    status_code = _ERROR_STATUS.get(type(err), status.HTTP_400_BAD_REQUEST)
    return HTTPException(status_code=status_code, detail=err.message)


def _credentials_error(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _resolve_user(token: str, db: Session) -> User:
    subject = decode_access_token(token)
    if subject is None:
        raise _credentials_error()
    try:
        user_id = int(subject)
    except ValueError as err:
        raise _credentials_error() from err

    user = db.get(User, user_id)
    if user is None:
        raise _credentials_error("User not found")
    return user


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(bearer_scheme)],
    db: SessionDep,
) -> User:
    """Get the current authenticated user from JWT token.

    Args:
        credentials: HTTP Bearer token credentials
        db: Database session

    Returns:
        User object for the authenticated user

    Raises:
        HTTPException: If token is invalid or user not found
    """
    return _resolve_user(credentials.credentials, db)


def get_optional_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(optional_bearer_scheme)
    ],
    db: SessionDep,
) -> User | None:
    """Resolve the caller when a bearer token is supplied, otherwise None.

    A token that is present but invalid is still rejected with 401.
    """
    if credentials is None:
        return None
    return _resolve_user(credentials.credentials, db)


def require_admin(
    current_user: Annotated[User, Depends(get_current_user)],
) -> User:
    """Allow only users with the admin role."""
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin privileges required",
        )
    return current_user


# Type aliases for user dependencies
CurrentUserDep = Annotated[User, Depends(get_current_user)]
OptionalUserDep = Annotated[User | None, Depends(get_optional_user)]
AdminUserDep = Annotated[User, Depends(require_admin)]
