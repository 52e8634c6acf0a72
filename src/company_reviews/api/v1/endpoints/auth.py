# src/company_reviews/api/v1/endpoints/auth.py
"""Authentication endpoints for the company review API."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from company_reviews.api.v1.dependencies import CurrentUserDep, SessionDep, http_error
from company_reviews.core.security import create_access_token
from company_reviews.models import User
from company_reviews.schemas.user import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from company_reviews.services import user_service
from company_reviews.services.errors import ReviewServiceError

router = APIRouter(prefix="/auth", tags=["authentication"])


def _token_response(user: User) -> TokenResponse:
    return TokenResponse(
        access_token=create_access_token(user.id, {"role": user.role}),
        token_type="bearer",
        user=UserResponse.model_validate(user),
    )


@router.post(
    "/register",
    summary="Register a new account",
    status_code=status.HTTP_201_CREATED,
    response_model=TokenResponse,
)
async def register(payload: RegisterRequest, db: SessionDep) -> TokenResponse:
    """Create an account and return an access token for it."""
    try:
        user = user_service.register_user(db, payload)
    except ReviewServiceError as err:
        raise http_error(err) from err
    return _token_response(user)


@router.post("/login", summary="Exchange credentials for a token", response_model=TokenResponse)
async def login(payload: LoginRequest, db: SessionDep) -> TokenResponse:
    """Authenticate with email and password."""
    user = user_service.authenticate_user(db, payload.email, payload.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )
    return _token_response(user)


@router.get("/me", response_model=UserResponse)
async def read_current_user(current_user: CurrentUserDep) -> User:
    """Return the authenticated user's account."""
    return current_user
