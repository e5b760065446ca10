"""User registration routes."""

from typing import Any

from fastapi import APIRouter, Request, status

from artha.auth import (
    AuthResponse,
    SessionDep,
    UserPublic,
    UserRegister,
    issue_token,
    register_user,
)
from artha.core.logging import get_logger
from artha.core.rate_limit import REGISTER_RATE_LIMIT, limiter

router = APIRouter()
logger = get_logger(__name__)


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
@limiter.limit(REGISTER_RATE_LIMIT)
def register(
    request: Request,  # Required for rate limiter
    session: SessionDep,
    user_in: UserRegister,
) -> Any:
    """Create a new identity and return a token for it.

    New identities always get the standard role.
    """
    user = register_user(session=session, user_in=user_in)
    token = issue_token(user)

    return AuthResponse(
        message="User created successfully",
        token=token,
        user=UserPublic.model_validate(user),
    )
