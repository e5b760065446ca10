"""Login and token issuance routes."""

from typing import Any

from fastapi import APIRouter, Request

from artha.auth import (
    AuthResponse,
    SessionDep,
    UserLogin,
    UserPublic,
    issue_token,
    verify_credentials,
)
from artha.core.exceptions import InvalidCredentialsError
from artha.core.logging import get_logger
from artha.core.rate_limit import AUTH_RATE_LIMIT, limiter

router = APIRouter()
logger = get_logger(__name__)


@router.post("/login", response_model=AuthResponse)
@limiter.limit(AUTH_RATE_LIMIT)
def login(
    request: Request,  # Required for rate limiter
    session: SessionDep,
    credentials: UserLogin,
) -> Any:
    """Exchange email and password for a token valid for 7 days.

    Rate limited to slow down brute force attempts.
    """
    try:
        user = verify_credentials(
            session=session, email=credentials.email, password=credentials.password
        )
    except InvalidCredentialsError:
        logger.info("user_login_failed")
        raise

    logger.info("user_login", user_id=str(user.id))
    return AuthResponse(
        message="Login successful",
        token=issue_token(user),
        user=UserPublic.model_validate(user),
    )
