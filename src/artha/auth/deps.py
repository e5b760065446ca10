from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session

from artha.auth.models import TokenPayload, UserRole
from artha.auth.tokens import verify_token
from artha.core.db import get_db
from artha.core.exceptions import (
    ExpiredTokenError,
    ForbiddenError,
    TokenError,
    UnauthorizedError,
)
from artha.core.logging import get_logger

logger = get_logger(__name__)

# auto_error=False so a missing header reaches get_current_identity as None
bearer_scheme = HTTPBearer(auto_error=False)

SessionDep = Annotated[Session, Depends(get_db)]
BearerDep = Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)]


def get_current_identity(request: Request, credentials: BearerDep) -> TokenPayload:
    """Resolve the bearer token into claims and attach them to the request.

    The stored user record is not fetched; handlers that need fresh state
    must query the credential store themselves.

    Raises:
        UnauthorizedError: If no bearer token was sent
        ForbiddenError: If the token is invalid or expired
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError()

    try:
        claims = verify_token(credentials.credentials)
    except TokenError as e:
        logger.info(
            "token_rejected",
            reason="expired" if isinstance(e, ExpiredTokenError) else "invalid",
            path=request.url.path,
        )
        raise ForbiddenError("Invalid or expired token") from e

    request.state.identity = claims
    return claims


CurrentIdentity = Annotated[TokenPayload, Depends(get_current_identity)]


def require_role(role: UserRole) -> Callable[[TokenPayload], TokenPayload]:
    """Build a dependency that admits only identities holding ``role``."""

    def check_role(identity: CurrentIdentity) -> TokenPayload:
        if identity.role != role:
            logger.info(
                "role_gate_denied",
                user_id=str(identity.user_id),
                required_role=role.value,
            )
            raise ForbiddenError(f"{role.value.capitalize()} access required")
        return identity

    return check_role


AdminIdentity = Annotated[TokenPayload, Depends(require_role(UserRole.ADMIN))]
