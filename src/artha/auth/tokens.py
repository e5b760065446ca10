"""Issuing and verifying identity tokens."""

from pydantic import ValidationError

from artha.auth.models import TokenPayload, User
from artha.core.exceptions import InvalidTokenError
from artha.core.security import create_access_token, decode_token


def issue_token(user: User) -> str:
    """Sign a token asserting the user's id, email and role."""
    token, _expires_at = create_access_token(
        str(user.id),
        claims={"email": user.email, "role": user.role.value},
    )
    return token


def verify_token(token: str) -> TokenPayload:
    """Check signature and expiry and return the claims.

    Raises:
        ExpiredTokenError: Token is past its validity window
        InvalidTokenError: Token is forged, malformed or lacks identity claims
    """
    payload = decode_token(token)
    try:
        return TokenPayload.model_validate(payload)
    except ValidationError as e:
        raise InvalidTokenError("Token claims are malformed") from e
