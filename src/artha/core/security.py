from datetime import UTC, datetime, timedelta
from functools import lru_cache
import secrets
from typing import Any

import jwt
from passlib.context import CryptContext

from artha.core.config import settings
from artha.core.exceptions import ExpiredTokenError, InvalidTokenError

# Work factor is fixed; raising it only affects newly hashed passwords
BCRYPT_ROUNDS = 12

pwd_context = CryptContext(
    schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS
)

REQUIRED_CLAIMS = ["exp", "iat", "sub"]


def create_access_token(
    subject: str,
    claims: dict[str, Any] | None = None,
    expires_delta: timedelta | None = None,
) -> tuple[str, datetime]:
    """Create a signed access token.

    Args:
        subject: Identity the token asserts (stored in ``sub``)
        claims: Extra claims to embed, e.g. email and role
        expires_delta: Validity window, defaults to ACCESS_TOKEN_EXPIRE_DAYS

    Returns:
        Tuple of (token, expires_at)
    """
    now = datetime.now(UTC)
    if expires_delta is not None:
        expire = now + expires_delta
    else:
        expire = now + timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)

    to_encode = {
        **(claims or {}),
        "exp": expire,
        "iat": now,
        "sub": str(subject),
    }
    token = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return token, expire


def decode_token(token: str) -> dict[str, Any]:
    """Verify signature and expiry together and return the claims.

    Raises:
        ExpiredTokenError: Signature is fine but the token is past ``exp``
        InvalidTokenError: Anything else (tampered, malformed, missing claims)
    """
    try:
        result: dict[str, Any] = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise ExpiredTokenError(str(e)) from e
    except jwt.InvalidTokenError as e:
        raise InvalidTokenError(str(e)) from e
    return result


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


@lru_cache
def dummy_password_hash() -> str:
    """Hash of a random secret, used to equalize timing for unknown emails."""
    return get_password_hash(secrets.token_urlsafe(16))
