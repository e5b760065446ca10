"""Per-client request limits (slowapi).

Limits are keyed by client address and switched off in the local
environment so tests and development are never throttled. Exceeding a limit
returns 429.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from artha.core.config import settings

_enabled = settings.ENVIRONMENT != "local"

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.DEFAULT_RATE_LIMIT] if _enabled else [],
    enabled=_enabled,
)

# Brute-force protection on credential checks
AUTH_RATE_LIMIT = "5/minute"
REGISTER_RATE_LIMIT = "10/hour"

# Every call fans out to the external provider
TRANSLATE_RATE_LIMIT = "60/minute"
