"""HTTP client utilities with built-in timeout handling.

Provides pre-configured HTTP clients for external service calls, ensuring
every outbound request has an explicit deadline and that transport failures
and deadline expiry surface as a single error type.
"""

import asyncio
import builtins
from typing import Any

import httpx

from artha.core.exceptions import ProviderUnavailableError
from artha.core.logging import get_logger

logger = get_logger(__name__)


DEFAULT_TIMEOUT = httpx.Timeout(
    connect=5.0,  # Connection timeout
    read=30.0,  # Read timeout
    write=10.0,  # Write timeout
    pool=5.0,  # Pool timeout
)


def create_http_client(
    timeout: httpx.Timeout | None = None,
    **kwargs: Any,
) -> httpx.AsyncClient:
    """Create an async HTTP client with sensible defaults.

    Args:
        timeout: Custom timeout configuration. Defaults to DEFAULT_TIMEOUT.
        **kwargs: Additional arguments passed to AsyncClient (e.g. transport).

    Returns:
        Configured AsyncClient instance.

    Usage:
        async with create_http_client() as client:
            response = await client.get("https://api.example.com/data")
    """
    return httpx.AsyncClient(
        timeout=timeout or DEFAULT_TIMEOUT,
        follow_redirects=True,
        **kwargs,
    )


async def fetch_with_timeout(
    url: str,
    method: str = "GET",
    timeout_seconds: float = 30.0,
    service_name: str = "external service",
    transport: httpx.AsyncBaseTransport | None = None,
    **kwargs: Any,
) -> httpx.Response:
    """Fetch a URL with an overall deadline.

    Args:
        url: URL to fetch
        method: HTTP method (GET, POST, etc.)
        timeout_seconds: Total time allowed for the request
        service_name: Name used in logs and error details
        transport: Optional transport override (tests use httpx.MockTransport)
        **kwargs: Additional arguments for the request

    Returns:
        HTTP response, whatever its status code

    Raises:
        ProviderUnavailableError: If the request times out or fails in transport
    """
    client_kwargs: dict[str, Any] = {}
    if transport is not None:
        client_kwargs["transport"] = transport
    try:
        async with create_http_client(**client_kwargs) as client:
            return await asyncio.wait_for(
                client.request(method, url, **kwargs),
                timeout=timeout_seconds,
            )
    except (builtins.TimeoutError, httpx.TimeoutException) as err:
        logger.warning(
            "http_request_timeout", service=service_name, timeout=timeout_seconds
        )
        raise ProviderUnavailableError(service_name) from err
    except httpx.RequestError as e:
        logger.warning(
            "http_request_failed",
            service=service_name,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise ProviderUnavailableError(service_name) from e
