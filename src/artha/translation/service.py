"""Gateway to the external machine-translation provider.

The provider is the unofficial Google Translate endpoint. It answers with a
nested JSON array whose first element lists translated fragments::

    [[["Hola, ", "Hello, ", null, null], ["¿cómo estás?", "how are you?", ...]], null, "en"]

The gateway concatenates the first item of every fragment, in order, with no
separator. Transport failures, timeouts, non-2xx statuses, unexpected
payloads and an empty translation all become ProviderUnavailableError.
There is no retry and no fallback.
"""

from typing import Any

import httpx

from artha.core.config import settings
from artha.core.exceptions import (
    ProviderUnavailableError,
    TextTooLongError,
    ValidationError,
)
from artha.core.http import fetch_with_timeout
from artha.core.logging import get_logger

logger = get_logger(__name__)

# Longer input is rejected before the provider is called
MAX_TEXT_LENGTH = 2000


def parse_provider_payload(payload: Any) -> str:
    """Rebuild the translated text from the provider's fragment list.

    Raises:
        ValueError: If the payload does not have the expected shape
    """
    if not isinstance(payload, list) or not payload:
        raise ValueError("Expected a non-empty JSON array")
    fragments = payload[0]
    if not isinstance(fragments, list) or not fragments:
        raise ValueError("Expected a list of fragments")

    parts: list[str] = []
    for fragment in fragments:
        if not isinstance(fragment, list) or not fragment:
            raise ValueError("Malformed fragment")
        text = fragment[0]
        if text is None:
            continue
        if not isinstance(text, str):
            raise ValueError("Fragment text is not a string")
        parts.append(text)
    return "".join(parts)


class TranslationGateway:
    """Delegates translation requests to a single external provider."""

    def __init__(
        self,
        provider_url: str | None = None,
        timeout_seconds: float | None = None,
        provider_name: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.provider_url = provider_url or settings.TRANSLATION_PROVIDER_URL
        self.timeout_seconds = timeout_seconds or settings.TRANSLATION_TIMEOUT_SECONDS
        self.provider_name = provider_name or settings.TRANSLATION_PROVIDER_NAME
        self.transport = transport

    @staticmethod
    def validate_request(text: str, source_lang: str, target_lang: str) -> None:
        """Check preconditions without touching the network.

        Raises:
            ValidationError: If a field is missing or blank
            TextTooLongError: If ``text`` exceeds MAX_TEXT_LENGTH
        """
        if not text or not text.strip() or not source_lang or not target_lang:
            raise ValidationError("Missing required fields")
        if len(text) > MAX_TEXT_LENGTH:
            raise TextTooLongError(MAX_TEXT_LENGTH)

    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        """Translate ``text`` from ``source_lang`` to ``target_lang``.

        Returns:
            Exactly the provider's reconstructed text, never empty

        Raises:
            ValidationError: If the request is malformed (no provider call made)
            ProviderUnavailableError: If the provider call fails in any way
        """
        self.validate_request(text, source_lang, target_lang)

        logger.info(
            "translation_requested",
            provider=self.provider_name,
            source_lang=source_lang,
            target_lang=target_lang,
            length=len(text),
        )
        response = await fetch_with_timeout(
            self.provider_url,
            timeout_seconds=self.timeout_seconds,
            service_name=self.provider_name,
            transport=self.transport,
            params={
                "client": "gtx",
                "sl": source_lang,
                "tl": target_lang,
                "dt": "t",
                "q": text,
            },
        )

        if not response.is_success:
            logger.warning(
                "translation_failed",
                provider=self.provider_name,
                status=response.status_code,
            )
            raise ProviderUnavailableError(self.provider_name)

        try:
            translated = parse_provider_payload(response.json())
        except ValueError as e:
            # json.JSONDecodeError is a ValueError too
            logger.warning(
                "translation_invalid_payload",
                provider=self.provider_name,
                error=str(e),
            )
            raise ProviderUnavailableError(self.provider_name) from e

        if not translated:
            logger.warning("translation_empty", provider=self.provider_name)
            raise ProviderUnavailableError(self.provider_name)

        logger.info("translation_succeeded", provider=self.provider_name)
        return translated


def get_translation_gateway() -> TranslationGateway:
    """FastAPI dependency; tests override it with a stubbed transport."""
    return TranslationGateway()
