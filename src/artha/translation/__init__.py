from artha.translation.models import (
    TranslateRequest,
    TranslateResponse,
    TranslationSelfTest,
)
from artha.translation.service import (
    MAX_TEXT_LENGTH,
    TranslationGateway,
    get_translation_gateway,
    parse_provider_payload,
)

__all__ = [
    "MAX_TEXT_LENGTH",
    "TranslateRequest",
    "TranslateResponse",
    "TranslationGateway",
    "TranslationSelfTest",
    "get_translation_gateway",
    "parse_provider_payload",
]
