from sqlmodel import Field

from artha.core.base_models import CamelModel, RequestModel, UTCDateTime


class TranslateRequest(RequestModel):
    # Presence is checked here; blank and length rules live in the gateway
    text: str
    source_lang: str
    target_lang: str
    save_to_history: bool = False
    auth_token: str | None = Field(default=None)


class TranslateResponse(CamelModel):
    original_text: str
    translated_text: str
    source_lang: str
    target_lang: str
    service: str
    timestamp: UTCDateTime


class TranslationSelfTest(CamelModel):
    status: str
    original: str
    translated: str
    service: str
