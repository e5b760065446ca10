"""Public translation routes (mounted at the application root)."""

from typing import Any

from fastapi import APIRouter, BackgroundTasks, Request

from artha.api.deps import GatewayDep
from artha.core.base_models import utcnow
from artha.core.logging import get_logger
from artha.core.rate_limit import TRANSLATE_RATE_LIMIT, limiter
from artha.core.tasks import run_safe_task
from artha.history.tasks import save_translation_for_token
from artha.translation import TranslateRequest, TranslateResponse, TranslationSelfTest

router = APIRouter(tags=["translate"])
logger = get_logger(__name__)

SELF_TEST_TEXT = "Hello, how are you today?"


@router.post("/translate", response_model=TranslateResponse)
@limiter.limit(TRANSLATE_RATE_LIMIT)
async def translate(
    request: Request,  # Required for rate limiter
    body: TranslateRequest,
    gateway: GatewayDep,
    background_tasks: BackgroundTasks,
) -> Any:
    """Translate text through the external provider.

    With ``saveToHistory`` and an ``authToken`` the result is also appended
    to that identity's history. The save runs after this response has been
    sent and its outcome is only logged: a successful response does not
    guarantee the history entry exists.
    """
    translated = await gateway.translate(body.text, body.source_lang, body.target_lang)

    if body.save_to_history and body.auth_token:
        background_tasks.add_task(
            run_safe_task,
            save_translation_for_token,
            "history_save",
            body.auth_token,
            body.text,
            translated,
            body.source_lang,
            body.target_lang,
        )
        logger.debug("history_save_scheduled", target_lang=body.target_lang)

    return TranslateResponse(
        original_text=body.text,
        translated_text=translated,
        source_lang=body.source_lang,
        target_lang=body.target_lang,
        service=gateway.provider_name,
        timestamp=utcnow(),
    )


@router.get("/test-translation", response_model=TranslationSelfTest)
async def test_translation(gateway: GatewayDep) -> Any:
    """Translate a fixed phrase to check the provider is reachable."""
    translated = await gateway.translate(SELF_TEST_TEXT, "en", "es")
    return TranslationSelfTest(
        status="SUCCESS",
        original=SELF_TEST_TEXT,
        translated=translated,
        service=gateway.provider_name,
    )
