"""History writes that run after the translate response has been sent."""

from sqlalchemy import Engine
from sqlmodel import Session

from artha.auth.tokens import verify_token
from artha.core.db import engine
from artha.core.exceptions import ExpiredTokenError, TokenError
from artha.core.logging import get_logger
from artha.history.crud import append_translation
from artha.history.models import TranslationRecordCreate

logger = get_logger(__name__)


def save_translation_for_token(
    auth_token: str,
    original_text: str,
    translated_text: str,
    source_lang: str,
    target_lang: str,
    bind: Engine | None = None,
) -> bool:
    """Append a translation to the history of the identity behind a token.

    Runs in its own session. The record is built and validated here rather
    than in the request, so a value the history store will not accept fails
    this job and never the translate response.

    A rejected token means nothing is saved; that is logged and reported as
    ``False``. Validation and store errors propagate to the caller
    (run_safe_task), which logs and counts them.
    """
    try:
        claims = verify_token(auth_token)
    except TokenError as e:
        logger.info(
            "history_save_skipped",
            reason="expired_token" if isinstance(e, ExpiredTokenError) else "invalid_token",
        )
        return False

    record_in = TranslationRecordCreate(
        original_text=original_text,
        translated_text=translated_text,
        source_lang=source_lang,
        target_lang=target_lang,
    )
    with Session(bind or engine) as session:
        append_translation(
            session=session, user_id=claims.user_id, record_in=record_in
        )
    logger.info("history_saved", user_id=str(claims.user_id))
    return True
