import uuid

from sqlmodel import Session, select

from artha.auth.models import User
from artha.core.exceptions import ResourceNotFoundError
from artha.core.logging import get_logger
from artha.history.models import (
    TranslationHistory,
    TranslationRecord,
    TranslationRecordCreate,
)

logger = get_logger(__name__)


def append_translation(
    *, session: Session, user_id: uuid.UUID, record_in: TranslationRecordCreate
) -> TranslationRecord:
    """Insert a record at the front of the user's history.

    The user row is locked for the read-modify-write on backends that
    support ``SELECT ... FOR UPDATE``, so concurrent appends for one user
    are applied one after the other instead of overwriting each other.

    Args:
        session: Database session
        user_id: Owner of the history
        record_in: Translation to store; the timestamp is assigned here

    Returns:
        The stored record

    Raises:
        ResourceNotFoundError: If the user does not exist
    """
    statement = (
        select(User)
        .where(User.id == user_id)
        .with_for_update()
        .execution_options(populate_existing=True)
    )
    user = session.exec(statement).first()
    if not user:
        raise ResourceNotFoundError("User")

    record = TranslationRecord.model_validate(record_in.model_dump())
    history = TranslationHistory.from_stored(user.translation_history)
    history.push(record)
    user.translation_history = history.to_stored()

    session.add(user)
    session.commit()
    logger.debug(
        "translation_saved_to_history", user_id=str(user_id), size=len(history)
    )
    return record


def list_translations(*, session: Session, user_id: uuid.UUID) -> list[TranslationRecord]:
    """Return the user's history, newest first.

    Raises:
        ResourceNotFoundError: If the user does not exist
    """
    user = session.get(User, user_id)
    if not user:
        raise ResourceNotFoundError("User")
    return list(TranslationHistory.from_stored(user.translation_history))
