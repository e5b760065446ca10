from typing import Any

from fastapi import APIRouter

from artha.auth import CurrentIdentity, SessionDep
from artha.core.base_models import Message
from artha.history import (
    HistoryResponse,
    TranslationRecordCreate,
    append_translation,
    list_translations,
)

router = APIRouter(prefix="/translations", tags=["translations"])


@router.post("/save", response_model=Message)
def save_translation(
    session: SessionDep,
    identity: CurrentIdentity,
    record_in: TranslationRecordCreate,
) -> Any:
    """Add a translation to the caller's history (the 50 newest are kept)."""
    append_translation(session=session, user_id=identity.user_id, record_in=record_in)
    return Message(message="Translation saved to history")


@router.get("/history", response_model=HistoryResponse)
def read_history(session: SessionDep, identity: CurrentIdentity) -> Any:
    """Get the caller's translation history, newest first."""
    history = list_translations(session=session, user_id=identity.user_id)
    return HistoryResponse(history=history)
