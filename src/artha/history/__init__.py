from artha.history.crud import append_translation, list_translations
from artha.history.models import (
    HISTORY_LIMIT,
    LANG_CODE_MAX_LENGTH,
    HistoryResponse,
    TranslationHistory,
    TranslationRecord,
    TranslationRecordCreate,
)

__all__ = [
    "HISTORY_LIMIT",
    "LANG_CODE_MAX_LENGTH",
    "HistoryResponse",
    "TranslationHistory",
    "TranslationRecord",
    "TranslationRecordCreate",
    "append_translation",
    "list_translations",
]
