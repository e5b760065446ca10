from collections import deque
from collections.abc import Iterable, Iterator
from itertools import islice
from typing import Any

from sqlmodel import Field

from artha.core.base_models import CamelModel, RequestModel, UTCDateTime, utcnow

# Fixed policy: each identity keeps its 50 most recent translations
HISTORY_LIMIT = 50

# Longest BCP 47 tag implementations must support (RFC 5646, section 4.4.1)
LANG_CODE_MAX_LENGTH = 35


class TranslationRecordCreate(RequestModel):
    original_text: str = Field(min_length=1)
    translated_text: str = Field(min_length=1)
    source_lang: str = Field(min_length=1, max_length=LANG_CODE_MAX_LENGTH)
    target_lang: str = Field(min_length=1, max_length=LANG_CODE_MAX_LENGTH)


class TranslationRecord(CamelModel):
    original_text: str
    translated_text: str
    source_lang: str
    target_lang: str
    timestamp: UTCDateTime = Field(default_factory=utcnow)


class HistoryResponse(CamelModel):
    history: list[TranslationRecord]


class TranslationHistory:
    """Fixed-capacity, newest-first log of translation records.

    Pushing onto a full history evicts the oldest record. Existing records
    never change order.
    """

    def __init__(
        self,
        records: Iterable[TranslationRecord] = (),
        capacity: int = HISTORY_LIMIT,
    ):
        self.capacity = capacity
        # Input is newest first, so keep its head
        self._records: deque[TranslationRecord] = deque(
            islice(records, capacity), maxlen=capacity
        )

    @classmethod
    def from_stored(
        cls, rows: Iterable[dict[str, Any]], capacity: int = HISTORY_LIMIT
    ) -> "TranslationHistory":
        return cls((TranslationRecord.model_validate(row) for row in rows), capacity)

    def push(self, record: TranslationRecord) -> None:
        self._records.appendleft(record)

    def to_stored(self) -> list[dict[str, Any]]:
        return [record.model_dump(mode="json") for record in self._records]

    def __iter__(self) -> Iterator[TranslationRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)
