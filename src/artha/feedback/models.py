from enum import Enum
from typing import Any
import uuid

from pydantic import field_validator
from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from artha.core.base_models import (
    BaseTable,
    CamelModel,
    RequestModel,
    UTCDateTime,
    utcnow,
)

ANONYMOUS_NAME = "Anonymous"


class FeedbackCategory(str, Enum):
    SUGGESTION = "suggestion"
    BUG = "bug"
    FEATURE = "feature"
    GENERAL = "general"


class FeedbackStatus(str, Enum):
    NEW = "new"
    REVIEWED = "reviewed"
    IN_PROGRESS = "in-progress"
    RESOLVED = "resolved"


class FeedbackReply(CamelModel):
    admin_name: str
    admin_email: str
    message: str
    created_at: UTCDateTime = Field(default_factory=utcnow)


class FeedbackBase(SQLModel):
    name: str = Field(default=ANONYMOUS_NAME, max_length=255)
    email: str = Field(default="", max_length=255)
    category: FeedbackCategory = Field(default=FeedbackCategory.GENERAL, index=True)
    message: str = Field(min_length=1)
    status: FeedbackStatus = Field(default=FeedbackStatus.NEW, index=True)


class Feedback(FeedbackBase, BaseTable, table=True):
    replies: list[dict[str, Any]] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False)
    )


def _blank_to_none(v: Any) -> Any:
    if isinstance(v, str):
        v = v.strip()
        return v or None
    return v


class FeedbackCreate(RequestModel):
    """Public submission. Only ``message`` is required."""

    name: str | None = Field(default=None, max_length=255)
    email: str | None = Field(default=None, max_length=255)
    category: FeedbackCategory | None = Field(default=None, alias="type")
    message: str = Field(min_length=1, max_length=5000)

    @field_validator("name", "email", "category", mode="before")
    @classmethod
    def blank_as_missing(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v


class FeedbackStatusUpdate(RequestModel):
    status: FeedbackStatus


class FeedbackReplyCreate(RequestModel):
    message: str = Field(min_length=1, max_length=5000)

    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v


class FeedbackPublic(CamelModel):
    id: uuid.UUID
    name: str
    email: str
    category: FeedbackCategory = Field(serialization_alias="type")
    message: str
    status: FeedbackStatus
    replies: list[FeedbackReply]
    created_at: UTCDateTime


class FeedbackSubmitted(CamelModel):
    message: str
    feedback_id: uuid.UUID


class FeedbackList(CamelModel):
    feedback: list[FeedbackPublic]


class FeedbackStats(CamelModel):
    total: int
    by_type: dict[str, int]
    by_status: dict[str, int]
