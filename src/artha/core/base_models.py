"""Base models and mixins for SQLModel schemas.

Usage:
    - Database models (table=True) inherit from BaseTable
    - Request/response schemas inherit from CamelModel or RequestModel so the
      wire format uses camelCase (``sourceLang``) while Python code keeps
      snake_case (``source_lang``)

Example:
    class Feedback(FeedbackBase, BaseTable, table=True):
        ...

    class FeedbackCreate(RequestModel):
        message: str
"""

from datetime import UTC, datetime
from typing import Annotated
import uuid

from pydantic import AfterValidator, ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(UTC)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive values (SQLite drops the offset on read)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


# Response-side datetime that always serializes with an offset
UTCDateTime = Annotated[datetime, AfterValidator(as_utc)]


class UUIDPrimaryKeyMixin(SQLModel):
    """Standard UUID primary key for all models."""

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)


class CreatedAtMixin(SQLModel):
    """Immutable creation timestamp."""

    created_at: datetime = Field(
        default_factory=utcnow, sa_type=DateTime(timezone=True)  # type: ignore[call-overload]
    )


class BaseTable(UUIDPrimaryKeyMixin, CreatedAtMixin):
    """Base for tables (UUID id plus created_at).

    Use for: User, Feedback
    """

    pass


class CamelModel(SQLModel):
    """Schema serialized with camelCase keys, accepting either spelling."""

    model_config = ConfigDict(  # type: ignore[assignment]
        alias_generator=to_camel,
        populate_by_name=True,
    )


class RequestModel(CamelModel):
    """Request body schema: unknown fields are rejected."""

    model_config = ConfigDict(  # type: ignore[assignment]
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class Message(CamelModel):
    message: str
