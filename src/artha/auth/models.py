from enum import Enum
from typing import Any
import uuid

from pydantic import EmailStr, field_validator
from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from artha.core.base_models import BaseTable, CamelModel, RequestModel, UTCDateTime

# Shortest password accepted at registration
MIN_PASSWORD_LENGTH = 6


class UserRole(str, Enum):
    STANDARD = "standard"
    ADMIN = "admin"


def default_preferences() -> dict[str, Any]:
    return {"defaultSourceLang": "en", "defaultTargetLang": "es", "theme": "dark"}


def _normalize_email(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().lower()
    return value


class UserBase(SQLModel):
    name: str = Field(min_length=1, max_length=255)
    # Stored lowercased, which makes the unique index case-insensitive
    email: str = Field(unique=True, index=True, max_length=255)


class User(UserBase, BaseTable, table=True):
    hashed_password: str
    role: UserRole = Field(default=UserRole.STANDARD)
    preferences: dict[str, Any] = Field(
        default_factory=default_preferences, sa_column=Column(JSON, nullable=False)
    )
    # Newest first, capped by artha.history; see TranslationHistory
    translation_history: list[dict[str, Any]] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False)
    )


class UserRegister(RequestModel):
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr = Field(max_length=255)
    password: str = Field(min_length=MIN_PASSWORD_LENGTH, max_length=128)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v: Any) -> Any:
        return _normalize_email(v)


class UserLogin(RequestModel):
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=128)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v: Any) -> Any:
        return _normalize_email(v)


class PreferencesUpdate(RequestModel):
    default_source_lang: str | None = Field(default=None, min_length=2, max_length=10)
    default_target_lang: str | None = Field(default=None, min_length=2, max_length=10)
    theme: str | None = Field(default=None, min_length=1, max_length=20)


class UserPublic(CamelModel):
    """User projection returned to clients. Never carries the password hash."""

    id: uuid.UUID
    name: str
    email: str
    role: UserRole
    preferences: dict[str, Any]
    created_at: UTCDateTime


class AuthResponse(CamelModel):
    message: str
    token: str
    user: UserPublic


class ProfileResponse(CamelModel):
    user: UserPublic


class TokenPayload(SQLModel):
    """Claims carried by an access token and trusted for routing decisions."""

    sub: uuid.UUID
    email: str
    role: UserRole = UserRole.STANDARD

    @property
    def user_id(self) -> uuid.UUID:
        return self.sub
