from functools import lru_cache
import os
from typing import Annotated, Any, Literal
import warnings

from pydantic import (
    AnyUrl,
    BeforeValidator,
    ValidationInfo,
    computed_field,
    field_validator,
)
from pydantic_core import MultiHostUrl
from pydantic_settings import BaseSettings, SettingsConfigDict

# Minimum recommended length for SECRET_KEY in characters
MIN_SECRET_KEY_LENGTH = 32

# Insecure fallbacks, only acceptable for local development
DEFAULT_SECRET_KEY = "artha-insecure-dev-secret-change-me"
DEFAULT_POSTGRES_PASSWORD = "changethis"


def parse_cors(v: Any) -> list[str] | str:
    if isinstance(v, str) and not v.startswith("["):
        return [i.strip() for i in v.split(",") if i.strip()]
    if isinstance(v, list | str):
        return v
    raise ValueError(v)


def _check_insecure_default(name: str, info: ValidationInfo) -> None:
    env = (
        info.data.get("ENVIRONMENT")
        if info.data
        else os.getenv("ENVIRONMENT", "local")
    )
    if env == "production":
        raise ValueError(
            f"{name} must be changed from its default value in production. "
            f"Set it via the {name} environment variable."
        )
    if env != "local":
        warnings.warn(
            f"{name} is set to its insecure default value. "
            "Set a strong, unique value before deploying.",
            UserWarning,
            stacklevel=2,
        )


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "Artha Translator API"
    API_PREFIX: str = "/api"
    DEBUG: bool = False

    HOST: str = "0.0.0.0"
    PORT: int = 3001
    FRONTEND_URL: str = "http://localhost:5173"

    ENVIRONMENT: Literal["local", "staging", "production"] = "local"

    CORS_ORIGINS: Annotated[list[AnyUrl] | str, BeforeValidator(parse_cors)] = []

    @computed_field  # type: ignore[prop-decorator]
    @property
    def all_cors_origins(self) -> list[str]:
        """Return all CORS origins as strings."""
        origins = [str(origin).rstrip("/") for origin in self.CORS_ORIGINS]
        if self.FRONTEND_URL and self.FRONTEND_URL not in origins:
            origins.append(self.FRONTEND_URL.rstrip("/"))
        return origins

    # Full connection string; takes precedence over the POSTGRES_* parts
    DATABASE_URL: str | None = None

    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = DEFAULT_POSTGRES_PASSWORD
    POSTGRES_DB: str = "artha"

    @field_validator("POSTGRES_PASSWORD", mode="after")
    @classmethod
    def validate_postgres_password(cls, v: str, info: ValidationInfo) -> str:
        """Refuse the default POSTGRES_PASSWORD in production."""
        if v == DEFAULT_POSTGRES_PASSWORD and not info.data.get("DATABASE_URL"):
            _check_insecure_default("POSTGRES_PASSWORD", info)
        return v

    @computed_field  # type: ignore[prop-decorator]
    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """Connection URI for SQLAlchemy."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return str(
            MultiHostUrl.build(
                scheme="postgresql+psycopg",
                username=self.POSTGRES_USER,
                password=self.POSTGRES_PASSWORD,
                host=self.POSTGRES_SERVER,
                port=self.POSTGRES_PORT,
                path=self.POSTGRES_DB,
            )
        )

    # JWT Security Settings
    # The fallback SECRET_KEY is public; tokens signed with it are forgeable
    SECRET_KEY: str = DEFAULT_SECRET_KEY
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7

    @field_validator("SECRET_KEY", mode="after")
    @classmethod
    def validate_secret_key(cls, v: str, info: ValidationInfo) -> str:
        """Validate and warn about SECRET_KEY configuration."""
        if v == DEFAULT_SECRET_KEY:
            _check_insecure_default("SECRET_KEY", info)
        elif len(v) < MIN_SECRET_KEY_LENGTH:
            warnings.warn(
                f"SECRET_KEY is shorter than {MIN_SECRET_KEY_LENGTH} characters. "
                "Consider using a longer key for better security.",
                UserWarning,
                stacklevel=2,
            )
        return v

    TRANSLATION_PROVIDER_NAME: str = "google-translate"
    TRANSLATION_PROVIDER_URL: str = (
        "https://translate.googleapis.com/translate_a/single"
    )
    TRANSLATION_TIMEOUT_SECONDS: float = 10.0

    # Applied to every route outside the local environment
    DEFAULT_RATE_LIMIT: str = "100/minute"

    # Identity promoted to admin by the bootstrap script, never at startup
    FIRST_ADMIN_EMAIL: str | None = None


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
