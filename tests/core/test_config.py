import pydantic
import pytest

from artha.core.config import (
    DEFAULT_POSTGRES_PASSWORD,
    DEFAULT_SECRET_KEY,
    Settings,
)

STRONG_KEY = "x" * 48


def test_defaults() -> None:
    config = Settings(_env_file=None, SECRET_KEY=STRONG_KEY)

    assert config.PORT == 3001
    assert config.API_PREFIX == "/api"
    assert config.ACCESS_TOKEN_EXPIRE_DAYS == 7
    assert config.TRANSLATION_TIMEOUT_SECONDS == 10.0


def test_default_secret_is_refused_in_production() -> None:
    with pytest.raises(pydantic.ValidationError, match="SECRET_KEY"):
        Settings(
            _env_file=None, ENVIRONMENT="production", SECRET_KEY=DEFAULT_SECRET_KEY
        )


def test_default_secret_warns_in_staging() -> None:
    with pytest.warns(UserWarning, match="SECRET_KEY"):
        Settings(_env_file=None, ENVIRONMENT="staging", SECRET_KEY=DEFAULT_SECRET_KEY)


def test_short_secret_warns() -> None:
    with pytest.warns(UserWarning, match="shorter"):
        Settings(_env_file=None, SECRET_KEY="short")


def test_default_postgres_password_is_refused_in_production() -> None:
    with pytest.raises(pydantic.ValidationError, match="POSTGRES_PASSWORD"):
        Settings(
            _env_file=None,
            ENVIRONMENT="production",
            SECRET_KEY=STRONG_KEY,
            DATABASE_URL=None,
            POSTGRES_PASSWORD=DEFAULT_POSTGRES_PASSWORD,
        )


def test_database_url_takes_precedence() -> None:
    config = Settings(
        _env_file=None, SECRET_KEY=STRONG_KEY, DATABASE_URL="sqlite:///artha.db"
    )
    assert config.SQLALCHEMY_DATABASE_URI == "sqlite:///artha.db"


def test_postgres_uri_is_built_from_parts() -> None:
    config = Settings(
        _env_file=None,
        SECRET_KEY=STRONG_KEY,
        DATABASE_URL=None,
        POSTGRES_SERVER="db",
        POSTGRES_USER="artha",
        POSTGRES_PASSWORD="s3cret",
        POSTGRES_DB="translations",
    )
    assert (
        config.SQLALCHEMY_DATABASE_URI
        == "postgresql+psycopg://artha:s3cret@db:5432/translations"
    )


def test_cors_origins_from_comma_separated_string() -> None:
    config = Settings(
        _env_file=None,
        SECRET_KEY=STRONG_KEY,
        FRONTEND_URL="http://localhost:5173",
        CORS_ORIGINS="https://artha.example.com, https://admin.example.com",
    )
    assert config.all_cors_origins == [
        "https://artha.example.com",
        "https://admin.example.com",
        "http://localhost:5173",
    ]
