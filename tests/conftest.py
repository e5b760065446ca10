from collections.abc import Generator
import os

# Must be set before anything imports artha.core.config
os.environ["ENVIRONMENT"] = "local"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ.pop("FIRST_ADMIN_EMAIL", None)

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlmodel import Session, SQLModel  # noqa: E402

from artha.core.db import engine, init_db  # noqa: E402
from artha.core.tasks import task_stats  # noqa: E402
from artha.main import app  # noqa: E402
from artha.translation import TranslationGateway, get_translation_gateway  # noqa: E402
from tests.utils.provider import echo_provider  # noqa: E402


@pytest.fixture(autouse=True)
def db_tables() -> Generator[None, None, None]:
    init_db(engine)
    task_stats.reset()
    yield
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


@pytest.fixture
def gateway() -> TranslationGateway:
    """Gateway whose provider answers every request successfully."""
    return TranslationGateway(transport=echo_provider())


@pytest.fixture
def client(gateway: TranslationGateway) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_translation_gateway] = lambda: gateway
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
