from collections.abc import Generator

from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine, select

from artha.core.config import settings
from artha.core.logging import get_logger

logger = get_logger(__name__)


def build_engine(url: str) -> Engine:
    if url.startswith("sqlite"):
        # One shared connection so an in-memory database survives across sessions
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=settings.DEBUG and settings.ENVIRONMENT == "local",
        )
    return create_engine(
        url,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,
        pool_recycle=3600,
        echo=settings.DEBUG and settings.ENVIRONMENT == "local",
    )


engine = build_engine(settings.SQLALCHEMY_DATABASE_URI)


def get_db() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


def init_db(bind: Engine = engine) -> None:
    """Create all tables directly. Deployed databases use alembic instead."""
    # Table models must be imported before create_all sees them
    from artha.auth.models import User  # noqa: F401
    from artha.feedback.models import Feedback  # noqa: F401

    SQLModel.metadata.create_all(bind)


def check_database(bind: Engine = engine) -> bool:
    """Return True when a trivial query succeeds."""
    try:
        with Session(bind) as session:
            session.exec(select(1))
    except Exception as e:
        logger.warning("database_check_failed", error=str(e))
        return False
    return True
