"""Block until the database accepts queries, then exit.

Run before migrations and the API server in container entrypoints::

    python -m artha.scripts.backend_pre_start
"""

import logging

from sqlalchemy import Engine
from sqlmodel import Session, select
from tenacity import (
    Retrying,
    after_log,
    before_sleep_log,
    stop_after_delay,
    wait_fixed,
)

from artha.core.db import engine

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Give a freshly started database container five minutes
MAX_WAIT_SECONDS = 60 * 5
POLL_INTERVAL_SECONDS = 1


def ping(db_engine: Engine) -> None:
    with Session(db_engine) as session:
        session.exec(select(1))


def init(
    db_engine: Engine,
    max_wait: float = MAX_WAIT_SECONDS,
    interval: float = POLL_INTERVAL_SECONDS,
) -> None:
    """Retry a trivial query until it succeeds or ``max_wait`` runs out.

    Raises:
        tenacity.RetryError: If the database never became reachable
    """
    for attempt in Retrying(
        stop=stop_after_delay(max_wait),
        wait=wait_fixed(interval),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        after=after_log(logger, logging.DEBUG),
    ):
        with attempt:
            ping(db_engine)


def main() -> None:
    logger.info("Waiting for database")
    init(engine)
    logger.info("Database is ready")


if __name__ == "__main__":
    main()
