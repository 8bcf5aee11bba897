import logging
import time
from urllib.parse import urlparse

from sqlalchemy import create_engine, text
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker

from signal_engine.core.config import settings
from signal_engine.db.base import Base

logger = logging.getLogger(__name__)


def _is_sqlite(url: str) -> bool:
    return urlparse(url).scheme.startswith("sqlite")


def _connect_args(url: str) -> dict:
    # Sessions are used from the request threadpool.
    if _is_sqlite(url):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    connect_args=_connect_args(settings.DATABASE_URL),
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def wait_for_db(max_attempts: int = 10, delay_seconds: float = 2.0) -> None:
    """Block until the database is reachable or raise after exhausting retries."""

    if _is_sqlite(settings.DATABASE_URL):
        return

    for attempt in range(1, max_attempts + 1):
        try:
            with engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            if attempt > 1:
                logger.info("Database became reachable on attempt %s", attempt)
            return
        except OperationalError as exc:  # pragma: no cover - best effort guard
            logger.warning(
                "Database not ready (attempt %s/%s): %s", attempt, max_attempts, exc
            )
            if attempt == max_attempts:
                raise
            time.sleep(delay_seconds)


def init_db() -> None:
    # Registers the feedback table on Base.metadata.
    from signal_engine.models import feedback  # noqa: F401

    wait_for_db()
    Base.metadata.create_all(bind=engine)
