from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from fleet_tracker.domain.errors import DomainError
from fleet_tracker.infra.db import config

logger = logging.getLogger(__name__)

# Created on first use so importing the app never needs DATABASE_URL
_engine: Engine | None = None
_session_local: sessionmaker[Session] | None = None


def engine_options() -> dict[str, Any]:
    """
    Pool settings for the PostgreSQL engine.

    pool_size/max_overflow come from DB_POOL_SIZE/DB_MAX_OVERFLOW; stale
    connections are detected with a pre-ping and recycled hourly.
    """
    return {
        "pool_size": config.pool_size(),
        "max_overflow": config.max_overflow(),
        "pool_pre_ping": True,
        "pool_recycle": 3600,
    }


def get_engine() -> Engine:
    global _engine
    if _engine is None:
        _engine = create_engine(config.database_url(), **engine_options())
        logger.info("Database engine created", extra=engine_options())
    return _engine


def get_session_local() -> sessionmaker[Session]:
    global _session_local
    if _session_local is None:
        _session_local = sessionmaker(bind=get_engine(), expire_on_commit=False)
    return _session_local


def dispose_engine() -> None:
    """Close pooled connections and forget the engine (shutdown, tests)."""
    global _engine, _session_local
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_local = None


@contextmanager
def get_session() -> Iterator[Session]:
    """
    One unit of work: commit when the block exits cleanly, roll back otherwise.

    Listing requests only read, so their commit is a no-op; car maintenance
    writes become visible only once the request succeeds.
    """
    session = get_session_local()()

    try:
        yield session
        session.commit()
    except Exception as exc:
        # Domain errors are expected outcomes (404, 400) and get logged by the HTTP handlers
        if not isinstance(exc, DomainError):
            logger.warning("Rolling back database session", exc_info=True)
        session.rollback()
        raise
    finally:
        session.close()
