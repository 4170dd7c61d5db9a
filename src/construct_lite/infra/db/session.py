from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from construct_lite.infra.db.config import database_url, pool_settings

logger = logging.getLogger(__name__)

# Created on first use so importing the app never requires DATABASE_URL
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """
    Return the process-wide engine, creating it on first call.

    Pool sizing comes from pool_settings(); connections are pre-pinged
    before checkout and recycled after pool_recycle_seconds.
    """
    global _engine
    if _engine is None:
        settings = pool_settings()
        _engine = create_engine(
            database_url(),
            pool_size=settings.pool_size,
            max_overflow=settings.max_overflow,
            pool_pre_ping=True,
            pool_recycle=settings.pool_recycle_seconds,
        )
        logger.info(
            "Database engine created",
            extra={
                "pool_size": settings.pool_size,
                "max_overflow": settings.max_overflow,
            },
        )
    return _engine


def get_session_factory() -> sessionmaker[Session]:
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(
            bind=get_engine(),
            class_=Session,
            expire_on_commit=False,
        )
    return _session_factory


def dispose_engine() -> None:
    """Close pooled connections and forget the engine (scripts, test teardown)."""
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


@contextmanager
def get_session() -> Iterator[Session]:
    """Yield a session that commits on success and rolls back on any error."""
    session = get_session_factory()()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
