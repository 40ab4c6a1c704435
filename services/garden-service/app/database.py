"""
Database configuration and connection management.

Builds the SQLAlchemy engine and session factory from application settings.
"""

import logging
import time
from typing import Generator, Optional

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import QueuePool

from .config import settings
from .models import Base

logger = logging.getLogger(__name__)


def get_connect_args(db_url: str) -> dict:
    """
    Get database-specific connection arguments.

    Args:
        db_url: Database connection URL

    Returns:
        Connection arguments dict
    """
    if "sqlite" in db_url:
        return {"check_same_thread": False}
    return {}


def get_engine_options(db_url: str) -> dict:
    """
    Get pooling options for the engine.

    SQLite uses SQLAlchemy's default single-file pool; server databases
    get a QueuePool sized from settings.

    Args:
        db_url: Database connection URL

    Returns:
        Keyword arguments for ``create_engine``
    """
    options = {"connect_args": get_connect_args(db_url), "echo": False}
    if "sqlite" in db_url:
        return options

    options.update(
        poolclass=QueuePool,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_recycle=settings.DB_POOL_RECYCLE,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_pre_ping=settings.DB_POOL_PRE_PING,
    )
    return options


def safe_database_url(db_url: str) -> str:
    """Strip credentials from a database URL for logging."""
    if "@" in db_url:
        return db_url.split("://")[0] + "://...@" + db_url.split("@", 1)[1]
    return db_url


@event.listens_for(Engine, "before_cursor_execute")
def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
    """Track query start time."""
    conn.info.setdefault("query_start_time", []).append(time.time())


@event.listens_for(Engine, "after_cursor_execute")
def after_cursor_execute(conn, cursor, statement, parameters, context, executemany):
    """Log slow queries."""
    total_time_ms = (time.time() - conn.info["query_start_time"].pop()) * 1000

    if total_time_ms > settings.QUERY_LOG_THRESHOLD_MS:
        logger.warning(
            "Slow query detected: %.2fms",
            total_time_ms,
            extra={
                "query_time_ms": total_time_ms,
                "statement": statement[:200],
            },
        )


logger.info("Using database: %s", safe_database_url(settings.DATABASE_URL))

engine = create_engine(settings.DATABASE_URL, **get_engine_options(settings.DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Initialize database tables.

    Uses checkfirst=True so existing tables are left untouched.

    Args:
        bind: Engine to create tables on (defaults to the service engine)
    """
    try:
        logger.info("Initializing database tables...")
        Base.metadata.create_all(bind=bind or engine, checkfirst=True)
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error("Failed to initialize database: %s", e)
        raise


def get_db() -> Generator[Session, None, None]:
    """
    Get database session for dependency injection.

    Yields:
        SQLAlchemy database session, closed when the request finishes
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_database(db: Session) -> bool:
    """
    Run a trivial query to verify the database is reachable.

    Args:
        db: Open database session

    Returns:
        True if the query succeeded, False otherwise
    """
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.warning("Database check failed: %s", e)
        return False


def get_db_stats() -> dict:
    """
    Get database connection pool statistics.

    Returns:
        Dict with pool statistics; sizes are included for QueuePool engines
    """
    pool = engine.pool
    stats = {"pool_class": type(pool).__name__}

    if isinstance(pool, QueuePool):
        stats.update(
            {
                "pool_size": pool.size(),
                "checked_out": pool.checkedout(),
                "overflow": pool.overflow(),
            }
        )
    return stats
