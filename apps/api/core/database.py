"""
Database connection management with connection pooling.

PostgreSQL in production; DATABASE_URL may point anywhere SQLAlchemy
can reach (tests use an in-memory SQLite database).
"""
import logging
import time

from fastapi import HTTPException
from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import QueuePool, StaticPool

from core.config import settings

logger = logging.getLogger(__name__)


def build_database_url() -> str:
    if settings.DATABASE_URL:
        return settings.DATABASE_URL
    return (
        f"postgresql://{settings.POSTGRES_USER}:"
        f"{settings.POSTGRES_PASSWORD}@"
        f"{settings.POSTGRES_HOST}:"
        f"{settings.POSTGRES_PORT}/"
        f"{settings.POSTGRES_DB}"
    )


DATABASE_URL = build_database_url()


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        # One shared connection so an in-memory database survives across sessions
        return {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
            "echo": settings.DEBUG,
        }
    return {
        "poolclass": QueuePool,
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_timeout": settings.DB_POOL_TIMEOUT,
        "pool_recycle": settings.DB_POOL_RECYCLE,
        "pool_pre_ping": True,  # Verify connections before using
        "echo": settings.DEBUG,  # Log SQL queries in debug mode
    }


engine = create_engine(DATABASE_URL, **_engine_kwargs(DATABASE_URL))

# Session factory
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False,  # Prevent lazy loading issues
)

Base = declarative_base()


@event.listens_for(engine, "checkout")
def receive_checkout(dbapi_conn, connection_record, connection_proxy):
    """Log when connection is checked out from pool."""
    logger.debug("Connection checked out from pool")


@event.listens_for(engine, "checkin")
def receive_checkin(dbapi_conn, connection_record):
    """Log when connection is returned to pool."""
    logger.debug("Connection returned to pool")


def get_db() -> Session:
    """
    Dependency for FastAPI to get database session.

    This function ensures:
    - Connection is properly acquired from pool
    - Connection is returned to pool after request
    - Transactions are committed on success and rolled back on error
    """
    db = None
    max_retries = 3
    retry_delay = 0.1  # 100ms initial delay

    for attempt in range(max_retries):
        try:
            db = SessionLocal()
            # Verify connection is alive
            db.execute(text("SELECT 1"))
            break
        except Exception as e:
            if db:
                db.close()
            if attempt == max_retries - 1:
                logger.error(f"Failed to establish database connection after {max_retries} attempts: {e}")
                raise
            logger.warning(f"Database connection attempt {attempt + 1} failed, retrying...")
            time.sleep(retry_delay * (2 ** attempt))  # Exponential backoff

    try:
        yield db
        db.commit()
    except Exception as e:
        db.rollback()
        # Only log actual database errors, not HTTP exceptions
        if not isinstance(e, HTTPException):
            logger.error(f"Database transaction error: {e}")
        raise
    finally:
        if db:
            db.close()


def check_db_connection() -> bool:
    """
    Check if database connection is healthy.

    Returns:
        True if connection is healthy, False otherwise
    """
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database connection check failed: {e}")
        return False
