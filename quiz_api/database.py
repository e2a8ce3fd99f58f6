"""
Database engine, session factory and declarative base
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from quiz_api.config import settings

logger = logging.getLogger(__name__)


def build_engine(database_url: str, access_key: Optional[str] = None):
    """
    Create an engine for the configured store

    The access key, when set, replaces the password in the URL.
    SQLite URLs get a single shared connection so in-memory databases
    survive across sessions.
    """
    url = make_url(database_url)
    if access_key:
        url = url.set(password=access_key)

    if url.get_backend_name() == "sqlite":
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    return create_engine(url, pool_pre_ping=True)


engine = build_engine(settings.DATABASE_URL, settings.DATABASE_KEY)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    """Yield a session per request and always close it"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Create tables that do not exist yet"""
    # Register models on the metadata before create_all
    import quiz_api.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info(f"Database tables ensured on {engine.url.render_as_string(hide_password=True)}")


def utcnow() -> datetime:
    """Timezone-aware current time used for row timestamps"""
    return datetime.now(timezone.utc)
