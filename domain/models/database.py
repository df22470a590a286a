"""
Database configuration and session management.
"""

import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from app.config import settings

logger = logging.getLogger("repscale.database")

# Create SQLAlchemy Base
Base = declarative_base()


def build_engine(url: str, echo: bool = False):
    """Create an engine; in-memory SQLite shares one connection across threads."""
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url or url.rstrip("/").endswith("sqlite:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=echo, future=True, **kwargs)
    return create_engine(url, echo=echo, future=True, pool_pre_ping=True)


# Create engine
engine = build_engine(settings.database_url, echo=settings.db_echo)

# Create session factory
SessionLocal = sessionmaker(bind=engine, future=True, expire_on_commit=False)


def init_database():
    """Initialize database schema"""
    # Model modules must be imported so their tables are registered on Base
    import domain.models  # noqa: F401

    with engine.begin() as conn:
        Base.metadata.create_all(bind=conn)
        logger.info("Database tables created successfully")
