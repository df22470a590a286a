"""
Request-scoped dependencies shared by the routers
"""

from typing import Generator
from sqlalchemy.orm import Session
from domain.models import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    One session per request.

    Anything left uncommitted when a service raises is rolled back before
    the session is closed.
    """
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
