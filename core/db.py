"""
SQLAlchemy engine and session for the prayer times SQLite file.
The table is owned by whoever ships player.db; this module never creates it.
"""
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

Base = declarative_base()

_engine = None
_SessionLocal = None


@contextmanager
def session_scope() -> Generator[Session, None, None]:
    """Read-only session; always closed, rolled back on error."""
    if _SessionLocal is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")
    session = _SessionLocal()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def get_engine():
    return _engine


def db_url_from_config(config_data: dict) -> str:
    path = Path(config_data.get("database", {}).get("path", "player.db")).expanduser()
    return f"sqlite:///{path}"


def init_db(config_data: Optional[dict] = None, db_url: Optional[str] = None) -> None:
    """
    Initialize the engine.
    config_data: app config dict; used for database.path if db_url not given.
    db_url: optional SQLAlchemy URL override.
    """
    global _engine, _SessionLocal

    if db_url is None:
        db_url = db_url_from_config(config_data or {})

    if _engine is not None:
        if str(_engine.url) == db_url:
            logging.debug("[DB] Database already initialized")
            return
        dispose_db()

    _engine = create_engine(db_url, echo=False, future=True)
    _SessionLocal = sessionmaker(bind=_engine, autocommit=False, autoflush=False, expire_on_commit=False)
    logging.info(f"[DB] Connected to {db_url}")


def dispose_db() -> None:
    global _engine, _SessionLocal
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _SessionLocal = None
