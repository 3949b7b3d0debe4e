"""Engine, sessions and migrations for the planner database."""
import sqlite3
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from app.config import get_settings


settings = get_settings()
PROJECT_ROOT = Path(__file__).resolve().parent.parent


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create an engine for ``database_url``.

    For SQLite the database directory is created and connections may be
    used from FastAPI's worker threads as well as the event loop thread.
    """
    url = make_url(database_url)
    connect_args = {}
    if url.get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
        if url.database and url.database != ":memory:":
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(url, echo=echo, connect_args=connect_args)


engine = build_engine(settings.database_url, echo=settings.sql_echo)


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    """Turn on SQLite foreign keys so deleting a user deletes their day plans."""
    if not isinstance(dbapi_conn, sqlite3.Connection):
        return
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Base(DeclarativeBase):
    """Declarative base for the users and day_plans tables."""


SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def get_db():
    """
    Request-scoped session.

    Repositories only flush; the request commits here once the handler
    returns, or rolls back if it raised.
    """
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def alembic_config(database_url: str | None = None) -> Config:
    cfg = Config(str(PROJECT_ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    cfg.set_main_option("sqlalchemy.url", database_url or settings.database_url)
    # Keep the dictConfig handlers when migrating from inside the app.
    cfg.attributes["configure_logger"] = False
    return cfg


def run_migrations(target_revision: str = "head") -> None:
    """Upgrade the configured database to ``target_revision``."""
    command.upgrade(alembic_config(), target_revision)
