import os

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

# Default to SQLite
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///tareas.db")

_engine_options: dict = {}
if DATABASE_URL.startswith("sqlite"):
    _engine_options["connect_args"] = {"check_same_thread": False}
    if ":memory:" in DATABASE_URL:
        # A single connection keeps the in-memory database alive
        _engine_options["poolclass"] = StaticPool

engine = create_engine(DATABASE_URL, **_engine_options)
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
Base = declarative_base()


def get_session() -> Session:
    return SessionLocal()


def init_db() -> None:
    # Import models so they register on Base.metadata
    from infrastructure.sqlalchemy.model import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
