# farmlog/models/base.py
from __future__ import annotations

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def build_engine(url: str) -> Engine:
    # In-memory SQLite: one shared connection, otherwise every session sees an empty DB
    if url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    # SQLite: make the path absolute and ensure the folder exists
    if url.startswith("sqlite:///"):
        rel = url[len("sqlite:///"):]  # e.g. ./db/farmlog.db
        db_file = Path(rel)
        if not db_file.is_absolute():
            db_file = Path.cwd() / db_file
        db_file.parent.mkdir(parents=True, exist_ok=True)
        abs_url = f"sqlite:///{db_file.as_posix()}"
        return create_engine(
            abs_url,
            connect_args={"check_same_thread": False},  # SQLite only
            pool_pre_ping=True,
        )

    # Other databases (Postgres/MySQL)
    return create_engine(url, pool_pre_ping=True)


def make_session_factory(engine: Engine) -> sessionmaker:
    # Records leave the session with the response; keep their loaded state
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
