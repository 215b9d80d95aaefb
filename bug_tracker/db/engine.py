# bug_tracker/db/engine.py

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

DB_URL = "sqlite://"  # in-memory, gone when the engine is disposed


def get_engine() -> Engine:
    # StaticPool keeps the single in-memory connection alive and shared
    # across the request thread pool; every call gets its own database.
    return create_engine(
        DB_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
        future=True,
    )
