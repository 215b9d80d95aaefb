# bug_tracker/db/store.py

import logging
import threading
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.engine import Engine

from bug_tracker.db.engine import get_engine
from bug_tracker.db.schema import bugs, metadata
from bug_tracker.models.bugs import Bug

logger = logging.getLogger(__name__)


class BugStoreClosedError(RuntimeError):
    """Raised when a closed store is read or written."""


class BugStore:
    """
    Ordered, append-only collection of bugs for the lifetime of the app.

    Handlers run on a thread pool, so reads and writes go through one lock.
    Once closed, the in-memory database is gone and the store can't be used.
    """

    def __init__(self, engine: Optional[Engine] = None):
        self._engine = engine if engine is not None else get_engine()
        self._lock = threading.Lock()
        self._closed = False
        metadata.create_all(self._engine)

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_open(self) -> None:
        if self._closed:
            raise BugStoreClosedError("Bug store is closed")

    def list(self) -> List[Bug]:
        stmt = select(bugs.c.title, bugs.c.description).order_by(bugs.c.id)

        with self._lock:
            self._ensure_open()
            with self._engine.connect() as conn:
                rows = conn.execute(stmt).mappings().all()

        return [Bug(title=row["title"], description=row["description"]) for row in rows]

    def append(self, bug: Bug) -> Bug:
        with self._lock:
            self._ensure_open()
            with self._engine.begin() as conn:
                conn.execute(
                    bugs.insert().values(title=bug.title, description=bug.description)
                )

        return Bug(title=bug.title, description=bug.description)

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._engine.dispose()
        logger.info("Bug store closed")

    def __len__(self) -> int:
        with self._lock:
            self._ensure_open()
            with self._engine.connect() as conn:
                return conn.execute(select(func.count()).select_from(bugs)).scalar_one()
