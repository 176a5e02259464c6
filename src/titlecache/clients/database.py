"""SQLite-backed cache for the current title."""

import asyncio
import sqlite3
from typing import Protocol

from titlecache.models import Title
from titlecache.observable import LiveValue, MutableLiveValue
from titlecache.utils.logging import get_logger

logger = get_logger(__name__)

TITLE_ROW_ID = 0

CREATE_TABLE_SQL = "CREATE TABLE IF NOT EXISTS title (id INTEGER PRIMARY KEY, title TEXT NOT NULL)"
SELECT_TITLE_SQL = "SELECT title FROM title WHERE id = ?"
INSERT_TITLE_SQL = "INSERT OR REPLACE INTO title (id, title) VALUES (?, ?)"


class TitleDao(Protocol):
    """Storage for the single current title."""

    @property
    def title_live_data(self) -> LiveValue[Title | None]: ...

    async def insert_title(self, title: Title) -> None: ...


class SqliteTitleDao:
    """TitleDao that keeps the title in one SQLite row.

    Every insert replaces the row, so there is only ever one title. Writes
    run in a worker thread and are serialized; each committed write is
    published to title_live_data.
    """

    def __init__(self, path: str = ":memory:") -> None:
        self._path = path
        self._conn = sqlite3.connect(path, check_same_thread=False)
        self._conn.execute(CREATE_TABLE_SQL)
        self._conn.commit()
        self._lock = asyncio.Lock()
        self._title: MutableLiveValue[Title | None] = MutableLiveValue(self._load())
        logger.info("Opened title database", path=path, has_title=self._title.value is not None)

    @property
    def title_live_data(self) -> LiveValue[Title | None]:
        """Observable view of the stored title, None until one is inserted."""
        return self._title

    async def insert_title(self, title: Title) -> None:
        """Insert or replace the stored title.

        Once the write has started it runs to completion and is published,
        even if the caller is cancelled. Cancellation while waiting for an
        earlier write means this one is never issued.
        """
        async with self._lock:
            write = asyncio.ensure_future(self._write_and_publish(title))
            try:
                await asyncio.shield(write)
            except asyncio.CancelledError:
                # The row may already be committed; hold the lock until it is published.
                await write
                raise

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()

    def _load(self) -> Title | None:
        row = self._conn.execute(SELECT_TITLE_SQL, (TITLE_ROW_ID,)).fetchone()
        return Title(row[0]) if row else None

    async def _write_and_publish(self, title: Title) -> None:
        await asyncio.to_thread(self._write, title)
        logger.info("Stored title", title=title.title)
        self._title.set(title)

    def _write(self, title: Title) -> None:
        with self._conn:
            self._conn.execute(INSERT_TITLE_SQL, (TITLE_ROW_ID, title.title))
