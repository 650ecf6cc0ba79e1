"""SQLite storage for processed business cards.

Each operation opens its own connection, so one repository can be shared
between threads. ":memory:" databases keep a single connection for the
repository's lifetime instead, guarded by a lock.
"""

import sqlite3
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional
import logging

from cardreader.config import get_db_path
from cardreader.exceptions import StorageError
from cardreader.schema import ContactRecord

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS cards (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT,
    email TEXT,
    phone TEXT,
    company TEXT,
    created_at TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_cards_created_at ON cards(created_at);
"""

MEMORY_DB = ":memory:"


class CardRepository:
    """Persists ContactRecords and lists them newest first."""

    def __init__(self, db_path: Optional[str] = None):
        """
        Initialize repository and create the schema if needed.

        Args:
            db_path: SQLite file path. If None, uses CARDREADER_DB_PATH
                    (default cards.db). ":memory:" is supported.
        """
        self.db_path = str(db_path or get_db_path())
        self._lock = threading.Lock()
        self._memory_conn: Optional[sqlite3.Connection] = None

        if self.db_path == MEMORY_DB:
            self._memory_conn = sqlite3.connect(MEMORY_DB, check_same_thread=False)
        else:
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)

        with self._connection() as conn:
            conn.executescript(SCHEMA)

    @contextmanager
    def _connection(self):
        """Yield a connection, committing on success and rolling back on error."""
        try:
            if self._memory_conn is not None:
                with self._lock:
                    with self._memory_conn:
                        yield self._memory_conn
            else:
                conn = sqlite3.connect(self.db_path, timeout=5.0)
                try:
                    with conn:
                        yield conn
                finally:
                    conn.close()
        except sqlite3.Error as e:
            logger.error(f"Database error on {self.db_path}: {e}")
            raise StorageError(f"Database error: {e}") from e

    def persist(self, record: ContactRecord) -> int:
        """
        Store a contact record.

        Args:
            record: Sanitized ContactRecord (its id, if any, is ignored)

        Returns:
            Identity assigned to the stored card
        """
        with self._connection() as conn:
            cursor = conn.execute(
                "INSERT INTO cards (name, email, phone, company, created_at) "
                "VALUES (?, ?, ?, ?, ?)",
                (
                    record.name,
                    record.email,
                    record.phone,
                    record.company,
                    record.created_at.astimezone(timezone.utc).isoformat(),
                ),
            )
            card_id = cursor.lastrowid

        logger.debug(f"Stored card {card_id}")
        return card_id

    def list_all(self) -> List[ContactRecord]:
        """
        All stored cards, newest first.

        Returns:
            List of ContactRecords carrying their identity
        """
        with self._connection() as conn:
            rows = conn.execute(
                "SELECT id, name, email, phone, company, created_at FROM cards "
                "ORDER BY created_at DESC, id DESC"
            ).fetchall()

        return [self._row_to_record(row) for row in rows]

    def count(self) -> int:
        with self._connection() as conn:
            return conn.execute("SELECT COUNT(*) FROM cards").fetchone()[0]

    def close(self):
        """Release the in-memory connection, if any."""
        if self._memory_conn is not None:
            self._memory_conn.close()
            self._memory_conn = None

    @staticmethod
    def _row_to_record(row) -> ContactRecord:
        card_id, name, email, phone, company, created_at = row
        return ContactRecord(
            id=card_id,
            name=name,
            email=email,
            phone=phone,
            company=company,
            created_at=datetime.fromisoformat(created_at),
        )
