"""SQLite connection manager for captured leads."""
import sqlite3
from contextlib import contextmanager
from typing import Generator, Optional
import logging

from .config import get_settings

log = logging.getLogger(__name__)

LEADS_SCHEMA = """
CREATE TABLE IF NOT EXISTS leads (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    email TEXT NOT NULL,
    source TEXT NOT NULL,
    utm TEXT,
    created_at TEXT NOT NULL
)
"""


class DatabaseManager:
    """
    SQLite database manager for the leads store.
    Opens a short-lived connection per operation so concurrent
    requests never share a connection.
    """

    def __init__(self, settings=None):
        self.settings = settings or get_settings()

    @property
    def leads_db_path(self) -> Optional[str]:
        return self.settings.leads_db_path

    @property
    def leads_enabled(self) -> bool:
        """True when a leads database is configured."""
        return self.leads_db_path is not None

    @contextmanager
    def get_leads_conn(self) -> Generator[sqlite3.Connection, None, None]:
        """Get a read-write connection to the leads database, schema ensured."""
        if not self.leads_enabled:
            raise RuntimeError("Leads database is not configured")
        yield from self._connect(self.leads_db_path)

    def _connect(self, db_path: str) -> Generator[sqlite3.Connection, None, None]:
        """
        Create a connection that commits on success and rolls back on error.
        """
        log.debug(f"Opening leads database: {db_path}")
        conn = sqlite3.connect(db_path, check_same_thread=False)
        conn.row_factory = sqlite3.Row  # Enable dict-like row access
        try:
            conn.execute(LEADS_SCHEMA)
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()


# Singleton instance
db_manager = DatabaseManager()
