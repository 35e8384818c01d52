"""Read-only SQLite connection manager for stored daily summaries."""
import sqlite3
from contextlib import contextmanager
from typing import Generator
import logging

from .config import get_settings

log = logging.getLogger(__name__)


class DatabaseManager:
    """
    Read-only SQLite database manager for daily summaries.
    The logging subsystem owns writes; the dashboard only reads.
    """

    def __init__(self, settings=None):
        self.settings = settings or get_settings()

    @contextmanager
    def get_summary_conn(self) -> Generator[sqlite3.Connection, None, None]:
        """Get read-only connection to the daily summary database."""
        yield from self._connect(self.settings.summary_db_path)

    def _connect(self, db_path: str) -> Generator[sqlite3.Connection, None, None]:
        """
        Create a read-only connection with proper isolation.
        Uses URI mode with mode=ro to ensure read-only access.
        """
        uri = f"file:{db_path}?mode=ro"
        log.debug(f"[API] Opening {uri}")
        conn = sqlite3.connect(uri, uri=True, check_same_thread=False)
        conn.row_factory = sqlite3.Row  # Enable dict-like row access
        try:
            yield conn
        finally:
            conn.close()


# Singleton instance
db_manager = DatabaseManager()
