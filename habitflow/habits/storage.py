"""Simple SQLite key-value storage for persisted app state."""

import logging
import sqlite3
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class KeyValueStorage:
    """String key-value storage backed by a single SQLite table."""

    def __init__(self, db_path: str = "data/habitflow.db"):
        """Initialize storage."""
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self):
        """Create the storage table if it doesn't exist."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS storage (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)
            conn.commit()
        logger.info(f"Storage initialized at {self.db_path}")

    def get_item(self, key: str) -> Optional[str]:
        """Get the raw value stored under key."""
        with sqlite3.connect(self.db_path) as conn:
            row = conn.execute(
                "SELECT value FROM storage WHERE key = ?", (key,)
            ).fetchone()

        if not row:
            return None

        return row[0]

    def set_item(self, key: str, value: str):
        """Store value under key, replacing any previous value."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute(
                "INSERT OR REPLACE INTO storage (key, value) VALUES (?, ?)",
                (key, value),
            )
            conn.commit()
        logger.debug(f"Stored {len(value)} bytes under '{key}'")
