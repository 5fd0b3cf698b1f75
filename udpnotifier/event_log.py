"""A journal of sent messages kept in a SQLite database."""

from __future__ import annotations

import sqlite3
from datetime import datetime
from typing import Optional

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_CREATE_TABLE = (
    "CREATE TABLE logs ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT,"
    "message TEXT NOT NULL,"
    "timestamp TEXT NOT NULL DEFAULT (datetime('now', 'localtime'))"
    ")"
)


def format_timestamp(moment: datetime) -> str:
    """Format a moment as the journal stores it."""
    return moment.strftime(TIMESTAMP_FORMAT)


class EventLog:
    """The ``logs`` table: one row per message sent."""

    def __init__(self, path: str = ":memory:") -> None:
        self.path = path
        self._connection = sqlite3.connect(path)
        self.ensure_table()

    def ensure_table(self) -> bool:
        """Create the ``logs`` table if it is missing; return whether it was created."""
        row = self._connection.execute(
            "SELECT EXISTS (SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = 'logs')"
        ).fetchone()
        if row[0]:
            return False
        with self._connection:
            self._connection.execute(_CREATE_TABLE)
        return True

    def check(self) -> bool:
        """Run a trivial query to confirm the database answers."""
        return self._connection.execute("SELECT 1").fetchone()[0] == 1

    def log_event(self, message: str, moment: Optional[datetime] = None) -> int:
        """Record a message with its time; return the new row's id."""
        timestamp = format_timestamp(moment if moment is not None else datetime.now())
        with self._connection:
            cursor = self._connection.execute(
                "INSERT INTO logs (message, timestamp) VALUES (?, ?)",
                (message, timestamp),
            )
        return int(cursor.lastrowid)

    def entries(self) -> list[tuple[int, str, str]]:
        """All recorded (id, message, timestamp) rows, oldest first."""
        return list(
            self._connection.execute("SELECT id, message, timestamp FROM logs ORDER BY id")
        )

    def close(self) -> None:
        self._connection.close()

    def __enter__(self) -> EventLog:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()