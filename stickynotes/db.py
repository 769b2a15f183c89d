"""SQLite storage for notes and identifier generation."""

from __future__ import annotations

import os
import sqlite3
import time
from pathlib import Path
from typing import Union

DEFAULT_PATH = "./database.sqlite"

_CROCKFORD = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
_TIMESTAMP_MASK = (1 << 48) - 1

_SCHEMA = """
CREATE TABLE IF NOT EXISTS notes (
  id TEXT NOT NULL
, body TEXT NOT NULL
, width INTEGER NOT NULL
, height INTEGER NOT NULL
, location_x INTEGER NOT NULL
, location_y INTEGER NOT NULL
, is_active BOOLEAN NOT NULL
);
"""


def gen_id() -> str:
    """Return a new ULID: 26 Crockford base-32 characters, sortable by time."""
    millis = (time.time_ns() // 1_000_000) & _TIMESTAMP_MASK
    value = (millis << 80) | int.from_bytes(os.urandom(10), "big")
    chars = []
    for _ in range(26):
        chars.append(_CROCKFORD[value & 0x1F])
        value >>= 5
    return "".join(reversed(chars))


class Database:
    """An open SQLite database holding the notes table."""

    def __init__(self, path: Union[str, Path] = DEFAULT_PATH) -> None:
        self.connection = self.connect(path)

    @staticmethod
    def connect(path: Union[str, Path]) -> sqlite3.Connection:
        """Open the database file at ``path`` in autocommit mode."""
        return sqlite3.connect(path, isolation_level=None)

    def prepare_database(self) -> None:
        """Create the notes table if it does not exist."""
        self.connection.execute(_SCHEMA)

    def close(self) -> None:
        """Close the underlying connection."""
        self.connection.close()

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()