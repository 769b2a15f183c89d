"""Persistence of notes."""

from __future__ import annotations

import sqlite3
from abc import ABC, abstractmethod
from typing import List, Optional

from .db import gen_id
from .models import (
    Note,
    UpdateNoteActiveEvent,
    UpdateNoteBodyEvent,
    UpdateNoteBoundsEvent,
)

NEW_NOTE_BODY = ""
NEW_NOTE_SIZE = 200
NEW_NOTE_LOCATION = 200

_SELECT = """
SELECT
  id
, body
, width
, height
, location_x
, location_y
, is_active
FROM notes
"""


class RepositoryError(Exception):
    """A storage operation failed."""


class NoteRepository(ABC):
    """Storage of notes."""

    @abstractmethod
    def get_notes(self) -> List[Note]:
        """Return every note, newest first."""

    @abstractmethod
    def get_note_by_id(self, note_id: str) -> Optional[Note]:
        """Return the note with ``note_id``, or ``None``."""

    @abstractmethod
    def create_note(self) -> Note:
        """Store a new empty note and return it."""

    @abstractmethod
    def update_note_body(self, event: UpdateNoteBodyEvent) -> str:
        """Replace a note's text; return its id."""

    @abstractmethod
    def update_note_bounds(self, event: UpdateNoteBoundsEvent) -> str:
        """Store a note's position and size; return its id."""

    @abstractmethod
    def update_note_active(self, event: UpdateNoteActiveEvent) -> None:
        """Mark a note as shown or hidden."""

    @abstractmethod
    def delete_note_by_id(self, note_id: str) -> None:
        """Remove a note."""


def _row_to_note(row) -> Note:
    note_id, body, width, height, location_x, location_y, is_active = row
    return Note(
        id=note_id,
        body=body,
        width=float(width),
        height=float(height),
        location_x=float(location_x),
        location_y=float(location_y),
        is_active=bool(is_active),
    )


class SqliteNoteRepository(NoteRepository):
    """Notes kept in the ``notes`` table of a SQLite connection."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection

    def _query(self, sql: str, params=()) -> list:
        try:
            return self.connection.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            raise RepositoryError(str(exc)) from exc

    def _write(self, sql: str, params) -> None:
        try:
            with self.connection:
                self.connection.execute(sql, params)
        except sqlite3.Error as exc:
            raise RepositoryError(str(exc)) from exc

    def get_notes(self) -> List[Note]:
        return [_row_to_note(row) for row in self._query(_SELECT + "ORDER BY id DESC")]

    def get_note_by_id(self, note_id: str) -> Optional[Note]:
        rows = self._query(_SELECT + "WHERE id = ?", (note_id,))
        return _row_to_note(rows[0]) if rows else None

    def create_note(self) -> Note:
        note_id = gen_id()
        self._write(
            """
            insert into notes (
              id, body, is_active, width, height, location_x, location_y
            ) values (?, ?, ?, ?, ?, ?, ?)
            """,
            (
                note_id,
                NEW_NOTE_BODY,
                True,
                NEW_NOTE_SIZE,
                NEW_NOTE_SIZE,
                NEW_NOTE_LOCATION,
                NEW_NOTE_LOCATION,
            ),
        )
        note = self.get_note_by_id(note_id)
        if note is None:
            raise RepositoryError(f"note {note_id} vanished after insert")
        return note

    def update_note_body(self, event: UpdateNoteBodyEvent) -> str:
        self._write("update notes set body = ? where id = ?", (event.body, event.id))
        return event.id

    def update_note_bounds(self, event: UpdateNoteBoundsEvent) -> str:
        bounds = event.bounds
        self._write(
            """
            update notes set
              width = ?
            , height = ?
            , location_x = ?
            , location_y = ?
            where id = ?
            """,
            (
                float(bounds.size.width),
                float(bounds.size.height),
                float(bounds.origin.x),
                float(bounds.origin.y),
                event.id,
            ),
        )
        return event.id

    def update_note_active(self, event: UpdateNoteActiveEvent) -> None:
        self._write(
            "update notes set is_active = ? where id = ?",
            (bool(event.is_active), event.id),
        )

    def delete_note_by_id(self, note_id: str) -> None:
        self._write("delete from notes where id = ?", (note_id,))