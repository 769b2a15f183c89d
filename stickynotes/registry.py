"""Application-wide state: the note handler and the store of notes to show."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Union

from .db import DEFAULT_PATH, Database
from .handler import NoteHandler
from .models import Note
from .repository import SqliteNoteRepository


@dataclass
class AppHandler:
    """Holds the handler through which the interface reaches the notes."""

    note_handler: NoteHandler

    @staticmethod
    def from_connection(connection: sqlite3.Connection) -> "AppHandler":
        """Build a handler backed by the ``notes`` table of ``connection``."""
        return AppHandler(NoteHandler(SqliteNoteRepository(connection)))


@dataclass
class NoteStore:
    """Notes loaded at start-up and notes created while running."""

    notes: List[Note]
    new_notes: List[Note] = field(default_factory=list)
    _observers: List[Callable[["NoteStore"], None]] = field(
        default_factory=list, repr=False, compare=False
    )

    def add_note(self, note: Note) -> None:
        """Record a newly created note and notify every observer."""
        self.new_notes.append(note)
        for callback in list(self._observers):
            callback(self)

    def observe(self, callback: Callable[["NoteStore"], None]) -> None:
        """Call ``callback`` with the store each time it changes."""
        self._observers.append(callback)


@dataclass
class Registry:
    """The open database together with the handler and store built on it."""

    database: Database
    app_handler: AppHandler
    note_store: NoteStore

    def add_note(self, note: Note) -> None:
        """Record a newly created note in the store."""
        self.note_store.add_note(note)


def init(path: Union[str, Path] = DEFAULT_PATH) -> Registry:
    """Open the database at ``path``, prepare it and load every note."""
    try:
        database = Database(path)
        database.prepare_database()
    except sqlite3.Error as exc:
        raise RuntimeError(f"Failed to connect to database: {exc}") from exc
    app_handler = AppHandler.from_connection(database.connection)
    note_store = NoteStore(notes=app_handler.note_handler.get_all())
    return Registry(database=database, app_handler=app_handler, note_store=note_store)