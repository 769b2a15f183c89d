"""Application-level operations on notes."""

from __future__ import annotations

from typing import List, Optional

from .models import (
    Note,
    UpdateNoteActiveEvent,
    UpdateNoteBodyEvent,
    UpdateNoteBoundsEvent,
)
from .repository import NoteRepository, RepositoryError


class NoteHandler:
    """Operations the user interface performs on notes."""

    def __init__(self, repository: NoteRepository) -> None:
        self.repository = repository

    def create_note(self) -> Note:
        """Create and return a new note."""
        return self.repository.create_note()

    def get_all(self) -> List[Note]:
        """Return every note, or an empty list if storage fails."""
        try:
            return self.repository.get_notes()
        except RepositoryError:
            return []

    def get_by_id(self, note_id: str) -> Optional[Note]:
        """Return the note with ``note_id``, or ``None`` if absent or unreadable."""
        try:
            return self.repository.get_note_by_id(note_id)
        except RepositoryError:
            return None

    def update_note_body(self, event: UpdateNoteBodyEvent) -> None:
        self.repository.update_note_body(event)

    def update_note_bounds(self, event: UpdateNoteBoundsEvent) -> None:
        self.repository.update_note_bounds(event)

    def toggle_note_active(self, note_id: str) -> None:
        """Flip whether a note is shown; does nothing for an unknown id."""
        note = self.repository.get_note_by_id(note_id)
        if note is not None:
            self.repository.update_note_active(
                UpdateNoteActiveEvent(id=note.id, is_active=not note.is_active)
            )

    def delete_note(self, note_id: str) -> None:
        self.repository.delete_note_by_id(note_id)