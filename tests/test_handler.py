import pytest

from stickynotes.db import Database
from stickynotes.handler import NoteHandler
from stickynotes.models import (
    Bounds,
    Point,
    Size,
    UpdateNoteBodyEvent,
    UpdateNoteBoundsEvent,
)
from stickynotes.repository import (
    NoteRepository,
    RepositoryError,
    SqliteNoteRepository,
)


class FailingRepository(NoteRepository):
    def _fail(self, *args):
        raise RepositoryError("storage unavailable")

    get_notes = _fail
    get_note_by_id = _fail
    create_note = _fail
    update_note_body = _fail
    update_note_bounds = _fail
    update_note_active = _fail
    delete_note_by_id = _fail


@pytest.fixture
def handler():
    db = Database(":memory:")
    db.prepare_database()
    yield NoteHandler(SqliteNoteRepository(db.connection))
    db.close()


def test_create_and_get_by_id(handler):
    note = handler.create_note()
    assert handler.get_by_id(note.id) == note


def test_get_all_lists_created_notes(handler):
    created = {handler.create_note().id for _ in range(3)}
    assert {note.id for note in handler.get_all()} == created


def test_get_by_missing_id(handler):
    assert handler.get_by_id("missing") is None


def test_update_body(handler):
    note = handler.create_note()
    handler.update_note_body(UpdateNoteBodyEvent(note.id, "buy milk"))
    assert handler.get_by_id(note.id).body == "buy milk"


def test_update_bounds(handler):
    note = handler.create_note()
    bounds = Bounds(Point(1.0, 2.0), Size(3.0, 4.0))
    handler.update_note_bounds(UpdateNoteBoundsEvent(note.id, bounds))
    stored = handler.get_by_id(note.id)
    assert (stored.location_x, stored.location_y, stored.width, stored.height) == (
        1.0,
        2.0,
        3.0,
        4.0,
    )


def test_toggle_note_active_flips_twice(handler):
    note = handler.create_note()
    handler.toggle_note_active(note.id)
    assert handler.get_by_id(note.id).is_active is False
    handler.toggle_note_active(note.id)
    assert handler.get_by_id(note.id).is_active is True


def test_toggle_unknown_note_changes_nothing(handler):
    note = handler.create_note()
    handler.toggle_note_active("missing")
    assert handler.get_all() == [note]


def test_delete_note(handler):
    note = handler.create_note()
    handler.delete_note(note.id)
    assert handler.get_all() == []


def test_get_all_swallows_storage_errors():
    assert NoteHandler(FailingRepository()).get_all() == []


def test_get_by_id_swallows_storage_errors():
    assert NoteHandler(FailingRepository()).get_by_id("x") is None


def test_create_note_propagates_storage_errors():
    with pytest.raises(RepositoryError):
        NoteHandler(FailingRepository()).create_note()


def test_delete_note_propagates_storage_errors():
    with pytest.raises(RepositoryError):
        NoteHandler(FailingRepository()).delete_note("x")