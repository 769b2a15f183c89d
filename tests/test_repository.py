import pytest

from stickynotes.db import Database
from stickynotes.models import (
    Bounds,
    Point,
    Size,
    UpdateNoteActiveEvent,
    UpdateNoteBodyEvent,
    UpdateNoteBoundsEvent,
)
from stickynotes.repository import (
    NoteRepository,
    RepositoryError,
    SqliteNoteRepository,
)


@pytest.fixture
def repo():
    db = Database(":memory:")
    db.prepare_database()
    yield SqliteNoteRepository(db.connection)
    db.close()


def test_create_note_uses_defaults(repo):
    note = repo.create_note()
    assert note.body == ""
    assert note.is_active is True
    assert (note.width, note.height) == (200.0, 200.0)
    assert (note.location_x, note.location_y) == (200.0, 200.0)


def test_created_note_can_be_fetched(repo):
    note = repo.create_note()
    assert repo.get_note_by_id(note.id) == note


def test_get_note_by_missing_id_returns_none(repo):
    assert repo.get_note_by_id("missing") is None


def test_get_notes_empty(repo):
    assert repo.get_notes() == []


def test_get_notes_sorted_by_id_descending(repo):
    created = [repo.create_note() for _ in range(5)]
    ids = [note.id for note in repo.get_notes()]
    assert ids == sorted((note.id for note in created), reverse=True)


def test_update_note_body(repo):
    note = repo.create_note()
    returned = repo.update_note_body(UpdateNoteBodyEvent(note.id, "hello"))
    assert returned == note.id
    assert repo.get_note_by_id(note.id).body == "hello"


def test_update_note_bounds(repo):
    note = repo.create_note()
    bounds = Bounds(Point(10.5, 20.0), Size(300.0, 400.25))
    returned = repo.update_note_bounds(UpdateNoteBoundsEvent(note.id, bounds))
    stored = repo.get_note_by_id(note.id)
    assert returned == note.id
    assert (stored.location_x, stored.location_y) == (10.5, 20.0)
    assert (stored.width, stored.height) == (300.0, 400.25)


def test_update_note_active(repo):
    note = repo.create_note()
    repo.update_note_active(UpdateNoteActiveEvent(note.id, False))
    assert repo.get_note_by_id(note.id).is_active is False
    repo.update_note_active(UpdateNoteActiveEvent(note.id, True))
    assert repo.get_note_by_id(note.id).is_active is True


def test_update_only_touches_target(repo):
    first = repo.create_note()
    second = repo.create_note()
    repo.update_note_body(UpdateNoteBodyEvent(first.id, "changed"))
    assert repo.get_note_by_id(second.id) == second


def test_delete_note(repo):
    keep = repo.create_note()
    gone = repo.create_note()
    repo.delete_note_by_id(gone.id)
    assert repo.get_note_by_id(gone.id) is None
    assert repo.get_notes() == [keep]


def test_missing_table_raises_repository_error():
    db = Database(":memory:")
    repo = SqliteNoteRepository(db.connection)
    with pytest.raises(RepositoryError):
        repo.get_notes()
    with pytest.raises(RepositoryError):
        repo.create_note()
    db.close()


def test_repository_is_abstract():
    with pytest.raises(TypeError):
        NoteRepository()