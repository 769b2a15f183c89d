from stickynotes.cli import main
from stickynotes.models import UpdateNoteBodyEvent
from stickynotes.registry import init


def _seed(path, count, hide=()):
    registry = init(path)
    handler = registry.app_handler.note_handler
    notes = [handler.create_note() for _ in range(count)]
    for index in hide:
        handler.toggle_note_active(notes[index].id)
    registry.database.close()
    return notes


def test_empty_database_lists_nothing(tmp_path, capsys):
    assert main(["--database", str(tmp_path / "notes.sqlite")]) == 0
    assert capsys.readouterr().out == ""


def test_lists_active_notes(tmp_path, capsys):
    path = tmp_path / "notes.sqlite"
    notes = _seed(path, 2, hide=(0,))

    assert main(["--database", str(path)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert [line.split("\t")[0] for line in lines] == [notes[1].id]


def test_shows_first_line_of_body(tmp_path, capsys):
    path = tmp_path / "notes.sqlite"
    (note,) = _seed(path, 1)
    registry = init(path)
    registry.app_handler.note_handler.update_note_body(
        UpdateNoteBodyEvent(id=note.id, body="milk\neggs")
    )
    registry.database.close()

    main(["--database", str(path)])

    line = capsys.readouterr().out.splitlines()[0]
    assert line.split("\t")[-1] == "milk"


def test_unopenable_database_fails(tmp_path, capsys):
    assert main(["--database", str(tmp_path / "missing" / "notes.sqlite")]) == 1
    assert "Failed to connect to database" in capsys.readouterr().err