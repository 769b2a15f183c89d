# stickynotes

Sticky notes kept in a local SQLite database. Each note stores its text,
its window size and position, and whether it is active (shown). The
package covers storing notes, working out where a note window goes when
it is moved or resized in fixed steps, and debouncing repeated calls.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command

```
sticky [--database PATH]
```

`sticky` opens the database (`./database.sqlite` by default) and creates
the `notes` table if it is missing. It then opens an editor for every
active note, at that note's saved position and size. For each editor it
prints one tab-separated line: the note id, the position `x,y`, the size
`WIDTHxHEIGHT` and the first line of the text. If the database cannot be
opened it prints the error to standard error and exits with status 1.

## What it does not do

The package draws no windows and reads no keyboard input. An `Editor` is
a plain object that holds a note's text and bounds. `sticky` only lists
the editors it would show. It does not put them on screen. Editing,
moving and resizing happen only through the `Editor` methods.

## Editor commands

`stickynotes.editor.key_bindings(platform)` returns the keystrokes bound
in the editor context as `(keys, Action)` pairs. The `cmd-` bindings are
included only when the platform is `"darwin"`. The platform defaults to
the current one.

| Keys          | Action                                         |
|---------------|------------------------------------------------|
| `ctrl-k/j/l/h`| move the window up/down/right/left             |
| `cmd-n`       | new note (macOS)                               |
| `cmd-w`       | close the note (macOS)                         |
| `cmd-k/j/l/h` | grow toward the top/bottom/right/left (macOS)  |
| `cmd-shift-k` | shrink from the bottom (macOS)                 |
| `cmd-shift-j` | shrink from the top (macOS)                    |
| `cmd-shift-l` | shrink from the left (macOS)                   |
| `cmd-shift-h` | shrink from the right (macOS)                  |

`Editor.dispatch(action)` runs the command for an `Action`:

- Moves and resizes go in steps of 100 pixels.
- Shrinking never takes a window below 30 pixels wide or 5 pixels high.
- Each move or resize stores the new bounds and marks the current editor
  closed. It then opens a replacement editor at the new bounds.
- `on_input(text)` stores the new body straight away.
- `close_editor()` toggles the note's active flag, so an active note
  becomes inactive. The note is not deleted.
- `new_editor()` creates a note and adds it to the note store. An
  `EditorDelegate` that has run `render_notes()` opens an editor for it.

## Library use

- `stickynotes.models`: `Note`, `Point`, `Size`, `Bounds`, and the
  events `UpdateNoteBodyEvent`, `UpdateNoteBoundsEvent` and
  `UpdateNoteActiveEvent`.
- `stickynotes.db`:
  - `Database(path)`, with `connect`, `prepare_database`, `close`, and
    use as a context manager.
  - `gen_id()`, which returns a new 26-character ULID.
- `stickynotes.repository`: the abstract `NoteRepository` and its SQLite
  implementation `SqliteNoteRepository`. Storage failures raise
  `RepositoryError`. New notes have an empty body, size 200×200 and
  position 200,200. `get_notes()` orders notes by id, descending.
- `stickynotes.handler`: `NoteHandler`, with `create_note`, `get_all`,
  `get_by_id`, `update_note_body`, `update_note_bounds`,
  `toggle_note_active` and `delete_note`. `get_all` returns an empty list
  when storage fails, and `get_by_id` returns `None`.
- `stickynotes.registry`: `init(path)` opens and prepares the database.
  It returns a `Registry` that holds the database, an `AppHandler` and a
  `NoteStore` loaded with every note. `NoteStore.observe(callback)` is
  notified whenever `add_note` is called. `init` raises `RuntimeError`
  when the database cannot be opened.
- `stickynotes.geometry`:
  - `Direction`, `Location` and `WindowSize`.
  - `make_editor_bounds`.
  - `move_bounds`, `inflate_bounds` and `shrink_bounds`, which compute
    new bounds and change nothing else.
- `stickynotes.editor`: `Action`, `key_bindings`, `Editor` and
  `EditorDelegate`.
- `stickynotes.debounce`: `Bouncer(delay)`, with `delay` in seconds or as
  a `timedelta`.
  - The first call always runs.
  - A later call runs only when more than `delay` has passed since the
    last call that ran. Otherwise `debounce(func)` returns `None`.
  - `with_func` binds a function for `execute()`, which keeps its
    outcome in `result`.
  - `reset()` lets the next call through.