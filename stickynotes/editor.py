"""Note editor windows and the delegate that opens them."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .geometry import (
    Direction,
    Location,
    WindowSize,
    inflate_bounds,
    make_editor_bounds,
    move_bounds,
    shrink_bounds,
)
from .handler import NoteHandler
from .models import Bounds, Note, Size, UpdateNoteBodyEvent, UpdateNoteBoundsEvent
from .registry import NoteStore, Registry

CONTEXT = "Editor"

OpenWindow = Callable[[Bounds, str], "Editor"]


class Action(Enum):
    """Commands an editor window responds to."""

    NEW_EDITOR = "editor::NewEditor"
    CLOSE_EDITOR = "editor::CloseEditor"
    MOVE_WINDOW_UP = "editor::MoveWindowUp"
    MOVE_WINDOW_DOWN = "editor::MoveWindowDown"
    MOVE_WINDOW_RIGHT = "editor::MoveWindowRight"
    MOVE_WINDOW_LEFT = "editor::MoveWindowLeft"
    INFLATE_TOP = "editor::InflateTop"
    INFLATE_BOTTOM = "editor::InflateBottom"
    INFLATE_RIGHT = "editor::InflateRight"
    INFLATE_LEFT = "editor::InflateLeft"
    SHRINK_BOTTOM = "editor::ShrinkBottom"
    SHRINK_TOP = "editor::ShrinkTop"
    SHRINK_RIGHT = "editor::ShrinkRight"
    SHRINK_LEFT = "editor::ShrinkLeft"


_MAC_ONLY = "mac"
_BINDINGS: List[Tuple[str, Action, bool]] = [
    ("cmd-n", Action.NEW_EDITOR, True),
    ("cmd-w", Action.CLOSE_EDITOR, True),
    ("ctrl-k", Action.MOVE_WINDOW_UP, False),
    ("ctrl-j", Action.MOVE_WINDOW_DOWN, False),
    ("ctrl-l", Action.MOVE_WINDOW_RIGHT, False),
    ("ctrl-h", Action.MOVE_WINDOW_LEFT, False),
    ("cmd-k", Action.INFLATE_TOP, True),
    ("cmd-j", Action.INFLATE_BOTTOM, True),
    ("cmd-l", Action.INFLATE_RIGHT, True),
    ("cmd-h", Action.INFLATE_LEFT, True),
    ("cmd-shift-k", Action.SHRINK_BOTTOM, True),
    ("cmd-shift-j", Action.SHRINK_TOP, True),
    ("cmd-shift-l", Action.SHRINK_LEFT, True),
    ("cmd-shift-h", Action.SHRINK_RIGHT, True),
]


def key_bindings(platform: Optional[str] = None) -> List[Tuple[str, Action]]:
    """Keystrokes bound in the editor context on ``platform`` (default: this one)."""
    is_mac = (platform or sys.platform) == "darwin"
    return [(keys, action) for keys, action, mac_only in _BINDINGS if is_mac or not mac_only]


class Editor:
    """One window editing one note."""

    def __init__(
        self,
        registry: Registry,
        note_id: str,
        bounds: Bounds,
        open_window: OpenWindow,
        viewport: Optional[Size] = None,
    ) -> None:
        note = registry.app_handler.note_handler.get_by_id(note_id)
        if note is None:
            raise LookupError(f"no note with id {note_id}")
        self.registry = registry
        self.id = note_id
        self.text = note.body
        self._bounds = bounds
        self.viewport = viewport if viewport is not None else bounds.size
        self.closed = False
        self._open_window = open_window

    @property
    def _handler(self) -> NoteHandler:
        return self.registry.app_handler.note_handler

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    @bounds.setter
    def bounds(self, value: Bounds) -> None:
        self._bounds = value
        self.viewport = value.size
        self._handler.update_note_bounds(UpdateNoteBoundsEvent(id=self.id, bounds=value))

    def on_input(self, text: str) -> None:
        """Take the new text of the note and store it."""
        self.text = text
        self._handler.update_note_body(UpdateNoteBodyEvent(id=self.id, body=text))

    def dispatch(self, action: Action):
        """Run the command bound to ``action``."""
        commands = {
            Action.NEW_EDITOR: self.new_editor,
            Action.CLOSE_EDITOR: self.close_editor,
            Action.MOVE_WINDOW_UP: lambda: self.move_window(Direction.UP),
            Action.MOVE_WINDOW_DOWN: lambda: self.move_window(Direction.DOWN),
            Action.MOVE_WINDOW_RIGHT: lambda: self.move_window(Direction.RIGHT),
            Action.MOVE_WINDOW_LEFT: lambda: self.move_window(Direction.LEFT),
            Action.INFLATE_TOP: lambda: self.inflate(Direction.UP),
            Action.INFLATE_BOTTOM: lambda: self.inflate(Direction.DOWN),
            Action.INFLATE_RIGHT: lambda: self.inflate(Direction.RIGHT),
            Action.INFLATE_LEFT: lambda: self.inflate(Direction.LEFT),
            Action.SHRINK_BOTTOM: lambda: self.shrink(Direction.DOWN),
            Action.SHRINK_TOP: lambda: self.shrink(Direction.UP),
            Action.SHRINK_RIGHT: lambda: self.shrink(Direction.RIGHT),
            Action.SHRINK_LEFT: lambda: self.shrink(Direction.LEFT),
        }
        return commands[action]()

    def new_editor(self) -> Note:
        """Create a note and hand it to the store, which opens its window."""
        note = self._handler.create_note()
        self.registry.add_note(note)
        return note

    def close_editor(self) -> None:
        """Hide the note and close this window."""
        self._handler.toggle_note_active(self.id)
        self.closed = True

    def _reopen(self, bounds: Bounds) -> "Editor":
        self._handler.update_note_bounds(UpdateNoteBoundsEvent(id=self.id, bounds=bounds))
        self.closed = True
        return self._open_window(bounds, self.id)

    def move_window(self, direction: Direction) -> "Editor":
        """Reopen the window one step away in ``direction``."""
        return self._reopen(move_bounds(self._bounds, self.viewport, direction))

    def inflate(self, direction: Direction) -> "Editor":
        """Reopen the window grown by one step toward ``direction``."""
        return self._reopen(inflate_bounds(self._bounds, self.viewport, direction))

    def shrink(self, direction: Direction) -> "Editor":
        """Reopen the window with its ``direction`` edge pulled in one step."""
        return self._reopen(shrink_bounds(self._bounds, self.viewport, direction))


class EditorDelegate:
    """Opens an editor window for every active note."""

    def __init__(self, registry: Registry) -> None:
        self.registry = registry
        self.editors: List[Editor] = []

    def _open_window(self, bounds: Bounds, note_id: str) -> Editor:
        editor = Editor(self.registry, note_id, bounds, self._open_window)
        self.editors.append(editor)
        return editor

    def render_notes(self) -> None:
        """Open the stored notes, then open new notes as they are added."""
        for note in list(self.registry.note_store.notes):
            self.render_note(note)

        def render_new(store: NoteStore) -> None:
            for note in list(store.new_notes):
                self.render_note(note)

        self.registry.note_store.observe(render_new)

    def render_note(self, note: Note) -> Optional[Editor]:
        """Open a window for ``note`` where it was left; skip hidden notes."""
        if not note.is_active:
            return None
        bounds = make_editor_bounds(
            Location(note.location_x, note.location_y),
            WindowSize(note.width, note.height),
        )
        return self._open_window(bounds, note.id)