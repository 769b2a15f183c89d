"""Value types shared by the storage, handler and window layers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A position on screen, in pixels."""

    x: float
    y: float


@dataclass(frozen=True)
class Size:
    """A width and height, in pixels."""

    width: float
    height: float


@dataclass(frozen=True)
class Bounds:
    """A rectangle described by its top-left origin and its size."""

    origin: Point
    size: Size


@dataclass(frozen=True)
class Note:
    """A sticky note as stored and shown."""

    id: str
    body: str
    width: float
    height: float
    location_x: float
    location_y: float
    is_active: bool


@dataclass(frozen=True)
class UpdateNoteBodyEvent:
    """Request to replace the text of a note."""

    id: str
    body: str


@dataclass(frozen=True)
class UpdateNoteBoundsEvent:
    """Request to store a note's window position and size."""

    id: str
    bounds: Bounds


@dataclass(frozen=True)
class UpdateNoteActiveEvent:
    """Request to mark a note as shown or hidden."""

    id: str
    is_active: bool