"""Window placement: positions, sizes and the moves the editor applies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .models import Bounds, Point, Size

WINDOW_MIN_WIDTH = 30.0
WINDOW_MIN_HEIGHT = 5.0
RESIZE_STEP = 100.0


class Direction(Enum):
    """Which edge or way a window is moved or resized."""

    UP = "up"
    DOWN = "down"
    RIGHT = "right"
    LEFT = "left"


@dataclass(frozen=True)
class Location:
    """Top-left corner of a window."""

    x: float
    y: float

    def to_point(self) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class WindowSize:
    """Width and height of a window."""

    width: float
    height: float

    def to_size(self) -> Size:
        return Size(self.width, self.height)


def make_editor_bounds(location: Location, size: WindowSize) -> Bounds:
    """Bounds of an editor window placed at ``location`` with ``size``."""
    return Bounds(origin=location.to_point(), size=size.to_size())


def move_bounds(bounds: Bounds, viewport: Size, direction: Direction) -> Bounds:
    """Shift the window one step in ``direction``, keeping the viewport size."""
    x, y = bounds.origin.x, bounds.origin.y
    match direction:
        case Direction.UP:
            y -= RESIZE_STEP
        case Direction.DOWN:
            y += RESIZE_STEP
        case Direction.RIGHT:
            x += RESIZE_STEP
        case Direction.LEFT:
            x -= RESIZE_STEP
    return Bounds(Point(x, y), viewport)


def inflate_bounds(bounds: Bounds, viewport: Size, direction: Direction) -> Bounds:
    """Grow the window by one step at the edge facing ``direction``."""
    x, y = bounds.origin.x, bounds.origin.y
    width, height = viewport.width, viewport.height
    match direction:
        case Direction.UP:
            y -= RESIZE_STEP
            height += RESIZE_STEP
        case Direction.DOWN:
            height += RESIZE_STEP
        case Direction.RIGHT:
            width += RESIZE_STEP
        case Direction.LEFT:
            x -= RESIZE_STEP
            width += RESIZE_STEP
    return Bounds(Point(x, y), Size(width, height))


def shrink_bounds(bounds: Bounds, viewport: Size, direction: Direction) -> Bounds:
    """Pull in the edge facing ``direction`` by one step, down to a minimum size."""
    x, y = bounds.origin.x, bounds.origin.y
    width, height = viewport.width, viewport.height
    match direction:
        case Direction.UP:
            y += RESIZE_STEP
            height = max(height - RESIZE_STEP, WINDOW_MIN_HEIGHT)
        case Direction.DOWN:
            height = max(height - RESIZE_STEP, WINDOW_MIN_HEIGHT)
        case Direction.RIGHT:
            width = max(width - RESIZE_STEP, WINDOW_MIN_WIDTH)
        case Direction.LEFT:
            x += RESIZE_STEP
            width = max(width - RESIZE_STEP, WINDOW_MIN_WIDTH)
    return Bounds(Point(x, y), Size(width, height))