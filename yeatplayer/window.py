"""Frameless window behaviour: edge hit-testing, resizing, dragging, geometry persistence."""

from __future__ import annotations

import configparser
import re
from dataclasses import dataclass, replace
from enum import Enum
from os import PathLike
from pathlib import Path

DEFAULT_GEOMETRY_VALUES = (200, 200, 300, 300)
NORMAL_MARGIN = 9
MAXIMIZED_MARGIN = 0

_SECTION = "General"
_KEY = "geometry"
_RECT_RE = re.compile(r"^@Rect\(\s*(-?\d+)\s+(-?\d+)\s+(-?\d+)\s+(-?\d+)\s*\)$")


class MouseType(Enum):
    """Which part of the window a point falls on."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    MAIN_TOP = "main_top"
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"
    NONE = "none"


class CursorShape(Enum):
    """Mouse cursor shapes used over the window frame."""

    ARROW = "arrow"
    SIZE_VER = "size_ver"
    SIZE_HOR = "size_hor"
    SIZE_FDIAG = "size_fdiag"
    SIZE_BDIAG = "size_bdiag"


@dataclass(frozen=True)
class Geometry:
    """A rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, x: float, y: float) -> bool:
        """Whether the point lies inside the rectangle or on its edge."""
        left, right = sorted((self.x, self.x + self.width))
        top, bottom = sorted((self.y, self.y + self.height))
        return left <= x <= right and top <= y <= bottom


DEFAULT_GEOMETRY = Geometry(*DEFAULT_GEOMETRY_VALUES)


def check_collision(geometry: Geometry, x: float, y: float) -> MouseType:
    """Return the frame region under the global point (x, y)."""
    gx, gy, w, h = geometry.x, geometry.y, geometry.width, geometry.height
    regions = (
        (MouseType.TOP, Geometry(gx + 20, gy, w - 40, 9)),
        (MouseType.BOTTOM, Geometry(gx + 20, gy + h - 9, w - 40, 9)),
        (MouseType.LEFT, Geometry(gx, gy + 20, 9, h - 40)),
        (MouseType.RIGHT, Geometry(gx + w - 9, gy + 20, 9, h - 40)),
        (MouseType.MAIN_TOP, Geometry(gx + 10, gy + 10, w - 20, 30)),
        (MouseType.TOP_LEFT, Geometry(gx, gy, 15, 15)),
        (MouseType.TOP_RIGHT, Geometry(gx + w - 15, gy, 15, 15)),
        (MouseType.BOTTOM_LEFT, Geometry(gx, gy + h - 15, 15, 15)),
        (MouseType.BOTTOM_RIGHT, Geometry(gx + w - 15, gy + h - 15, 15, 15)),
    )
    return next((kind for kind, rect in regions if rect.contains(x, y)), MouseType.NONE)


_CURSORS = {
    MouseType.TOP: CursorShape.SIZE_VER,
    MouseType.BOTTOM: CursorShape.SIZE_VER,
    MouseType.LEFT: CursorShape.SIZE_HOR,
    MouseType.RIGHT: CursorShape.SIZE_HOR,
    MouseType.TOP_LEFT: CursorShape.SIZE_FDIAG,
    MouseType.BOTTOM_RIGHT: CursorShape.SIZE_FDIAG,
    MouseType.TOP_RIGHT: CursorShape.SIZE_BDIAG,
    MouseType.BOTTOM_LEFT: CursorShape.SIZE_BDIAG,
}


def cursor_for(mouse_type: MouseType) -> CursorShape:
    """Return the cursor shape shown over a frame region."""
    return _CURSORS.get(mouse_type, CursorShape.ARROW)


def _load_settings(path: Path) -> configparser.ConfigParser:
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str  # type: ignore[assignment]
    if path.exists():
        try:
            parser.read(path, encoding="utf-8")
        except configparser.Error:
            parser = configparser.ConfigParser(interpolation=None)
            parser.optionxform = str  # type: ignore[assignment]
    return parser


def read_geometry(path: str | PathLike[str]) -> Geometry:
    """Read the saved window geometry, falling back to the default."""
    parser = _load_settings(Path(path))
    raw = parser.get(_SECTION, _KEY, fallback="")
    match = _RECT_RE.match(raw.strip())
    if not match:
        return DEFAULT_GEOMETRY
    return Geometry(*(int(part) for part in match.groups()))


def write_geometry(path: str | PathLike[str], geometry: Geometry) -> None:
    """Save the window geometry, keeping any other settings in the file."""
    target = Path(path)
    parser = _load_settings(target)
    if not parser.has_section(_SECTION):
        parser.add_section(_SECTION)
    values = " ".join(str(int(v)) for v in (geometry.x, geometry.y, geometry.width, geometry.height))
    parser.set(_SECTION, _KEY, f"@Rect({values})")
    with target.open("w", encoding="utf-8") as handle:
        parser.write(handle, space_around_delimiters=False)


class WindowFrame:
    """State of a frameless window being dragged and resized by its edges."""

    def __init__(self, geometry: Geometry = DEFAULT_GEOMETRY) -> None:
        self.geometry = geometry
        self.maximized = False
        self.margins = NORMAL_MARGIN
        self.mouse_type = MouseType.NONE
        self.cursor = CursorShape.ARROW
        self._previous = (0.0, 0.0)

    def press(self, local_x: float, local_y: float, global_x: float, global_y: float) -> MouseType:
        """Start a drag at a point; return the region that was hit."""
        self._previous = (local_x, local_y)
        self.mouse_type = check_collision(self.geometry, global_x, global_y)
        if not self.maximized:
            self.cursor = cursor_for(self.mouse_type)
        return self.mouse_type

    def move(self, local_x: float, local_y: float, global_x: float, global_y: float) -> Geometry:
        """Follow the mouse, resizing or moving the window; return the new geometry."""
        if not self.maximized:
            self.cursor = cursor_for(check_collision(self.geometry, global_x, global_y))

        kind = self.mouse_type
        if kind is MouseType.NONE:
            return self.geometry
        if self.maximized:
            if kind is MouseType.MAIN_TOP:
                self.maximized = False
                self.margins = NORMAL_MARGIN
            return self.geometry

        g = self.geometry
        prev_x, prev_y = self._previous
        dx = local_x - prev_x
        dy = local_y - prev_y
        left_dx = global_x - g.x
        update_previous = True

        if kind is MouseType.TOP:
            new = replace(g, y=g.y + dy, height=g.height - dy)
            update_previous = False
        elif kind is MouseType.BOTTOM:
            new = replace(g, height=g.height + dy)
        elif kind is MouseType.LEFT:
            new = replace(g, x=global_x, width=g.width - left_dx)
            update_previous = False
        elif kind is MouseType.RIGHT:
            new = replace(g, width=g.width + dx)
        elif kind is MouseType.TOP_LEFT:
            new = Geometry(global_x, g.y + dy, g.width - left_dx, g.height - dy)
        elif kind is MouseType.TOP_RIGHT:
            new = Geometry(g.x, g.y + dy, g.width + dx, g.height - dy)
        elif kind is MouseType.BOTTOM_LEFT:
            new = Geometry(global_x, g.y, g.width - left_dx, g.height + dy)
        elif kind is MouseType.BOTTOM_RIGHT:
            new = Geometry(g.x, g.y, g.width + dx, g.height + dy)
        else:
            new = replace(g, x=g.x + dx, y=g.y + dy)
            update_previous = False

        if update_previous:
            self._previous = (local_x, local_y)
        self.geometry = new
        return new

    def release(self) -> None:
        """End the current drag."""
        self.mouse_type = MouseType.NONE
        self.cursor = cursor_for(self.mouse_type)

    def toggle_maximized(self) -> bool:
        """Switch between maximized and normal; return whether now maximized."""
        if self.maximized:
            self.margins = NORMAL_MARGIN
            self.maximized = False
        else:
            self.margins = MAXIMIZED_MARGIN
            self.maximized = True
        return self.maximized