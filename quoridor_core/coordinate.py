from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Tuple

from .direction import Direction, perpendicular
from .errors import InvalidActionFormat

_COORD_RE = re.compile(r'^([a-z])([1-9][0-9]*)$')


@dataclass(frozen=True, order=True)
class Coord:
    """A board square (or wall anchor) addressed by column letter and 1-based row."""
    column: str
    row: int

    def __str__(self) -> str:
        return to_algebraic(self)


def column_numeric_value(column: str) -> int:
    """Maps 'a' -> 1, 'b' -> 2, ..."""
    return ord(column) - ord('a') + 1


def numeric_column_to_char(n: int) -> str:
    return chr(ord('a') + n - 1)


def coordinate_in_dir(coord: Coord, direction: Direction) -> Coord:
    """The square one step away in ``direction``. No bounds checking."""
    if direction is Direction.UP:
        return Coord(coord.column, coord.row + 1)
    if direction is Direction.DOWN:
        return Coord(coord.column, coord.row - 1)
    col = column_numeric_value(coord.column)
    if direction is Direction.LEFT:
        return Coord(numeric_column_to_char(col - 1), coord.row)
    return Coord(numeric_column_to_char(col + 1), coord.row)


def adjacent(coord: Coord, direction: Direction) -> Tuple[Coord, Coord]:
    """The two squares beside ``coord`` across the axis of ``direction``."""
    a, b = perpendicular(direction)
    return coordinate_in_dir(coord, a), coordinate_in_dir(coord, b)


def offset_coordinate(coord: Coord, directions: Iterable[Direction]) -> Coord:
    for direction in directions:
        coord = coordinate_in_dir(coord, direction)
    return coord


def to_algebraic(coord: Coord) -> str:
    return f"{coord.column}{coord.row}"


def parse_coordinate(text: str) -> Coord:
    """Parses 'e2' or 'a10'. Raises InvalidActionFormat for anything else."""
    m = _COORD_RE.match(text.strip()) if isinstance(text, str) else None
    if m is None:
        raise InvalidActionFormat(f"not a coordinate: {text!r}", {'text': text})
    return Coord(m.group(1), int(m.group(2)))
