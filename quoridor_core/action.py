"""
Actions and their compact text form.

A pawn move is written as its destination square ("e2"); a wall placement as
its anchor square followed by the orientation ("e2h", "c4v").
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .coordinate import Coord, to_algebraic
from .errors import InvalidActionFormat


class WallType(Enum):
    HORIZONTAL = 'h'
    VERTICAL = 'v'

    def other(self) -> 'WallType':
        return WallType.VERTICAL if self is WallType.HORIZONTAL else WallType.HORIZONTAL


@dataclass(frozen=True)
class MovePawn:
    coordinate: Coord


@dataclass(frozen=True)
class PlaceWall:
    wall_type: WallType
    coordinate: Coord


Action = Union[MovePawn, PlaceWall]

_ACTION_RE = re.compile(r'^([a-z])([1-9][0-9]*)([hv]?)$')


def is_place_wall(action: Action) -> bool:
    return isinstance(action, PlaceWall)


def is_move_pawn(action: Action) -> bool:
    return isinstance(action, MovePawn)


def action_to_algebraic(action: Action) -> str:
    text = to_algebraic(action.coordinate)
    if isinstance(action, PlaceWall):
        return text + action.wall_type.value
    return text


def parse_action(text: str) -> Action:
    """Decodes 'e2' into a MovePawn and 'e2h' / 'e2v' into a PlaceWall.

    Malformed text raises InvalidActionFormat rather than producing a
    half-parsed coordinate.
    """
    if not isinstance(text, str):
        raise InvalidActionFormat(f"action must be a string, got {type(text).__name__}")
    m = _ACTION_RE.match(text.strip())
    if m is None:
        raise InvalidActionFormat(f"not an action: {text!r}", {'text': text})
    coord = Coord(m.group(1), int(m.group(2)))
    if m.group(3):
        return PlaceWall(WallType(m.group(3)), coord)
    return MovePawn(coord)


def into_action(action: Union[Action, str]) -> Action:
    if isinstance(action, (MovePawn, PlaceWall)):
        return action
    return parse_action(action)
