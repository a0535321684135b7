from __future__ import annotations

from enum import Enum
from typing import Callable, Tuple


class Direction(Enum):
    """A single orthogonal step on the board. Up increases the row number."""
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'


# Scan order used for pawn-move generation.
DIRECTIONS: Tuple[Direction, ...] = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)

DirectionOrdering = Callable[[int], Tuple[Direction, ...]]

_GOAL_BIASED = {
    1: (Direction.UP, Direction.RIGHT, Direction.LEFT, Direction.DOWN),
    2: (Direction.DOWN, Direction.RIGHT, Direction.LEFT, Direction.UP),
    3: (Direction.RIGHT, Direction.UP, Direction.DOWN, Direction.LEFT),
    4: (Direction.LEFT, Direction.UP, Direction.DOWN, Direction.RIGHT),
}


def goal_biased_directions(player_num: int) -> Tuple[Direction, ...]:
    """Directions ordered from most to least likely to progress toward the player's goal."""
    return _GOAL_BIASED.get(player_num, DIRECTIONS)


def canonical_directions(player_num: int) -> Tuple[Direction, ...]:
    """Ordering that ignores the player; used to check the search result is order independent."""
    return DIRECTIONS


def perpendicular(direction: Direction) -> Tuple[Direction, Direction]:
    if direction in (Direction.UP, Direction.DOWN):
        return Direction.LEFT, Direction.RIGHT
    return Direction.UP, Direction.DOWN

