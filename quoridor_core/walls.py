"""
Wall placement rules.

A wall is legal when it does not overlap or cross an existing wall and leaves
every player a path to their goal. The path check is a graph search, so a cheap
geometric pre-filter skips it for walls that cannot close off any region.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, List, Sequence, Tuple

from .action import PlaceWall, WallType, action_to_algebraic
from .coordinate import Coord, column_numeric_value, numeric_column_to_char, offset_coordinate
from .direction import Direction, DirectionOrdering, goal_biased_directions
from .reachability import first_cut_off_player
from .state import GameState

logger = logging.getLogger(__name__)

# (offsets from the anchor, wall type) pairs naming a neighbouring wall slot.
WallOffset = Tuple[Tuple[Direction, ...], WallType]

U, D, L, R = Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT
H, V = WallType.HORIZONTAL, WallType.VERTICAL


def _some_wall_at_offsets(state: GameState, coord: Coord, offsets: Sequence[WallOffset]) -> bool:
    return any(state.has_wall(offset_coordinate(coord, dirs), wall_type) for dirs, wall_type in offsets)


def collision_offsets(wall_type: WallType) -> List[WallOffset]:
    """Slots that overlap or cross a wall of ``wall_type`` at the same anchor."""
    along = (L, R) if wall_type is H else (D, U)
    return [
        ((), wall_type),
        ((), wall_type.other()),
        ((along[0],), wall_type),
        ((along[1],), wall_type),
    ]


def collides_with_existing_wall(state: GameState, wall: PlaceWall) -> bool:
    return _some_wall_at_offsets(state, wall.coordinate, collision_offsets(wall.wall_type))


def touching_offsets(wall_type: WallType) -> Tuple[List[WallOffset], List[WallOffset], List[WallOffset]]:
    """
    Wall slots passing through each contact point of a wall: (end A, end B, middle).

    A horizontal wall at (c, r) runs along the top edge of squares c and c+1 of row r.
    Its ends touch the left/right neighbouring horizontal slot and the three vertical
    slots meeting at that corner; its middle touches the vertical slots directly above
    and below. Vertical walls are the same picture rotated.
    """
    if wall_type is H:
        end_a = [((L, L), H), ((L,), V), ((L, U), V), ((L, D), V)]
        end_b = [((R, R), H), ((R,), V), ((R, U), V), ((R, D), V)]
        middle = [((U,), V), ((D,), V)]
    else:
        end_a = [((D, D), V), ((D,), H), ((D, L), H), ((D, R), H)]
        end_b = [((U, U), V), ((U,), H), ((U, L), H), ((U, R), H)]
        middle = [((L,), H), ((R,), H)]
    return end_a, end_b, middle


def _ends_on_edge(state: GameState, wall: PlaceWall) -> Tuple[bool, bool]:
    if wall.wall_type is H:
        col = column_numeric_value(wall.coordinate.column)
        return col - 1 == 0, col + 1 == state.num_cols
    row = wall.coordinate.row
    return row - 1 == 0, row + 1 == state.num_rows


def can_wall_block(state: GameState, wall: PlaceWall) -> bool:
    """
    Necessary condition for a wall to cut a player off.

    Sealing a region means closing a loop of walls and board edge, which the new
    wall can only do if at least two of its three contact points (both ends and the
    middle) already touch a wall or, for the ends, the edge of the board.
    """
    end_a, end_b, middle = touching_offsets(wall.wall_type)
    edge_a, edge_b = _ends_on_edge(state, wall)
    coord = wall.coordinate
    touching = [
        edge_a or _some_wall_at_offsets(state, coord, end_a),
        edge_b or _some_wall_at_offsets(state, coord, end_b),
        _some_wall_at_offsets(state, coord, middle),
    ]
    return sum(touching) >= 2


@contextmanager
def provisional_wall(state: GameState, wall: PlaceWall) -> Iterator[None]:
    """Adds ``wall`` for the duration of the block and always takes it back out."""
    walls = state.wall_set(wall.wall_type)
    already_present = wall.coordinate in walls
    walls.add(wall.coordinate)
    try:
        yield
    finally:
        if not already_present:
            walls.discard(wall.coordinate)


def is_wall_blocking(
    state: GameState,
    wall: PlaceWall,
    ordering: DirectionOrdering = goal_biased_directions,
    prefilter: bool = True,
) -> bool:
    """True if placing ``wall`` would leave some player with no path to their goal."""
    if prefilter and not can_wall_block(state, wall):
        return False
    with provisional_wall(state, wall):
        cut_off = first_cut_off_player(state, ordering)
    if cut_off is not None:
        logger.debug("wall %s cuts off player %d", action_to_algebraic(wall), cut_off)
        return True
    return False


def is_valid_wall_placement(
    state: GameState,
    wall: PlaceWall,
    ordering: DirectionOrdering = goal_biased_directions,
    prefilter: bool = True,
) -> bool:
    return (
        state.is_interior_anchor(wall.coordinate)
        and not collides_with_existing_wall(state, wall)
        and not is_wall_blocking(state, wall, ordering, prefilter)
    )


def player_has_walls(state: GameState) -> bool:
    return state.walls_remaining[state.player_to_move - 1] > 0


def wall_placements(
    state: GameState,
    ordering: DirectionOrdering = goal_biased_directions,
    prefilter: bool = True,
) -> List[PlaceWall]:
    """All legal wall placements for the player to move: horizontal first, then row-major."""
    if not player_has_walls(state):
        return []

    placements: List[PlaceWall] = []
    for wall_type in (H, V):
        for row in range(1, state.num_rows):
            for col in range(1, state.num_cols):
                wall = PlaceWall(wall_type, Coord(numeric_column_to_char(col), row))
                if is_valid_wall_placement(state, wall, ordering, prefilter):
                    placements.append(wall)
    return placements
