from __future__ import annotations

from typing import List

from .action import MovePawn, WallType
from .coordinate import Coord, coordinate_in_dir
from .direction import DIRECTIONS, Direction, perpendicular
from .state import GameState


def pawn_can_move(state: GameState, coord: Coord, direction: Direction) -> bool:
    """True if a single step from ``coord`` stays on the board and crosses no wall.

    Walls are stored by their bottom-left square, so a wall segment borders two
    squares: moving up or down checks the lower square and the one to its left,
    moving left or right checks the left square and the one below it.
    """
    dest = coordinate_in_dir(coord, direction)
    if not state.is_in_bounds(dest):
        return False

    vertical_move = direction in (Direction.UP, Direction.DOWN)
    wall_type = WallType.HORIZONTAL if vertical_move else WallType.VERTICAL
    wall_coord = coord if direction in (Direction.UP, Direction.RIGHT) else dest
    neighbour = coordinate_in_dir(wall_coord, Direction.LEFT if vertical_move else Direction.DOWN)
    return not (state.has_wall(wall_coord, wall_type) or state.has_wall(neighbour, wall_type))


def pawn_destinations(state: GameState) -> List[Coord]:
    """Lists the squares the player to move can reach this turn, including jumps."""
    me = state.current_pos()
    if me is None:
        return []

    results: List[Coord] = []
    for direction in DIRECTIONS:
        # A wall or the board edge: nothing further is reachable this way.
        if not pawn_can_move(state, me, direction):
            continue

        dest = coordinate_in_dir(me, direction)
        if not state.has_pawn(dest):
            results.append(dest)
            continue

        # Straight jump over the adjacent pawn.
        if pawn_can_move(state, dest, direction):
            landing = coordinate_in_dir(dest, direction)
            if not state.has_pawn(landing):
                results.append(landing)
                continue

        # Jump blocked: step diagonally around the pawn instead.
        for side in perpendicular(direction):
            if pawn_can_move(state, dest, side):
                landing = coordinate_in_dir(dest, side)
                if not state.has_pawn(landing) and landing not in results:
                    results.append(landing)
    return results


def legal_pawn_moves(state: GameState) -> List[MovePawn]:
    return [MovePawn(dest) for dest in pawn_destinations(state)]
