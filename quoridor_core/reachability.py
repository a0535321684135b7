from __future__ import annotations

from typing import List, Optional, Set

from .coordinate import Coord, coordinate_in_dir
from .direction import DirectionOrdering, goal_biased_directions
from .moves import pawn_can_move
from .state import GameState


def goal_reachable(
    state: GameState,
    player_num: int,
    ordering: DirectionOrdering = goal_biased_directions,
) -> bool:
    """
    Checks whether the player can still walk to any square of their goal edge.

    Only walls and the board edge constrain the walk; pawns are ignored since they
    move and can be jumped. This is a depth first search with an explicit stack that
    visits each square at most once. ``ordering`` decides which neighbour is explored
    first and only changes how quickly a goal square is found, never the answer.
    """
    start = state.player_pos(player_num)
    if start is None or not state.has_goal(player_num):
        # Unplaced pawns and players without a goal edge have nothing to reach.
        return True

    visited: Set[Coord] = {start}
    stack: List[Coord] = [start]
    preferred_last = tuple(reversed(ordering(player_num)))
    while stack:
        current = stack.pop()
        if state.is_goal(player_num, current):
            return True
        for direction in preferred_last:
            if not pawn_can_move(state, current, direction):
                continue
            nxt = coordinate_in_dir(current, direction)
            if nxt in visited:
                continue
            visited.add(nxt)
            stack.append(nxt)
    return False


def first_cut_off_player(
    state: GameState,
    ordering: DirectionOrdering = goal_biased_directions,
) -> Optional[int]:
    """Returns the lowest-numbered player with no path to their goal, or None."""
    for player_num in range(1, state.num_players + 1):
        if not goal_reachable(state, player_num, ordering):
            return player_num
    return None
