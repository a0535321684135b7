from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple, Union

from .action import Action, MovePawn, PlaceWall, WallType, action_to_algebraic, into_action
from .coordinate import Coord, parse_coordinate
from .direction import DirectionOrdering, goal_biased_directions
from .moves import legal_pawn_moves, pawn_destinations
from .state import GameOptions, GameState
from .walls import is_valid_wall_placement, player_has_walls, wall_placements

logger = logging.getLogger(__name__)

CoordLike = Union[Coord, str]


def _into_coord(coord: CoordLike) -> Coord:
    return parse_coordinate(coord) if isinstance(coord, str) else coord


class Game:
    """
    A Quoridor game: board, pawns, walls and turn order.

    ``take_action`` applies whatever it is given; callers decide legality first with
    ``is_valid`` or by choosing from ``valid_actions``. The direction ordering only
    tunes the wall reachability search and can be swapped out for testing.
    """

    def __init__(
        self,
        num_cols: int = 9,
        num_rows: int = 9,
        num_players: int = 2,
        walls_per_player: int = 10,
        ordering: DirectionOrdering = goal_biased_directions,
    ):
        self.options = GameOptions(num_cols, num_rows, num_players, walls_per_player)
        self.state = GameState.create(self.options)
        self.ordering = ordering

    @classmethod
    def from_options(cls, options: GameOptions, ordering: DirectionOrdering = goal_biased_directions) -> 'Game':
        return cls(options.num_cols, options.num_rows, options.num_players, options.walls_per_player, ordering)

    # ---------- Board extents ----------

    def num_columns(self) -> int:
        return self.state.num_cols

    def num_rows(self) -> int:
        return self.state.num_rows

    def num_players(self) -> int:
        return self.state.num_players

    # ---------- Accessors / setters ----------

    def get_walls_remaining(self, player_num: int) -> int:
        return self.state.walls_remaining[self.state.check_player(player_num)]

    def set_walls_remaining(self, player_num: int, num_walls: int) -> None:
        self.state.walls_remaining[self.state.check_player(player_num)] = num_walls

    def get_player_to_move(self) -> int:
        return self.state.player_to_move

    def set_player_to_move(self, player_num: int) -> None:
        self.state.check_player(player_num)
        self.state.player_to_move = player_num

    def get_move_number(self) -> int:
        return self.state.move_number

    def set_move_number(self, move_number: int) -> None:
        self.state.move_number = move_number

    def get_player_position(self, player_num: int) -> Optional[Coord]:
        return self.state.player_pos(player_num)

    def set_player_position(self, player_num: int, coordinate: CoordLike) -> None:
        self.state.player_positions[self.state.check_player(player_num)] = _into_coord(coordinate)

    def get_walls(self) -> List[Tuple[WallType, Coord]]:
        """Every placed wall as (type, anchor): horizontal walls first, each group sorted."""
        walls = [(WallType.HORIZONTAL, c) for c in sorted(self.state.horizontal_walls)]
        walls.extend((WallType.VERTICAL, c) for c in sorted(self.state.vertical_walls))
        return walls

    def set_walls(self, walls: Iterable[Tuple[WallType, CoordLike]]) -> None:
        """Replaces every wall on the board. No placement rules are checked."""
        self.state.horizontal_walls.clear()
        self.state.vertical_walls.clear()
        for wall_type, coordinate in walls:
            self.state.wall_set(wall_type).add(_into_coord(coordinate))

    def is_goal(self, player_num: int, coordinate: CoordLike) -> bool:
        self.state.check_player(player_num)
        return self.state.is_goal(player_num, _into_coord(coordinate))

    # ---------- Actions ----------

    def take_action(self, action: Union[Action, str]) -> None:
        """Applies ``action`` for the player to move and passes the turn on."""
        action = into_action(action)
        player = self.state.player_to_move
        if isinstance(action, MovePawn):
            self.state.player_positions[player - 1] = action.coordinate
        elif isinstance(action, PlaceWall):
            self.state.wall_set(action.wall_type).add(action.coordinate)
            self.state.walls_remaining[player - 1] -= 1
        logger.debug("move %d: player %d plays %s", self.state.move_number, player, action_to_algebraic(action))
        self.state.advance_turn()

    def valid_pawn_move_actions(self) -> List[MovePawn]:
        return legal_pawn_moves(self.state)

    def valid_wall_actions(self) -> List[PlaceWall]:
        return wall_placements(self.state, self.ordering)

    def valid_actions(self) -> List[Action]:
        actions: List[Action] = []
        actions.extend(self.valid_pawn_move_actions())
        actions.extend(self.valid_wall_actions())
        return actions

    def is_valid(self, action: Union[Action, str]) -> bool:
        action = into_action(action)
        if isinstance(action, MovePawn):
            return action.coordinate in pawn_destinations(self.state)
        return player_has_walls(self.state) and is_valid_wall_placement(self.state, action, self.ordering)
