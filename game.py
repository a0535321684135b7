from __future__ import annotations

# Facade module that re-exports the Quoridor engine.
# The Flask app and tests import from here; the logic lives under quoridor_core/*.

from quoridor_core.direction import (
    Direction,
    DIRECTIONS,
    canonical_directions,
    goal_biased_directions,
    perpendicular,
)
from quoridor_core.coordinate import (
    Coord,
    adjacent,
    column_numeric_value,
    coordinate_in_dir,
    numeric_column_to_char,
    offset_coordinate,
    parse_coordinate,
    to_algebraic,
)
from quoridor_core.action import (
    Action,
    MovePawn,
    PlaceWall,
    WallType,
    action_to_algebraic,
    into_action,
    is_move_pawn,
    is_place_wall,
    parse_action,
)
from quoridor_core.errors import (
    InvalidActionFormat,
    InvalidBoardSize,
    InvalidSnapshot,
    PlayerOutOfRange,
    QuoridorError,
    UnsupportedPlayerCount,
)
from quoridor_core.state import GameOptions, GameState, initial_player_positions
from quoridor_core.moves import legal_pawn_moves, pawn_can_move, pawn_destinations
from quoridor_core.reachability import first_cut_off_player, goal_reachable
from quoridor_core.walls import (
    can_wall_block,
    collides_with_existing_wall,
    is_valid_wall_placement,
    is_wall_blocking,
    provisional_wall,
    wall_placements,
)
from quoridor_core.game import Game
from quoridor_core.serialize import game_to_json, json_to_game


def main() -> None:
    # CLI driver delegated to quoridor_core.cli
    from quoridor_core.cli import main as _main
    raise SystemExit(_main())


if __name__ == '__main__':
    main()
