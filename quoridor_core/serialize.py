from __future__ import annotations

from typing import Any, Dict, List, Optional

from .action import PlaceWall, action_to_algebraic, parse_action
from .coordinate import Coord, parse_coordinate, to_algebraic
from .errors import InvalidSnapshot, QuoridorError
from .game import Game
from .state import GameOptions


def game_to_json(game: Game) -> Dict[str, Any]:
    s = game.state
    return {
        "numCols": int(s.num_cols),
        "numRows": int(s.num_rows),
        "numPlayers": int(s.num_players),
        "playerToMove": int(s.player_to_move),
        "moveNumber": int(s.move_number),
        "wallsRemaining": [int(n) for n in s.walls_remaining],
        "playerPositions": [to_algebraic(p) if p is not None else None for p in s.player_positions],
        "walls": [action_to_algebraic(PlaceWall(t, c)) for t, c in game.get_walls()],
    }


def _position(raw: Any) -> Optional[Coord]:
    return None if raw is None else parse_coordinate(str(raw))


def json_to_game(obj: Dict[str, Any]) -> Game:
    """Rebuilds a game from ``game_to_json`` output. Raises InvalidSnapshot on bad input."""
    if not isinstance(obj, dict):
        raise InvalidSnapshot("state must be an object")
    try:
        game = Game.from_options(GameOptions.from_json(obj))
        n = game.num_players()
        remaining = obj.get("wallsRemaining")
        if remaining is not None:
            if len(remaining) != n:
                raise InvalidSnapshot(f"wallsRemaining needs {n} entries")
            for i, walls_left in enumerate(remaining, start=1):
                game.set_walls_remaining(i, int(walls_left))
        positions = obj.get("playerPositions")
        if positions is not None:
            if len(positions) != n:
                raise InvalidSnapshot(f"playerPositions needs {n} entries")
            game.state.player_positions = [_position(p) for p in positions]
        walls: List[PlaceWall] = []
        for text in obj.get("walls", []):
            wall = parse_action(str(text))
            if not isinstance(wall, PlaceWall):
                raise InvalidSnapshot(f"not a wall: {text!r}")
            walls.append(wall)
        game.set_walls((w.wall_type, w.coordinate) for w in walls)
        game.set_player_to_move(int(obj.get("playerToMove", 1)))
        game.set_move_number(int(obj.get("moveNumber", 1)))
    except InvalidSnapshot:
        raise
    except QuoridorError as e:
        raise InvalidSnapshot(f"bad state: {e.message}", {"cause": e.code}) from e
    except (TypeError, ValueError) as e:
        raise InvalidSnapshot(f"bad state: {e}") from e
    return game
