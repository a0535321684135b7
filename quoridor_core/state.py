from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from .action import WallType
from .coordinate import Coord, column_numeric_value, numeric_column_to_char
from .errors import InvalidBoardSize, PlayerOutOfRange, UnsupportedPlayerCount

MAX_COLUMNS = 26


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    return int(raw)


@dataclass(frozen=True)
class GameOptions:
    """Board and player configuration used to construct a game."""
    num_cols: int = 9
    num_rows: int = 9
    num_players: int = 2
    walls_per_player: int = 10

    @classmethod
    def from_env(cls) -> 'GameOptions':
        """Defaults overridable through QUORIDOR_COLS / _ROWS / _PLAYERS / _WALLS."""
        base = cls()
        return cls(
            num_cols=_env_int('QUORIDOR_COLS', base.num_cols),
            num_rows=_env_int('QUORIDOR_ROWS', base.num_rows),
            num_players=_env_int('QUORIDOR_PLAYERS', base.num_players),
            walls_per_player=_env_int('QUORIDOR_WALLS', base.walls_per_player),
        )

    @classmethod
    def from_json(cls, obj: Dict[str, Any], defaults: Optional['GameOptions'] = None) -> 'GameOptions':
        base = defaults or cls()
        return cls(
            num_cols=int(obj.get('numCols', base.num_cols)),
            num_rows=int(obj.get('numRows', base.num_rows)),
            num_players=int(obj.get('numPlayers', base.num_players)),
            walls_per_player=int(obj.get('wallsPerPlayer', base.walls_per_player)),
        )

    def validate(self) -> None:
        if self.num_players < 1:
            raise UnsupportedPlayerCount(
                f"at least one player is required, got {self.num_players}",
                {'numPlayers': self.num_players},
            )
        if self.num_cols < 2 or self.num_rows < 2:
            raise InvalidBoardSize(
                f"board must be at least 2x2, got {self.num_cols}x{self.num_rows}",
                {'numCols': self.num_cols, 'numRows': self.num_rows},
            )
        if self.num_cols > MAX_COLUMNS:
            raise InvalidBoardSize(
                f"at most {MAX_COLUMNS} columns can be lettered, got {self.num_cols}",
                {'numCols': self.num_cols},
            )


def initial_player_positions(options: GameOptions) -> List[Optional[Coord]]:
    """Start squares: P1 bottom middle, P2 top middle, P3 left middle, P4 right middle.

    Players beyond the fourth have no start square.
    """
    middle_row = (options.num_rows + 1) // 2
    middle_col = numeric_column_to_char((options.num_cols + 1) // 2)
    starts = [
        Coord(middle_col, 1),
        Coord(middle_col, options.num_rows),
        Coord('a', middle_row),
        Coord(numeric_column_to_char(options.num_cols), middle_row),
    ]
    positions: List[Optional[Coord]] = list(starts[:options.num_players])
    positions.extend([None] * (options.num_players - len(positions)))
    return positions


@dataclass
class GameState:
    """Mutable game state. Player numbers are 1-based; lists are indexed by player - 1."""
    num_cols: int
    num_rows: int
    num_players: int
    walls_remaining: List[int]
    player_positions: List[Optional[Coord]]
    player_to_move: int = 1
    move_number: int = 1
    horizontal_walls: Set[Coord] = field(default_factory=set)
    vertical_walls: Set[Coord] = field(default_factory=set)

    @classmethod
    def create(cls, options: GameOptions) -> 'GameState':
        options.validate()
        return cls(
            num_cols=options.num_cols,
            num_rows=options.num_rows,
            num_players=options.num_players,
            walls_remaining=[options.walls_per_player] * options.num_players,
            player_positions=initial_player_positions(options),
        )

    def check_player(self, player_num: int) -> int:
        """Returns the list index for ``player_num`` or raises PlayerOutOfRange."""
        if not isinstance(player_num, int) or isinstance(player_num, bool) \
                or not 1 <= player_num <= self.num_players:
            raise PlayerOutOfRange(
                f"player {player_num!r} is not in 1..{self.num_players}",
                {'playerNum': player_num, 'numPlayers': self.num_players},
            )
        return player_num - 1

    def player_pos(self, player_num: int) -> Optional[Coord]:
        return self.player_positions[self.check_player(player_num)]

    def current_pos(self) -> Optional[Coord]:
        return self.player_positions[self.player_to_move - 1]

    def wall_set(self, wall_type: WallType) -> Set[Coord]:
        return self.horizontal_walls if wall_type is WallType.HORIZONTAL else self.vertical_walls

    def has_wall(self, coord: Coord, wall_type: WallType) -> bool:
        return coord in self.wall_set(wall_type)

    def has_pawn(self, coord: Coord) -> bool:
        return any(pos == coord for pos in self.player_positions)

    def is_in_bounds(self, coord: Coord) -> bool:
        col = column_numeric_value(coord.column)
        return 1 <= coord.row <= self.num_rows and 1 <= col <= self.num_cols

    def is_interior_anchor(self, coord: Coord) -> bool:
        """Walls are anchored on squares that have a neighbour above and to the right."""
        col = column_numeric_value(coord.column)
        return 1 <= coord.row < self.num_rows and 1 <= col < self.num_cols

    def has_goal(self, player_num: int) -> bool:
        """Only the four edge-starting players have a goal edge."""
        return 1 <= player_num <= 4

    def is_goal(self, player_num: int, coord: Coord) -> bool:
        if player_num == 1:
            return coord.row == self.num_rows
        if player_num == 2:
            return coord.row == 1
        if player_num == 3:
            return coord.column == numeric_column_to_char(self.num_cols)
        if player_num == 4:
            return coord.column == 'a'
        return False

    def advance_turn(self) -> None:
        self.player_to_move = (self.player_to_move % self.num_players) + 1
        if self.player_to_move == 1:
            self.move_number += 1
