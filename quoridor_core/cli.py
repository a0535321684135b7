from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from .action import action_to_algebraic
from .coordinate import to_algebraic
from .errors import QuoridorError
from .game import Game
from .serialize import game_to_json
from .state import GameOptions


def build_parser(defaults: GameOptions) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Quoridor rules engine')
    parser.add_argument('--cols', type=int, default=defaults.num_cols, help='Number of board columns')
    parser.add_argument('--rows', type=int, default=defaults.num_rows, help='Number of board rows')
    parser.add_argument('--players', type=int, default=defaults.num_players, help='Number of players')
    parser.add_argument('--walls', type=int, default=defaults.walls_per_player, help='Walls per player')
    parser.add_argument('--moves', default='', help='Actions to replay, e.g. "e2 e8 e2h"')
    parser.add_argument('--json', action='store_true', help='Print the resulting game as JSON')
    parser.add_argument('--legal', action='store_true', help='List legal actions for the player to move')
    parser.add_argument('--play', action='store_true', help='Hot-seat play reading actions from stdin')
    parser.add_argument('--log-level', default='WARNING', help='Logging level (DEBUG, INFO, ...)')
    return parser


def describe(game: Game) -> str:
    lines = [f"Move {game.get_move_number()}, player {game.get_player_to_move()} to move"]
    for p in range(1, game.num_players() + 1):
        pos = game.get_player_position(p)
        where = to_algebraic(pos) if pos is not None else '-'
        lines.append(f"  P{p}: {where}  walls left: {game.get_walls_remaining(p)}")
    walls = ' '.join(f"{to_algebraic(c)}{t.value}" for t, c in game.get_walls())
    lines.append(f"  walls: {walls or '(none)'}")
    return '\n'.join(lines)


def replay(game: Game, moves: List[str]) -> None:
    """Applies each action in turn, refusing the first illegal one."""
    for text in moves:
        if not game.is_valid(text):
            raise QuoridorError(f"illegal action for player {game.get_player_to_move()}: {text}")
        game.take_action(text)


def play(game: Game) -> None:
    print(describe(game))
    while True:
        mover = game.get_player_to_move()
        legal = [action_to_algebraic(a) for a in game.valid_pawn_move_actions()]
        print('Pawn moves:', ' '.join(legal) or '(none)')
        try:
            text = input(f'Player {mover}, enter an action (e.g. e2 or e2h), blank to stop: ').strip()
        except EOFError:
            return
        if not text:
            return
        try:
            ok = game.is_valid(text)
        except QuoridorError as e:
            print(f'Could not parse: {e.message}. Try again.')
            continue
        if not ok:
            print('Illegal action. Try again.')
            continue
        game.take_action(text)
        print(describe(game))
        pos = game.get_player_position(mover)
        if pos is not None and game.is_goal(mover, pos):
            print(f"Player {mover} reached their goal.")
            return


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser(GameOptions.from_env())
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
                        format='%(levelname)s %(name)s: %(message)s')

    try:
        game = Game(args.cols, args.rows, args.players, args.walls)
        replay(game, args.moves.split())
    except QuoridorError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 2

    if args.play:
        play(game)

    if args.json:
        print(json.dumps(game_to_json(game)))
    else:
        print(describe(game))

    if args.legal:
        print('Pawn moves:', ' '.join(action_to_algebraic(a) for a in game.valid_pawn_move_actions()))
        walls = game.valid_wall_actions()
        print(f'Wall placements ({len(walls)}):', ' '.join(action_to_algebraic(a) for a in walls))
    return 0


if __name__ == '__main__':
    sys.exit(main())
