"""
Quoridor core Python package.

Pure rules logic for the pathway-blocking board game, kept free of any web or
terminal concerns so it can be driven from the Flask app, the CLI and tests alike.
Modules:
- direction.py, coordinate.py: board addressing and single-step arithmetic
- action.py: MovePawn / PlaceWall and their text form ("e2", "e2h")
- state.py: GameOptions, GameState
- moves.py: pawn moves including jumps
- reachability.py, walls.py: wall legality and the goal reachability check
- game.py: the Game facade
- serialize.py: JSON snapshots
"""
