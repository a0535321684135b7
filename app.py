from __future__ import annotations

import logging
from typing import Any, Dict

from flask import Flask, jsonify, request

from game import (
    Game,
    GameOptions,
    QuoridorError,
    action_to_algebraic,
    game_to_json,
    json_to_game,
)

logger = logging.getLogger(__name__)

# Defaults for /api/new come from QUORIDOR_* environment variables.
DEFAULT_OPTIONS = GameOptions.from_env()

app = Flask(__name__)


def _legal_json(game: Game) -> Dict[str, Any]:
    return {
        "pawnMoves": [action_to_algebraic(a) for a in game.valid_pawn_move_actions()],
        "walls": [action_to_algebraic(a) for a in game.valid_wall_actions()],
    }


def _game_from_body(body: Dict[str, Any]) -> Game:
    return json_to_game(body.get("state"))


@app.errorhandler(QuoridorError)
def handle_quoridor_error(e: QuoridorError) -> Any:
    logger.warning("rejected %s %s: %s", request.method, request.path, e)
    return jsonify({"ok": False, "error": e.message, "code": e.code}), 400


@app.get("/api/health")
def api_health() -> Any:
    return jsonify({"ok": True})


@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        options = GameOptions.from_json(body, defaults=DEFAULT_OPTIONS)
    except (TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad options: {e}", "code": "INVALID_OPTIONS"}), 400
    game = Game.from_options(options)
    return jsonify({"ok": True, "state": game_to_json(game), "legal": _legal_json(game)})


@app.post("/api/legal")
def api_legal() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    game = _game_from_body(body)
    return jsonify({"ok": True, "legal": _legal_json(game)})


@app.post("/api/valid")
def api_valid() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    game = _game_from_body(body)
    return jsonify({"ok": True, "valid": game.is_valid(body.get("action"))})


@app.post("/api/action")
def api_action() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    game = _game_from_body(body)
    action = body.get("action")
    if not game.is_valid(action):
        logger.warning("illegal action %r for player %d", action, game.get_player_to_move())
        return jsonify({"ok": False, "error": "Illegal action", "code": "ILLEGAL_ACTION",
                        "legal": _legal_json(game)}), 400
    game.take_action(action)
    return jsonify({"ok": True, "state": game_to_json(game), "legal": _legal_json(game)})


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(debug=False)
