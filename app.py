from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request

from loopover_core.config import load_settings
from loopover_core.logging_config import setup_logging
from game import (
    Board,
    GameState,
    LoopoverError,
    NotationError,
    format_move,
    make_rng,
    new_game,
    parse_dimensions,
    parse_move,
)

SETTINGS = load_settings()
logger = logging.getLogger("loopover_core.app")

app = Flask(__name__)


class BadPayload(Exception):
    """Request body is missing fields or has the wrong shape."""


def board_to_json(b: Board) -> Dict[str, Any]:
    return {"width": int(b.width), "height": int(b.height), "rows": b.rows()}


def _check_dimensions(width: int, height: int) -> None:
    limit = SETTINGS.max_dimension
    if width > limit or height > limit:
        raise BadPayload(f"board is {width}x{height}; at most {limit} per side is served")


def board_from_json(obj: Dict[str, Any]) -> Board:
    rows = obj["rows"]
    _check_dimensions(len(rows[0]) if rows else 0, len(rows))
    return Board.from_rows([[int(v) for v in row] for row in rows])


def state_to_json(s: GameState) -> Dict[str, Any]:
    return {
        "board": board_to_json(s.board),
        "moveCount": int(s.move_count),
        "solved": s.is_solved(),
    }


def json_to_state(obj: Any) -> GameState:
    if not isinstance(obj, dict):
        raise BadPayload("state required")
    try:
        board = board_from_json(obj["board"])
        move_count = int(obj.get("moveCount", 0))
    except (LoopoverError, BadPayload):
        raise
    except (KeyError, TypeError, ValueError, IndexError) as e:
        raise BadPayload(f"bad state: {e}") from e
    return GameState(board=board, move_count=move_count)


def move_to_json(text: str, state: GameState) -> Dict[str, Any]:
    move = parse_move(text, state.board)
    return {
        "axis": move.axis.name.lower(),
        "index": move.index,
        "amount": move.amount,
        "notation": format_move(move),
    }


def _body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    return body if isinstance(body, dict) else {}


def _int_field(body: Dict[str, Any], name: str, default: Optional[int]) -> Optional[int]:
    value = body.get(name, default)
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise BadPayload(f"{name} must be an integer") from e


def _iterations(body: Dict[str, Any]) -> int:
    iterations = _int_field(body, "iterations", 0) or 0
    if iterations > SETTINGS.max_steps:
        raise BadPayload(f"iterations must be at most {SETTINGS.max_steps}")
    return iterations


@app.errorhandler(NotationError)
def handle_notation_error(e: NotationError) -> Any:
    return jsonify({"ok": False, "error": str(e), "kind": e.kind.value, "fragment": e.fragment}), 400


@app.errorhandler(LoopoverError)
def handle_loopover_error(e: LoopoverError) -> Any:
    return jsonify({"ok": False, "error": str(e), "kind": type(e).__name__}), 400


@app.errorhandler(BadPayload)
def handle_bad_payload(e: BadPayload) -> Any:
    return jsonify({"ok": False, "error": str(e)}), 400


# ---------- Core Game API ----------

@app.get("/api/health")
def api_health() -> Any:
    return jsonify({"ok": True})


@app.post("/api/new")
def api_new() -> Any:
    body = _body()
    size = str(body.get("size") or SETTINGS.size)
    _check_dimensions(*parse_dimensions(size))
    state = new_game(size)
    mode = body.get("shuffle")
    iterations = 0
    if mode in ("fast", "moves"):
        iterations = state.shuffle(fast=mode == "fast", iterations=_iterations(body),
                                   rng=make_rng(_int_field(body, "seed", None)))
    elif mode is not None:
        raise BadPayload(f"unknown shuffle mode: {mode!r}")
    logger.info("new %dx%d game (shuffle=%s)", state.board.width, state.board.height, mode)
    return jsonify({"ok": True, "state": state_to_json(state), "iterations": iterations})


@app.post("/api/parse")
def api_parse() -> Any:
    body = _body()
    state = json_to_state(body.get("state"))
    return jsonify({"ok": True, "move": move_to_json(str(body.get("move", "")), state)})


@app.post("/api/move")
def api_move() -> Any:
    body = _body()
    state = json_to_state(body.get("state"))
    move = parse_move(str(body.get("move", "")), state.board)
    if move.steps > SETTINGS.max_steps:
        raise BadPayload(f"move amount {move.amount} exceeds {SETTINGS.max_steps} steps")
    state.apply(move)
    return jsonify({
        "ok": True,
        "move": format_move(move),
        "steps": move.steps,
        "state": state_to_json(state),
        "solved": state.is_solved(),
    })


@app.post("/api/shuffle")
def api_shuffle() -> Any:
    body = _body()
    state = json_to_state(body.get("state"))
    mode = body.get("mode", "fast")
    if mode not in ("fast", "moves"):
        raise BadPayload(f"unknown shuffle mode: {mode!r}")
    iterations = state.shuffle(fast=mode == "fast", iterations=_iterations(body),
                               rng=make_rng(_int_field(body, "seed", None)))
    return jsonify({"ok": True, "mode": mode, "iterations": iterations, "state": state_to_json(state)})


@app.post("/api/reset")
def api_reset() -> Any:
    state = json_to_state(_body().get("state"))
    state.reset()
    return jsonify({"ok": True, "state": state_to_json(state)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    setup_logging(SETTINGS.log_level)
    app.run(host="0.0.0.0", port=SETTINGS.port, debug=SETTINGS.flask_debug)
