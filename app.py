from __future__ import annotations

import logging
import os
from typing import Any, Dict

from flask import Flask, jsonify, request, send_from_directory

import tictactoe_core

try:
    from .game import (  # type: ignore
        Board,
        History,
        GameSession,
        legal_moves,
    )
except ImportError:
    from game import (  # type: ignore
        Board,
        History,
        GameSession,
        legal_moves,
    )

logger = logging.getLogger(__name__)

# Static assets ship as package data under tictactoe_core/static
STATIC_DIR = os.path.abspath(os.path.join(os.path.dirname(tictactoe_core.__file__), "static"))
app = Flask(__name__, static_url_path="/static", static_folder=STATIC_DIR)


# ---------- Static routes ----------

@app.get("/")
def index() -> Any:
    return send_from_directory(app.static_folder, "index.html")


@app.get("/main.js")
def main_js() -> Any:
    resp = send_from_directory(app.static_folder, "main.js")
    resp.headers["Content-Type"] = "application/javascript; charset=utf-8"
    return resp


@app.get("/styles.css")
def styles_css() -> Any:
    resp = send_from_directory(app.static_folder, "styles.css")
    resp.headers["Content-Type"] = "text/css; charset=utf-8"
    return resp


# ---------- JSON encoding ----------

def session_to_json(s: GameSession) -> Dict[str, Any]:
    outcome = s.outcome
    line = s.winning_line
    return {
        "history": [list(b.cells) for b in s.history],
        "position": s.position,
        "board": list(s.board.cells),
        "turn": s.turn,
        "outcome": {"winner": outcome.winner, "draw": outcome.draw, "decided": outcome.decided},
        "status": s.status,
        "winningLine": list(line) if line is not None else None,
        "legalMoves": legal_moves(s.board),
        "moves": [
            {"index": e.index, "label": e.label, "current": e.current}
            for e in s.entries()
        ],
    }


def json_to_session(obj: Any) -> GameSession:
    """Rebuilds a session from a posted {history, position} object. Raises ValueError when malformed."""
    if not isinstance(obj, dict):
        raise ValueError("expected a JSON object")
    raw_history = obj.get("history")
    if not isinstance(raw_history, list) or not raw_history:
        raise ValueError("history must be a non-empty list")
    snapshots = []
    for raw in raw_history:
        if not isinstance(raw, list):
            raise ValueError("each snapshot must be a list of marks")
        snapshots.append(Board(cells=tuple("" if m is None else str(m) for m in raw)))
    history = History(snapshots=tuple(snapshots))
    position = obj.get("position", len(history) - 1)
    if isinstance(position, bool) or not isinstance(position, int):
        raise ValueError("position must be an integer")
    return GameSession(history=history, position=position)


def _int_field(body: Dict[str, Any], name: str) -> int:
    value = body.get(name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer")
    return value


def _bad_request(e: Exception) -> Any:
    return jsonify({"ok": False, "error": f"bad state: {e}"}), 400


# ---------- Game API ----------

@app.post("/api/new")
def api_new() -> Any:
    return jsonify({"ok": True, **session_to_json(GameSession())})


@app.post("/api/status")
def api_status() -> Any:
    body = request.get_json(force=True, silent=True)
    try:
        session = json_to_session(body)
    except ValueError as e:
        return _bad_request(e)
    return jsonify({"ok": True, **session_to_json(session)})


@app.post("/api/play")
def api_play() -> Any:
    body = request.get_json(force=True, silent=True)
    try:
        session = json_to_session(body)
        cell = _int_field(body, "cell")
        if not 0 <= cell <= 8:
            raise ValueError(f"cell out of range: {cell}")
    except ValueError as e:
        return _bad_request(e)
    if not session.play(cell):
        # Unchanged view on rejection
        return jsonify({"ok": False, "error": "Illegal move", **session_to_json(session)})
    return jsonify({"ok": True, **session_to_json(session)})


@app.post("/api/jump")
def api_jump() -> Any:
    body = request.get_json(force=True, silent=True)
    try:
        session = json_to_session(body)
        index = _int_field(body, "index")
    except ValueError as e:
        return _bad_request(e)
    if not session.jump(index):
        logger.info("client requested jump to %d outside history of %d", index, len(session.history))
        return jsonify({"ok": False, "error": f"No history entry {index}", **session_to_json(session)}), 400
    return jsonify({"ok": True, **session_to_json(session)})


def log_level_from_env() -> str:
    """Level named by TICTACTOE_LOG_LEVEL, or WARNING when unset or unknown."""
    level = os.getenv("TICTACTOE_LOG_LEVEL", "WARNING").upper()
    if not isinstance(logging.getLevelName(level), int):
        return "WARNING"
    return level


# Entrypoint for "python app.py"
if __name__ == "__main__":
    logging.basicConfig(level=log_level_from_env())
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
