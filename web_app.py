"""
This is the main file for the web application.
It exposes game sessions over a small JSON API.
"""

import uuid
from dataclasses import asdict
from typing import Dict

from flask import Flask, request, jsonify
import logging

import config

# --- Logging Configuration ---
logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

# --- Core Game System Imports ---
from core.game_master import GameMaster
from core.game_state import GameSession, new_session

app = Flask(__name__)

# --- Game Initialization ---
game_master = GameMaster()

# Active sessions keyed by session id; nothing is persisted
sessions: Dict[str, GameSession] = {}


def _session_payload(session_id: str, session: GameSession) -> dict:
    return {
        "session_id": session_id,
        "state": session.state.value,
        "awaiting_quit_confirmation": session.awaiting_quit_confirmation,
        "status": asdict(game_master.status(session)),
    }


# --- Routes ---

@app.route("/sessions", methods=["POST"])
def create_session():
    """Starts a new session at the forest entrance."""
    session_id = uuid.uuid4().hex
    sessions[session_id] = new_session()
    logging.info("Created session %s (%d active)", session_id, len(sessions))
    return jsonify(_session_payload(session_id, sessions[session_id])), 201


@app.route("/sessions/<session_id>", methods=["GET"])
def get_session(session_id):
    """Returns the current status of a session."""
    session = sessions.get(session_id)
    if session is None:
        return jsonify({"error": f"Session '{session_id}' not found."}), 404
    return jsonify(_session_payload(session_id, session))


@app.route("/sessions/<session_id>/commands", methods=["POST"])
def send_command(session_id):
    """Handles one player command for a session."""
    session = sessions.get(session_id)
    if session is None:
        return jsonify({"error": f"Session '{session_id}' not found."}), 404

    data = request.get_json(silent=True) or {}
    command = data.get("command")
    if not isinstance(command, str):
        return jsonify({"error": "Missing command"}), 400

    result = game_master.process_command(command, session)
    logging.info("Session %s: '%s' -> %s", session_id, command, result.state.value)
    payload = _session_payload(session_id, session)
    payload["messages"] = result.messages
    if result.state.is_terminal:
        # Ended sessions are discarded; later calls with this id get a 404
        sessions.pop(session_id, None)
        logging.info("Discarded finished session %s (%d active)", session_id, len(sessions))
    return jsonify(payload)


# Add error handler for 404
@app.errorhandler(404)
def page_not_found(e):
    return jsonify({"error": "Not found"}), 404


# Add error handler for 500
@app.errorhandler(500)
def internal_server_error(e):
    logging.exception("Internal Server Error")
    return jsonify({"error": "Internal server error"}), 500


# --- Run the App ---
if __name__ == "__main__":
    # Debug mode is helpful during development
    app.run(port=config.WEB_PORT, debug=True)
