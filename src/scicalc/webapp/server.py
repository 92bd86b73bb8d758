"""
Flask server for the scientific calculator.

Provides a JSON API: the page sends every button click or key press and
renders the state that comes back.
"""

import logging

from flask import Flask, jsonify, request

from ..config import CalculatorSettings, configure_logging
from ..events import action_from_button, action_from_key
from . import sessions

app = Flask(__name__)

# Configuration
SETTINGS = CalculatorSettings.from_env()

logger = logging.getLogger(__name__)


def _not_found():
    return jsonify({"error": "Session not found"}), 404


@app.route("/api/sessions", methods=["POST"])
def create_session():
    """
    Create a calculator session.

    Returns:
        {"session_id": "...", "state": {...}}
    """
    session_id = sessions.create_session(SETTINGS)
    state = sessions.get_state(session_id)
    return jsonify({"session_id": session_id, "state": state.to_dict()}), 201


@app.route("/api/sessions", methods=["GET"])
def list_sessions():
    return jsonify({"sessions": sessions.list_sessions()})


@app.route("/api/sessions/<session_id>", methods=["GET"])
def get_session(session_id: str):
    state = sessions.get_state(session_id)
    if state is None:
        return _not_found()
    return jsonify({"state": state.to_dict()})


@app.route("/api/sessions/<session_id>/press", methods=["POST"])
def press(session_id: str):
    """
    Handle a button click or key press.

    Expected JSON payload, either a key:
        {"key": "Enter"}
    or the button's data attributes:
        {"num": "7"}
        {"action": "operator", "op": "+"}
        {"action": "sin"}

    Returns:
        {"state": {...}} with the calculator state after the event
    """
    data = request.get_json(silent=True)

    if not data or not isinstance(data, dict):
        return jsonify({"error": "No data provided"}), 400

    try:
        if "key" in data:
            action = action_from_key(str(data["key"]))
        else:
            action = action_from_button(data)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    if action is None:
        # unbound key: report the unchanged state
        state = sessions.get_state(session_id)
    else:
        state = sessions.with_engine(session_id, lambda engine: engine.dispatch(action))

    if state is None:
        return _not_found()
    return jsonify({"state": state.to_dict()})


@app.route("/api/sessions/<session_id>/clear", methods=["POST"])
def clear(session_id: str):
    """Clear entry, pending operator and parentheses; memory is kept."""

    def _clear(engine):
        engine.clear()
        return engine.state()

    state = sessions.with_engine(session_id, _clear)
    if state is None:
        return _not_found()
    return jsonify({"state": state.to_dict()})


@app.route("/api/sessions/<session_id>", methods=["DELETE"])
def delete_session(session_id: str):
    if not sessions.delete_session(session_id):
        return _not_found()
    return jsonify({"ok": True})


def main():
    """Run the Flask development server."""
    import argparse

    parser = argparse.ArgumentParser(description="Run the scientific calculator web server")
    parser.add_argument(
        "--host",
        default=SETTINGS.host,
        help=f"Host to bind to (default: {SETTINGS.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=SETTINGS.port,
        help=f"Port to bind to (default: {SETTINGS.port})",
    )
    parser.add_argument(
        "--log-level",
        default=SETTINGS.log_level,
        help=f"Logging level (default: {SETTINGS.log_level})",
    )

    args = parser.parse_args()
    configure_logging(args.log_level)

    logger.info("Starting calculator server on %s:%s", args.host, args.port)
    print(f"Access at: http://{args.host}:{args.port}")

    app.run(host=args.host, port=args.port, debug=False)


if __name__ == "__main__":
    main()
