from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from cssedit.model.operation import operation_from_dict
from cssedit.model.rule import rules_from_dicts, rules_to_dicts
from cssedit.session import EditorSession
from cssedit.transcoder import (
    escape_for_transport,
    format_rules,
    parse_css,
    unescape_from_transport,
)

api_bp = Blueprint("api", __name__)


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, PUT, DELETE, OPTIONS"
    return response


def _session() -> EditorSession:
    return current_app.extensions["session"]


def _string_field(name: str) -> str | None:
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get(name), str):
        return None
    return data[name]


def _history_state(session: EditorSession) -> dict:
    history = session.history
    return {
        "can_undo": history.can_undo,
        "can_redo": history.can_redo,
        "size": history.size(),
        "current_index": history.current_index,
    }


# --- stateless transcoding ----------------------------------------------------


@api_bp.route("/parse", methods=["POST"])
def parse():
    """Parse CSS text into rules."""
    css = _string_field("css")
    if css is None:
        return jsonify({"error": "css (string) required"}), 400
    return jsonify({"rules": rules_to_dicts(parse_css(css))})


@api_bp.route("/format", methods=["POST"])
def format_():
    """Format a rule list as CSS text."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get("rules"), list):
        return jsonify({"error": "rules (list) required"}), 400
    try:
        rules = rules_from_dicts(data["rules"])
    except (KeyError, TypeError):
        return jsonify({"error": "malformed rule"}), 400
    return jsonify({"css": format_rules(rules)})


@api_bp.route("/escape", methods=["POST"])
def escape():
    css = _string_field("css")
    if css is None:
        return jsonify({"error": "css (string) required"}), 400
    return jsonify({"text": escape_for_transport(css)})


@api_bp.route("/unescape", methods=["POST"])
def unescape():
    text = _string_field("text")
    if text is None:
        return jsonify({"error": "text (string) required"}), 400
    return jsonify({"css": unescape_from_transport(text)})


# --- editing session ----------------------------------------------------------


@api_bp.route("/rules", methods=["GET"])
def get_rules():
    """Return the live rules and their CSS rendering."""
    session = _session()
    return jsonify({"rules": rules_to_dicts(session.rules), "css": session.export_css()})


@api_bp.route("/rules", methods=["PUT"])
def put_rules():
    """Replace the live rules, from a rule list or from CSS text."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "JSON object required"}), 400

    session = _session()
    if isinstance(data.get("css"), str):
        session.load_css(data["css"])
    elif isinstance(data.get("rules"), list):
        try:
            rules = rules_from_dicts(data["rules"])
            operation = data.get("operation")
            op = operation_from_dict(operation) if isinstance(operation, dict) else None
        except (KeyError, TypeError, ValueError) as exc:
            return jsonify({"error": f"malformed request: {exc}"}), 400
        session.apply(rules, op)
    else:
        return jsonify({"error": "rules (list) or css (string) required"}), 400

    return jsonify({"rules": rules_to_dicts(session.rules), **_history_state(session)})


@api_bp.route("/undo", methods=["POST"])
def undo():
    session = _session()
    if not session.undo():
        return jsonify({"error": "nothing to undo", **_history_state(session)}), 409
    return jsonify({"rules": rules_to_dicts(session.rules), **_history_state(session)})


@api_bp.route("/redo", methods=["POST"])
def redo():
    session = _session()
    if not session.redo():
        return jsonify({"error": "nothing to redo", **_history_state(session)}), 409
    return jsonify({"rules": rules_to_dicts(session.rules), **_history_state(session)})


@api_bp.route("/history", methods=["GET"])
def history_state():
    return jsonify(_history_state(_session()))


@api_bp.route("/history", methods=["DELETE"])
def clear_history():
    _session().history.clear()
    return "", 204
