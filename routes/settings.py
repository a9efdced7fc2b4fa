"""Settings API — auto-check toggle, inline warnings, debounce window."""

from flask import Blueprint, jsonify, request

from routes.checker import checker
from services.settings import load_settings, save_settings

bp = Blueprint("settings", __name__)


@bp.route("/api/settings", methods=["GET"])
def get_settings():
    """Return settings plus live cache status."""
    settings = load_settings()
    settings["cache"] = checker.cache.status
    return jsonify(settings)


@bp.route("/api/settings", methods=["POST"])
def update_settings():
    """Validate and persist settings."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "body must be a JSON object"}), 400

    settings = load_settings()

    for key in ("enable_auto_check", "show_inline_warnings"):
        if key in data:
            if not isinstance(data[key], bool):
                return jsonify({"error": f"{key} must be a boolean"}), 400
            settings[key] = data[key]

    if "debounce_ms" in data:
        delay = data["debounce_ms"]
        if isinstance(delay, bool) or not isinstance(delay, int) or not (0 <= delay <= 5000):
            return jsonify({"error": "debounce_ms must be an integer between 0 and 5000"}), 400
        settings["debounce_ms"] = delay
        checker.set_debounce(delay / 1000)

    save_settings(settings)
    return jsonify(settings)
