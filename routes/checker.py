"""Type check endpoints: single file, whole vault, active file, cache, schema listing."""

from flask import Blueprint, jsonify, request

from config import VAULT_DIR, get_types_path
from services.checker import TypeChecker, summarize
from services.schema import describe_property_types
from services.settings import load_settings

bp = Blueprint("checker", __name__)

checker = TypeChecker(VAULT_DIR)


def _truthy(value: str | None) -> bool:
    return (value or "").lower() in ("1", "true", "yes")


@bp.route("/api/check/file/<path:rel_path>")
def check_file(rel_path):
    """Type errors for one note. ?force=1 bypasses the cache."""
    errors = checker.check_file(rel_path, force=_truthy(request.args.get("force")))
    if errors is None:
        return jsonify({"error": "File not found"}), 404
    return jsonify(
        {
            "path": rel_path,
            "errors": [e.to_dict() for e in errors],
            "valid": not errors,
        }
    )


@bp.route("/api/check/all")
def check_all():
    """Every note with at least one type error, plus totals."""
    results = checker.check_all_files()
    return jsonify(
        {
            "results": [
                {"path": record.path, "errors": [e.to_dict() for e in errors]}
                for record, errors in results
            ],
            **summarize(results),
        }
    )


@bp.route("/api/check/active", methods=["POST"])
def set_active():
    """Set the open note; it is checked after the debounce window when auto-check is on."""
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({"error": "body must be a JSON object"}), 400
    path = data.get("path")
    if path is not None and not isinstance(path, str):
        return jsonify({"error": "path must be a string"}), 400

    settings = load_settings()
    checker.set_debounce(settings["debounce_ms"] / 1000)
    checker.set_active_file(path, auto_check=settings["enable_auto_check"])
    return jsonify({"ok": True, "path": path}), 202


@bp.route("/api/check/current")
def current():
    """Last result for the active note. errors is null until its check has run."""
    path, errors = checker.current_file()
    return jsonify(
        {
            "path": path,
            "errors": None if errors is None else [e.to_dict() for e in errors],
        }
    )


@bp.route("/api/check/cache/clear", methods=["POST"])
def cache_clear():
    checker.clear_cache()
    return jsonify({"ok": True})


@bp.route("/api/check/cache/prune", methods=["POST"])
def cache_prune():
    """Drop cache entries for notes that no longer exist."""
    removed = checker.prune_cache()
    return jsonify({"ok": True, "removed": removed})


@bp.route("/api/check/cache")
def cache_status():
    return jsonify(checker.cache.status)


@bp.route("/api/types", methods=["GET"])
def list_types():
    """Configured property types. Built-in properties are listed but never checked."""
    return jsonify(
        {
            "path": get_types_path(checker.vault_dir),
            "types": describe_property_types(checker.property_types),
        }
    )


@bp.route("/api/types/reload", methods=["POST"])
def reload_types():
    types = checker.reload_property_types()
    return jsonify({"ok": True, "count": len(types)})
