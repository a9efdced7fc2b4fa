"""Settings persistence for the checker (~/.config/vault-typecheck/settings.json).

Only the keys in _DEFAULTS are read back and written; anything else in the
file (for example vault_dir, read by config.py) is preserved on save.
"""

import json
import os

from config import SETTINGS_FILE

_DEFAULTS = {
    "enable_auto_check": True,
    "show_inline_warnings": True,
    "debounce_ms": 100,
}


def _read_file() -> dict:
    try:
        with open(SETTINGS_FILE) as f:
            saved = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        return {}
    return saved if isinstance(saved, dict) else {}


def load_settings() -> dict:
    """Load saved settings merged over defaults."""
    saved = _read_file()
    settings = {}
    for key, default_val in _DEFAULTS.items():
        value = saved.get(key, default_val)
        # Drop values of the wrong type rather than failing later.
        if type(value) is not type(default_val):
            value = default_val
        settings[key] = value
    return settings


def save_settings(settings: dict) -> None:
    """Persist known keys, keeping unrelated keys already in the file."""
    data = _read_file()
    for key in _DEFAULTS:
        if key in settings:
            data[key] = settings[key]
    os.makedirs(os.path.dirname(SETTINGS_FILE), exist_ok=True)
    with open(SETTINGS_FILE, "w") as f:
        json.dump(data, f, indent=2)
