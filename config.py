"""Shared constants and path configuration for Vault Typecheck."""

import json
import os

_SETTINGS_FILE = os.path.expanduser("~/.config/vault-typecheck/settings.json")
_DEFAULT_VAULT_DIR = os.path.expanduser("~/vault")


def _read_setting(*keys, default=None):
    """Read a nested setting from the global settings file."""
    try:
        with open(_SETTINGS_FILE) as f:
            data = json.load(f)
        for k in keys:
            data = data[k]
        return data
    except (FileNotFoundError, json.JSONDecodeError, KeyError, TypeError):
        return default


def get_config_dir(vault_dir=None):
    """Return the host application's config directory inside a vault."""
    return os.path.join(vault_dir or VAULT_DIR, CONFIG_DIR_NAME)


def get_types_path(vault_dir=None):
    """Return the path of the property types file (<vault>/.obsidian/types.json)."""
    return os.path.join(get_config_dir(vault_dir), TYPES_FILENAME)


VAULT_DIR = _read_setting("vault_dir", default=_DEFAULT_VAULT_DIR)
CONFIG_DIR_NAME = ".obsidian"
TYPES_FILENAME = "types.json"
SETTINGS_FILE = _SETTINGS_FILE
PORT = 4250
