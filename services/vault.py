"""Vault file access: frontmatter parsing and record loading."""

import datetime as _dt
import os
from dataclasses import dataclass

import yaml

from config import VAULT_DIR


@dataclass
class Record:
    """A markdown note as seen by the checker."""

    path: str  # vault-relative, forward slashes
    mtime: int  # st_mtime_ns
    frontmatter: dict | None = None

    @property
    def basename(self) -> str:
        return os.path.splitext(os.path.basename(self.path))[0]


def _safe_path(rel_path: str, vault_dir: str = None) -> tuple[str, str | None]:
    """Resolve and validate that path stays within vault_dir. Returns (abs_path, error)."""
    vault_dir = vault_dir or VAULT_DIR
    abs_path = os.path.realpath(os.path.join(vault_dir, rel_path))
    vault_real = os.path.realpath(vault_dir)
    if abs_path != vault_real and not abs_path.startswith(vault_real + os.sep):
        return abs_path, "Path traversal detected"
    return abs_path, None


def parse_frontmatter(content: str) -> tuple[dict, str]:
    """Extract YAML frontmatter and body from file content."""
    if not content.startswith("---"):
        return {}, content

    lines = content.split("\n")
    end_idx = None
    for i, line in enumerate(lines[1:], 1):
        if line.strip() == "---":
            end_idx = i
            break

    if end_idx is None:
        return {}, content

    try:
        raw = yaml.safe_load("\n".join(lines[1:end_idx])) or {}
    except yaml.YAMLError:
        return {}, content
    if not isinstance(raw, dict):
        return {}, content

    # YAML resolves bare dates to date/datetime objects; the checker works on
    # the string form, the way the note author wrote it.
    frontmatter = {
        str(k): v.isoformat() if isinstance(v, _dt.date | _dt.datetime) else v
        for k, v in raw.items()
    }
    body = "\n".join(lines[end_idx + 1 :]).lstrip("\n")
    return frontmatter, body


def read_record(rel_path: str, vault_dir: str = None) -> Record | None:
    """Load a markdown note as a Record. None if missing, unreadable, or outside the vault."""
    if not rel_path.endswith(".md"):
        return None
    abs_path, err = _safe_path(rel_path, vault_dir)
    if err or not os.path.isfile(abs_path):
        return None

    try:
        with open(abs_path, encoding="utf-8") as f:
            content = f.read()
        mtime = os.stat(abs_path).st_mtime_ns
    except (OSError, UnicodeDecodeError):
        return None
    fm, _ = parse_frontmatter(content)
    return Record(path=rel_path.replace(os.sep, "/"), mtime=mtime, frontmatter=fm)


def list_markdown_paths(vault_dir: str = None) -> list[str]:
    """Return vault-relative paths of all .md files, skipping dot directories."""
    vault_dir = vault_dir or VAULT_DIR
    paths = []
    for root, dirs, files in os.walk(vault_dir):
        dirs[:] = sorted(d for d in dirs if not d.startswith("."))
        for fname in sorted(files):
            if not fname.endswith(".md"):
                continue
            rel_root = os.path.relpath(root, vault_dir)
            rel_path = fname if rel_root == "." else os.path.join(rel_root, fname)
            paths.append(rel_path.replace(os.sep, "/"))
    return paths


def iter_records(vault_dir: str = None):
    """Yield a Record for every readable markdown note in the vault."""
    for rel_path in list_markdown_paths(vault_dir):
        record = read_record(rel_path, vault_dir)
        if record is not None:
            yield record
