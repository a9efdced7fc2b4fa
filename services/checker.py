"""Frontmatter type checking: per-record validation and vault-wide orchestration.

validate_record() is the engine: it walks one note's frontmatter, checks each
property that has a declared type, and memoizes the result in a
ValidationCache keyed by path and mtime. TypeChecker owns the schema, the
cache, and the active-file state for the REST layer and the CLI.
"""

import logging
import threading
import time
from dataclasses import asdict, dataclass

from config import VAULT_DIR
from services.cache import ValidationCache
from services.debounce import Debouncer
from services.inference import infer_type
from services.schema import load_property_types
from services.validator import validate_property_type
from services.vault import Record, iter_records, list_markdown_paths, read_record

log = logging.getLogger(__name__)

# Host-reserved position marker plus the built-in list properties.
IGNORED_PROPERTIES = frozenset({"position", "aliases", "tags"})


@dataclass
class ValidationError:
    property: str
    expected: str
    actual: str
    message: str

    def to_dict(self) -> dict:
        return asdict(self)


def validate_record(
    record: Record, schema: dict, cache: ValidationCache, force: bool = False
) -> list[ValidationError]:
    """Return type errors for one record, reusing the cached result while its mtime is unchanged."""
    if not force:
        cached = cache.get(record.path, record.mtime)
        if cached is not None:
            log.debug("Using cached validation for %s", record.basename)
            return cached

    started = time.perf_counter()
    errors: list[ValidationError] = []
    frontmatter = record.frontmatter
    if not isinstance(schema, dict):
        schema = {}

    if frontmatter and isinstance(frontmatter, dict):
        for prop, value in frontmatter.items():
            if prop in IGNORED_PROPERTIES:
                continue
            expected = schema.get(prop)
            if not expected or not isinstance(expected, str):
                continue

            actual = infer_type(value)
            if not validate_property_type(value, expected):
                errors.append(
                    ValidationError(
                        property=prop,
                        expected=expected,
                        actual=actual,
                        message=f"expected {expected}, got {actual}",
                    )
                )

    cache.store(record.path, record.mtime, errors)
    log.debug(
        "Validated %s in %.2fms (%d errors)",
        record.basename,
        (time.perf_counter() - started) * 1000,
        len(errors),
    )
    return errors


def summarize(results: list[tuple[Record, list[ValidationError]]]) -> dict:
    return {
        "files_with_errors": len(results),
        "total_errors": sum(len(errors) for _, errors in results),
    }


class TypeChecker:
    def __init__(self, vault_dir: str = None, debounce_seconds: float = 0.1):
        self.vault_dir = vault_dir or VAULT_DIR
        self.cache = ValidationCache()
        self.property_types: dict = {}
        self._debouncer = Debouncer(debounce_seconds)
        self._active_path = None
        self._active_errors = None
        self._active_lock = threading.Lock()
        self.load_property_types()

    # ── Schema ────────────────────────────────────────────────────────────

    def load_property_types(self) -> dict:
        self.property_types = load_property_types(self.vault_dir)
        return self.property_types

    def set_vault(self, vault_dir: str) -> None:
        """Point the checker at another vault. Drops the cache and the active file."""
        self.shutdown()
        self.vault_dir = vault_dir
        self.set_active_file(None)
        self.reload_property_types()

    def reload_property_types(self) -> dict:
        """Re-read types.json. Cached results were computed against the old schema, so drop them."""
        self.load_property_types()
        self.clear_cache()
        log.info("Reloaded %d property types", len(self.property_types))
        return self.property_types

    # ── Core surface ──────────────────────────────────────────────────────

    def validate_one(self, record: Record, force: bool = False) -> list[ValidationError]:
        return validate_record(record, self.property_types, self.cache, force)

    def validate_all(self, records) -> list[tuple[Record, list[ValidationError]]]:
        """Validate each record in turn; return (record, errors) for records with errors."""
        results = []
        for record in records:
            errors = self.validate_one(record)
            if errors:
                results.append((record, errors))
        return results

    def clear_cache(self) -> None:
        self.cache.clear()
        log.info("Validation cache cleared")

    def prune_cache(self, paths=None) -> int:
        """Drop cache entries for paths no longer present. Defaults to the current vault listing."""
        if paths is None:
            paths = list_markdown_paths(self.vault_dir)
        removed = self.cache.prune(paths)
        if removed:
            log.info("Pruned %d stale cache entries", removed)
        return removed

    def evict(self, path: str) -> bool:
        return self.cache.evict(path)

    # ── Vault-backed checks ───────────────────────────────────────────────

    def check_file(self, rel_path: str, force: bool = False) -> list[ValidationError] | None:
        """Validate one vault note. None if it is missing or not markdown."""
        record = read_record(rel_path, self.vault_dir)
        if record is None:
            return None
        return self.validate_one(record, force=force)

    def check_all_files(self) -> list[tuple[Record, list[ValidationError]]]:
        records = list(iter_records(self.vault_dir))
        results = self.validate_all(records)
        self.prune_cache([r.path for r in records])
        return results

    # ── Active file ───────────────────────────────────────────────────────

    def set_active_file(self, rel_path: str | None, auto_check: bool = True) -> None:
        """Record the note the host is showing; schedule a debounced check if auto_check."""
        with self._active_lock:
            self._active_path = rel_path
            self._active_errors = None
        if rel_path and auto_check:
            self._debouncer.submit(self._check_active, rel_path)

    def _check_active(self, rel_path: str) -> None:
        errors = self.check_file(rel_path)
        with self._active_lock:
            if self._active_path == rel_path:
                self._active_errors = errors

    def current_file(self) -> tuple[str | None, list[ValidationError] | None]:
        """Return (active path, its last computed errors). Errors are None until checked."""
        with self._active_lock:
            return self._active_path, self._active_errors

    def set_debounce(self, seconds: float) -> None:
        self._debouncer.delay = seconds

    def shutdown(self) -> None:
        """Cancel any pending active-file check."""
        self._debouncer.cancel()
