"""Per-file validation cache keyed by path and modification time."""

import threading


class ValidationCache:
    """Maps a record path to the (mtime, errors) pair from its last validation.

    An entry is only reusable while the stored mtime equals the record's
    current mtime. Concurrent validations of one record may both store; the
    last write wins and both results are identical.
    """

    def __init__(self):
        self._entries: dict[str, tuple[int, tuple]] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, path: str, mtime) -> list | None:
        """Return a fresh copy of the cached errors for path if still current, else None."""
        with self._lock:
            entry = self._entries.get(path)
            if entry is not None and entry[0] == mtime:
                self.hits += 1
                return list(entry[1])
            self.misses += 1
        return None

    def store(self, path: str, mtime, errors: list) -> None:
        with self._lock:
            self._entries[path] = (mtime, tuple(errors))

    def evict(self, path: str) -> bool:
        """Drop one entry. Returns True if it existed."""
        with self._lock:
            return self._entries.pop(path, None) is not None

    def prune(self, keep_paths) -> int:
        """Drop entries whose path is not in keep_paths. Returns the number dropped."""
        keep = set(keep_paths)
        with self._lock:
            stale = [p for p in self._entries if p not in keep]
            for p in stale:
                del self._entries[p]
        return len(stale)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, path) -> bool:
        with self._lock:
            return path in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    @property
    def status(self) -> dict:
        with self._lock:
            return {"entries": len(self._entries), "hits": self.hits, "misses": self.misses}
