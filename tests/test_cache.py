"""Unit tests for the path/mtime validation cache."""

import threading

from services.cache import ValidationCache


def test_get_miss_on_empty():
    cache = ValidationCache()
    assert cache.get("a.md", 1) is None
    assert cache.misses == 1


def test_store_then_hit():
    cache = ValidationCache()
    cache.store("a.md", 1, ["err"])
    assert cache.get("a.md", 1) == ["err"]
    assert cache.hits == 1


def test_mtime_change_is_a_miss():
    cache = ValidationCache()
    cache.store("a.md", 1, [])
    assert cache.get("a.md", 2) is None


def test_store_overwrites():
    cache = ValidationCache()
    cache.store("a.md", 1, ["old"])
    cache.store("a.md", 2, [])
    assert cache.get("a.md", 2) == []
    assert cache.get("a.md", 1) is None
    assert len(cache) == 1


def test_evict():
    cache = ValidationCache()
    cache.store("a.md", 1, [])
    assert cache.evict("a.md") is True
    assert cache.evict("a.md") is False
    assert "a.md" not in cache


def test_prune_keeps_listed_paths():
    cache = ValidationCache()
    for path in ("a.md", "b.md", "gone.md"):
        cache.store(path, 1, [])
    removed = cache.prune(["a.md", "b.md", "never-cached.md"])
    assert removed == 1
    assert "gone.md" not in cache
    assert "a.md" in cache and "b.md" in cache


def test_clear():
    cache = ValidationCache()
    cache.store("a.md", 1, [])
    cache.store("b.md", 1, [])
    cache.clear()
    assert len(cache) == 0


def test_status():
    cache = ValidationCache()
    cache.store("a.md", 1, [])
    cache.get("a.md", 1)
    cache.get("a.md", 2)
    assert cache.status == {"entries": 1, "hits": 1, "misses": 1}


def test_returned_errors_are_a_copy():
    cache = ValidationCache()
    errors = ["err"]
    cache.store("a.md", 1, errors)
    errors.append("late")
    hit = cache.get("a.md", 1)
    hit.clear()
    assert cache.get("a.md", 1) == ["err"]


def test_concurrent_gets_count_every_lookup():
    cache = ValidationCache()
    cache.store("a.md", 1, [])

    def lookup():
        for _ in range(1000):
            cache.get("a.md", 1)
            cache.get("a.md", 2)

    threads = [threading.Thread(target=lookup) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert cache.status == {"entries": 1, "hits": 8000, "misses": 8000}
