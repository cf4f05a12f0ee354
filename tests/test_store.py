"""Tests for finch.store — navigation-time view data."""

from finch.store import ViewDataStore


class TestViewDataStore:
    def test_put_then_get(self, store: ViewDataStore) -> None:
        data = {"title": "Hi", "items": [1, 2, 3]}
        store.put("home", data)
        assert store.get("home") == data
        assert store.get("home") is data

    def test_missing_entry(self, store: ViewDataStore) -> None:
        assert store.get("missing") is None
        assert "missing" not in store

    def test_get_default(self, store: ViewDataStore) -> None:
        assert store.get("missing", {}) == {}

    def test_last_put_wins(self, store: ViewDataStore) -> None:
        store.put("home", {"v": 1})
        store.put("home", {"v": 2})
        assert store.get("home") == {"v": 2}
        assert len(store) == 1

    def test_none_is_stored(self, store: ViewDataStore) -> None:
        store.put("home", None)
        assert "home" in store

    def test_unbounded_by_default(self, store: ViewDataStore) -> None:
        for i in range(500):
            store.put(f"view-{i}", i)
        assert len(store) == 500
        assert store.get("view-0") == 0


class TestCap:
    def test_evicts_oldest_write(self) -> None:
        store = ViewDataStore(max_entries=2)
        store.put("a", 1)
        store.put("b", 2)
        store.put("c", 3)
        assert "a" not in store
        assert store.get("b") == 2
        assert store.get("c") == 3

    def test_rewrite_refreshes_entry(self) -> None:
        store = ViewDataStore(max_entries=2)
        store.put("a", 1)
        store.put("b", 2)
        store.put("a", 10)
        store.put("c", 3)
        assert "b" not in store
        assert store.get("a") == 10

    def test_reads_do_not_refresh(self) -> None:
        store = ViewDataStore(max_entries=2)
        store.put("a", 1)
        store.put("b", 2)
        store.get("a")
        store.put("c", 3)
        assert "a" not in store
