"""
Tests for batch operations

These tests verify the *_multiple CacheStore operations:
- get_multiple(): Substitutes the default for missing/expired keys
- set_multiple(): One shared TTL, all-or-nothing validation
- delete_multiple(): Removes exactly the requested keys

Run with: python -m pytest tests/test_batch.py -v
"""

import pytest

from ttl_cache.cache.store import CacheStore
from ttl_cache.exceptions import InvalidKeyError, InvalidTTLError, NotIterableError


class TestGetMultiple:
    """Test get_multiple() method."""

    def test_get_multiple_existing(self, store: CacheStore):
        store.set("a", 1)
        store.set("b", 2)

        assert store.get_multiple(["a", "b"]) == {"a": 1, "b": 2}

    def test_get_multiple_missing_uses_default(self, store: CacheStore):
        """Test missing keys map to the default instead of raising."""
        store.set("a", 1)

        result = store.get_multiple(["a", "missing"], default="none")

        assert result == {"a": 1, "missing": "none"}

    def test_get_multiple_expired_uses_default(self, timed_store: CacheStore, clock):
        timed_store.set_multiple({"a": 1, "b": 2}, ttl=5)
        assert timed_store.get_multiple(["a", "b"], default=None) == {"a": 1, "b": 2}

        clock.advance(6)

        assert timed_store.get_multiple(["a", "b"], default=None) == {"a": None, "b": None}

    def test_get_multiple_accepts_any_iterable(self, store: CacheStore):
        store.set("a", 1)
        store.set("b", 2)

        assert store.get_multiple(("a", "b")) == {"a": 1, "b": 2}
        assert store.get_multiple(key for key in ["a"]) == {"a": 1}
        assert store.get_multiple({"b"}) == {"b": 2}

    def test_get_multiple_empty(self, store: CacheStore):
        assert store.get_multiple([]) == {}

    def test_get_multiple_duplicate_keys(self, store: CacheStore):
        store.set("a", 1)
        assert store.get_multiple(["a", "a"]) == {"a": 1}

    @pytest.mark.parametrize("keys", [None, 5, "ab", b"ab", object()])
    def test_get_multiple_not_iterable(self, store: CacheStore, keys):
        with pytest.raises(NotIterableError):
            store.get_multiple(keys)

    def test_get_multiple_invalid_key(self, store: CacheStore):
        with pytest.raises(InvalidKeyError):
            store.get_multiple(["a", "b@d"])


class TestSetMultiple:
    """Test set_multiple() method."""

    def test_set_multiple_mapping(self, store: CacheStore):
        assert store.set_multiple({"a": 1, "b": 2}) is True

        assert store.get("a") == 1
        assert store.get("b") == 2

    def test_set_multiple_pairs(self, store: CacheStore):
        assert store.set_multiple([("a", 1), ("b", 2)]) is True
        assert store.get_multiple(["a", "b"]) == {"a": 1, "b": 2}

    def test_set_multiple_overwrites(self, store: CacheStore):
        store.set("a", "old")
        store.set_multiple({"a": "new"})
        assert store.get("a") == "new"

    def test_set_multiple_shared_ttl(self, timed_store: CacheStore, clock):
        timed_store.set_multiple({"a": 1, "b": 2}, ttl=5)

        clock.advance(5)
        assert timed_store.has("a") is True
        assert timed_store.has("b") is True

        clock.advance(1)
        assert timed_store.has("a") is False
        assert timed_store.has("b") is False

    def test_set_multiple_invalid_key_writes_nothing(self, store: CacheStore):
        """Test one bad key aborts the whole batch."""
        with pytest.raises(InvalidKeyError):
            store.set_multiple([("a", 1), ("bad key", 2), ("c", 3)])

        assert store.size() == 0

    def test_set_multiple_invalid_ttl_writes_nothing(self, store: CacheStore):
        with pytest.raises(InvalidTTLError):
            store.set_multiple({"a": 1}, ttl=-5)

        assert store.size() == 0

    @pytest.mark.parametrize("entries", [None, 5, "ab"])
    def test_set_multiple_not_iterable(self, store: CacheStore, entries):
        with pytest.raises(NotIterableError):
            store.set_multiple(entries)

    @pytest.mark.parametrize("entries", [
        [("a", 1, 2)],
        [5],
        [("a",)],
        ["ab", "cd"],
        [b"ab"],
        [{"x": 1, "y": 2}],
    ])
    def test_set_multiple_malformed_pairs(self, store: CacheStore, entries):
        with pytest.raises(NotIterableError):
            store.set_multiple(entries)

        assert store.size() == 0


class TestDeleteMultiple:
    """Test delete_multiple() method."""

    def test_delete_multiple_ignores_absent(self, store: CacheStore):
        store.set("a", 1)

        assert store.delete_multiple(["a", "c"]) is True
        assert store.has("a") is False

    def test_delete_multiple_only_given_keys(self, store: CacheStore):
        """Test keys not in the request survive."""
        store.set_multiple({"a": 1, "b": 2, "c": 3})

        store.delete_multiple(["a", "c"])

        assert store.get_multiple(["a", "b", "c"]) == {"a": None, "b": 2, "c": None}
        assert store.size() == 1

    def test_delete_multiple_empty_store(self, store: CacheStore):
        assert store.delete_multiple(["a"]) is True

    def test_delete_multiple_invalid_key_deletes_nothing(self, store: CacheStore):
        store.set_multiple({"a": 1, "b": 2})

        with pytest.raises(InvalidKeyError):
            store.delete_multiple(["a", "", "b"])

        assert store.size() == 2

    @pytest.mark.parametrize("keys", [None, 3.5, "a"])
    def test_delete_multiple_not_iterable(self, store: CacheStore, keys):
        with pytest.raises(NotIterableError):
            store.delete_multiple(keys)
