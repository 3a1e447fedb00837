"""
Cache Store Module

This module implements the core key-value cache.

Features:
- get / set / delete / has / clear on single keys
- get_multiple / set_multiple / delete_multiple batch variants
- Optional TTL per entry (int seconds or timedelta)
- Lazy expiration: expired entries are hidden from reads, and purged by
  writes (periodic sweep), delete, clear or cleanup_expired()
"""

import copy
import logging
import threading
import time
from typing import Any, Callable, Dict, Iterable, Optional

from ..config.settings import settings
from .entry import CacheEntry
from .validation import resolve_ttl, validate_entries, validate_key, validate_keys

logger = logging.getLogger(__name__)


class CacheStore:
    """
    In-memory key-value cache with TTL support.

    Every operation validates its arguments before touching the store, so
    an invalid key or TTL never leaves a partial write behind. Batch
    operations validate the whole batch first.

    Values are deep-copied on the way in and on the way out; callers never
    hold a reference to a stored object.

    Internal Storage:
        Plain dict for O(1) operations.
        Format: key -> CacheEntry(value, expires_at)
        expires_at = None means no expiration

    Thread safety:
        All operations run under one lock owned by the instance. ``has()``
        is still only advisory: another thread may delete or overwrite the
        key right after it returns, so never use it to guard get/set.

    Attributes:
        max_key_length: Maximum key length accepted
        sweep_interval: Writes between sweeps of expired entries (0 = never)
    """

    def __init__(self, max_key_length: int = None, sweep_interval: int = None,
                 clock: Callable[[], float] = None):
        """
        Initialize the cache store.

        Args:
            max_key_length: Maximum key length (default from settings.MAX_KEY_LENGTH)
            sweep_interval: Writes between sweeps (default from settings.SWEEP_INTERVAL)
            clock: Callable returning the current POSIX time (default time.time)
        """
        self.max_key_length = (
            max_key_length if max_key_length is not None else settings.MAX_KEY_LENGTH
        )
        self.sweep_interval = (
            sweep_interval if sweep_interval is not None else settings.SWEEP_INTERVAL
        )
        self._clock = clock or time.time

        self._store: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self._writes = 0

    def get(self, key: str, default: Any = None) -> Any:
        """
        Fetch a value from the cache.

        Args:
            key: The key to look up
            default: Returned when the key is missing or expired

        Returns:
            A copy of the stored value, or ``default`` on a miss

        Raises:
            InvalidKeyError: If the key is not legal
        """
        validate_key(key, self.max_key_length)

        with self._lock:
            return self._lookup(key, default, self._clock())

    def set(self, key: str, value: Any = None, ttl: Any = None) -> bool:
        """
        Store a value, replacing any existing entry for the key.

        Args:
            key: The key to store
            value: The value to associate with the key
            ttl: None (never expires), int seconds or timedelta

        Returns:
            True on success

        Raises:
            InvalidKeyError: If the key is not legal
            InvalidTTLError: If the TTL is not legal
        """
        validate_key(key, self.max_key_length)
        expires_at = resolve_ttl(ttl, self._clock())
        entry = CacheEntry(copy.deepcopy(value), expires_at)

        with self._lock:
            self._store[key] = entry
            self._record_write()
        return True

    def delete(self, key: str) -> bool:
        """
        Delete an entry.

        An expired entry is removed as well but reported as absent.

        Returns:
            True if a live (unexpired) entry was deleted, False if the key was
            absent or had already expired

        Raises:
            InvalidKeyError: If the key is not legal
        """
        validate_key(key, self.max_key_length)

        with self._lock:
            entry = self._store.pop(key, None)
            return entry is not None and entry.is_live(self._clock())

    def clear(self) -> bool:
        """Remove every entry. Always returns True."""
        with self._lock:
            count = len(self._store)
            self._store.clear()
        logger.debug(f"Cleared {count} entries")
        return True

    def has(self, key: str) -> bool:
        """
        Check if a key is present and not expired.

        Only meant for advisory uses such as cache warming: the answer can
        be stale as soon as it is returned.

        Raises:
            InvalidKeyError: If the key is not legal
        """
        validate_key(key, self.max_key_length)

        with self._lock:
            entry = self._store.get(key)
            return entry is not None and entry.is_live(self._clock())

    def get_multiple(self, keys: Iterable[str], default: Any = None) -> Dict[str, Any]:
        """
        Fetch several values at once.

        Args:
            keys: Iterable of keys
            default: Value used for every missing or expired key

        Returns:
            Dict mapping each requested key to its value or ``default``

        Raises:
            NotIterableError: If ``keys`` is not a non-string iterable
            InvalidKeyError: If any key is not legal (nothing is read)
        """
        key_list = validate_keys(keys, self.max_key_length)

        with self._lock:
            now = self._clock()
            return {key: self._lookup(key, default, now) for key in key_list}

    def set_multiple(self, entries: Any, ttl: Any = None) -> bool:
        """
        Store several key/value pairs with one shared expiration.

        Args:
            entries: Mapping or iterable of (key, value) pairs
            ttl: None, int seconds or timedelta applied to every pair

        Returns:
            True on success

        Raises:
            NotIterableError: If ``entries`` is not an iterable of pairs
            InvalidKeyError: If any key is not legal (nothing is written)
            InvalidTTLError: If the TTL is not legal (nothing is written)
        """
        pairs = validate_entries(entries, self.max_key_length)
        expires_at = resolve_ttl(ttl, self._clock())
        new_entries = {key: CacheEntry(copy.deepcopy(value), expires_at)
                       for key, value in pairs}

        with self._lock:
            self._store.update(new_entries)
            self._record_write()
        return True

    def delete_multiple(self, keys: Iterable[str]) -> bool:
        """
        Delete several keys. Keys that are not stored are ignored.

        Returns:
            True on success

        Raises:
            NotIterableError: If ``keys`` is not a non-string iterable
            InvalidKeyError: If any key is not legal (nothing is deleted)
        """
        key_list = validate_keys(keys, self.max_key_length)

        with self._lock:
            for key in key_list:
                self._store.pop(key, None)
        return True

    def size(self) -> int:
        """
        Get the current number of stored entries.

        Note: This may include expired entries that haven't been purged yet.
        """
        with self._lock:
            return len(self._store)

    def cleanup_expired(self) -> int:
        """
        Remove all expired entries from the store.

        Returns:
            Number of entries removed
        """
        with self._lock:
            return self._purge_expired(self._clock())

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the store.

        Returns:
            Dictionary containing:
            - total_keys: Entries stored, expired ones included
            - expired_keys: Expired entries not yet purged
            - active_keys: Live entries
            - max_key_length: Maximum accepted key length
            - writes: Number of set/set_multiple calls so far
        """
        with self._lock:
            now = self._clock()
            total = len(self._store)
            expired = sum(1 for entry in self._store.values() if not entry.is_live(now))
            writes = self._writes

        return {
            "total_keys": total,
            "expired_keys": expired,
            "active_keys": total - expired,
            "max_key_length": self.max_key_length,
            "writes": writes,
        }

    def _lookup(self, key: str, default: Any, now: float) -> Any:
        # Caller holds the lock. Expired entries stay stored.
        entry = self._store.get(key)
        if entry is None:
            return default
        if not entry.is_live(now):
            logger.debug(f"Key expired: {key}")
            return default
        return copy.deepcopy(entry.value)

    def _record_write(self) -> None:
        # Caller holds the lock.
        self._writes += 1
        if self.sweep_interval > 0 and self._writes % self.sweep_interval == 0:
            self._purge_expired(self._clock())

    def _purge_expired(self, now: float) -> int:
        expired = [key for key, entry in self._store.items() if not entry.is_live(now)]
        for key in expired:
            del self._store[key]
        if expired:
            logger.debug(f"Purged {len(expired)} expired entries")
        return len(expired)
