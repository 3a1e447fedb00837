"""Cache module for TTL-Cache."""

from .entry import CacheEntry
from .store import CacheStore

__all__ = ["CacheEntry", "CacheStore"]
