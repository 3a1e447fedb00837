"""
TTL-Cache: In-Process Key-Value Cache

A small in-memory key-value cache with optional per-entry time-to-live,
single and batch get/set/delete operations, and lazy expiration.
"""

from .cache.store import CacheStore
from .exceptions import (
    CacheError,
    InvalidArgumentError,
    InvalidKeyError,
    InvalidTTLError,
    NotIterableError,
)

__version__ = "1.0.0"

__all__ = [
    "CacheStore",
    "CacheError",
    "InvalidArgumentError",
    "InvalidKeyError",
    "InvalidTTLError",
    "NotIterableError",
]
