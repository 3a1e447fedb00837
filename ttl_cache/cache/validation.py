"""
Argument Validation Module

Key validation, TTL resolution and batch argument checks shared by every
CacheStore operation. Each function either returns normally or raises one
of the exceptions in ``ttl_cache.exceptions``; none of them has side effects.
"""

import re
from collections.abc import Iterable, Mapping
from datetime import timedelta
from typing import Any, List, Optional, Tuple

from ..config.settings import settings
from ..exceptions import InvalidKeyError, InvalidTTLError, NotIterableError

_ILLEGAL_KEY_CHARS = re.compile(r"[^a-zA-Z._]")


def validate_key(key: Any, max_length: int = settings.MAX_KEY_LENGTH) -> None:
    """
    Check that ``key`` is a legal cache key.

    A legal key is a non-empty string of at most ``max_length`` characters
    drawn from ASCII letters, period and underscore.

    Raises:
        InvalidKeyError: If the key is not legal
    """
    if not isinstance(key, str):
        raise InvalidKeyError(f"Cache key must be str, {type(key).__name__} given")

    if not key:
        raise InvalidKeyError("Cache key can not be empty")

    match = _ILLEGAL_KEY_CHARS.search(key)
    if match:
        raise InvalidKeyError(
            f"Cache key {key!r} is not valid: character {match.group()!r} "
            f"is outside {settings.KEY_PATTERN}"
        )

    if len(key) > max_length:
        raise InvalidKeyError(
            f"Cache key length must be at most {max_length}, got {len(key)}"
        )


def resolve_ttl(ttl: Any, now: float) -> Optional[float]:
    """
    Convert a TTL into an absolute expiration timestamp.

    Args:
        ttl: None, a non-negative int number of seconds, or a timedelta
        now: Current POSIX timestamp

    Returns:
        ``now`` plus the TTL, or None when ``ttl`` is None (never expires)

    Raises:
        InvalidTTLError: For any other value, including negative durations
    """
    if ttl is None:
        return None

    if isinstance(ttl, timedelta):
        seconds = ttl.total_seconds()
    elif isinstance(ttl, int) and not isinstance(ttl, bool):
        seconds = ttl
    else:
        raise InvalidTTLError(
            f"TTL must be None, int or timedelta, {type(ttl).__name__} given"
        )

    if seconds < 0:
        raise InvalidTTLError(f"TTL can not be negative, got {ttl!r}")

    try:
        return now + seconds
    except OverflowError:
        raise InvalidTTLError(f"TTL is too large, got {ttl!r}") from None


def validate_keys(keys: Any, max_length: int = settings.MAX_KEY_LENGTH) -> List[str]:
    """
    Check a batch of keys and return them as a list.

    Strings and bytes are rejected even though they are iterable, since
    iterating them would yield single characters rather than keys.

    Raises:
        NotIterableError: If ``keys`` is not a non-string iterable
        InvalidKeyError: If any key is not legal
    """
    _ensure_iterable(keys)

    key_list = list(keys)
    for key in key_list:
        validate_key(key, max_length)
    return key_list


def validate_entries(entries: Any,
                     max_length: int = settings.MAX_KEY_LENGTH) -> List[Tuple[str, Any]]:
    """
    Check a batch of key/value pairs and return them as a list of tuples.

    Accepts a mapping or any non-string iterable of 2-item tuples or lists.

    Raises:
        NotIterableError: If ``entries`` is not iterable or an item is not a pair
        InvalidKeyError: If any key is not legal
    """
    _ensure_iterable(entries)

    items = entries.items() if isinstance(entries, Mapping) else entries

    pairs = []
    for item in items:
        if not isinstance(item, (tuple, list)) or len(item) != 2:
            raise NotIterableError(
                f"Cache entries must be key/value pairs, got {item!r}"
            )
        key, value = item
        validate_key(key, max_length)
        pairs.append((key, value))
    return pairs


def _ensure_iterable(values: Any) -> None:
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise NotIterableError(
            f"Value is not an iterable of keys, {type(values).__name__} given"
        )
