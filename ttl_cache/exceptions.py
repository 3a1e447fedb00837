"""Exceptions raised by the cache."""


class CacheError(Exception):
    """Base class for every error raised by the cache."""


class InvalidArgumentError(CacheError, ValueError):
    """An argument passed to a cache operation is not a legal value."""


class InvalidKeyError(InvalidArgumentError):
    """The key is not a string, is empty, too long, or has illegal characters."""


class InvalidTTLError(InvalidArgumentError):
    """The TTL is neither None, a non-negative int, nor a timedelta."""


class NotIterableError(InvalidArgumentError, TypeError):
    """A batch operation received something other than an iterable of keys/pairs."""
