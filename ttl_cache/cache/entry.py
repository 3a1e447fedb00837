"""Stored cache item."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class CacheEntry:
    """
    One stored item.

    Attributes:
        value: The cached payload
        expires_at: Absolute POSIX timestamp after which the entry is expired,
                    None means the entry never expires
    """
    value: Any
    expires_at: Optional[float] = None

    def is_live(self, now: float) -> bool:
        """Check if the entry is still visible at time ``now``."""
        return self.expires_at is None or now <= self.expires_at
