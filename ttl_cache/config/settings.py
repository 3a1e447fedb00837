"""
TTL-Cache Configuration Settings

This module contains all configuration constants for the cache.
Values marked with an environment variable can be overridden at startup.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Cache configuration settings."""

    # Key settings
    MAX_KEY_LENGTH: int = 64
    KEY_PATTERN: str = r"[a-zA-Z._]"

    # Expiration settings
    # Number of writes between opportunistic sweeps of expired entries (0 disables)
    SWEEP_INTERVAL: int = int(os.environ.get("TTL_CACHE_SWEEP_INTERVAL", "100"))

    # Logging settings
    DEBUG: bool = os.environ.get("TTL_CACHE_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("TTL_CACHE_LOG_LEVEL", "INFO")


# Global settings instance
settings = Settings()
