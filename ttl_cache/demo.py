#!/usr/bin/env python3
"""
TTL-Cache Demo Entry Point

Stores two keys with a TTL, optionally waits, then prints what the cache
returns for them.

Usage:
    python -m ttl_cache.demo                     # Default settings (ttl 5s, no wait)
    python -m ttl_cache.demo --ttl 2 --sleep 3   # Watch the keys expire
    python -m ttl_cache.demo --debug             # Enable debug logging

Environment Variables:
    TTL_CACHE_SWEEP_INTERVAL  - Writes between sweeps of expired entries
    TTL_CACHE_DEBUG           - Enable debug mode (true/false)
    TTL_CACHE_LOG_LEVEL       - Log level when debug mode is off
"""

import argparse
import logging
import sys
import time
from typing import List, Optional

from .cache.store import CacheStore
from .config.settings import settings


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="TTL-Cache: In-Process Key-Value Cache demo",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--ttl",
        type=int,
        default=5,
        help="TTL in seconds for the demo keys",
    )

    parser.add_argument(
        "--sleep",
        type=float,
        default=0,
        help="Seconds to wait before reading the keys back",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.DEBUG,
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def setup_logging(debug: bool = False) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the demo."""
    args = parse_args(argv)

    setup_logging(debug=args.debug)
    logger = logging.getLogger(__name__)

    store = CacheStore()

    store.set("first_key", "first_value", args.ttl)
    store.set("second_key", "second_value", args.ttl)
    logger.info(f"Stored 2 keys with ttl={args.ttl}s")

    if args.sleep > 0:
        logger.info(f"Sleeping {args.sleep}s")
        time.sleep(args.sleep)

    print(f"first_key: {store.get('first_key')!r}")
    print(f"second_key: {store.get('second_key')!r}")
    print(f"stats: {store.get_stats()}")


if __name__ == "__main__":
    main()
