#!/usr/bin/env python
"""Walk through the cache policies, TTL handling and concurrent use."""

import logging
import sys
import time
from concurrent.futures import ThreadPoolExecutor
import structlog

from smartcache import Cache, FIFOPolicy, LFUPolicy, LRUPolicy, TTLCache
from smartcache.config import settings


def configure_logging() -> None:
    """Configure structured logging for the demo process."""
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=settings.log_level.upper())
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def lru_demo():
    print("1. LRU (Least Recently Used)")
    cache = Cache(3, LRUPolicy(), name="demo-lru")
    cache.put("user:1", "Alice")
    cache.put("user:2", "Bob")
    cache.put("user:3", "Charlie")

    cache.get("user:1")
    cache.get("user:2")
    cache.put("user:4", "Diana")

    print(f"  size={cache.size()}, user:3 cached={cache.contains_key('user:3')} (least recently used)")
    print(f"  {cache!r}")


def fifo_demo():
    print("2. FIFO (First In First Out)")
    cache = Cache(3, FIFOPolicy(), name="demo-fifo")
    for key, value in ((1, "First"), (2, "Second"), (3, "Third")):
        cache.put(key, value)

    for _ in range(5):
        cache.get(1)
    cache.put(4, "Fourth")

    print(f"  entry 1 cached={cache.contains_key(1)} (first in, first out despite reads)")
    print(f"  {cache!r}")


def lfu_demo():
    print("3. LFU (Least Frequently Used)")
    cache = Cache(3, LFUPolicy(), name="demo-lfu")
    cache.put("popular", 1)
    cache.put("medium", 2)
    cache.put("rare", 3)

    for _ in range(10):
        cache.get("popular")
    for _ in range(5):
        cache.get("medium")
    cache.put("new", 4)

    print(f"  rare cached={cache.contains_key('rare')} (lowest frequency)")
    print(f"  {cache!r}")


def ttl_demo():
    print("4. TTL")
    cache = TTLCache(10, LRUPolicy(), name="demo-ttl")
    cache.put("session", "abc123", ttl=0.2)
    cache.put("config", {"debug": False})

    print(f"  session={cache.get('session')!r}, remaining={cache.get_remaining_ttl('session'):.3f}s")
    time.sleep(0.25)
    print(f"  after 250ms: session={cache.get('session')!r}, config={cache.get('config')!r}")
    print(f"  {cache.get_stats()}")


def concurrency_demo():
    print("5. Concurrency")
    cache = Cache(100, LRUPolicy(), name="demo-concurrent")

    def worker(thread_id):
        for i in range(200):
            cache.put(thread_id * 1000 + i, i)
            cache.get(thread_id * 1000 + i // 2)

    with ThreadPoolExecutor(max_workers=8) as executor:
        list(executor.map(worker, range(8)))

    print(f"  size={cache.size()} capacity={cache.capacity()}")


def main():
    configure_logging()
    for demo in (lru_demo, fifo_demo, lfu_demo, ttl_demo, concurrency_demo):
        demo()
        print("=" * 60)


if __name__ == "__main__":
    main()
