from prometheus_client import REGISTRY

from smartcache import Cache, LRUPolicy, TTLCache
from smartcache.config import settings


def _sample(name, **labels):
    return REGISTRY.get_sample_value(name, labels) or 0.0


def test_get_outcomes_are_counted(cache_name):
    cache = Cache(2, LRUPolicy(), name=cache_name)
    cache.put("a", 1)
    cache.get("a")
    cache.get("a")
    cache.get("b")

    assert _sample("smartcache_requests_total", cache=cache_name, operation="get", result="hit") == 2
    assert _sample("smartcache_requests_total", cache=cache_name, operation="get", result="miss") == 1


def test_evictions_are_counted(cache_name):
    cache = Cache(1, LRUPolicy(), name=cache_name)
    for key in range(4):
        cache.put(key, key)

    assert _sample("smartcache_evictions_total", cache=cache_name, policy="LRUPolicy") == 3


def test_expirations_are_counted(cache_name, clock):
    cache = TTLCache(5, LRUPolicy(), name=cache_name, time_fn=clock)
    for key in range(3):
        cache.put(key, key, ttl=1)
    clock.advance(2)

    cache.get(0)
    cache.cleanup_expired()

    assert _sample("smartcache_expirations_total", cache=cache_name) == 3


def test_metrics_can_be_disabled(cache_name, monkeypatch):
    monkeypatch.setattr(settings, "enable_metrics", False)
    cache = Cache(1, LRUPolicy(), name=cache_name)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.get("b")

    assert _sample("smartcache_requests_total", cache=cache_name, operation="get", result="hit") == 0
    assert _sample("smartcache_evictions_total", cache=cache_name, policy="LRUPolicy") == 0
