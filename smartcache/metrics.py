"""Prometheus metrics for cache instances."""

from prometheus_client import Counter

from smartcache.config import settings

CACHE_REQUESTS = Counter(
    'smartcache_requests_total',
    'Cache lookups by outcome',
    ['cache', 'operation', 'result'],
)
CACHE_EVICTIONS = Counter(
    'smartcache_evictions_total',
    'Entries evicted by the eviction policy',
    ['cache', 'policy'],
)
CACHE_EXPIRATIONS = Counter(
    'smartcache_expirations_total',
    'Entries removed because their TTL elapsed',
    ['cache'],
)


def record_get(cache_name: str, hit: bool) -> None:
    if settings.enable_metrics:
        CACHE_REQUESTS.labels(cache=cache_name, operation='get', result='hit' if hit else 'miss').inc()


def record_eviction(cache_name: str, policy_name: str) -> None:
    if settings.enable_metrics:
        CACHE_EVICTIONS.labels(cache=cache_name, policy=policy_name).inc()


def record_expirations(cache_name: str, count: int = 1) -> None:
    if settings.enable_metrics and count:
        CACHE_EXPIRATIONS.labels(cache=cache_name).inc(count)
