"""Pytest configuration and fixtures."""

import itertools

import pytest

from smartcache.cache_factory import reset_in_memory_cache

_cache_names = itertools.count()


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache_name(request):
    """Unique cache name so metrics samples do not leak between tests."""
    return f"{request.node.name}-{next(_cache_names)}"


@pytest.fixture(autouse=True)
def _reset_singleton():
    reset_in_memory_cache()
    yield
    reset_in_memory_cache()
