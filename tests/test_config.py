import pytest
from pydantic import ValidationError

from smartcache.config import CacheSettings


def test_defaults(monkeypatch):
    for var in (
        "SMARTCACHE_DEFAULT_CAPACITY",
        "SMARTCACHE_DEFAULT_EVICTION_POLICY",
        "SMARTCACHE_ENABLE_TTL",
        "SMARTCACHE_DEFAULT_TTL_SECONDS",
    ):
        monkeypatch.delenv(var, raising=False)

    config = CacheSettings(_env_file=None)
    assert config.default_capacity == 1000
    assert config.default_eviction_policy == "LRU"
    assert config.enable_ttl is False
    assert config.default_ttl_seconds is None
    assert config.enable_metrics is True


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("SMARTCACHE_DEFAULT_CAPACITY", "64")
    monkeypatch.setenv("SMARTCACHE_DEFAULT_EVICTION_POLICY", "lfu")
    monkeypatch.setenv("SMARTCACHE_ENABLE_TTL", "true")
    monkeypatch.setenv("SMARTCACHE_DEFAULT_TTL_SECONDS", "2.5")

    config = CacheSettings(_env_file=None)
    assert config.default_capacity == 64
    assert config.default_eviction_policy == "LFU"
    assert config.enable_ttl is True
    assert config.default_ttl_seconds == 2.5


@pytest.mark.parametrize(
    "var,value",
    [
        ("SMARTCACHE_DEFAULT_CAPACITY", "0"),
        ("SMARTCACHE_DEFAULT_TTL_SECONDS", "-1"),
    ],
)
def test_rejects_invalid_values(monkeypatch, var, value):
    monkeypatch.setenv(var, value)
    with pytest.raises(ValidationError):
        CacheSettings(_env_file=None)
