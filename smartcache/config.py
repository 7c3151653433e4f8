"""Configuration management for the in-memory cache."""

from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CacheSettings(BaseSettings):
    """Cache settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SMARTCACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra fields from environment variables
    )

    # Cache Configuration
    cache_name: str = Field(default="default", description="Name of the process-wide cache, used as metrics label")
    default_capacity: int = Field(default=1000, gt=0, description="Capacity of the process-wide cache")
    default_eviction_policy: str = Field(default="LRU", description="Eviction policy of the process-wide cache (LRU, FIFO, LFU)")

    # TTL Configuration
    enable_ttl: bool = Field(default=False, description="Create the process-wide cache with TTL support")
    default_ttl_seconds: Optional[float] = Field(default=None, ge=0, description="TTL applied when put() gets none; unset means never expire")

    # Monitoring
    enable_metrics: bool = Field(default=True, description="Enable Prometheus metrics")
    log_level: str = Field(default="INFO", description="Logging level used by the demo driver")

    @field_validator("default_eviction_policy")
    @classmethod
    def normalize_eviction_policy(cls, value: str) -> str:
        """Store policy names upper-cased."""
        return value.strip().upper()


# Global settings instance
settings = CacheSettings()
