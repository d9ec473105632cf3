"""Configuration management for evictcache."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EVICTCACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra fields from environment variables
    )

    # Default cache used by get_in_memory_cache()
    default_eviction_policy: str = Field(default="LRU", description="Eviction policy of the shared cache")
    default_capacity: int = Field(default=1000, description="Maximum number of keys in the shared cache")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=True, description="Render log lines as JSON instead of console text")


# Global settings instance
settings = Settings()
