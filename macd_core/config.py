"""Library configuration."""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """MACD defaults loaded from environment variables (prefix ``MACD_``)."""

    model_config = SettingsConfigDict(
        env_prefix="MACD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Indicator periods (classic 12/26/9)
    fast_period: int = 12
    slow_period: int = 26
    signal_period: int = 9

    # Strength normalization: min(1, (|hist| + |macd|) * strength_scale)
    strength_scale: float = 100.0

    # Trailing window used by divergence detection
    divergence_lookback: int = 10


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
