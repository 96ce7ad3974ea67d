"""MACD configuration model."""

from __future__ import annotations

from pydantic import BaseModel, model_validator

from macd_core.config import Settings, get_settings


class MacdConfig(BaseModel):
    """MACD indicator and signal parameters."""

    # Indicator periods
    fast_period: int = 12
    slow_period: int = 26
    signal_period: int = 9

    # Multiplier for get_signal_strength; tied to the instrument's price scale
    strength_scale: float = 100.0

    # Trailing window for divergence detection
    divergence_lookback: int = 10

    @model_validator(mode="after")
    def _validate(self):
        for name in ("fast_period", "slow_period", "signal_period"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be >= 1, got {getattr(self, name)}")
        if self.fast_period >= self.slow_period:
            raise ValueError(
                f"fast_period ({self.fast_period}) must be less than "
                f"slow_period ({self.slow_period})"
            )
        if self.strength_scale <= 0:
            raise ValueError(f"strength_scale must be > 0, got {self.strength_scale}")
        if self.divergence_lookback < 2:
            raise ValueError(
                f"divergence_lookback must be >= 2, got {self.divergence_lookback}"
            )
        return self

    @property
    def min_length(self) -> int:
        """Fewest prices that produce one aligned MACD point."""
        return self.slow_period + self.signal_period

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> MacdConfig:
        """Build a config from environment-backed settings."""
        settings = settings or get_settings()
        return cls(
            fast_period=settings.fast_period,
            slow_period=settings.slow_period,
            signal_period=settings.signal_period,
            strength_scale=settings.strength_scale,
            divergence_lookback=settings.divergence_lookback,
        )
