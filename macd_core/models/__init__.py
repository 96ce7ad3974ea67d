"""Data models for MACD values and configuration."""

from macd_core.models.config import MacdConfig
from macd_core.models.macd import (
    CrossoverType,
    DivergenceType,
    MacdResult,
    MacdSignalReport,
    MacdSnapshot,
)

__all__ = [
    "MacdConfig",
    "CrossoverType",
    "DivergenceType",
    "MacdResult",
    "MacdSignalReport",
    "MacdSnapshot",
]
