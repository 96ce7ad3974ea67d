"""Signal interpretation over MACD values (pure functions, no I/O)."""

from macd_core.signals.macd_signals import (
    is_bullish_crossover,
    is_bearish_crossover,
    detect_crossover,
    is_divergence,
    get_signal_strength,
    evaluate,
)

__all__ = [
    "is_bullish_crossover",
    "is_bearish_crossover",
    "detect_crossover",
    "is_divergence",
    "get_signal_strength",
    "evaluate",
]
