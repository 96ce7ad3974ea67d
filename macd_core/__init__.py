"""MACD indicator computation and signal interpretation.

This package contains pure computation with no I/O dependencies
(no database, network or scheduling). Price series go in, freshly
allocated indicator values and advisory signals come out; nothing is
cached between calls, so every function is safe to call concurrently.
"""

from macd_core.errors import InsufficientDataError
from macd_core.indicators import (
    ema,
    sma,
    calculate,
    get_current_macd,
    get_macd_snapshots,
    MacdCalculator,
)
from macd_core.models import (
    CrossoverType,
    DivergenceType,
    MacdConfig,
    MacdResult,
    MacdSignalReport,
    MacdSnapshot,
)
from macd_core.signals import (
    is_bullish_crossover,
    is_bearish_crossover,
    detect_crossover,
    is_divergence,
    get_signal_strength,
    evaluate,
)

__all__ = [
    "InsufficientDataError",
    "ema",
    "sma",
    "calculate",
    "get_current_macd",
    "get_macd_snapshots",
    "MacdCalculator",
    "CrossoverType",
    "DivergenceType",
    "MacdConfig",
    "MacdResult",
    "MacdSignalReport",
    "MacdSnapshot",
    "is_bullish_crossover",
    "is_bearish_crossover",
    "detect_crossover",
    "is_divergence",
    "get_signal_strength",
    "evaluate",
]
