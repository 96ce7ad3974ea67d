"""Technical indicators (pure math, no I/O)."""

from macd_core.indicators.moving_averages import (
    ema,
    sma,
    current_ema,
    current_sma,
    is_ma_crossover,
    is_ma_crossunder,
)
from macd_core.indicators.macd import (
    calculate,
    get_current_macd,
    get_macd_snapshots,
    MacdCalculator,
)
from macd_core.indicators.protocol import EmaFunction

__all__ = [
    "ema",
    "sma",
    "current_ema",
    "current_sma",
    "is_ma_crossover",
    "is_ma_crossunder",
    "calculate",
    "get_current_macd",
    "get_macd_snapshots",
    "MacdCalculator",
    "EmaFunction",
]
