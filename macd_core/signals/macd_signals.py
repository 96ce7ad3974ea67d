"""MACD signal interpretation: crossovers, divergence and strength.

Signal Logic:
- Bullish crossover: MACD line moves above the signal line
- Bearish crossover: MACD line moves below the signal line
- Bullish divergence: price low is more recent than the MACD low
- Bearish divergence: price high is more recent than the MACD high

These functions are advisory and run over every historical window, so they
return False / 0.0 on short or degenerate input instead of raising.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np

from macd_core.errors import InsufficientDataError
from macd_core.indicators.macd import MacdCalculator
from macd_core.indicators.moving_averages import ema
from macd_core.indicators.protocol import EmaFunction
from macd_core.models import (
    CrossoverType,
    DivergenceType,
    MacdConfig,
    MacdSignalReport,
    MacdSnapshot,
)

logger = logging.getLogger(__name__)

DEFAULT_DIVERGENCE_LOOKBACK = 10
DEFAULT_STRENGTH_SCALE = 100.0


def is_bullish_crossover(current: MacdSnapshot, previous: MacdSnapshot) -> bool:
    """MACD line crossed above the signal line."""
    return current.macd > current.signal and previous.macd <= previous.signal


def is_bearish_crossover(current: MacdSnapshot, previous: MacdSnapshot) -> bool:
    """MACD line crossed below the signal line."""
    return current.macd < current.signal and previous.macd >= previous.signal


def detect_crossover(current: MacdSnapshot, previous: MacdSnapshot) -> CrossoverType:
    if is_bullish_crossover(current, previous):
        return CrossoverType.BULLISH
    if is_bearish_crossover(current, previous):
        return CrossoverType.BEARISH
    return CrossoverType.NONE


def is_divergence(
    prices: Sequence[float],
    macd_values: Sequence[float],
    divergence_type: DivergenceType | str = DivergenceType.BULLISH,
    *,
    lookback: int = DEFAULT_DIVERGENCE_LOOKBACK,
) -> bool:
    """
    Detect price/MACD divergence over the trailing ``lookback`` values.

    Bullish: the price minimum is strictly more recent than the MACD minimum
    (price still falling while momentum has bottomed). Bearish: same with
    maxima. When an extreme repeats, its first occurrence in the window is
    used.

    Args:
        prices: Price series, oldest first
        macd_values: MACD line values, oldest first
        divergence_type: 'bullish' or 'bearish'
        lookback: Trailing window size

    Returns:
        True if divergence is present; False on short input, NaN values,
        a non-positive lookback or an unknown divergence_type
    """
    if lookback < 1:
        logger.warning(f"Divergence lookback must be >= 1, got {lookback}")
        return False

    try:
        divergence_type = DivergenceType(divergence_type)
    except ValueError:
        logger.warning(f"Unknown divergence type: {divergence_type!r}")
        return False

    if len(prices) < lookback or len(macd_values) < lookback:
        return False

    recent_prices = np.array([float(v) for v in prices[-lookback:]], dtype=np.float64)
    recent_macd = np.array([float(v) for v in macd_values[-lookback:]], dtype=np.float64)

    if np.isnan(recent_prices).any() or np.isnan(recent_macd).any():
        return False

    if divergence_type == DivergenceType.BULLISH:
        price_idx = int(np.argmin(recent_prices))
        macd_idx = int(np.argmin(recent_macd))
    else:
        price_idx = int(np.argmax(recent_prices))
        macd_idx = int(np.argmax(recent_macd))

    return price_idx > macd_idx


def get_signal_strength(
    current: MacdSnapshot,
    scale: float = DEFAULT_STRENGTH_SCALE,
) -> float:
    """
    Signal strength in [0, 1] from histogram and MACD magnitudes.

    strength = min(1, (|histogram| + |macd|) * scale), floored at 0

    ``scale`` is a heuristic tied to the instrument's price scale; it is
    not dimensionally derived.
    """
    raw = (abs(current.histogram) + abs(current.macd)) * scale
    if not math.isfinite(raw) or raw <= 0:
        return 0.0
    return min(1.0, raw)


def evaluate(
    prices: Sequence[float],
    config: MacdConfig | None = None,
    *,
    ema_fn: EmaFunction = ema,
) -> MacdSignalReport | None:
    """
    Interpret the latest MACD state of a price window.

    Args:
        prices: Price series, oldest first
        config: MACD parameters (defaults to MacdConfig())
        ema_fn: EMA implementation

    Returns:
        MacdSignalReport, or None if the window cannot produce two snapshots
    """
    config = config or MacdConfig()
    calc = MacdCalculator(config, ema_fn=ema_fn)

    try:
        result = calc.calculate(prices)
    except InsufficientDataError as e:
        logger.debug(f"MACD evaluation skipped: {e}")
        return None

    if len(result) < 2:
        return None

    current = result.snapshot_at(-1)
    previous = result.snapshot_at(-2)

    # Price tail aligned bar-for-bar with the MACD series
    aligned_prices = list(prices[-len(result):])

    return MacdSignalReport(
        current=current,
        previous=previous,
        crossover=detect_crossover(current, previous),
        strength=get_signal_strength(current, config.strength_scale),
        bullish_divergence=is_divergence(
            aligned_prices,
            result.macd,
            DivergenceType.BULLISH,
            lookback=config.divergence_lookback,
        ),
        bearish_divergence=is_divergence(
            aligned_prices,
            result.macd,
            DivergenceType.BEARISH,
            lookback=config.divergence_lookback,
        ),
    )
