"""Moving averages (EMA / SMA) over in-memory price series.

Output series only contain defined values: a moving average of ``period``
cannot be produced until ``period`` samples have been seen, so the result is
``len(values) - period + 1`` long and element ``j`` corresponds to input
element ``j + period - 1``.
"""

import logging
from typing import Sequence

import numpy as np

from macd_core.errors import InsufficientDataError

logger = logging.getLogger(__name__)


def _to_array(values: Sequence[float]) -> np.ndarray:
    """Convert a price sequence (floats, ints, Decimals, ndarray) to float64."""
    return np.array([float(v) for v in values], dtype=np.float64)


def _check_period(values: Sequence[float], period: int, what: str) -> None:
    if period < 1:
        raise ValueError(f"{what} period must be >= 1, got {period}")
    if len(values) < period:
        logger.debug(f"{what}({period}) needs {period} values, got {len(values)}")
        raise InsufficientDataError(period, len(values), what)


def ema(values: Sequence[float], period: int) -> list[float]:
    """
    Calculate Exponential Moving Average.

    Seeded with the simple mean of the first ``period`` values, then
    ``ema[i] = value * k + ema[i-1] * (1 - k)`` with ``k = 2 / (period + 1)``.

    Args:
        values: Sequence of price values, oldest first
        period: EMA period

    Returns:
        List of EMA values, ``len(values) - period + 1`` long

    Raises:
        InsufficientDataError: If fewer than ``period`` values are given
    """
    _check_period(values, period, "EMA")

    arr = _to_array(values)
    multiplier = 2.0 / (period + 1)

    result = np.empty(len(arr) - period + 1, dtype=np.float64)
    result[0] = np.mean(arr[:period])

    for i in range(1, len(result)):
        result[i] = arr[i + period - 1] * multiplier + result[i - 1] * (1 - multiplier)

    return result.tolist()


def sma(values: Sequence[float], period: int) -> list[float]:
    """
    Calculate Simple Moving Average.

    Args:
        values: Sequence of price values, oldest first
        period: SMA period

    Returns:
        List of SMA values, ``len(values) - period + 1`` long

    Raises:
        InsufficientDataError: If fewer than ``period`` values are given
    """
    _check_period(values, period, "SMA")

    arr = _to_array(values)
    result = np.empty(len(arr) - period + 1, dtype=np.float64)

    for i in range(len(result)):
        result[i] = np.mean(arr[i : i + period])

    return result.tolist()


def current_ema(values: Sequence[float], period: int) -> float:
    """Latest EMA value."""
    return ema(values, period)[-1]


def current_sma(values: Sequence[float], period: int) -> float:
    """Latest SMA value."""
    return sma(values, period)[-1]


def is_ma_crossover(
    short_ma: float,
    long_ma: float,
    prev_short_ma: float,
    prev_long_ma: float,
) -> bool:
    """Short MA crossed above long MA between the previous and current bar."""
    return short_ma > long_ma and prev_short_ma <= prev_long_ma


def is_ma_crossunder(
    short_ma: float,
    long_ma: float,
    prev_short_ma: float,
    prev_long_ma: float,
) -> bool:
    """Short MA crossed below long MA between the previous and current bar."""
    return short_ma < long_ma and prev_short_ma >= prev_long_ma
