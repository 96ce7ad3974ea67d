"""MACD (Moving Average Convergence Divergence) indicator.

MACD      = EMA(fast) - EMA(slow)
Signal    = EMA(MACD, signal_period)
Histogram = MACD - Signal

The fast EMA starts ``slow_period - fast_period`` bars earlier than the slow
EMA, and the signal line starts ``signal_period - 1`` bars after the MACD
line. Both heads are trimmed so every returned series starts at the same bar.

This module is pure computation with no I/O dependencies.
"""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from macd_core.errors import InsufficientDataError
from macd_core.indicators.moving_averages import ema
from macd_core.indicators.protocol import EmaFunction
from macd_core.models import MacdConfig, MacdResult, MacdSnapshot

logger = logging.getLogger(__name__)


def calculate(
    prices: Sequence[float],
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
    *,
    ema_fn: EmaFunction = ema,
) -> MacdResult:
    """
    Calculate MACD line, signal line and histogram.

    ``fast_period <= slow_period`` is required; a faster slow EMA cannot be
    aligned to the fast one.

    Args:
        prices: Price series, oldest first
        fast_period: Fast EMA period (default: 12)
        slow_period: Slow EMA period (default: 26)
        signal_period: Signal line EMA period (default: 9)
        ema_fn: EMA implementation (values, period) -> EMA series

    Returns:
        MacdResult with three equal-length, time-aligned series of
        ``len(prices) - slow_period - signal_period + 2`` values

    Raises:
        InsufficientDataError: If ``len(prices) < slow_period + signal_period``
        ValueError: If ``fast_period > slow_period``
    """
    if fast_period > slow_period:
        raise ValueError(
            f"fast_period ({fast_period}) must not exceed slow_period ({slow_period})"
        )

    required = slow_period + signal_period
    if len(prices) < required:
        logger.debug(
            f"MACD({fast_period},{slow_period},{signal_period}) needs {required} "
            f"prices, got {len(prices)}"
        )
        raise InsufficientDataError(required, len(prices), "MACD calculation")

    fast_ema = ema_fn(prices, fast_period)
    slow_ema = ema_fn(prices, slow_period)

    # Slow EMA starts later; drop the fast EMA's extra head
    start_index = slow_period - fast_period
    aligned_fast = fast_ema[start_index:]

    macd_line = [f - s for f, s in zip(aligned_fast, slow_ema)]

    signal_line = list(ema_fn(macd_line, signal_period))

    histogram_start = len(macd_line) - len(signal_line)
    macd_tail = macd_line[histogram_start:]
    histogram = [m - s for m, s in zip(macd_tail, signal_line)]

    logger.debug(
        f"MACD({fast_period},{slow_period},{signal_period}): "
        f"{len(prices)} prices -> {len(histogram)} points"
    )

    return MacdResult(macd=macd_tail, signal=signal_line, histogram=histogram)


def get_current_macd(
    prices: Sequence[float],
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
    *,
    ema_fn: EmaFunction = ema,
) -> MacdSnapshot:
    """Latest MACD/signal/histogram values.

    Raises:
        InsufficientDataError: Same contract as ``calculate``
    """
    result = calculate(
        prices, fast_period, slow_period, signal_period, ema_fn=ema_fn
    )
    return result.latest()


def get_macd_snapshots(
    prices: Sequence[float],
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
    *,
    ema_fn: EmaFunction = ema,
) -> tuple[MacdSnapshot, MacdSnapshot]:
    """Current and previous snapshots, for crossover detection.

    Returns:
        Tuple of (current, previous)

    Raises:
        InsufficientDataError: If fewer than
            ``slow_period + signal_period + 1`` prices are given
    """
    required = slow_period + signal_period + 1
    if len(prices) < required:
        raise InsufficientDataError(required, len(prices), "MACD snapshots")

    result = calculate(
        prices, fast_period, slow_period, signal_period, ema_fn=ema_fn
    )
    return result.snapshot_at(-1), result.snapshot_at(-2)


class MacdCalculator:
    """MACD calculator bound to a configuration.

    Holds no per-series state; every call is independent.
    """

    def __init__(
        self,
        config: MacdConfig | None = None,
        ema_fn: EmaFunction = ema,
    ):
        self.config = config or MacdConfig()
        self.ema_fn = ema_fn

    @property
    def min_length(self) -> int:
        return self.config.min_length

    def _periods(self) -> tuple[int, int, int]:
        return (
            self.config.fast_period,
            self.config.slow_period,
            self.config.signal_period,
        )

    def calculate(self, prices: Sequence[float]) -> MacdResult:
        """Full MACD series for ``prices``."""
        return calculate(prices, *self._periods(), ema_fn=self.ema_fn)

    def latest(self, prices: Sequence[float]) -> MacdSnapshot:
        """Latest snapshot; raises on insufficient data."""
        return get_current_macd(prices, *self._periods(), ema_fn=self.ema_fn)

    def snapshots(self, prices: Sequence[float]) -> tuple[MacdSnapshot, MacdSnapshot]:
        """(current, previous) snapshots; raises on insufficient data."""
        return get_macd_snapshots(prices, *self._periods(), ema_fn=self.ema_fn)

    def calculate_latest(self, prices: Sequence[float]) -> MacdSnapshot | None:
        """
        Calculate the latest snapshot only.

        Args:
            prices: Price series (needs at least ``min_length`` values)

        Returns:
            Latest MacdSnapshot, or None if not enough data
        """
        if len(prices) < self.min_length:
            return None
        return self.latest(prices)

    def calculate_many(
        self,
        prices_by_key: Mapping[str, Sequence[float]],
    ) -> dict[str, MacdResult | None]:
        """
        Calculate MACD independently for several series (e.g. per symbol).

        Args:
            prices_by_key: Price series keyed by e.g. 'BTCUSDT_5m'

        Returns:
            Dict of MacdResult per key; None where the series is too short
        """
        results: dict[str, MacdResult | None] = {}
        for key, prices in prices_by_key.items():
            try:
                results[key] = self.calculate(prices)
            except InsufficientDataError as e:
                logger.warning(f"MACD skipped for {key}: {e}")
                results[key] = None
        return results
