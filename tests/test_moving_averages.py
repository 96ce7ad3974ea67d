"""Tests for moving averages."""

import pytest
from decimal import Decimal

import numpy as np

from macd_core.errors import InsufficientDataError
from macd_core.indicators import (
    ema,
    sma,
    current_ema,
    current_sma,
    is_ma_crossover,
    is_ma_crossunder,
)


class TestEMA:
    """Tests for EMA calculation."""

    def test_ema_basic(self):
        """Test basic EMA calculation."""
        values = [float(i) for i in range(1, 11)]  # 1-10
        result = ema(values, 5)

        # One value per bar from the 5th bar onwards
        assert len(result) == 6

        # Seed is SMA of first 5 = (1+2+3+4+5)/5 = 3
        assert result[0] == pytest.approx(3.0)

        # k = 1/3: 6 * 1/3 + 3 * 2/3 = 4
        assert result[1] == pytest.approx(4.0)

    def test_ema_linear_series_lags_by_half_period(self):
        """A unit-slope series is tracked with a constant lag of (period - 1) / 2."""
        values = [float(i) for i in range(1, 11)]
        result = ema(values, 5)

        assert result == pytest.approx([3.0, 4.0, 5.0, 6.0, 7.0, 8.0])

    @pytest.mark.parametrize("period", [1, 3, 9, 20])
    def test_ema_constant_series(self, period):
        """EMA of a constant series is the constant."""
        values = [42.5] * 20
        result = ema(values, period)

        assert len(result) == 20 - period + 1
        assert result == pytest.approx([42.5] * len(result))

    def test_ema_period_one_is_identity(self):
        values = [3.0, 1.0, 4.0, 1.0, 5.0]
        assert ema(values, 1) == pytest.approx(values)

    def test_ema_exact_length(self):
        """Exactly `period` values yields a single SMA seed."""
        result = ema([2.0, 4.0, 6.0], 3)
        assert result == pytest.approx([4.0])

    def test_ema_insufficient_data(self):
        """Test EMA with insufficient data."""
        values = [100.0, 101.0, 102.0]

        with pytest.raises(InsufficientDataError) as exc_info:
            ema(values, 10)

        assert exc_info.value.required == 10
        assert exc_info.value.available == 3

    def test_ema_invalid_period(self):
        with pytest.raises(ValueError):
            ema([1.0, 2.0], 0)

    def test_ema_accepts_decimals_and_arrays(self):
        """Decimal and numpy input give the same float output."""
        decimals = [Decimal(str(i)) for i in range(1, 11)]
        array = np.arange(1, 11, dtype=np.float64)

        assert ema(decimals, 5) == pytest.approx(ema(array, 5))
        assert all(isinstance(v, float) for v in ema(decimals, 5))

    def test_ema_does_not_mutate_input(self):
        values = [1.0, 2.0, 3.0, 4.0]
        ema(values, 2)
        assert values == [1.0, 2.0, 3.0, 4.0]


class TestSMA:
    """Tests for SMA calculation."""

    def test_sma_basic(self):
        """Test basic SMA calculation."""
        values = [float(i) for i in range(1, 11)]  # 1-10
        result = sma(values, 3)

        assert len(result) == 8

        # (1+2+3)/3 = 2
        assert result[0] == pytest.approx(2.0)

        # (2+3+4)/3 = 3
        assert result[1] == pytest.approx(3.0)

        # (8+9+10)/3 = 9
        assert result[-1] == pytest.approx(9.0)

    def test_sma_insufficient_data(self):
        with pytest.raises(InsufficientDataError):
            sma([1.0, 2.0], 3)


class TestCurrentValues:
    def test_current_ema(self):
        values = [float(i) for i in range(1, 11)]
        assert current_ema(values, 5) == pytest.approx(8.0)

    def test_current_sma(self):
        values = [float(i) for i in range(1, 11)]
        assert current_sma(values, 4) == pytest.approx(8.5)

    def test_current_ema_insufficient_data(self):
        with pytest.raises(InsufficientDataError):
            current_ema([1.0], 2)


class TestMACrossover:
    """Tests for moving-average cross detection."""

    def test_crossover(self):
        assert is_ma_crossover(101.0, 100.0, 99.0, 100.0) is True

    def test_crossover_from_equality(self):
        assert is_ma_crossover(101.0, 100.0, 100.0, 100.0) is True

    def test_no_crossover_when_already_above(self):
        assert is_ma_crossover(102.0, 100.0, 101.0, 100.0) is False

    def test_crossunder(self):
        assert is_ma_crossunder(99.0, 100.0, 101.0, 100.0) is True

    def test_crossunder_from_equality(self):
        assert is_ma_crossunder(99.0, 100.0, 100.0, 100.0) is True

    def test_no_crossunder_when_already_below(self):
        assert is_ma_crossunder(98.0, 100.0, 99.0, 100.0) is False
