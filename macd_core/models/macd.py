"""MACD result and snapshot models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator


class DivergenceType(str, Enum):
    """Which extreme divergence detection compares."""

    BULLISH = "bullish"  # minima
    BEARISH = "bearish"  # maxima


class CrossoverType(int, Enum):
    """Direction of a MACD/signal line cross."""

    BULLISH = 1
    NONE = 0
    BEARISH = -1


class MacdSnapshot(BaseModel):
    """MACD, signal and histogram values at a single point in time."""

    model_config = ConfigDict(frozen=True)

    macd: float
    signal: float
    histogram: float


class MacdResult(BaseModel):
    """Time-aligned MACD line, signal line and histogram.

    Element ``i`` of each series refers to the same bar. All three series
    always have the same length.
    """

    model_config = ConfigDict(frozen=True)

    macd: list[float]
    signal: list[float]
    histogram: list[float]

    @model_validator(mode="after")
    def _check_aligned(self):
        if not len(self.macd) == len(self.signal) == len(self.histogram):
            raise ValueError(
                "macd, signal and histogram must have equal lengths, got "
                f"{len(self.macd)}, {len(self.signal)}, {len(self.histogram)}"
            )
        return self

    def __len__(self) -> int:
        return len(self.macd)

    def snapshot_at(self, index: int) -> MacdSnapshot:
        """Get the snapshot at ``index`` (negative indexes count from the end)."""
        return MacdSnapshot(
            macd=self.macd[index],
            signal=self.signal[index],
            histogram=self.histogram[index],
        )

    def latest(self) -> MacdSnapshot:
        """Get the most recent snapshot."""
        return self.snapshot_at(-1)


class MacdSignalReport(BaseModel):
    """Interpretation of the latest MACD state for one price window."""

    model_config = ConfigDict(frozen=True)

    current: MacdSnapshot
    previous: MacdSnapshot
    crossover: CrossoverType = CrossoverType.NONE
    strength: float = 0.0
    bullish_divergence: bool = False
    bearish_divergence: bool = False
