"""Callable interfaces consumed by the MACD engine.

The MACD engine never calls a moving-average implementation directly; it
receives one through ``EmaFunction`` so tests (or a faster backend) can
substitute it.
"""

from __future__ import annotations

from typing import Callable, Sequence

# (values, period) -> EMA series of length len(values) - period + 1
EmaFunction = Callable[[Sequence[float], int], list[float]]
