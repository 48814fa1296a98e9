"""Bollinger Bands built on a simple moving average and population standard deviation."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass

from tradeindex.sma import SimpleMovingAverage


@dataclass(frozen=True)
class BBResult:
    """Upper, middle (SMA) and lower Bollinger Bands."""

    upper: float
    middle: float
    lower: float


class BollingerBands:
    """Bands at ``multiplier`` standard deviations around the SMA of ``period`` prices.

    Raises :class:`tradeindex.sma.SMAError` if ``period`` is zero.
    """

    def __init__(self, period: int, multiplier: float) -> None:
        self._sma = SimpleMovingAverage(period)
        self.period = period
        self.multiplier = multiplier
        self._values: deque[float] = deque()

    def calculate(self, price: float) -> BBResult | None:
        """Add a price and return the bands once enough data has been collected."""
        self._sma.add_value(price)
        self._values.append(price)
        if len(self._values) > self.period:
            self._values.popleft()
        middle = self._sma.calculate()
        if middle is None:
            return None
        std_dev = self._std_dev(middle.value)
        if std_dev is None:
            return None
        band_width = std_dev * self.multiplier
        return BBResult(
            upper=middle.value + band_width,
            middle=middle.value,
            lower=middle.value - band_width,
        )

    def _std_dev(self, mean: float) -> float | None:
        if len(self._values) < self.period:
            return None
        variance = sum((mean - value) ** 2 for value in self._values) / self.period
        return math.sqrt(variance)