"""Simple Moving Average over a sliding window, with trend detection."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from tradeindex.types import TrendDirection


class SMAError(ValueError):
    """Raised when a moving average is configured with an invalid period."""


@dataclass(frozen=True)
class SMAResult:
    """The SMA value and the trend relative to the previous SMA."""

    value: float
    trend: TrendDirection


class SimpleMovingAverage:
    """Arithmetic mean of the most recent ``period`` values.

    The trend compares each calculated average with the one calculated before it.
    """

    def __init__(self, period: int) -> None:
        if period == 0:
            raise SMAError("invalid period: must be greater than zero")
        self.period = period
        self._values: deque[float] = deque()
        self._sum = 0.0
        self._last_value: float | None = None

    def add_value(self, value: float) -> None:
        """Push a value into the window, dropping the oldest when it is full."""
        if len(self._values) == self.period:
            self._sum -= self._values.popleft()
        self._values.append(value)
        self._sum += value

    def calculate(self) -> SMAResult | None:
        """Return the current average and trend, or None if the window is not full."""
        if len(self._values) < self.period:
            return None
        current = self._sum / self.period
        previous = self._last_value
        if previous is not None and current > previous:
            trend = TrendDirection.UP
        elif previous is not None and current < previous:
            trend = TrendDirection.DOWN
        else:
            trend = TrendDirection.SIDEWAYS
        self._last_value = current
        return SMAResult(value=current, trend=trend)