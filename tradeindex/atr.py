"""Simplified Average True Range computed from closing prices only."""

from __future__ import annotations

from collections import deque


class ATR:
    """Average of the absolute close-to-close changes over ``period`` values.

    The first close has no predecessor and contributes a true range of 0.0.
    """

    def __init__(self, period: int) -> None:
        self.period = period
        self._values: deque[float] = deque()
        self._prev_close: float | None = None

    def calculate(self, close: float) -> float | None:
        """Add a closing price and return the ATR once the window is full."""
        true_range = 0.0 if self._prev_close is None else abs(close - self._prev_close)
        self._values.append(true_range)
        if len(self._values) > self.period:
            self._values.popleft()
        self._prev_close = close
        if len(self._values) == self.period:
            return sum(self._values) / self.period
        return None