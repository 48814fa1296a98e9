"""Momentum: change between the current price and the price ``period`` values back."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True)
class MomentumResult:
    """Price difference and the current price as a percentage of the past price."""

    value: float
    ratio: float


class Momentum:
    """Momentum over a sliding window of ``period`` prices."""

    DEFAULT_PERIOD = 14

    def __init__(self, period: int = DEFAULT_PERIOD) -> None:
        self.period = period
        self._values: deque[float] = deque()

    def calculate(self, price: float) -> MomentumResult | None:
        """Add a price and return the momentum once the window is full.

        Returns None while data is insufficient or when the past price is zero.
        """
        self._values.append(price)
        if len(self._values) > self.period:
            self._values.popleft()
        if len(self._values) < self.period or not self._values:
            return None
        past_price = self._values[0]
        if past_price == 0.0:
            return None
        return MomentumResult(
            value=price - past_price,
            ratio=(price / past_price) * 100.0,
        )