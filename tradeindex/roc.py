"""Rate of Change: percentage change against the price ``period`` values back."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from tradeindex.types import TradingSignal


@dataclass(frozen=True)
class ROCResult:
    """ROC value, normalised momentum, acceleration and trading signal."""

    value: float
    momentum: float
    acceleration: float | None
    signal: TradingSignal


class ROC:
    """Rate of Change over a window of ``period + 1`` prices."""

    DEFAULT_PERIOD = 12
    SIGNAL_THRESHOLD = 2.0

    def __init__(self, period: int = DEFAULT_PERIOD) -> None:
        self.period = period
        self._values: deque[float] = deque()
        self._prev_roc: float | None = None

    def calculate(self, price: float) -> ROCResult | None:
        """Add a price and return the ROC once enough data is available.

        Returns None while data is insufficient or when the old price is zero.
        """
        self._values.append(price)
        if len(self._values) > self.period + 1:
            self._values.popleft()
        if len(self._values) <= self.period:
            return None
        old_price = self._values[0]
        if old_price == 0.0:
            return None
        current = ((price - old_price) / old_price) * 100.0
        acceleration = None if self._prev_roc is None else current - self._prev_roc
        self._prev_roc = current
        return ROCResult(
            value=current,
            momentum=self._normalize_momentum(current),
            acceleration=acceleration,
            signal=self._signal(current),
        )

    @staticmethod
    def _normalize_momentum(roc: float) -> float:
        # A ROC of +/-10% maps to +/-100.
        return min(max(roc * 10.0, -100.0), 100.0)

    @classmethod
    def _signal(cls, roc: float) -> TradingSignal:
        if roc > cls.SIGNAL_THRESHOLD:
            return TradingSignal.BUY
        if roc < -cls.SIGNAL_THRESHOLD:
            return TradingSignal.SELL
        return TradingSignal.HOLD