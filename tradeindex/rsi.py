"""Relative Strength Index with configurable overbought and oversold thresholds."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum


class MarketCondition(Enum):
    """Market condition derived from an RSI value."""

    OVERBOUGHT = "Overbought"
    OVERSOLD = "Oversold"
    NEUTRAL = "Neutral"


@dataclass(frozen=True)
class RSIResult:
    """The RSI value and the market condition it indicates."""

    value: float
    condition: MarketCondition


class RSI:
    """RSI over a sliding window of ``period`` price changes.

    Thresholds default to 70 (overbought) and 30 (oversold).
    """

    def __init__(
        self,
        period: int,
        overbought: float | None = None,
        oversold: float | None = None,
    ) -> None:
        self.period = period
        self.overbought = 70.0 if overbought is None else overbought
        self.oversold = 30.0 if oversold is None else oversold
        self._gains: deque[float] = deque()
        self._losses: deque[float] = deque()
        self._sum_gains = 0.0
        self._sum_losses = 0.0
        self._prev_price: float | None = None

    def calculate(self, price: float) -> RSIResult | None:
        """Add a price and return the RSI once ``period`` changes are available."""
        if self._prev_price is not None:
            change = price - self._prev_price
            gain, loss = (change, 0.0) if change >= 0.0 else (0.0, -change)
            self._gains.append(gain)
            self._losses.append(loss)
            self._sum_gains += gain
            self._sum_losses += loss
            if len(self._gains) > self.period:
                self._sum_gains -= self._gains.popleft()
                self._sum_losses -= self._losses.popleft()
        self._prev_price = price

        if len(self._gains) < self.period:
            return None

        avg_gain = self._sum_gains / self.period
        avg_loss = self._sum_losses / self.period
        rs = 100.0 if avg_loss == 0.0 else avg_gain / avg_loss
        value = 100.0 - 100.0 / (1.0 + rs)
        return RSIResult(value=value, condition=self.determine_condition(value))

    def determine_condition(self, rsi: float) -> MarketCondition:
        """Classify an RSI value against the configured thresholds."""
        if rsi >= self.overbought:
            return MarketCondition.OVERBOUGHT
        if rsi <= self.oversold:
            return MarketCondition.OVERSOLD
        return MarketCondition.NEUTRAL