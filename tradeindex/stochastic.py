"""Stochastic Oscillator producing smoothed %K and %D values from closing prices."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum


class StochSignal(Enum):
    """Trading signal derived from %K and %D."""

    BUY = "Buy"
    SELL = "Sell"
    OVERBOUGHT = "Overbought"
    OVERSOLD = "Oversold"
    NEUTRAL = "Neutral"


class StochCondition(Enum):
    """Condition of the oscillator derived from %K."""

    OVERBOUGHT = "Overbought"
    OVERSOLD = "Oversold"
    STRONG = "Strong"
    WEAK = "Weak"
    NEUTRAL = "Neutral"


class StochCrossover(Enum):
    """Crossing of %K over or under %D."""

    BULLISH = "Bullish"
    BEARISH = "Bearish"
    NONE = "None"


@dataclass(frozen=True)
class StochResult:
    """One reading of the Stochastic Oscillator."""

    k_value: float
    d_value: float
    signal: StochSignal
    condition: StochCondition
    crossover: StochCrossover
    strength: float


class StochasticOscillator:
    """Stochastic Oscillator over ``period`` prices.

    Highs and lows are taken from the closing prices themselves. %K is smoothed
    over ``k_smooth`` raw values and %D averages the last ``d_period`` %K values.
    """

    DEFAULT_PERIOD = 14
    DEFAULT_K_SMOOTH = 3
    DEFAULT_D_PERIOD = 3

    OVERBOUGHT_THRESHOLD = 80.0
    OVERSOLD_THRESHOLD = 20.0

    def __init__(
        self,
        period: int = DEFAULT_PERIOD,
        k_smooth: int = DEFAULT_K_SMOOTH,
        d_period: int = DEFAULT_D_PERIOD,
    ) -> None:
        self.period = period
        self.k_smooth = k_smooth
        self.d_period = d_period
        self._prices: deque[float] = deque(maxlen=period)
        self._raw_k_values: deque[float] = deque(maxlen=k_smooth)
        self._k_values: deque[float] = deque(maxlen=d_period)

    def calculate(self, price: float) -> StochResult | None:
        """Add a price and return the oscillator reading once the window is full."""
        self._prices.append(price)
        if len(self._prices) < self.period:
            return None

        highest = max(self._prices, default=float("-inf"))
        lowest = min(self._prices, default=float("inf"))
        if highest == lowest:
            raw_k = 50.0
        else:
            raw_k = (price - lowest) / (highest - lowest) * 100.0

        self._raw_k_values.append(raw_k)
        if len(self._raw_k_values) < self.k_smooth:
            k = raw_k
        else:
            k = sum(self._raw_k_values) / self.k_smooth

        self._k_values.append(k)
        d = self._d_value()

        return StochResult(
            k_value=k,
            d_value=d,
            signal=self._signal(k, d),
            condition=self._condition(k),
            crossover=self._crossover(k, d),
            strength=self._strength(k, d),
        )

    def _d_value(self) -> float:
        if len(self._k_values) < self.d_period:
            return self._k_values[-1] if self._k_values else 50.0
        return sum(self._k_values) / self.d_period

    @classmethod
    def _signal(cls, k: float, d: float) -> StochSignal:
        if k > d and k < cls.OVERBOUGHT_THRESHOLD:
            return StochSignal.BUY
        if k < d and k > cls.OVERSOLD_THRESHOLD:
            return StochSignal.SELL
        if k >= cls.OVERBOUGHT_THRESHOLD:
            return StochSignal.OVERBOUGHT
        if k <= cls.OVERSOLD_THRESHOLD:
            return StochSignal.OVERSOLD
        return StochSignal.NEUTRAL

    @classmethod
    def _condition(cls, k: float) -> StochCondition:
        if k >= cls.OVERBOUGHT_THRESHOLD:
            return StochCondition.OVERBOUGHT
        if k <= cls.OVERSOLD_THRESHOLD:
            return StochCondition.OVERSOLD
        if k > 50.0:
            return StochCondition.STRONG
        if k < 50.0:
            return StochCondition.WEAK
        return StochCondition.NEUTRAL

    def _crossover(self, k: float, d: float) -> StochCrossover:
        if len(self._k_values) < 2:
            return StochCrossover.NONE
        prev_k = self._k_values[-2]
        if k > d and prev_k <= d:
            return StochCrossover.BULLISH
        if k < d and prev_k >= d:
            return StochCrossover.BEARISH
        return StochCrossover.NONE

    @staticmethod
    def _strength(k: float, d: float) -> float:
        trend_strength = abs(k - 50.0) / 50.0
        momentum = abs(k - d) / 20.0
        return min((trend_strength + momentum) / 2.0 * 100.0, 100.0)