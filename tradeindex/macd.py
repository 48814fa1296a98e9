"""Moving Average Convergence Divergence built from three exponential moving averages."""

from __future__ import annotations

from dataclasses import dataclass, field

from tradeindex.ema import ExponentialMovingAverage
from tradeindex.types import TradingSignal


@dataclass(frozen=True)
class MACDResult:
    """MACD line, signal line, histogram and the trading signal derived from them."""

    macd_line: float
    signal_line: float
    histogram: float
    signal: TradingSignal


@dataclass
class MACD:
    """MACD indicator: fast EMA minus slow EMA, smoothed by a signal EMA."""

    fast_ema: ExponentialMovingAverage
    slow_ema: ExponentialMovingAverage
    signal_ema: ExponentialMovingAverage
    histogram: list[float] = field(default_factory=list)

    def __init__(self, fast_period: int, slow_period: int, signal_period: int) -> None:
        self.fast_ema = ExponentialMovingAverage(fast_period)
        self.slow_ema = ExponentialMovingAverage(slow_period)
        self.signal_ema = ExponentialMovingAverage(signal_period)
        self.histogram = []

    def calculate(self, price: float) -> MACDResult:
        """Update the averages with ``price`` and return the current MACD values."""
        fast = self.fast_ema.add_value(price)
        slow = self.slow_ema.add_value(price)
        macd_line = fast - slow
        signal_line = self.signal_ema.add_value(macd_line)
        histogram = macd_line - signal_line
        self.histogram.append(histogram)
        return MACDResult(
            macd_line=macd_line,
            signal_line=signal_line,
            histogram=histogram,
            signal=self.determine_signal(macd_line, signal_line),
        )

    def determine_signal(self, macd: float, signal: float) -> TradingSignal:
        """Buy when MACD is above the signal line, Sell when below, otherwise Hold."""
        if macd > signal:
            return TradingSignal.BUY
        if macd < signal:
            return TradingSignal.SELL
        return TradingSignal.HOLD