"""Exponential Moving Average with smoothing factor 2 / (period + 1)."""

from __future__ import annotations


class ExponentialMovingAverage:
    """An exponentially weighted moving average.

    The first value seeds the average; later values are blended in with ``alpha``.
    """

    def __init__(self, period: int) -> None:
        self.alpha = 2.0 / (period + 1.0)
        self.current_ema: float | None = None

    def add_value(self, price: float) -> float:
        """Update the average with ``price`` and return the new value."""
        if self.current_ema is None:
            self.current_ema = price
        else:
            self.current_ema = price * self.alpha + self.current_ema * (1.0 - self.alpha)
        return self.current_ema