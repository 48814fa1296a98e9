"""Support and resistance levels detected from swing highs and lows."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum


class PricePosition(Enum):
    """Where the price sits relative to the nearest support and resistance."""

    ABOVE_RESISTANCE = "AboveResistance"
    BELOW_SUPPORT = "BelowSupport"
    NEAR_RESISTANCE = "NearResistance"
    NEAR_SUPPORT = "NearSupport"
    MIDDLE = "Middle"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class SRResult:
    """Nearest levels, their strengths (0-100) and the price position."""

    nearest_support: float | None
    nearest_resistance: float | None
    support_strength: float
    resistance_strength: float
    breakout_potential: float
    price_position: PricePosition


class SupportResistance:
    """Support and resistance from swing points in the last ``period`` prices.

    ``threshold`` is a fraction (0.02 for 2%) used to drop levels that the
    price has moved too far past.
    """

    DEFAULT_PERIOD = 20
    DEFAULT_THRESHOLD = 0.02

    def __init__(self, period: int = DEFAULT_PERIOD, threshold: float = DEFAULT_THRESHOLD) -> None:
        self.period = period
        self._prices: deque[float] = deque(maxlen=period * 2)
        self._swing_high_threshold = 1.0 + threshold
        self._swing_low_threshold = 1.0 - threshold
        self.support_levels: list[float] = []
        self.resistance_levels: list[float] = []

    def calculate(self, price: float) -> SRResult | None:
        """Add a price and return the current levels once ``period`` prices are known."""
        self._prices.append(price)
        if len(self._prices) < self.period:
            return None

        self._update_levels()
        support = self._nearest_support(price)
        resistance = self._nearest_resistance(price)
        support_strength = self._strength(price, support)
        resistance_strength = self._strength(price, resistance)
        return SRResult(
            nearest_support=support,
            nearest_resistance=resistance,
            support_strength=support_strength,
            resistance_strength=resistance_strength,
            breakout_potential=min(support_strength, resistance_strength),
            price_position=self._position(price, support, resistance),
        )

    def _update_levels(self) -> None:
        prices = list(self._prices)
        window = prices[max(len(prices) - self.period, 0):]
        if _is_swing(window, high=True):
            self.resistance_levels.append(window[len(window) // 2])
        if _is_swing(window, high=False):
            self.support_levels.append(window[len(window) // 2])
        current = prices[-1] if prices else 0.0
        self.support_levels = [
            level for level in self.support_levels if level < current * self._swing_high_threshold
        ]
        self.resistance_levels = [
            level for level in self.resistance_levels if level > current * self._swing_low_threshold
        ]

    def _nearest_support(self, price: float) -> float | None:
        return max((level for level in self.support_levels if level < price), default=None)

    def _nearest_resistance(self, price: float) -> float | None:
        return min((level for level in self.resistance_levels if level > price), default=None)

    @staticmethod
    def _strength(price: float, level: float | None) -> float:
        if level is None:
            return 0.0
        distance = abs(price - level) / price
        return min(max(1.0 - distance, 0.0), 1.0) * 100.0

    @staticmethod
    def _position(price: float, support: float | None, resistance: float | None) -> PricePosition:
        if support is not None and resistance is not None:
            mid_point = (support + resistance) / 2.0
            if abs(price - mid_point) < (resistance - support) * 0.1:
                return PricePosition.MIDDLE
            if price > mid_point:
                return PricePosition.NEAR_RESISTANCE
            return PricePosition.NEAR_SUPPORT
        if support is not None:
            return PricePosition.ABOVE_RESISTANCE
        if resistance is not None:
            return PricePosition.BELOW_SUPPORT
        return PricePosition.UNKNOWN


def _is_swing(window: list[float], *, high: bool) -> bool:
    """True if the middle value is strictly above (or below) every other value."""
    if len(window) < 3:
        return False
    mid = len(window) // 2
    mid_price = window[mid]
    others = window[:mid] + window[mid + 1:]
    if high:
        return all(p < mid_price for p in others)
    return all(p > mid_price for p in others)