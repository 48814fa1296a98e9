"""Shared enumerations used across the indicators."""

from __future__ import annotations

from enum import Enum


class TradingSignal(Enum):
    """A trading recommendation produced by an indicator."""

    BUY = "Buy"
    SELL = "Sell"
    HOLD = "Hold"


class TrendDirection(Enum):
    """The direction in which a series is moving."""

    UP = "Up"
    DOWN = "Down"
    SIDEWAYS = "Sideways"