"""Short, medium and long simple and exponential moving averages, plus MACD."""

from __future__ import annotations

from dataclasses import dataclass

from tradeindex.ema import ExponentialMovingAverage
from tradeindex.macd import MACD, MACDResult
from tradeindex.sma import SimpleMovingAverage, SMAResult

_DEFAULT_SHORT = 20
_DEFAULT_MEDIUM = 50
_DEFAULT_LONG = 200
_DEFAULT_MACD_FAST = 12
_DEFAULT_MACD_SLOW = 26
_DEFAULT_MACD_SIGNAL = 9


def _or_default(value: int | None, default: int) -> int:
    return default if value is None else value


@dataclass(frozen=True)
class SMAValues:
    """SMA results for the short, medium and long periods."""

    short: SMAResult | None
    medium: SMAResult | None
    long: SMAResult | None


@dataclass(frozen=True)
class EMAValues:
    """EMA values for the short, medium and long periods."""

    short: float | None
    medium: float | None
    long: float | None


@dataclass(frozen=True)
class MovingAverageResults:
    """All moving-average results produced for one price."""

    sma: SMAValues
    ema: EMAValues
    macd: MACDResult | None


class SMAPeriods:
    """Simple moving averages over three periods (defaults 20, 50 and 200).

    Raises :class:`tradeindex.sma.SMAError` if any period is zero.
    """

    def __init__(
        self,
        short: int | None = None,
        medium: int | None = None,
        long: int | None = None,
    ) -> None:
        self.short = SimpleMovingAverage(_or_default(short, _DEFAULT_SHORT))
        self.medium = SimpleMovingAverage(_or_default(medium, _DEFAULT_MEDIUM))
        self.long = SimpleMovingAverage(_or_default(long, _DEFAULT_LONG))

    def update(self, price: float) -> None:
        """Add ``price`` to every average."""
        for average in (self.short, self.medium, self.long):
            average.add_value(price)

    def snapshot(self) -> SMAValues:
        """Calculate and return the current values of all three averages."""
        return SMAValues(
            short=self.short.calculate(),
            medium=self.medium.calculate(),
            long=self.long.calculate(),
        )


class EMAPeriods:
    """Exponential moving averages over three periods (defaults 20, 50 and 200)."""

    def __init__(
        self,
        short: int | None = None,
        medium: int | None = None,
        long: int | None = None,
    ) -> None:
        self.short = ExponentialMovingAverage(_or_default(short, _DEFAULT_SHORT))
        self.medium = ExponentialMovingAverage(_or_default(medium, _DEFAULT_MEDIUM))
        self.long = ExponentialMovingAverage(_or_default(long, _DEFAULT_LONG))

    def update(self, price: float) -> None:
        """Add ``price`` to every average."""
        for average in (self.short, self.medium, self.long):
            average.add_value(price)

    def snapshot(self) -> EMAValues:
        """Return the current values of all three averages."""
        return EMAValues(
            short=self.short.current_ema,
            medium=self.medium.current_ema,
            long=self.long.current_ema,
        )


class MovingAverages:
    """SMA, EMA and MACD indicators fed from a single price stream.

    Any period left as None takes its default: SMA and EMA 20/50/200,
    MACD fast 12, slow 26, signal 9.
    """

    def __init__(
        self,
        sma_short: int | None = None,
        sma_medium: int | None = None,
        sma_long: int | None = None,
        ema_short: int | None = None,
        ema_medium: int | None = None,
        ema_long: int | None = None,
        macd_fast: int | None = None,
        macd_slow: int | None = None,
        macd_signal: int | None = None,
    ) -> None:
        self.sma = SMAPeriods(sma_short, sma_medium, sma_long)
        self.ema = EMAPeriods(ema_short, ema_medium, ema_long)
        self.macd = MACD(
            _or_default(macd_fast, _DEFAULT_MACD_FAST),
            _or_default(macd_slow, _DEFAULT_MACD_SLOW),
            _or_default(macd_signal, _DEFAULT_MACD_SIGNAL),
        )

    def calculate(self, price: float) -> MovingAverageResults:
        """Update every indicator with ``price`` and return the combined results."""
        self.sma.update(price)
        self.ema.update(price)
        return MovingAverageResults(
            sma=self.sma.snapshot(),
            ema=self.ema.snapshot(),
            macd=self.macd.calculate(price),
        )