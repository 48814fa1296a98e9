import math

import pytest

from tradeindex.ma import (
    EMAPeriods,
    EMAValues,
    MovingAverageResults,
    MovingAverages,
    SMAPeriods,
    SMAValues,
)
from tradeindex.sma import SMAError
from tradeindex.types import TradingSignal, TrendDirection


def _simulate(ma: MovingAverages, prices) -> MovingAverageResults:
    result = None
    for price in prices:
        result = ma.calculate(price)
    assert result is not None
    return result


def test_moving_averages_initially_none():
    ma = MovingAverages()
    result = ma.calculate(100.0)
    assert result.sma == SMAValues(short=None, medium=None, long=None)
    assert result.ema == EMAValues(short=100.0, medium=100.0, long=100.0)


def test_sma_and_ema_update():
    ma = MovingAverages()
    result = _simulate(ma, [float(x) for x in range(1, 26)])
    assert result.sma.short is not None
    assert result.sma.short.value == pytest.approx(15.5)
    assert result.sma.short.trend == TrendDirection.UP
    assert result.sma.medium is None
    assert result.sma.long is None
    assert result.ema.short is not None
    assert 1.0 < result.ema.short < 25.0


def test_macd_calculation():
    ma = MovingAverages()
    prices = [10.0, 10.2, 10.4, 10.3, 10.5, 10.6, 10.8, 10.7, 10.9, 11.0, 10.8, 10.7]
    result = _simulate(ma, prices)
    assert result.macd is not None
    assert math.isfinite(result.macd.macd_line)
    assert result.macd.histogram == pytest.approx(
        result.macd.macd_line - result.macd.signal_line
    )
    assert result.macd.signal in set(TradingSignal)


def test_default_short_sma_needs_twenty_prices():
    ma = MovingAverages()
    result = _simulate(ma, [1.0] * 19)
    assert result.sma.short is None
    result = ma.calculate(1.0)
    assert result.sma.short is not None
    assert result.sma.short.value == pytest.approx(1.0)


def test_custom_periods():
    ma = MovingAverages(sma_short=2, sma_medium=3, sma_long=4, ema_short=1)
    result = _simulate(ma, [2.0, 4.0, 6.0])
    assert result.sma.short.value == pytest.approx(5.0)
    assert result.sma.medium.value == pytest.approx(4.0)
    assert result.sma.long is None
    # A period of 1 gives alpha 1.0, so the EMA follows the price exactly.
    assert result.ema.short == pytest.approx(6.0)


def test_zero_period_raises():
    with pytest.raises(SMAError):
        MovingAverages(sma_medium=0)
    with pytest.raises(SMAError):
        SMAPeriods(0, None, None)


def test_sma_periods_snapshot_tracks_trend():
    periods = SMAPeriods(2, 3, 4)
    for price in (1.0, 2.0, 3.0, 4.0):
        periods.update(price)
    first = periods.snapshot()
    assert first.short.value == pytest.approx(3.5)
    assert first.long.value == pytest.approx(2.5)
    assert first.short.trend == TrendDirection.SIDEWAYS
    periods.update(0.0)
    second = periods.snapshot()
    assert second.short.value == pytest.approx(2.0)
    assert second.short.trend == TrendDirection.DOWN


def test_ema_periods_snapshot():
    periods = EMAPeriods(None, None, None)
    assert periods.snapshot() == EMAValues(short=None, medium=None, long=None)
    periods.update(50.0)
    assert periods.snapshot() == EMAValues(short=50.0, medium=50.0, long=50.0)
    periods.update(60.0)
    snap = periods.snapshot()
    assert 50.0 < snap.long < snap.medium < snap.short < 60.0