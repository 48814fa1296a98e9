import pytest

from tradeindex.stochastic import (
    StochasticOscillator,
    StochCondition,
    StochCrossover,
    StochSignal,
)


def _feed(stoch, prices):
    return [stoch.calculate(price) for price in prices]


def test_insufficient_data():
    stoch = StochasticOscillator(14, 3, 3)
    for price in [100.0, 101.0, 102.0, 103.0]:
        assert stoch.calculate(price) is None


def test_stochastic_calculation():
    stoch = StochasticOscillator(14, 3, 3)
    prices = [100.0, 102.0, 101.5, 103.0, 104.0, 102.5, 101.0, 100.5, 99.5, 98.0, 97.5, 98.5, 99.0, 100.0]
    result = _feed(stoch, prices)[-1]
    assert result is not None
    assert 0.0 <= result.k_value <= 100.0
    assert 0.0 <= result.d_value <= 100.0


def test_defaults():
    stoch = StochasticOscillator()
    assert (stoch.period, stoch.k_smooth, stoch.d_period) == (14, 3, 3)


def test_flat_prices_are_neutral():
    stoch = StochasticOscillator(3, 3, 3)
    result = _feed(stoch, [10.0, 10.0, 10.0])[-1]
    assert result.k_value == 50.0
    assert result.d_value == 50.0
    assert result.signal is StochSignal.NEUTRAL
    assert result.condition is StochCondition.NEUTRAL
    assert result.crossover is StochCrossover.NONE
    assert result.strength == 0.0


def test_rising_prices_are_overbought():
    stoch = StochasticOscillator(3, 3, 3)
    result = _feed(stoch, [1.0, 2.0, 3.0])[-1]
    assert result.k_value == 100.0
    assert result.d_value == 100.0
    assert result.signal is StochSignal.OVERBOUGHT
    assert result.condition is StochCondition.OVERBOUGHT
    assert result.strength == pytest.approx(50.0)


def test_crossovers():
    stoch = StochasticOscillator(2, 1, 2)
    first, cross_up, cross_down = _feed(stoch, [10.0, 9.0, 10.0, 9.0])[1:]
    assert first.k_value == 0.0
    assert first.crossover is StochCrossover.NONE
    assert first.condition is StochCondition.OVERSOLD
    assert cross_up.k_value == 100.0
    assert cross_up.d_value == 50.0
    assert cross_up.crossover is StochCrossover.BULLISH
    assert cross_up.strength == 100.0
    assert cross_down.k_value == 0.0
    assert cross_down.d_value == 50.0
    assert cross_down.crossover is StochCrossover.BEARISH
    assert cross_down.signal is StochSignal.OVERSOLD


def test_strength_is_capped():
    stoch = StochasticOscillator(5, 3, 3)
    prices = [100.0, 90.0, 110.0, 80.0, 120.0, 70.0, 130.0, 60.0]
    for result in _feed(stoch, prices)[4:]:
        assert 0.0 <= result.strength <= 100.0