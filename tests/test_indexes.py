import dataclasses

import pytest

from tradeindex.atr import ATR
from tradeindex.bollinger import BollingerBands
from tradeindex.indexes import BasicIndexes
from tradeindex.ma import MovingAverages
from tradeindex.momentum import Momentum
from tradeindex.roc import ROC
from tradeindex.rsi import RSI
from tradeindex.stochastic import StochasticOscillator
from tradeindex.support_resistance import SupportResistance


PRICES = [100.0, 102.0, 101.0, 103.0, 104.0, 102.0, 101.0, 100.0]


@pytest.fixture
def results():
    ma, rsi, bb, atr = MovingAverages(), RSI(3), BollingerBands(3, 2.0), ATR(3)
    roc, momentum = ROC(3), Momentum(3)
    stoch, sr = StochasticOscillator(3, 3, 3), SupportResistance(3, 0.02)
    out = {}
    for price in PRICES:
        out = {
            "ma": ma.calculate(price),
            "rsi": rsi.calculate(price),
            "bb": bb.calculate(price),
            "atr": atr.calculate(price),
            "roc": roc.calculate(price),
            "momentum": momentum.calculate(price),
            "stochastic": stoch.calculate(price),
            "support_resistance": sr.calculate(price),
        }
    return out


def test_bundle_keeps_every_result(results):
    indexes = BasicIndexes(**results)
    assert dataclasses.asdict(indexes) == {
        key: dataclasses.asdict(value) if dataclasses.is_dataclass(value) else value
        for key, value in results.items()
    }
    assert indexes.atr == results["atr"]
    assert indexes.bb.middle == results["bb"].middle


def test_bundle_is_immutable(results):
    indexes = BasicIndexes(**results)
    original_atr = indexes.atr
    with pytest.raises(dataclasses.FrozenInstanceError):
        indexes.atr = original_atr + 1.0
    assert indexes.atr == original_atr
    assert indexes.atr == results["atr"]


def test_bundle_equality(results):
    assert BasicIndexes(**results) == BasicIndexes(**results)
    changed = dict(results, atr=results["atr"] + 1.0)
    assert BasicIndexes(**changed) != BasicIndexes(**results)


def test_missing_field_is_rejected(results):
    partial = {key: value for key, value in results.items() if key != "rsi"}
    with pytest.raises(TypeError):
        BasicIndexes(**partial)