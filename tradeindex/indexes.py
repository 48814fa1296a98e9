"""A bundle of the basic indicator results for one price."""

from __future__ import annotations

from dataclasses import dataclass

from tradeindex.bollinger import BBResult
from tradeindex.ma import MovingAverageResults
from tradeindex.momentum import MomentumResult
from tradeindex.roc import ROCResult
from tradeindex.rsi import RSIResult
from tradeindex.stochastic import StochResult
from tradeindex.support_resistance import SRResult


@dataclass(frozen=True)
class BasicIndexes:
    """The results of every basic indicator taken together."""

    ma: MovingAverageResults
    rsi: RSIResult
    bb: BBResult
    atr: float
    roc: ROCResult
    momentum: MomentumResult
    stochastic: StochResult
    support_resistance: SRResult