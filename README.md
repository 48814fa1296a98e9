# tradeindex

Streaming technical indicators for market analysis. Each indicator keeps its
own state and is fed one price at a time. Most indicators return `None` until
they have seen enough prices to fill their window. The exponential moving
average and MACD produce a value from the very first price.

## Indicators

| Module | Class | What it measures |
| --- | --- | --- |
| `tradeindex.sma` | `SimpleMovingAverage` | Mean of the last *n* values, with a trend direction |
| `tradeindex.ema` | `ExponentialMovingAverage` | Exponentially weighted average, `alpha = 2 / (n + 1)` |
| `tradeindex.macd` | `MACD` | Fast EMA minus slow EMA, a signal line, a histogram and a buy/sell/hold signal |
| `tradeindex.ma` | `MovingAverages` | Short, medium and long SMA and EMA, plus MACD, in one call |
| `tradeindex.atr` | `ATR` | Average absolute close-to-close change (a simplified true range) |
| `tradeindex.bollinger` | `BollingerBands` | SMA middle band ± multiplier × population standard deviation |
| `tradeindex.momentum` | `Momentum` | Price change over the window, and the current price as a percentage of the past one |
| `tradeindex.roc` | `ROC` | Percentage rate of change, normalised momentum, acceleration and a signal |
| `tradeindex.rsi` | `RSI` | Relative Strength Index, with an overbought, oversold or neutral condition |
| `tradeindex.stochastic` | `StochasticOscillator` | %K and %D, a signal, a condition, a crossover and a strength value |
| `tradeindex.support_resistance` | `SupportResistance` | Swing-based support and resistance levels, their strengths and the price position |
| `tradeindex.indexes` | `BasicIndexes` | A frozen dataclass that holds the results above together |

The shared enumerations `TradingSignal` (`BUY`, `SELL`, `HOLD`) and
`TrendDirection` (`UP`, `DOWN`, `SIDEWAYS`) live in `tradeindex.types`. Each
indicator module defines its own result dataclass (`SMAResult`, `BBResult`,
`MACDResult`, `MomentumResult`, `ROCResult`, `RSIResult`, `StochResult`,
`SRResult`) and, where needed, its own enumerations (`MarketCondition`,
`StochSignal`, `StochCondition`, `StochCrossover`, `PricePosition`).

## Installation

```
pip install tradeindex
```

The package uses only the standard library.

## Usage

### Simple moving average

```python
from tradeindex.sma import SimpleMovingAverage

sma = SimpleMovingAverage(3)
for value in (2.0, 4.0, 6.0):
    sma.add_value(value)

result = sma.calculate()
print(result.value)   # 4.0
print(result.trend)   # TrendDirection.SIDEWAYS: the first result has nothing to compare with
```

`calculate()` returns `None` until the window is full. Each call compares the
new average with the previous one to give `UP`, `DOWN` or `SIDEWAYS`. A period
of zero raises `SMAError`, which is a `ValueError`.

### Exponential moving average

```python
from tradeindex.ema import ExponentialMovingAverage

ema = ExponentialMovingAverage(10)
ema.add_value(100.0)          # the first value seeds the average: 100.0
print(ema.add_value(110.0))   # about 101.82
print(ema.current_ema)        # the latest value, or None before any price
```

### MACD

```python
from tradeindex.macd import MACD

macd = MACD(12, 26, 9)
for price in (44.0, 44.5, 45.0, 44.8, 45.2):
    result = macd.calculate(price)

print(result.macd_line, result.signal_line, result.histogram, result.signal)
print(macd.determine_signal(1.0, 0.5))   # TradingSignal.BUY
```

Every histogram value calculated so far is kept in `macd.histogram`.

### Bollinger Bands

```python
from tradeindex.bollinger import BollingerBands

bb = BollingerBands(3, 2.0)
result = None
for price in (100.0, 102.0, 104.0):
    result = bb.calculate(price)

print(result.upper, result.middle, result.lower)   # about 105.27, 102.0, 98.73
```

### All moving averages at once

```python
from tradeindex.ma import MovingAverages

ma = MovingAverages()   # SMA/EMA periods 20, 50 and 200; MACD 12, 26 and 9
for price in (10.0, 10.5, 11.0, 10.8, 11.2):
    results = ma.calculate(price)

print(results.sma, results.ema, results.macd)
```

Any period passed as `None` (or left out) takes its default. The SMA and EMA
sets are also available alone as `SMAPeriods` and `EMAPeriods`. Each has
`update(price)` and `snapshot()`.

### RSI with custom thresholds

```python
from tradeindex.rsi import RSI

rsi = RSI(14, overbought=80.0, oversold=20.0)
print(rsi.determine_condition(85.0))   # MarketCondition.OVERBOUGHT
```

The thresholds default to 70 and 30.

### Stochastic oscillator and support/resistance

```python
from tradeindex.stochastic import StochasticOscillator
from tradeindex.support_resistance import SupportResistance

stoch = StochasticOscillator()          # period 14, %K smoothing 3, %D period 3
sr = SupportResistance(5, 0.02)         # defaults are 20 and 0.02

for price in (100.0, 102.0, 101.0, 103.0, 104.0, 102.0, 101.0, 100.0, 99.0, 98.0):
    s = sr.calculate(price)

print(s.nearest_support, s.nearest_resistance, s.price_position)
```

## Behaviour notes

- `Momentum` (default period 14) and `ROC` (default period 12) return `None`
  rather than divide by a zero past price.
- `ROC` needs `period + 1` prices before it produces a value. A ROC above 2%
  gives `BUY`, below -2% gives `SELL`, and anything else gives `HOLD`. The
  momentum is the ROC × 10, clamped to ±100.
- `ATR` counts the first price as a true range of 0.0.
- `SupportResistance` keeps up to twice its period in prices. Its detected
  levels are in `support_levels` and `resistance_levels`. Levels that the price
  has moved past by more than the threshold are dropped.
- `StochasticOscillator` uses the closing price as the high and the low, so
  %K compares the close with the highest and lowest closes in the window.

## What the package does not do

- It works on a single closing-price series. There is no input for high, low,
  open or volume, so `ATR` is not the classic high/low true range.
- `BasicIndexes` only holds results. It does not run the indicators for you.
- There is no command-line tool, no market-data download and no storage of
  results.

## Running the tests

```
pip install -e ".[test]"
pytest
```