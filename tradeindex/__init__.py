"""Streaming technical indicators: moving averages, MACD, ATR, Bollinger Bands,
momentum, ROC, RSI, stochastic oscillator and support/resistance."""

__version__ = "0.1.0"

__all__ = [
    "atr",
    "bollinger",
    "ema",
    "indexes",
    "ma",
    "macd",
    "momentum",
    "roc",
    "rsi",
    "sma",
    "stochastic",
    "support_resistance",
    "types",
]