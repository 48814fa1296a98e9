[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tradeindex"
version = "0.1.0"
description = "Streaming technical indicators for financial market analysis: SMA, EMA, MACD, RSI, ATR, Bollinger Bands, ROC, Momentum, Stochastic and Support/Resistance."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "trading",
    "technical-analysis",
    "indicators",
    "moving-average",
    "macd",
    "rsi",
    "bollinger-bands",
    "stochastic",
    "finance",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tradeindex"]

[tool.hatch.build.targets.sdist]
include = ["tradeindex", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
