# streamta/__init__.py
"""
Streaming technical analysis indicators.

Quick start:
    from streamta import SMA, RSI, Candle

    sma = SMA(period=5)
    for price in prices:
        value = sma.update(price)

    # Indicators compose: smooth an RSI with a 3-period SMA
    smooth_rsi = RSI(14).pullback(SMA(3))
    value = smooth_rsi.update_from(candle)
"""

from .config import settings
from .errors import IndicatorError, InvalidRangeError, InvalidRelationError, InvalidTypeError
from .factory import create_indicator
from .indicators import (
    EMA,
    MACD,
    RMA,
    RSI,
    SMA,
    VWAP,
    VWMA,
    AroonIndicator,
    AroonOscillator,
    BollingerBands,
    Indicator,
    Max,
    MaxIndex,
    Min,
    MinIndex,
    StandardDeviation,
    Stochastics,
)
from .marketdata import Candle
from .operators import (
    Composition,
    Constant,
    Diff,
    Identity,
    Map,
    Mature,
    Together,
    Window,
)
from .runner import configure_logging, run_pipeline
from .streams import IndicatorIterator, IndicatorStream

__version__ = "0.1.0"

__all__ = [
    "Indicator",
    "SMA",
    "EMA",
    "RMA",
    "StandardDeviation",
    "Max",
    "Min",
    "MaxIndex",
    "MinIndex",
    "RSI",
    "MACD",
    "BollingerBands",
    "AroonIndicator",
    "AroonOscillator",
    "Stochastics",
    "VWAP",
    "VWMA",
    "Composition",
    "Constant",
    "Diff",
    "Identity",
    "Map",
    "Mature",
    "Together",
    "Window",
    "IndicatorIterator",
    "IndicatorStream",
    "Candle",
    "IndicatorError",
    "InvalidRangeError",
    "InvalidRelationError",
    "InvalidTypeError",
    "create_indicator",
    "run_pipeline",
    "configure_logging",
    "settings",
]
