# streamta/indicators/__init__.py
"""
Technical indicators for streaming price data.

Provides stateful indicator classes that are advanced one value at a time
and return the calculated value straight away. Every indicator also accepts
market data records through ``update_from``.

Example:
    from streamta.indicators import RSI, MACD, SMA

    rsi = RSI(period=14)
    macd = MACD(short_period=12, long_period=26, signal_period=9)
    smooth_rsi = RSI(14).pullback(SMA(3))

    # Update with each new candle
    rsi_value = rsi.update_from(candle)
    macd_values = macd.update(candle.close)
    smooth_value = smooth_rsi.update(candle.close)
"""

from .base import Indicator
from .aroon import AroonIndicator, AroonOscillator, AroonOutput
from .bollinger_bands import BollingerBands, BollingerBandsOutput
from .ema import EMA
from .extrema import Max, MaxIndex, Min, MinIndex
from .macd import MACD, MACDOutput
from .rma import RMA
from .rsi import RSI
from .sma import SMA
from .standard_deviation import StandardDeviation, StandardDeviationOutput
from .stochastics import Stochastics, StochasticsOutput
from .vwap import VWAP
from .vwma import VWMA

__all__ = [
    "Indicator",
    "AroonIndicator",
    "AroonOscillator",
    "AroonOutput",
    "BollingerBands",
    "BollingerBandsOutput",
    "EMA",
    "Max",
    "MaxIndex",
    "Min",
    "MinIndex",
    "MACD",
    "MACDOutput",
    "RMA",
    "RSI",
    "SMA",
    "StandardDeviation",
    "StandardDeviationOutput",
    "Stochastics",
    "StochasticsOutput",
    "VWAP",
    "VWMA",
]
