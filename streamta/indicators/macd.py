# streamta/indicators/macd.py
"""
MACD (Moving Average Convergence Divergence) indicator implementation.

MACD is a trend-following momentum indicator that shows the relationship
between two moving averages of prices.
"""

from typing import NamedTuple

from streamta.errors import Parameter, check_relation
from streamta.operators.diff import Diff
from .base import Indicator
from .ema import EMA
from .sma import SMA


class MACDOutput(NamedTuple):
    macd: float
    signal: float
    histogram: float


class MACD(Indicator[float, MACDOutput]):
    """
    MACD (Moving Average Convergence Divergence) indicator.

    Components:
        - MACD Line: Short EMA - Long EMA
        - Signal Line: SMA of MACD Line
        - Histogram: MACD Line - Signal Line

    The MACD line is a ``Diff`` of the two EMAs, both fed the same price.

    Args:
        short_period: Short EMA period (default: 12)
        long_period: Long EMA period (default: 26)
        signal_period: Signal line SMA period (default: 9)

    Raises:
        InvalidRelationError: short_period is not strictly less than long_period
        InvalidRangeError: any period is below 1

    Example:
        macd = MACD(short_period=12, long_period=26, signal_period=9)

        for price in prices:
            values = macd.update(price)
            if values.histogram > 0:
                print("Bullish momentum")
    """

    DEFAULT_SHORT_PERIOD = 12
    DEFAULT_LONG_PERIOD = 26
    DEFAULT_SIGNAL_PERIOD = 9

    def __init__(
        self,
        short_period: int = DEFAULT_SHORT_PERIOD,
        long_period: int = DEFAULT_LONG_PERIOD,
        signal_period: int = DEFAULT_SIGNAL_PERIOD,
    ):
        check_relation(
            Parameter("short_period", short_period),
            "<",
            Parameter("long_period", long_period),
        )
        self.short_period = short_period
        self.long_period = long_period
        self.signal_period = signal_period

        self._line = Diff(EMA(short_period), EMA(long_period))
        self._signal = SMA(signal_period)

    def update(self, value: float) -> MACDOutput:
        value = float(value)
        self._signal.update(self._line.update((value, value)))
        return self.current()

    def current(self) -> MACDOutput | None:
        macd = self._line.current()
        signal = self._signal.current()
        if macd is None or signal is None:
            return None
        return MACDOutput(macd=macd, signal=signal, histogram=macd - signal)

    def reset(self) -> None:
        self._line.reset()
        self._signal.reset()

    def warmup_periods(self) -> int:
        return self.long_period + self.signal_period - 1

    def __repr__(self) -> str:
        return (
            f"MACD(short_period={self.short_period}, long_period={self.long_period}, "
            f"signal_period={self.signal_period})"
        )
