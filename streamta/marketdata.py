# streamta/marketdata.py
"""
Market data records and the read-only capabilities indicators rely on.

Indicators only need a scalar (price) or a price/volume pair. Any record type
exposing the matching attributes can be fed through ``Indicator.update_from``.
The protocols below describe those shapes for callers and type checkers;
they are not enforced at runtime. ``Candle`` is the bundled OHLCV record.
"""

from dataclasses import dataclass
from numbers import Real
from typing import Protocol, runtime_checkable


@runtime_checkable
class HasPrice(Protocol):
    """Shape a record must have for ``Indicator.update_from``."""

    @property
    def price(self) -> float: ...


@runtime_checkable
class HasVolume(Protocol):
    """Extra shape volume-weighted indicators (VWAP, VWMA) read from a record."""

    @property
    def volume(self) -> float: ...


@runtime_checkable
class HasOHLC(Protocol):
    """
    Shape of an OHLC bar.

    No indicator reads these fields directly; they are what a record type
    must provide for its own ``price`` (close, typical price, mid, ...) to be
    derived the way ``Candle`` does it.
    """

    @property
    def open(self) -> float: ...

    @property
    def high(self) -> float: ...

    @property
    def low(self) -> float: ...

    @property
    def close(self) -> float: ...


@runtime_checkable
class Candlestick(HasOHLC, HasVolume, Protocol):
    """OHLC record that also carries a volume."""


@dataclass
class Candle:
    """
    Represents a single OHLCV candle.

    Attributes:
        timestamp: ISO 8601 timestamp or Unix timestamp string
        open: Opening price
        high: Highest price during period
        low: Lowest price during period
        close: Closing price
        volume: Trading volume (or 0 if unavailable)
        tick_count: Number of ticks/updates during period
    """

    timestamp: str
    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0
    tick_count: int = 0

    @property
    def price(self) -> float:
        """Price fed to single-input indicators (the close)."""
        return self.close

    @property
    def hloc(self) -> float:
        """(High + Low + Open + Close) / 4"""
        return (self.high + self.low + self.open + self.close) / 4

    @property
    def hlc(self) -> float:
        """(High + Low + Close) / 3"""
        return (self.high + self.low + self.close) / 3

    @property
    def typical_price(self) -> float:
        return self.hlc

    @property
    def hlcc(self) -> float:
        """(High + Low + Close + Close) / 4"""
        return (self.high + self.low + self.close * 2) / 4

    @property
    def mid(self) -> float:
        """Calculate midpoint between high and low."""
        return (self.high + self.low) / 2

    @property
    def range(self) -> float:
        """Calculate candle range (high - low)."""
        return self.high - self.low

    def __repr__(self) -> str:
        return (
            f"Candle(timestamp={self.timestamp}, "
            f"O={self.open:.5f}, H={self.high:.5f}, "
            f"L={self.low:.5f}, C={self.close:.5f}, "
            f"V={self.volume:.0f})"
        )


def price_of(record: HasPrice | Real) -> float:
    """Extract the price from a record; bare numbers are their own price."""
    if isinstance(record, Real):
        return float(record)
    return float(record.price)


def volume_of(record: HasVolume) -> float:
    return float(record.volume)
