"""Volume Weighted Average Price (VWAP) indicator implementation."""

from streamta.marketdata import price_of, volume_of
from .base import Indicator


class VWAP(Indicator[tuple[float, float], float]):
    """
    Cumulative VWAP.

    VWAP = sum(price * volume) / sum(volume)

    ``update`` takes a ``(price, volume)`` pair; ``update_from`` reads
    ``price`` and ``volume`` from a record. The first price seeds the
    average; zero-volume updates leave it unchanged.
    """

    def __init__(self):
        self._vwap: float | None = None
        self._cum_v: float = 0.0

    def update(self, value: tuple[float, float]) -> float:
        price, volume = value
        price = float(price)
        volume = float(volume)

        self._cum_v += volume
        if self._vwap is None:
            self._vwap = price
        elif self._cum_v != 0.0:
            self._vwap += (price - self._vwap) * volume / self._cum_v
        return self._vwap

    def update_from(self, record) -> float:
        return self.update((price_of(record), volume_of(record)))

    def current(self) -> float | None:
        return self._vwap

    def reset(self) -> None:
        self._vwap = None
        self._cum_v = 0.0

    def __repr__(self) -> str:
        return "VWAP()"
