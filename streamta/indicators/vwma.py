"""Volume Weighted Moving Average (VWMA) indicator implementation."""

import math
from collections import deque

from streamta.errors import check_int_range
from streamta.marketdata import price_of, volume_of
from .base import Indicator


class VWMA(Indicator[tuple[float, float], float]):
    """
    Volume Weighted Moving Average over the last ``period`` (price, volume)
    pairs.

    VWMA = sum(price * volume) / sum(volume)

    The window is seeded with ``period`` copies of the first pair. A window
    with zero total volume yields NaN.
    """

    def __init__(self, period: int = 20):
        check_int_range("period", period, min=1)
        self.period = period
        self._ring: deque[tuple[float, float]] = deque(maxlen=period)
        self._sum_pv: float | None = None
        self._sum_v: float = 0.0

    def update(self, value: tuple[float, float]) -> float:
        price, volume = value
        price = float(price)
        volume = float(volume)

        if self._sum_pv is None:
            self._ring.extend([(price, volume)] * self.period)
            self._sum_pv = price * volume * self.period
            self._sum_v = volume * self.period
        else:
            old_price, old_volume = self._ring[0]
            self._ring.append((price, volume))
            self._sum_pv += price * volume - old_price * old_volume
            self._sum_v += volume - old_volume
        return self.current()

    def update_from(self, record) -> float:
        return self.update((price_of(record), volume_of(record)))

    def current(self) -> float | None:
        if self._sum_pv is None:
            return None
        if self._sum_v == 0.0:
            return math.nan
        return self._sum_pv / self._sum_v

    def reset(self) -> None:
        self._ring.clear()
        self._sum_pv = None
        self._sum_v = 0.0

    def warmup_periods(self) -> int:
        return self.period
