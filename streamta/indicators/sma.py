"""Simple Moving Average (SMA) indicator implementation."""

from collections import deque

from streamta.errors import check_int_range
from .base import Indicator


class SMA(Indicator[float, float]):
    """
    Simple Moving Average.

    The window is seeded with ``period`` copies of the first input, so a
    value is available from the first update on and the running sum is
    adjusted in O(1) per update.
    """

    def __init__(self, period: int = 14):
        check_int_range("period", period, min=1)
        self.period = period
        self._ring: deque[float] = deque(maxlen=period)
        self._sum: float | None = None

    def update(self, value: float) -> float:
        value = float(value)
        if self._sum is None:
            self._ring.extend([value] * self.period)
            self._sum = value * self.period
        else:
            self._sum -= self._ring[0]
            self._ring.append(value)
            self._sum += value
        return self._sum / self.period

    def current(self) -> float | None:
        if self._sum is None:
            return None
        return self._sum / self.period

    def reset(self) -> None:
        self._ring.clear()
        self._sum = None

    def warmup_periods(self) -> int:
        return self.period

    def __repr__(self) -> str:
        return f"SMA(period={self.period})"
