"""Rolling standard deviation indicator implementation."""

import math
from collections import deque
from typing import NamedTuple

from streamta.errors import check_int_range
from .base import Indicator


class StandardDeviationOutput(NamedTuple):
    mean: float
    sd: float


class StandardDeviation(Indicator[float, StandardDeviationOutput]):
    """
    Rolling mean and population standard deviation (ddof=0).

    The window is seeded with ``period`` copies of the first input. Mean and
    sum of squared errors are updated in O(1) as values slide in and out
    (Welford's update for a fixed-size window).
    """

    def __init__(self, period: int = 20):
        check_int_range("period", period, min=1)
        self.period = period
        self._ring: deque[float] = deque(maxlen=period)
        self._mean: float | None = None
        self._sse: float = 0.0

    def update(self, value: float) -> StandardDeviationOutput:
        value = float(value)
        if self._mean is None:
            self._ring.extend([value] * self.period)
            self._mean = value
            self._sse = 0.0
        else:
            old = self._ring[0]
            self._ring.append(value)

            delta = value - old
            old_mean = self._mean
            self._mean += delta / self.period
            self._sse += delta * (value - self._mean + old - old_mean)
        return self.current()

    def current(self) -> StandardDeviationOutput | None:
        if self._mean is None:
            return None
        # Rounding can push the SSE a hair below zero on flat windows
        variance = max(self._sse, 0.0) / self.period
        return StandardDeviationOutput(mean=self._mean, sd=math.sqrt(variance))

    def reset(self) -> None:
        self._ring.clear()
        self._mean = None
        self._sse = 0.0

    def warmup_periods(self) -> int:
        return self.period
