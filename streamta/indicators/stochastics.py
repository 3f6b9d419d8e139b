"""Stochastic Oscillator (%K / %D / slow %D) indicator implementation."""

from typing import NamedTuple

from .base import Indicator
from .extrema import Max, Min
from .sma import SMA


class StochasticsOutput(NamedTuple):
    k: float
    d: float
    slow_d: float


class Stochastics(Indicator[float, StochasticsOutput]):
    """
    Stochastic Oscillator over a single price series, values in [0.0, 1.0].

    %K      = (price - lowest) / (highest - lowest) over n_period
    %D      = SMA(price - lowest, m_period) / SMA(highest - lowest, m_period)
    slow %D = SMA(%D, x_period)

    Notes:
    - If highest == lowest, %K is defined as 0.5 (avoids division-by-zero);
      the same applies to %D when its averaged range is zero.
    - The first update has no range yet and reports (0.5, 0.5, 0.5); the
      %D averages are seeded with zeros and slow %D with 0.0.
    """

    DEFAULT_N_PERIOD = 14
    DEFAULT_M_PERIOD = 3
    DEFAULT_X_PERIOD = 3

    def __init__(
        self,
        n_period: int = DEFAULT_N_PERIOD,
        m_period: int = DEFAULT_M_PERIOD,
        x_period: int = DEFAULT_X_PERIOD,
    ):
        self._min = Min(n_period)
        self._max = Max(n_period)
        self._d_numerator = SMA(m_period)
        self._d_denominator = SMA(m_period)
        self._slow_d = SMA(x_period)

        self.n_period = n_period
        self.m_period = m_period
        self.x_period = x_period
        self._current: StochasticsOutput | None = None

    def update(self, value: float) -> StochasticsOutput:
        value = float(value)
        lowest = self._min.update(value)
        highest = self._max.update(value)

        if self._current is None:
            self._d_numerator.update(0.0)
            self._d_denominator.update(0.0)
            self._slow_d.update(0.0)
            self._current = StochasticsOutput(k=0.5, d=0.5, slow_d=0.5)
            return self._current

        numerator = self._d_numerator.update(value - lowest)
        denominator = self._d_denominator.update(highest - lowest)

        k = 0.5 if highest == lowest else (value - lowest) / (highest - lowest)
        d = 0.5 if denominator == 0.0 else numerator / denominator
        slow_d = self._slow_d.update(d)

        self._current = StochasticsOutput(k=k, d=d, slow_d=slow_d)
        return self._current

    def current(self) -> StochasticsOutput | None:
        return self._current

    def reset(self) -> None:
        self._min.reset()
        self._max.reset()
        self._d_numerator.reset()
        self._d_denominator.reset()
        self._slow_d.reset()
        self._current = None

    def warmup_periods(self) -> int:
        # n_period inputs for the first full range, then m and x averages
        return self.n_period + self.m_period + self.x_period - 2

    def __repr__(self) -> str:
        return (
            f"Stochastics(n_period={self.n_period}, m_period={self.m_period}, "
            f"x_period={self.x_period})"
        )
