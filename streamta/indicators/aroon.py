"""Aroon indicator and Aroon oscillator."""

from typing import NamedTuple

from streamta.errors import check_int_range
from .base import Indicator
from .extrema import MaxIndex, MinIndex


class AroonOutput(NamedTuple):
    up: float
    down: float


class AroonIndicator(Indicator[float, AroonOutput]):
    """
    Aroon Up / Aroon Down, each in [0.0, 1.0].

    up   = (period - updates since highest value) / period
    down = (period - updates since lowest value) / period

    Looks back over the last ``period + 1`` inputs.
    """

    DEFAULT_PERIOD = 14

    def __init__(self, period: int = DEFAULT_PERIOD):
        check_int_range("period", period, min=1)
        self.period = period
        self._max_index = MaxIndex(period + 1)
        self._min_index = MinIndex(period + 1)

    def update(self, value: float) -> AroonOutput:
        self._min_index.update(value)
        self._max_index.update(value)
        return self.current()

    def current(self) -> AroonOutput | None:
        max_index = self._max_index.current()
        min_index = self._min_index.current()
        if max_index is None or min_index is None:
            return None
        return AroonOutput(
            up=(self.period - max_index) / self.period,
            down=(self.period - min_index) / self.period,
        )

    def reset(self) -> None:
        self._min_index.reset()
        self._max_index.reset()

    def warmup_periods(self) -> int:
        return self.period + 1

    def __repr__(self) -> str:
        return f"AroonIndicator(period={self.period})"


class AroonOscillator(Indicator[float, float]):
    """Aroon Up minus Aroon Down, in [-1.0, 1.0]."""

    DEFAULT_PERIOD = AroonIndicator.DEFAULT_PERIOD

    def __init__(self, period: int = DEFAULT_PERIOD):
        self._aroon = AroonIndicator(period)

    @property
    def period(self) -> int:
        return self._aroon.period

    def update(self, value: float) -> float:
        self._aroon.update(value)
        return self.current()

    def current(self) -> float | None:
        out = self._aroon.current()
        if out is None:
            return None
        return out.up - out.down

    def reset(self) -> None:
        self._aroon.reset()

    def warmup_periods(self) -> int:
        return self._aroon.warmup_periods()
