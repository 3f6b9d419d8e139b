"""Rolling maximum / minimum indicators and their index variants."""

import operator
from collections import deque

from streamta.errors import check_int_range
from .base import Indicator


class _RollingExtreme(Indicator):
    """
    Shared window handling for Max/Min and MaxIndex/MinIndex.

    The window is seeded with ``period`` copies of the first input. The
    extreme is only recomputed from the whole window when the value leaving
    the window was the extreme itself.
    """

    _pick = staticmethod(max)
    _at_least = staticmethod(operator.ge)

    def __init__(self, period: int = 14):
        check_int_range("period", period, min=1)
        self.period = period
        self._ring: deque[float] = deque(maxlen=period)

    def _seed(self, value: float) -> None:
        self._ring.extend([value] * self.period)

    def _slide(self, value: float) -> float:
        """Push ``value`` into the window and return the value that left it."""
        old = self._ring[0]
        self._ring.append(value)
        return old

    def reset(self) -> None:
        self._ring.clear()

    def warmup_periods(self) -> int:
        return self.period

    def __repr__(self) -> str:
        return f"{type(self).__name__}(period={self.period})"


class _ExtremeValue(_RollingExtreme):
    def __init__(self, period: int = 14):
        super().__init__(period)
        self._extreme: float | None = None

    def update(self, value: float) -> float:
        value = float(value)
        if self._extreme is None:
            self._seed(value)
            self._extreme = value
            return value

        old = self._slide(value)
        if self._at_least(value, self._extreme):
            self._extreme = value
        elif self._extreme == old:
            self._extreme = self._pick(self._ring)
        return self._extreme

    def current(self) -> float | None:
        return self._extreme

    def reset(self) -> None:
        super().reset()
        self._extreme = None


class _ExtremeIndex(_RollingExtreme):
    def __init__(self, period: int = 14):
        super().__init__(period)
        self._index: int | None = None

    def _value_at(self, index: int) -> float:
        return self._ring[-1 - index]

    def update(self, value: float) -> int:
        value = float(value)
        if self._index is None:
            self._seed(value)
            self._index = 0
            return 0

        extreme = self._value_at(self._index)
        old = self._slide(value)
        if self._at_least(value, extreme):
            self._index = 0
        elif extreme == old:
            best = self._pick(self._ring)
            self._index = next(
                i for i in range(self.period) if self._value_at(i) == best
            )
        else:
            self._index += 1
        return self._index

    def current(self) -> int | None:
        return self._index

    def reset(self) -> None:
        super().reset()
        self._index = None


class Max(_ExtremeValue):
    """Highest value over the last ``period`` inputs."""


class Min(_ExtremeValue):
    """Lowest value over the last ``period`` inputs."""

    _pick = staticmethod(min)
    _at_least = staticmethod(operator.le)


class MaxIndex(_ExtremeIndex):
    """
    Number of updates since the highest value in the window (0 = latest).

    Ties resolve to the most recent occurrence, also after a rescan. Variants
    that resume a rescan from the stale index can report an older tie instead.
    """


class MinIndex(_ExtremeIndex):
    """Number of updates since the lowest value in the window (0 = latest)."""

    _pick = staticmethod(min)
    _at_least = staticmethod(operator.le)
