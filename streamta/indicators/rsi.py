"""Relative Strength Index (RSI) indicator."""

from .base import Indicator
from .rma import RMA


class RSI(Indicator[float, float]):
    """
    Relative Strength Index using Wilder's running averages.

    RSI = up / (up + down) = 1 / (1 + down / up)
      up   = RMA of positive changes
      down = RMA of negative changes (as positive numbers)

    Output is in [0.0, 1.0]:
      - both averages zero (flat or first input) -> 0.5
      - only losses                              -> 0.0
      - only gains                               -> 1.0

    The first input has no previous value, so it feeds a change of 0 to
    both averages.
    """

    DEFAULT_PERIOD = 14

    def __init__(self, period: int = DEFAULT_PERIOD):
        self.period = period
        self._up = RMA(period)
        self._down = RMA(period)
        self._prev: float | None = None

    def update(self, value: float) -> float:
        value = float(value)
        if self._prev is None:
            self._up.update(0.0)
            self._down.update(0.0)
        else:
            change = value - self._prev
            self._up.update(max(change, 0.0))
            self._down.update(max(-change, 0.0))
        self._prev = value
        return self.current()

    def current(self) -> float | None:
        up = self._up.current()
        down = self._down.current()
        if up is None or down is None:
            return None
        if up <= 0.0 and down <= 0.0:
            return 0.5
        if up <= 0.0:
            return 0.0
        if down <= 0.0:
            return 1.0
        return 1.0 / (1.0 + down / up)

    def reset(self) -> None:
        self._up.reset()
        self._down.reset()
        self._prev = None

    def warmup_periods(self) -> int:
        # Need period changes -> period + 1 inputs
        return self.period + 1

    def __repr__(self) -> str:
        return f"RSI(period={self.period})"
