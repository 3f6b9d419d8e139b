"""Running Moving Average (RMA, a.k.a. Wilder's / modified moving average)."""

from streamta.errors import check_int_range
from .base import Indicator


class RMA(Indicator[float, float]):
    """
    Running Moving Average.

    rma += (value - rma) / period, seeded with the first input.
    """

    def __init__(self, period: int = 14):
        check_int_range("period", period, min=2)
        self.period = period
        self._rma: float | None = None

    def update(self, value: float) -> float:
        value = float(value)
        if self._rma is None:
            self._rma = value
        else:
            self._rma += (value - self._rma) / self.period
        return self._rma

    def current(self) -> float | None:
        return self._rma

    def reset(self) -> None:
        self._rma = None

    def warmup_periods(self) -> int:
        return self.period
