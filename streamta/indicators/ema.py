"""Exponential Moving Average (EMA) indicator implementation."""

from streamta.errors import check_int_range
from .base import Indicator


class EMA(Indicator[float, float]):
    """Exponential Moving Average, seeded with the first input."""

    def __init__(self, period: int = 14):
        check_int_range("period", period, min=1)
        self.period = period
        self.alpha = 2.0 / (period + 1.0)
        self._ema: float | None = None

    def update(self, value: float) -> float:
        value = float(value)
        if self._ema is None:
            # Seed EMA with first value
            self._ema = value
        else:
            self._ema += (value - self._ema) * self.alpha
        return self._ema

    def current(self) -> float | None:
        return self._ema

    def reset(self) -> None:
        self._ema = None

    def warmup_periods(self) -> int:
        return self.period

    def __repr__(self) -> str:
        return f"EMA(period={self.period})"
