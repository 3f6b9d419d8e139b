"""Bollinger Bands indicator implementation."""

from typing import NamedTuple

from streamta.errors import check_range
from .base import Indicator
from .standard_deviation import StandardDeviation


class BollingerBandsOutput(NamedTuple):
    middle: float
    upper: float
    lower: float


class BollingerBands(Indicator[float, BollingerBandsOutput]):
    """
    Bollinger Bands (rolling SMA +/- multiplier * population standard deviation).

    Returns a BollingerBandsOutput:
      - middle: rolling mean
      - upper:  middle + multiplier * sd
      - lower:  middle - multiplier * sd

    Notes:
    - Uses population standard deviation (ddof=0), which matches the common
      "platform default" behavior.
    - A multiplier of 0 is allowed and collapses the bands onto the mean.
    """

    def __init__(self, period: int = 20, multiplier: float = 2.0):
        self._sd = StandardDeviation(period)
        check_range("multiplier", float(multiplier), min=0.0)
        self.period = period
        self.multiplier = float(multiplier)

    def update(self, value: float) -> BollingerBandsOutput:
        self._sd.update(value)
        return self.current()

    def current(self) -> BollingerBandsOutput | None:
        stats = self._sd.current()
        if stats is None:
            return None
        width = stats.sd * self.multiplier
        return BollingerBandsOutput(
            middle=stats.mean,
            upper=stats.mean + width,
            lower=stats.mean - width,
        )

    def reset(self) -> None:
        self._sd.reset()

    def warmup_periods(self) -> int:
        return self.period
