"""Mature operator: suppress early outputs of another indicator."""

from streamta.errors import check_int_range
from streamta.indicators.base import Indicator


class Mature(Indicator):
    """
    Hides the first ``period`` outputs of the wrapped indicator.

    The wrapped indicator is advanced on every update, so once the
    suppression window has passed its outputs are exactly what it would
    have produced on its own. Suppressed updates return None.

    This is an externally imposed warm-up, independent of the wrapped
    indicator's own seeding, so heterogeneous indicators can share one
    "don't trust early values" policy.
    """

    def __init__(self, indicator: Indicator, period: int):
        check_int_range("period", period, min=0)
        self.indicator = indicator
        self.period = period
        self._countdown = period + 1

    def _gate(self, output):
        if self._countdown <= 1:
            self._countdown = 0
            return output
        self._countdown -= 1
        return None

    def update(self, value):
        return self._gate(self.indicator.update(value))

    def update_from(self, record):
        return self._gate(self.indicator.update_from(record))

    def current(self):
        if self._countdown > 0:
            return None
        return self.indicator.current()

    def reset(self) -> None:
        self.indicator.reset()
        self._countdown = self.period + 1

    def warmup_periods(self) -> int:
        return max(self.indicator.warmup_periods(), self.period + 1)

    def __repr__(self) -> str:
        return f"Mature({self.indicator!r}, period={self.period})"
