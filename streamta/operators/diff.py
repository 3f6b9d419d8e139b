"""Difference of two indicators' outputs."""

from streamta.indicators.base import Indicator


class Diff(Indicator):
    """
    ``Diff(lhs, rhs).update((xl, xr)) == lhs.update(xl) - rhs.update(xr)``

    Both sides must produce values supporting subtraction. Used for the MACD
    line (fast EMA minus slow EMA).
    """

    def __init__(self, lhs: Indicator, rhs: Indicator):
        self.lhs = lhs
        self.rhs = rhs

    def update(self, value):
        lhs_value, rhs_value = value
        return self.lhs.update(lhs_value) - self.rhs.update(rhs_value)

    def update_from(self, record):
        lhs_record, rhs_record = record
        return self.lhs.update_from(lhs_record) - self.rhs.update_from(rhs_record)

    def current(self):
        lhs = self.lhs.current()
        rhs = self.rhs.current()
        if lhs is None or rhs is None:
            return None
        return lhs - rhs

    def reset(self) -> None:
        self.lhs.reset()
        self.rhs.reset()

    def warmup_periods(self) -> int:
        return max(self.lhs.warmup_periods(), self.rhs.warmup_periods())

    def decompose(self) -> tuple[Indicator, Indicator]:
        return self.lhs, self.rhs

    def __repr__(self) -> str:
        return f"Diff({self.lhs!r}, {self.rhs!r})"
