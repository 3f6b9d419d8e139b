"""Parallel fan-out of two indicators."""

from streamta.indicators.base import Indicator


class Together(Indicator):
    """
    Runs two indicators side by side and returns ``(lhs_output, rhs_output)``.

    By default the same input is handed to both indicators. With
    ``paired=True`` every input must be a ``(lhs_input, rhs_input)`` pair,
    which lets the two sides consume different kinds of values.

    ``current()`` only reports a value once both sides have one.
    """

    def __init__(self, lhs: Indicator, rhs: Indicator, *, paired: bool = False):
        self.lhs = lhs
        self.rhs = rhs
        self.paired = bool(paired)

    def update(self, value):
        if self.paired:
            lhs_value, rhs_value = value
            return self.lhs.update(lhs_value), self.rhs.update(rhs_value)
        return self.lhs.update(value), self.rhs.update(value)

    def update_from(self, record):
        if self.paired:
            lhs_record, rhs_record = record
            return self.lhs.update_from(lhs_record), self.rhs.update_from(rhs_record)
        return self.lhs.update_from(record), self.rhs.update_from(record)

    def current(self):
        lhs = self.lhs.current()
        rhs = self.rhs.current()
        if lhs is None or rhs is None:
            return None
        return lhs, rhs

    def reset(self) -> None:
        self.lhs.reset()
        self.rhs.reset()

    def warmup_periods(self) -> int:
        return max(self.lhs.warmup_periods(), self.rhs.warmup_periods())

    def decompose(self) -> tuple[Indicator, Indicator]:
        return self.lhs, self.rhs

    def __repr__(self) -> str:
        return f"Together({self.lhs!r}, {self.rhs!r}, paired={self.paired})"
