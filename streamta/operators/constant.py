"""Constant indicator."""

from streamta.indicators.base import Indicator


class Constant(Indicator):
    """Ignores its input and always produces ``value``."""

    def __init__(self, value):
        self.value = value

    def update(self, value=None):
        return self.value

    def update_from(self, record=None):
        return self.value

    def current(self):
        return self.value

    def reset(self) -> None:
        pass

    def warmup_periods(self) -> int:
        return 0

    def __repr__(self) -> str:
        return f"Constant({self.value!r})"
