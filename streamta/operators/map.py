"""Map operator: apply a projection to another indicator's output."""

from typing import Any, Callable

from streamta.indicators.base import Indicator


class Map(Indicator):
    """
    Applies ``func`` to every output of the wrapped indicator.

    ``func`` must be pure: it is called once per ``update()`` and once per
    ``current()``, and has no state of its own to reset.
    """

    def __init__(self, indicator: Indicator, func: Callable[[Any], Any]):
        self.indicator = indicator
        self.func = func

    def update(self, value):
        return self.func(self.indicator.update(value))

    def update_from(self, record):
        return self.func(self.indicator.update_from(record))

    def current(self):
        value = self.indicator.current()
        if value is None:
            return None
        return self.func(value)

    def reset(self) -> None:
        self.indicator.reset()

    def warmup_periods(self) -> int:
        return self.indicator.warmup_periods()

    def decompose(self) -> Indicator:
        """Take out the wrapped indicator."""
        return self.indicator

    def __repr__(self) -> str:
        name = getattr(self.func, "__name__", repr(self.func))
        return f"Map({self.indicator!r}, {name})"
