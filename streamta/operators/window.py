"""Window operator: keep the last N outputs of another indicator."""

from collections import deque

from streamta.errors import check_int_range
from streamta.indicators.base import Indicator


class Window(Indicator):
    """
    Returns the last ``size`` outputs of the wrapped indicator as a tuple,
    oldest first.

    Until ``size`` outputs have been produced, the leading slots repeat the
    earliest output so the tuple always has exactly ``size`` entries.
    Every update returns a fresh tuple; the ring itself is never exposed.
    """

    def __init__(self, indicator: Indicator, size: int):
        check_int_range("size", size, min=0)
        self.indicator = indicator
        self.size = size
        self._ring: deque = deque(maxlen=size)
        self._updated = False

    def _push(self, output) -> tuple:
        if self.size > 0:
            self._ring.append(output)
        self._updated = True
        return self._view()

    def _view(self) -> tuple:
        if not self._ring:
            return ()
        padding = self.size - len(self._ring)
        return (self._ring[0],) * padding + tuple(self._ring)

    def update(self, value) -> tuple:
        return self._push(self.indicator.update(value))

    def update_from(self, record) -> tuple:
        return self._push(self.indicator.update_from(record))

    def current(self) -> tuple | None:
        if not self._updated:
            return None
        return self._view()

    def reset(self) -> None:
        self.indicator.reset()
        self._ring.clear()
        self._updated = False

    def warmup_periods(self) -> int:
        return self.indicator.warmup_periods() + max(self.size - 1, 0)

    def decompose(self) -> Indicator:
        return self.indicator

    def __repr__(self) -> str:
        return f"Window({self.indicator!r}, size={self.size})"
