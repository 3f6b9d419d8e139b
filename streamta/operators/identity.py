"""Identity indicator."""

from streamta.indicators.base import Indicator


class Identity(Indicator):
    """Returns its input unchanged and remembers it for ``current()``."""

    def __init__(self):
        self._current = None

    def update(self, value):
        self._current = value
        return value

    def current(self):
        return self._current

    def reset(self) -> None:
        self._current = None

    def __repr__(self) -> str:
        return "Identity()"
