"""Serial composition of two indicators."""

from streamta.indicators.base import Indicator


class Composition(Indicator):
    """
    Feeds the output of ``inner`` into ``outer``.

    ``Composition(inner, outer).update(x) == outer.update(inner.update(x))``.
    Built by ``outer.pushforward(inner)`` or ``inner.pullback(outer)``.
    The inner indicator's intermediate value is not observable through
    ``current()``, which reports the outer indicator only.
    """

    def __init__(self, inner: Indicator, outer: Indicator):
        self.inner = inner
        self.outer = outer

    def update(self, value):
        return self.outer.update(self.inner.update(value))

    def update_from(self, record):
        return self.outer.update(self.inner.update_from(record))

    def current(self):
        return self.outer.current()

    def reset(self) -> None:
        self.inner.reset()
        self.outer.reset()

    def warmup_periods(self) -> int:
        return self.inner.warmup_periods() + self.outer.warmup_periods() - 1

    def decompose(self) -> tuple[Indicator, Indicator]:
        """Take out ``(inner, outer)``."""
        return self.inner, self.outer

    def __repr__(self) -> str:
        return f"Composition(inner={self.inner!r}, outer={self.outer!r})"
