"""Base class for streaming indicators."""

import abc
from typing import Any, AsyncIterable, Callable, Generic, Iterable, TypeVar

from streamta.marketdata import price_of

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class Indicator(abc.ABC, Generic[InputT, OutputT]):
    """
    Abstract base class for all indicators and operators.

    An indicator consumes one input per ``update()`` call and returns the new
    output, keeping only bounded internal state. ``current()`` peeks at the
    last output without mutating anything and ``reset()`` restores the state
    the indicator had right after construction.
    """

    @abc.abstractmethod
    def update(self, value: InputT) -> OutputT:
        """Advance the indicator with one input and return the new output."""
        raise NotImplementedError

    @abc.abstractmethod
    def current(self) -> OutputT | None:
        """Return the last output, or None before the first update."""
        raise NotImplementedError

    @abc.abstractmethod
    def reset(self) -> None:
        """Reset indicator internal state to its initial (empty) condition."""
        raise NotImplementedError

    def update_from(self, record: Any) -> OutputT:
        """Advance from a market data record by extracting its price."""
        return self.update(price_of(record))

    def ready(self) -> bool:
        return self.current() is not None

    def warmup_periods(self) -> int:
        return 1

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    def map(self, func: Callable[[OutputT], Any]) -> "Indicator":
        """
        Apply a pure projection to every output.

        Example:
            macd_line = MACD().map(lambda out: out.macd)
        """
        from streamta.operators.map import Map

        return Map(self, func)

    def mature(self, period: int) -> "Indicator":
        """
        Suppress the first ``period`` outputs (they come back as None).

        Example:
            sma = SMA(4).mature(3)
            [sma.update(x) for x in [1.0, 2.0, 1.0, 2.0]]
            # [None, None, None, 1.5]
        """
        from streamta.operators.mature import Mature

        return Mature(self, period)

    def pushforward(self, inner: "Indicator") -> "Indicator":
        """Feed ``inner``'s outputs into this indicator."""
        from streamta.operators.composition import Composition

        return Composition(inner, self)

    def pullback(self, outer: "Indicator") -> "Indicator":
        """Feed this indicator's outputs into ``outer``."""
        from streamta.operators.composition import Composition

        return Composition(self, outer)

    def together(self, companion: "Indicator", *, paired: bool = False) -> "Indicator":
        """Run this indicator and ``companion`` side by side."""
        from streamta.operators.together import Together

        return Together(self, companion, paired=paired)

    def diff(self, other: "Indicator") -> "Indicator":
        """Subtract ``other``'s output from this indicator's output."""
        from streamta.operators.diff import Diff

        return Diff(self, other)

    def window(self, size: int) -> "Indicator":
        """Return the last ``size`` outputs on each update, oldest first."""
        from streamta.operators.window import Window

        return Window(self, size)

    def iter_over(self, inputs: Iterable, *, records: bool = False):
        """
        Lazily drive the indicator from an iterable of inputs.

        Example:
            for value in SMA(2).iter_over([1.0, 2.0, 3.0]):
                print(value)
        """
        from streamta.streams import IndicatorIterator

        return IndicatorIterator(self, inputs, records=records)

    def iter_over_stream(self, inputs: AsyncIterable, *, records: bool = False):
        """Drive the indicator from an async iterable of inputs."""
        from streamta.streams import IndicatorStream

        return IndicatorStream(self, inputs, records=records)
