# streamta/streams.py
"""
Adapters that drive an indicator from a sequence of inputs.

``IndicatorIterator`` pulls from a regular iterable, ``IndicatorStream``
awaits items from an async iterable. Both call the indicator exactly once
per input and hold nothing besides the indicator and the source.
"""

import logging
from typing import AsyncIterable, Iterable

from .indicators.base import Indicator

log = logging.getLogger(__name__)


def _advance_fn(indicator: Indicator, records: bool):
    return indicator.update_from if records else indicator.update


class IndicatorIterator:
    """
    Lazy iterator of indicator outputs.

    Args:
        indicator: Indicator to advance
        inputs: Iterable of inputs (or market data records)
        records: If True, feed inputs through ``update_from``
    """

    def __init__(self, indicator: Indicator, inputs: Iterable, *, records: bool = False):
        self._indicator = indicator
        self._inputs = iter(inputs)
        self._advance = _advance_fn(indicator, records)

    def __iter__(self):
        return self

    def __next__(self):
        try:
            value = next(self._inputs)
        except StopIteration:
            log.debug("Input exhausted for %r", self._indicator)
            raise
        return self._advance(value)

    def decompose(self) -> Indicator:
        """Take out the indicator (its state reflects every input consumed)."""
        return self._indicator


class IndicatorStream:
    """
    Async iterator of indicator outputs.

    Example:
        async for value in SMA(5).iter_over_stream(price_feed()):
            ...
    """

    def __init__(self, indicator: Indicator, inputs: AsyncIterable, *, records: bool = False):
        self._indicator = indicator
        self._inputs = inputs.__aiter__()
        self._advance = _advance_fn(indicator, records)

    def __aiter__(self):
        return self

    async def __anext__(self):
        try:
            value = await self._inputs.__anext__()
        except StopAsyncIteration:
            log.debug("Input stream exhausted for %r", self._indicator)
            raise
        return self._advance(value)

    def decompose(self) -> Indicator:
        return self._indicator
