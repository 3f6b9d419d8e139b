# streamta/operators/__init__.py
"""
Generic operators that build indicators out of other indicators.

Operators know nothing about the formulas they wrap. Each one owns its
child indicator(s) and forwards ``update``, ``current`` and ``reset``.

Example:
    from streamta.indicators import EMA, SMA
    from streamta.operators import Diff, Mature

    line = Diff(EMA(12), EMA(26))
    value = line.update((price, price))

    slow = Mature(SMA(20), 20)
"""

from .composition import Composition
from .constant import Constant
from .diff import Diff
from .identity import Identity
from .map import Map
from .mature import Mature
from .together import Together
from .window import Window

__all__ = [
    "Composition",
    "Constant",
    "Diff",
    "Identity",
    "Map",
    "Mature",
    "Together",
    "Window",
]
