# tests/test_construction.py
"""
Constructors reject non-integer periods and sizes with a structured error.
"""
import numpy as np
import pytest

from streamta.errors import IndicatorError, InvalidTypeError
from streamta.indicators import (
    EMA,
    MACD,
    RMA,
    RSI,
    SMA,
    VWMA,
    AroonIndicator,
    AroonOscillator,
    BollingerBands,
    Max,
    MaxIndex,
    Min,
    MinIndex,
    StandardDeviation,
    Stochastics,
)
from streamta.operators import Identity, Mature, Window


class TestNonIntegerParameters:
    @pytest.mark.parametrize(
        "build",
        [
            lambda: SMA(2.5),
            lambda: EMA(1.5),
            lambda: RMA(2.5),
            lambda: StandardDeviation(3.0),
            lambda: Max(2.5),
            lambda: Min(2.5),
            lambda: MaxIndex(2.5),
            lambda: MinIndex(2.5),
            lambda: RSI(14.5),
            lambda: MACD(2.5, 4, 2),
            lambda: MACD(2, 4, 2.5),
            lambda: BollingerBands(20.5),
            lambda: AroonIndicator(4.5),
            lambda: AroonOscillator(4.5),
            lambda: Stochastics(14, 3.5, 3),
            lambda: VWMA(True),
            lambda: Window(Identity(), 1.5),
            lambda: Mature(Identity(), 0.5),
        ],
    )
    def test_rejected(self, build) -> None:
        with pytest.raises(InvalidTypeError):
            build()

    def test_is_indicator_error(self) -> None:
        with pytest.raises(IndicatorError):
            SMA("5")

    def test_integer_like_values_are_accepted(self) -> None:
        sma = SMA(np.int64(3))
        assert sma.update(6.0) == pytest.approx(6.0)
