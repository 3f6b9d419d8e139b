import pytest

from streamta.indicators.rsi import RSI
from streamta.marketdata import Candle


def candle(close: float) -> Candle:
    return Candle(
        timestamp="2020-01-01T00:00:00Z",
        open=close,
        high=close,
        low=close,
        close=close,
        volume=1.0,
        tick_count=1,
    )


class TestRSI:
    def test_rejects_small_period(self) -> None:
        with pytest.raises(ValueError):
            RSI(period=0)
        with pytest.raises(ValueError):
            RSI(period=-3)

    def test_first_update_is_neutral(self) -> None:
        rsi = RSI(period=3)
        assert rsi.current() is None
        assert rsi.update(100.0) == pytest.approx(0.5)
        assert rsi.ready() is True

    def test_all_gains_returns_one(self) -> None:
        rsi = RSI(period=3)
        for price in [10.0, 11.0, 12.0]:
            v = rsi.update_from(candle(price))
        assert v == pytest.approx(1.0)

    def test_all_losses_returns_zero(self) -> None:
        rsi = RSI(period=3)
        for price in [13.0, 12.0, 11.0]:
            v = rsi.update_from(candle(price))
        assert v == pytest.approx(0.0)

    def test_flat_series_returns_half(self) -> None:
        rsi = RSI(period=3)
        for _ in range(5):
            v = rsi.update(50.0)
        assert v == pytest.approx(0.5)

    def test_known_sequence(self) -> None:
        rsi = RSI(period=3)
        prices = [100.0, 101.0, 100.0, 100.0, 100.0, 102.0]
        expected = [0.5, 1.0, 0.4, 0.4, 0.4, 0.8811881188118812]

        assert [rsi.update(p) for p in prices] == pytest.approx(expected)

    def test_output_in_unit_range(self, random_prices) -> None:
        rsi = RSI(period=14)
        for price in random_prices(300):
            assert 0.0 <= rsi.update(price) <= 1.0

    def test_warmup_periods(self) -> None:
        assert RSI().warmup_periods() == 15

    def test_contract(
        self, random_prices, check_current_coherence, check_reset_replay, check_no_lookahead
    ) -> None:
        prices = random_prices(40)
        check_current_coherence(RSI(period=5), prices)
        check_reset_replay(RSI(period=5), prices)
        check_no_lookahead(lambda: RSI(period=5), prices)
