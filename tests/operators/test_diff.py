import pytest

from streamta.indicators import EMA, SMA
from streamta.operators import Diff, Identity


class TestDiff:
    def test_identities(self) -> None:
        diff = Identity().diff(Identity())
        pairs = [(0, 0), (1, 1), (0, 2), (2, 0), (3, 1), (1, 9)]
        assert [diff.update(p) for p in pairs] == [0, 0, -2, 2, 2, -8]

    def test_same_indicator_same_input_is_zero(self, random_prices) -> None:
        diff = Diff(SMA(period=4), SMA(period=4))
        for price in random_prices(50):
            assert diff.update((price, price)) == 0.0

    def test_ema_crossover_line(self) -> None:
        diff = Diff(EMA(period=2), EMA(period=4))
        diff.update((100.0, 100.0))
        assert diff.update((200.0, 200.0)) == pytest.approx(26.66666667)

    def test_update_from_splits_record_pair(self) -> None:
        diff = Diff(Identity(), Identity())
        assert diff.update_from((5.0, 3.0)) == pytest.approx(2.0)

    def test_current_needs_both_sides(self) -> None:
        diff = Diff(Identity(), Identity())
        assert diff.current() is None
        diff.update((4.0, 1.0))
        assert diff.current() == pytest.approx(3.0)

    def test_reset(self) -> None:
        diff = Diff(Identity(), Identity())
        diff.update((4.0, 1.0))
        diff.reset()
        assert diff.current() is None

    def test_contract(self, random_prices, check_current_coherence, check_reset_replay) -> None:
        prices = random_prices(30)
        pairs = list(zip(prices, reversed(prices)))
        check_current_coherence(Diff(SMA(period=3), EMA(period=3)), pairs)
        check_reset_replay(Diff(SMA(period=3), EMA(period=3)), pairs)

    def test_double_reset(self, random_prices, check_double_reset) -> None:
        prices = random_prices(30)
        check_double_reset(Diff(SMA(period=3), EMA(period=3)), list(zip(prices, reversed(prices))))
