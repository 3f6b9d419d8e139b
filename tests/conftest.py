# tests/conftest.py
import numpy as np
import pytest

from streamta.marketdata import Candle


def make_candle(i: int) -> Candle:
    """
    Deterministic candle series with monotonically increasing prices.
    """
    base = 100.0 + i
    return Candle(
        timestamp=f"2025-01-01T00:{i % 60:02d}:00Z",
        open=base,
        high=base + 0.5,
        low=base - 0.5,
        close=base + 0.2,
        volume=1000.0,
        tick_count=10,
    )


@pytest.fixture
def candle_factory():
    """
    Returns a function: (i:int) -> Candle
    """
    return make_candle


@pytest.fixture
def make_candles(candle_factory):
    """
    Returns a function: (n:int, start:int=0) -> list[Candle]
    """
    def _make(n: int, start: int = 0) -> list[Candle]:
        return [candle_factory(i) for i in range(start, start + n)]

    return _make


@pytest.fixture
def random_candles():
    """
    Returns a function: (n:int, seed:int=42) -> list[Candle]

    Random walk around 100 with positive volumes. The same seed always
    yields the same series.
    """
    def _make(n: int, seed: int = 42) -> list[Candle]:
        rng = np.random.default_rng(seed)
        closes = 100.0 + np.cumsum(rng.normal(0.0, 1.0, n))
        opens = closes + rng.normal(0.0, 0.3, n)
        highs = np.maximum(opens, closes) + np.abs(rng.normal(0.0, 0.5, n))
        lows = np.minimum(opens, closes) - np.abs(rng.normal(0.0, 0.5, n))
        volumes = rng.integers(1, 1000, n)
        return [
            Candle(
                timestamp=f"2025-01-01T{i // 60 % 24:02d}:{i % 60:02d}:00Z",
                open=float(opens[i]),
                high=float(highs[i]),
                low=float(lows[i]),
                close=float(closes[i]),
                volume=float(volumes[i]),
                tick_count=int(volumes[i]),
            )
            for i in range(n)
        ]

    return _make


@pytest.fixture
def random_prices(random_candles):
    """
    Returns a function: (n:int, seed:int=42) -> list[float]
    """
    def _make(n: int, seed: int = 42) -> list[float]:
        return [c.close for c in random_candles(n, seed)]

    return _make


@pytest.fixture
def check_current_coherence():
    """
    Returns a function: (indicator, inputs, records=False) -> None

    After every update, ``current()`` must equal the value ``update`` returned,
    and calling it twice must not change anything.
    """
    def _check(indicator, inputs, records: bool = False) -> None:
        assert indicator.current() is None
        advance = indicator.update_from if records else indicator.update
        for value in inputs:
            out = advance(value)
            assert indicator.current() == out
            assert indicator.current() == out

    return _check


@pytest.fixture
def check_reset_replay():
    """
    Returns a function: (indicator, inputs, records=False) -> None

    Replaying the same inputs after ``reset()`` must give identical outputs.
    """
    def _check(indicator, inputs, records: bool = False) -> None:
        advance = indicator.update_from if records else indicator.update
        first = [advance(v) for v in inputs]
        indicator.reset()
        assert indicator.current() is None
        second = [advance(v) for v in inputs]
        assert first == second

    return _check


@pytest.fixture
def check_no_lookahead():
    """
    Returns a function: (build, inputs, records=False) -> None

    The k-th output over the full series must match the last output of a fresh
    indicator fed only the first k inputs.
    """
    def _check(build, inputs, records: bool = False) -> None:
        full = build()
        advance = full.update_from if records else full.update
        outputs = [advance(v) for v in inputs]

        for k in range(1, len(inputs) + 1):
            fresh = build()
            fresh_advance = fresh.update_from if records else fresh.update
            last = None
            for v in inputs[:k]:
                last = fresh_advance(v)
            assert last == outputs[k - 1]

    return _check


@pytest.fixture
def check_double_reset():
    """
    Returns a function: (indicator, inputs, records=False) -> None

    Resetting twice in a row must leave the same state as resetting once.
    """
    def _check(indicator, inputs, records: bool = False) -> None:
        advance = indicator.update_from if records else indicator.update
        first = [advance(v) for v in inputs]
        indicator.reset()
        indicator.reset()
        assert indicator.current() is None
        second = [advance(v) for v in inputs]
        assert first == second

    return _check
