# tests/test_factory.py
"""
Tests for building indicators from mappings.
"""
import pytest

from streamta.errors import InvalidRangeError, InvalidRelationError
from streamta.factory import create_indicator, supported_types
from streamta.indicators import (
    MACD,
    RSI,
    SMA,
    VWAP,
    AroonIndicator,
    BollingerBands,
    Stochastics,
)
from streamta.operators import Composition, Constant, Diff, Identity, Map, Mature, Together, Window


class TestCreateIndicator:
    @pytest.mark.parametrize(
        "spec, cls",
        [
            ({"type": "sma", "period": 5}, SMA),
            ({"type": "RSI"}, RSI),
            ({"type": "macd", "short_period": 3, "long_period": 6}, MACD),
            ({"type": "bollinger", "period": 10, "multiplier": 1.5}, BollingerBands),
            ({"type": "aroon", "period": 7}, AroonIndicator),
            ({"type": "stochastics", "n_period": 5}, Stochastics),
            ({"type": "vwap"}, VWAP),
            ({"type": "constant", "value": 2}, Constant),
            ({"type": "identity"}, Identity),
        ],
    )
    def test_builds_primitives(self, spec, cls) -> None:
        assert isinstance(create_indicator(spec), cls)

    def test_parameters_are_passed_through(self) -> None:
        macd = create_indicator({"type": "macd", "short_period": 3, "long_period": 6})
        assert macd.short_period == 3
        assert macd.long_period == 6
        assert macd.signal_period == MACD.DEFAULT_SIGNAL_PERIOD

    def test_all_types_build_with_required_params(self) -> None:
        leaf = {"type": "identity"}
        required = {
            "constant": {"value": 1},
            "map": {"indicator": leaf, "field": 0},
            "mature": {"indicator": leaf, "period": 1},
            "window": {"indicator": leaf, "size": 2},
            "compose": {"inner": leaf, "outer": leaf},
            "together": {"lhs": leaf, "rhs": leaf},
            "diff": {"lhs": leaf, "rhs": leaf},
        }
        for name in supported_types():
            spec = {"type": name, **required.get(name, {})}
            assert create_indicator(spec) is not None

    def test_composition_tree(self) -> None:
        smoothed = create_indicator(
            {
                "type": "compose",
                "inner": {"type": "rsi", "period": 3},
                "outer": {"type": "sma", "period": 2},
            }
        )
        assert isinstance(smoothed, Composition)

        prices = [100.0, 101.0, 100.0, 100.0, 100.0, 102.0]
        expected = [0.5, 0.75, 0.7, 0.4, 0.4, 0.6405940594059405]
        assert [smoothed.update(p) for p in prices] == pytest.approx(expected)

    def test_map_field_by_name(self) -> None:
        line = create_indicator(
            {"type": "map", "field": "macd", "indicator": {"type": "macd", "short_period": 2, "long_period": 4}}
        )
        assert isinstance(line, Map)
        line.update(100.0)
        assert line.update(200.0) == pytest.approx(26.66666667)

    def test_map_field_by_index(self) -> None:
        lhs = create_indicator(
            {
                "type": "map",
                "field": 1,
                "indicator": {"type": "together", "lhs": {"type": "identity"}, "rhs": {"type": "constant", "value": 7}},
            }
        )
        assert lhs.update(1.0) == 7

    def test_combinators(self) -> None:
        sma = {"type": "sma", "period": 3}
        assert isinstance(create_indicator({"type": "mature", "indicator": sma, "period": 2}), Mature)
        assert isinstance(create_indicator({"type": "window", "indicator": sma, "size": 2}), Window)
        assert isinstance(create_indicator({"type": "diff", "lhs": sma, "rhs": sma}), Diff)

        paired = create_indicator({"type": "together", "lhs": sma, "rhs": {"type": "vwap"}, "paired": True})
        assert isinstance(paired, Together)
        assert paired.paired is True

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown indicator type"):
            create_indicator({"type": "ichimoku"})

    def test_missing_type(self) -> None:
        with pytest.raises(ValueError, match="missing 'type'"):
            create_indicator({"period": 3})

    def test_not_a_mapping(self) -> None:
        with pytest.raises(ValueError):
            create_indicator(["sma", 3])

    def test_unknown_params(self) -> None:
        with pytest.raises(ValueError, match="Unknown params for 'sma'"):
            create_indicator({"type": "sma", "length": 3})

    def test_missing_params(self) -> None:
        with pytest.raises(ValueError, match="Missing params for 'mature'"):
            create_indicator({"type": "mature", "indicator": {"type": "sma"}})

    def test_invalid_field(self) -> None:
        with pytest.raises(ValueError, match="Map field"):
            create_indicator({"type": "map", "field": 1.5, "indicator": {"type": "identity"}})

    def test_range_errors_propagate(self) -> None:
        with pytest.raises(InvalidRangeError):
            create_indicator({"type": "sma", "period": 0})
        with pytest.raises(InvalidRelationError):
            create_indicator({"type": "macd", "short_period": 26, "long_period": 12})

    def test_nested_errors_propagate(self) -> None:
        with pytest.raises(ValueError):
            create_indicator({"type": "window", "indicator": {"type": "bogus"}, "size": 2})

    def test_input_spec_is_not_mutated(self) -> None:
        spec = {"type": "sma", "period": 4}
        create_indicator(spec)
        assert spec == {"type": "sma", "period": 4}
