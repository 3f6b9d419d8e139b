# streamta/factory.py
"""
Build indicator trees from plain mappings.

Lets a pipeline be described in YAML (see ``streamta.config``) instead of
Python. Every node is a mapping with a ``type`` key; combinator nodes nest
further nodes.

Example:
    create_indicator({
        "type": "compose",
        "inner": {"type": "rsi", "period": 14},
        "outer": {"type": "sma", "period": 3},
    })
"""

import logging
from operator import attrgetter, itemgetter
from typing import Any, Callable

from .indicators import (
    EMA,
    MACD,
    RMA,
    RSI,
    SMA,
    VWAP,
    VWMA,
    AroonIndicator,
    AroonOscillator,
    BollingerBands,
    Indicator,
    Max,
    MaxIndex,
    Min,
    MinIndex,
    StandardDeviation,
    Stochastics,
)
from .operators import (
    Composition,
    Constant,
    Diff,
    Identity,
    Map,
    Mature,
    Together,
    Window,
)

log = logging.getLogger(__name__)


_VALID_PARAMS: dict[str, frozenset[str]] = {
    "sma": frozenset({"period"}),
    "ema": frozenset({"period"}),
    "rma": frozenset({"period"}),
    "stddev": frozenset({"period"}),
    "max": frozenset({"period"}),
    "min": frozenset({"period"}),
    "max_index": frozenset({"period"}),
    "min_index": frozenset({"period"}),
    "rsi": frozenset({"period"}),
    "macd": frozenset({"short_period", "long_period", "signal_period"}),
    "bollinger": frozenset({"period", "multiplier"}),
    "aroon": frozenset({"period"}),
    "aroon_oscillator": frozenset({"period"}),
    "stochastics": frozenset({"n_period", "m_period", "x_period"}),
    "vwap": frozenset(),
    "vwma": frozenset({"period"}),
    "constant": frozenset({"value"}),
    "identity": frozenset(),
    "map": frozenset({"indicator", "field"}),
    "mature": frozenset({"indicator", "period"}),
    "window": frozenset({"indicator", "size"}),
    "compose": frozenset({"inner", "outer"}),
    "together": frozenset({"lhs", "rhs", "paired"}),
    "diff": frozenset({"lhs", "rhs"}),
}

_REQUIRED_PARAMS: dict[str, frozenset[str]] = {
    "constant": frozenset({"value"}),
    "map": frozenset({"indicator", "field"}),
    "mature": frozenset({"indicator", "period"}),
    "window": frozenset({"indicator", "size"}),
    "compose": frozenset({"inner", "outer"}),
    "together": frozenset({"lhs", "rhs"}),
    "diff": frozenset({"lhs", "rhs"}),
}


def _validate_params(indicator_type: str, params: dict[str, Any]) -> None:
    """Raise ValueError if params has unknown or missing keys for this type."""
    valid = _VALID_PARAMS[indicator_type]
    unknown = set(params) - valid
    if unknown:
        raise ValueError(
            f"Unknown params for '{indicator_type}': {sorted(unknown)}. "
            f"Valid: {sorted(valid)}"
        )
    missing = _REQUIRED_PARAMS.get(indicator_type, frozenset()) - set(params)
    if missing:
        raise ValueError(f"Missing params for '{indicator_type}': {sorted(missing)}")


def _field_getter(field: str | int) -> Callable[[Any], Any]:
    # Named outputs are projected by attribute, tuples by position
    if isinstance(field, bool) or not isinstance(field, (str, int)):
        raise ValueError(f"Map field must be a name or an index, got {field!r}")
    if isinstance(field, int):
        return itemgetter(field)
    return attrgetter(field)


def _with_defaults(cls, *names: str) -> Callable[[dict[str, Any]], Indicator]:
    def build(params: dict[str, Any]) -> Indicator:
        return cls(**{name: params[name] for name in names if name in params})

    return build


_FACTORY: dict[str, Callable[[dict[str, Any]], Indicator]] = {
    # Primitives
    "sma": _with_defaults(SMA, "period"),
    "ema": _with_defaults(EMA, "period"),
    "rma": _with_defaults(RMA, "period"),
    "stddev": _with_defaults(StandardDeviation, "period"),
    "max": _with_defaults(Max, "period"),
    "min": _with_defaults(Min, "period"),
    "max_index": _with_defaults(MaxIndex, "period"),
    "min_index": _with_defaults(MinIndex, "period"),
    "rsi": _with_defaults(RSI, "period"),
    "macd": _with_defaults(MACD, "short_period", "long_period", "signal_period"),
    "bollinger": _with_defaults(BollingerBands, "period", "multiplier"),
    "aroon": _with_defaults(AroonIndicator, "period"),
    "aroon_oscillator": _with_defaults(AroonOscillator, "period"),
    "stochastics": _with_defaults(Stochastics, "n_period", "m_period", "x_period"),
    "vwap": lambda _: VWAP(),
    "vwma": _with_defaults(VWMA, "period"),
    # Trivial
    "constant": lambda p: Constant(p["value"]),
    "identity": lambda _: Identity(),
    # Combinators
    "map": lambda p: Map(create_indicator(p["indicator"]), _field_getter(p["field"])),
    "mature": lambda p: Mature(create_indicator(p["indicator"]), p["period"]),
    "window": lambda p: Window(create_indicator(p["indicator"]), p["size"]),
    "compose": lambda p: Composition(create_indicator(p["inner"]), create_indicator(p["outer"])),
    "together": lambda p: Together(
        create_indicator(p["lhs"]),
        create_indicator(p["rhs"]),
        paired=p.get("paired", False),
    ),
    "diff": lambda p: Diff(create_indicator(p["lhs"]), create_indicator(p["rhs"])),
}


def create_indicator(spec: dict[str, Any]) -> Indicator:
    """
    Create an indicator (or a tree of indicators) from a mapping.

    Args:
        spec: Mapping with a ``type`` key plus that type's parameters.
            Omitted primitive parameters fall back to the class defaults.

    Returns:
        The constructed indicator

    Raises:
        ValueError: If the type is unknown or parameters are unknown/missing.
            Out-of-range parameter values raise the indicator's own
            ``InvalidRangeError``/``InvalidRelationError``.
    """
    if not isinstance(spec, dict):
        raise ValueError(f"Indicator spec must be a mapping, got {type(spec).__name__}")

    params = dict(spec)
    indicator_type = params.pop("type", None)
    if indicator_type is None:
        raise ValueError("Indicator spec is missing 'type'")

    key = str(indicator_type).lower()
    if key not in _FACTORY:
        raise ValueError(
            f"Unknown indicator type: '{indicator_type}'. Supported: {sorted(_FACTORY)}"
        )

    _validate_params(key, params)
    indicator = _FACTORY[key](params)
    log.debug("Built %r from type '%s'", indicator, key)
    return indicator


def supported_types() -> list[str]:
    """Return all indicator type names understood by ``create_indicator``."""
    return sorted(_FACTORY)
