# streamta/errors.py
"""
Construction-time errors for indicators.

Indicators validate their numeric parameters when they are built and raise
one of the errors below. Nothing is raised from ``update()``, ``current()`` or
``reset()``.

All errors derive from ``ValueError`` so existing ``except ValueError``
handling keeps working.
"""

from dataclasses import dataclass
from numbers import Integral
from typing import Any


@dataclass(frozen=True)
class Parameter:
    """A named parameter value as passed to a constructor."""

    name: str
    value: Any


@dataclass(frozen=True)
class Range:
    """
    Allowed range for a numeric parameter.

    Either bound may be omitted; at least one must be set.
    """

    min: Any = None
    max: Any = None

    def __post_init__(self):
        if self.min is None and self.max is None:
            raise TypeError("Range needs at least one bound")

    def contains(self, value) -> bool:
        if self.min is not None and value < self.min:
            return False
        if self.max is not None and value > self.max:
            return False
        return True

    def describe(self, name: str) -> str:
        if self.max is None:
            return f"{self.min} <= {name}"
        if self.min is None:
            return f"{name} <= {self.max}"
        return f"{self.min} <= {name} <= {self.max}"


class IndicatorError(ValueError):
    """Base class for indicator construction errors."""


class InvalidRangeError(IndicatorError):
    """A parameter lies outside its allowed range."""

    def __init__(self, param: Parameter, range: Range):
        self.param = param
        self.range = range
        kind = "float" if isinstance(param.value, float) else "int"
        super().__init__(
            f"invalid {kind} range: expected to be {range.describe(param.name)}, "
            f"but actually {param.value}."
        )


class InvalidTypeError(IndicatorError):
    """A count-like parameter (period, size) is not a whole number."""

    def __init__(self, param: Parameter, expected: str = "int"):
        self.param = param
        self.expected = expected
        super().__init__(
            f"invalid type: expected {param.name} to be {expected}, "
            f"but actually {param.value!r}."
        )


class InvalidRelationError(IndicatorError):
    """Two parameters violate a required ordering (e.g. short < long)."""

    def __init__(self, operator: str, lhs: Parameter, rhs: Parameter):
        self.operator = operator
        self.lhs = lhs
        self.rhs = rhs
        super().__init__(
            f"invalid relation: expected to be {lhs.name} {operator} {rhs.name}, "
            f"found {lhs.value} {operator} {rhs.value}."
        )


_RELATIONS = {
    "<": lambda a, b: a < b,
    "<=": lambda a, b: a <= b,
    ">": lambda a, b: a > b,
    ">=": lambda a, b: a >= b,
}


def check_range(name: str, value, min=None, max=None) -> None:
    """Raise InvalidRangeError unless ``min <= value <= max``."""
    allowed = Range(min=min, max=max)
    if not allowed.contains(value):
        raise InvalidRangeError(Parameter(name, value), allowed)


def check_relation(lhs: Parameter, operator: str, rhs: Parameter) -> None:
    """Raise InvalidRelationError unless ``lhs <operator> rhs`` holds."""
    if not _RELATIONS[operator](lhs.value, rhs.value):
        raise InvalidRelationError(operator, lhs, rhs)


def check_int_range(name: str, value, min=None, max=None) -> None:
    """
    Raise InvalidTypeError unless ``value`` is an integer, then check its range.

    bool is rejected even though it is an ``int`` subclass.
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidTypeError(Parameter(name, value))
    check_range(name, value, min=min, max=max)
