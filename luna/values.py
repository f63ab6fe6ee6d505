"""
Value model for decoded JSON trees.

Trees are kept as the plain Python values produced by the json module
(None, bool, int/float, str, list, dict). Kind tags them as a closed variant
so that every shape check in luna goes through one exhaustive match.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from .types import Err, Ok


class Kind(Enum):
    """The six shapes a JSON value can take."""

    NULL = "null"
    BOOL = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


class Target(Enum):
    """Shapes an accessor can be asked to produce."""

    STRING = "string"
    FLOAT = "float"
    INT = "int"
    BOOL = "bool"
    OBJECT = "object"
    ARRAY = "array"


INT_MODES = ("truncate", "exact")


def kind_of(raw: Any) -> Kind | None:
    """Classify a raw value, or return None if it is not a JSON shape."""
    match raw:
        case None:
            return Kind.NULL
        case bool():
            return Kind.BOOL
        case int() | float():
            return Kind.NUMBER
        case str():
            return Kind.STRING
        case bytes() | bytearray() | memoryview():
            return None
        case Mapping():
            return Kind.OBJECT
        case Sequence():
            return Kind.ARRAY
        case _:
            return None


def describe(raw: Any) -> str:
    """Shape name used in error messages."""
    kind = kind_of(raw)
    if kind is None:
        return type(raw).__name__
    return kind.value


def coerce(raw: Any, target: Target, int_mode: str = "truncate") -> Ok[Any] | Err[str]:
    """
    Convert a raw value to the requested target shape.

    Returns:
        Ok(converted) on success
        Err(expected_shape_name) if the value has the wrong shape

    Integers are produced by truncating toward zero unless int_mode is
    "exact", in which case fractional numbers are rejected.
    """
    kind = kind_of(raw)

    match target:
        case Target.STRING:
            if kind is Kind.STRING:
                return Ok(raw)
            return Err(Kind.STRING.value)
        case Target.BOOL:
            if kind is Kind.BOOL:
                return Ok(raw)
            return Err(Kind.BOOL.value)
        case Target.FLOAT:
            if kind is not Kind.NUMBER:
                return Err(Kind.NUMBER.value)
            try:
                return Ok(float(raw))
            except OverflowError:
                return Err("finite number")
        case Target.INT:
            return _coerce_int(raw, kind, int_mode)
        case Target.OBJECT:
            if kind is Kind.OBJECT:
                return Ok(raw)
            return Err(Kind.OBJECT.value)
        case Target.ARRAY:
            if kind is Kind.ARRAY:
                return Ok(raw)
            return Err(Kind.ARRAY.value)

    raise ValueError(f"Unknown coercion target: {target!r}")


def _coerce_int(raw: Any, kind: Kind | None, int_mode: str) -> Ok[int] | Err[str]:
    exact = int_mode == "exact"
    expected = "integer" if exact else Kind.NUMBER.value

    if kind is not Kind.NUMBER:
        return Err(expected)
    if isinstance(raw, int):
        return Ok(raw)
    if not math.isfinite(raw):
        return Err("finite number")
    if exact and not raw.is_integer():
        return Err(expected)
    return Ok(math.trunc(raw))


def zero_value(target: Target) -> Any:
    """The value returned alongside an error for each target."""
    return _ZERO_VALUES[target]


_ZERO_VALUES: dict[Target, Any] = {
    Target.STRING: "",
    Target.FLOAT: 0.0,
    Target.INT: 0,
    Target.BOOL: False,
    Target.OBJECT: None,
    Target.ARRAY: None,
}
