"""
Construction entry points for luna accessors.
"""

from typing import IO, Any

from .array import ArrayAccessor
from .codec import decode, decode_stream
from .errors import DecodeError
from .lib.accessor_helpers import freeze
from .mapping import MapAccessor
from .values import Kind, describe, kind_of


def map_from_bytes(data: bytes | bytearray | str) -> MapAccessor:
    """
    Create a MapAccessor from a JSON document.

    A malformed document, or one whose top level is not an object, yields an
    accessor that is already failed with a DecodeError.

    Examples:
        doc = map_from_bytes(b'{"people": [{"score": 89.5}]}')
        doc.array("people").map(0).float("score")  # Ok(89.5)
    """
    try:
        return _as_map(decode(data))
    except DecodeError as e:
        return MapAccessor.failed(freeze(e))


def map_from_reader(stream: IO[Any]) -> MapAccessor:
    """Create a MapAccessor from a readable stream holding a JSON document."""
    try:
        return _as_map(decode_stream(stream))
    except DecodeError as e:
        return MapAccessor.failed(freeze(e))


def array_from_bytes(data: bytes | bytearray | str) -> ArrayAccessor:
    """Create an ArrayAccessor from a JSON document whose top level is an array."""
    try:
        return _as_array(decode(data))
    except DecodeError as e:
        return ArrayAccessor.failed(freeze(e))


def array_from_reader(stream: IO[Any]) -> ArrayAccessor:
    """Create an ArrayAccessor from a readable stream holding a JSON array."""
    try:
        return _as_array(decode_stream(stream))
    except DecodeError as e:
        return ArrayAccessor.failed(freeze(e))


def new_map(mapping: Any) -> MapAccessor:
    """
    Wrap an already-built mapping without copying it.

    Raises:
        TypeError: If mapping is not a Mapping
    """
    if kind_of(mapping) is not Kind.OBJECT:
        raise TypeError(f"new_map() expects a mapping, got {type(mapping).__name__}")
    return MapAccessor(mapping)


def new_array(sequence: Any) -> ArrayAccessor:
    """
    Wrap an already-built sequence without copying it.

    Raises:
        TypeError: If sequence is not a list-like Sequence
    """
    if kind_of(sequence) is not Kind.ARRAY:
        raise TypeError(
            f"new_array() expects a sequence, got {type(sequence).__name__}"
        )
    return ArrayAccessor(sequence)


def _as_map(raw: Any) -> MapAccessor:
    if kind_of(raw) is not Kind.OBJECT:
        raise DecodeError(
            f"expected a JSON object at the top level, got {describe(raw)}"
        )
    return MapAccessor(raw)


def _as_array(raw: Any) -> ArrayAccessor:
    if kind_of(raw) is not Kind.ARRAY:
        raise DecodeError(
            f"expected a JSON array at the top level, got {describe(raw)}"
        )
    return ArrayAccessor(raw)
