"""
JSON decode/encode boundary.

Decoding is delegated to the standard json module, with non-standard
constants (NaN, Infinity) and out-of-range floats rejected.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping, Sequence
from typing import IO, Any

from .errors import DecodeError, EncodeError

logger = logging.getLogger(__name__)

JSON_SEPARATORS = (",", ":")


def decode(data: bytes | bytearray | str) -> Any:
    """
    Decode one JSON document.

    Raises:
        DecodeError: If the input is not a valid JSON document
        TypeError: If data is not str, bytes or bytearray
    """
    try:
        return json.loads(
            data, parse_constant=_reject_constant, parse_float=_parse_float
        )
    except (ValueError, RecursionError) as e:
        logger.debug("Failed to decode JSON document: %s", e)
        raise DecodeError(f"invalid JSON document: {e}") from e


def decode_stream(stream: IO[Any]) -> Any:
    """Read a stream to the end and decode its content."""
    try:
        data = stream.read()
    except (OSError, ValueError) as e:
        logger.debug("Failed to read JSON stream: %s", e)
        raise DecodeError(f"failed to read JSON stream: {e}") from e
    return decode(data)


def encode(value: Any, *, path: Any = "$", sort_keys: bool = False) -> bytes:
    """
    Serialize a value to compact UTF-8 JSON.

    Raises:
        EncodeError: If the value holds something JSON cannot represent
    """
    try:
        text = json.dumps(
            value,
            separators=JSON_SEPARATORS,
            ensure_ascii=False,
            allow_nan=False,
            sort_keys=sort_keys,
            default=_to_builtin,
        )
    except (TypeError, ValueError) as e:
        logger.debug("Failed to encode value at %s: %s", path, e)
        raise EncodeError(f"cannot serialize value at {path}: {e}", path=path) from e
    return text.encode("utf-8")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def _parse_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"number {literal} is out of range")
    return value


def _to_builtin(obj: Any) -> Any:
    """Turn non-dict mappings and non-list sequences into json-native types."""
    if isinstance(obj, Mapping):
        return dict(obj)
    if isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray)):
        return list(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
