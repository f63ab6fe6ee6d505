"""
MapAccessor: fail-deferred navigation through a JSON object.
"""

from __future__ import annotations

import builtins
from typing import Any, TypeVar

from pydantic import BaseModel

from . import array as _array
from .accessor import Accessor
from .errors import KeyNotFoundError
from .lib.accessor_helpers import freeze, validate_model
from .path import PathSegment
from .types import Err, Ok, Result
from .values import Target

_ModelT = TypeVar("_ModelT", bound=BaseModel)


class MapAccessor(Accessor[str]):
    """
    Navigate through the content of a JSON object, or propagate any error
    that has occurred earlier in the chain.

    Terminal calls return Ok(value) or Err(error, zero_value); the must_*
    variants return the bare value and raise the error instead.

    Examples:
        doc = map_from_bytes(data)
        doc.array("people").map(0).float("score")    # Ok(89.5)
        doc.array("entries").map(0).float("score")   # Err(KeyNotFoundError)
    """

    __slots__ = ()

    target = Target.OBJECT

    def _locate(self, key: str) -> Ok[Any] | Err[KeyNotFoundError]:
        if not isinstance(key, str):
            raise TypeError(f"Object keys must be str, got {type(key).__name__}")
        if key not in self._value:
            return Err(
                freeze(
                    KeyNotFoundError(
                        key, path=self._path, valid_keys=list(self._value.keys())
                    )
                )
            )
        return Ok(self._value[key])

    def _segment(self, key: str) -> PathSegment:
        return PathSegment.key(key)

    def has(self, key: str) -> Result[builtins.bool]:
        """Whether the object contains `key`; absence is not an error."""
        if self._error is not None:
            return Err(self._error, False)
        return Ok(key in self._value)

    def string(self, key: str) -> Result[str]:
        return self._get(key, Target.STRING)

    def float(self, key: str) -> Result[builtins.float]:
        return self._get(key, Target.FLOAT)

    def int(self, key: str) -> Result[builtins.int]:
        """The number at `key`, truncated toward zero."""
        return self._get(key, Target.INT)

    def bool(self, key: str) -> Result[builtins.bool]:
        return self._get(key, Target.BOOL)

    def map(self, key: str) -> MapAccessor:
        """The object at `key`; errors are propagated."""
        return self._descend(key, MapAccessor)

    def array(self, key: str) -> _array.ArrayAccessor:
        """The array at `key`; errors are propagated."""
        return self._descend(key, _array.ArrayAccessor)

    def model(self, key: str, schema: type[_ModelT]) -> Result[_ModelT]:
        """Validate the item at `key` into a pydantic model."""
        return self._get_model(key, schema)

    def as_model(self, schema: type[_ModelT]) -> Result[_ModelT]:
        """Validate this whole object into a pydantic model."""
        if self._error is not None:
            return Err(self._error)
        return validate_model(self._value, schema, path=self._path, step=None)

    def must_has(self, key: str) -> builtins.bool:
        return self.has(key).unwrap()

    def must_string(self, key: str) -> str:
        return self.string(key).unwrap()

    def must_float(self, key: str) -> builtins.float:
        return self.float(key).unwrap()

    def must_int(self, key: str) -> builtins.int:
        return self.int(key).unwrap()

    def must_bool(self, key: str) -> builtins.bool:
        return self.bool(key).unwrap()

    def must_model(self, key: str, schema: type[_ModelT]) -> _ModelT:
        return self.model(key, schema).unwrap()

    def must_as_model(self, schema: type[_ModelT]) -> _ModelT:
        return self.as_model(schema).unwrap()
