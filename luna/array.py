"""
ArrayAccessor: fail-deferred navigation through a JSON array.
"""

from __future__ import annotations

import builtins
from typing import Any, TypeVar

from pydantic import BaseModel

from . import mapping as _mapping
from .accessor import Accessor
from .errors import IndexOutOfRangeError
from .lib.accessor_helpers import freeze
from .path import PathSegment
from .types import Err, Ok, Result
from .values import Target

_ModelT = TypeVar("_ModelT", bound=BaseModel)


class ArrayAccessor(Accessor[int]):
    """
    Navigate through the content of a JSON array, or propagate any error
    that has occurred earlier in the chain.

    Indices are validated against [0, len) before any type check; negative
    indices are out of range.
    """

    __slots__ = ()

    target = Target.ARRAY

    def _locate(self, idx: int) -> Ok[Any] | Err[IndexOutOfRangeError]:
        if isinstance(idx, builtins.bool) or not isinstance(idx, builtins.int):
            raise TypeError(f"Array indices must be int, got {type(idx).__name__}")
        length = len(self._value)
        if idx < 0 or idx >= length:
            return Err(freeze(IndexOutOfRangeError(idx, path=self._path, length=length)))
        return Ok(self._value[idx])

    def _segment(self, idx: int) -> PathSegment:
        return PathSegment.index(idx)

    def len(self) -> Result[builtins.int]:
        """The length of the array, or a propagated error."""
        if self._error is not None:
            return Err(self._error, 0)
        return Ok(len(self._value))

    def string(self, idx: int) -> Result[str]:
        return self._get(idx, Target.STRING)

    def float(self, idx: int) -> Result[builtins.float]:
        return self._get(idx, Target.FLOAT)

    def int(self, idx: int) -> Result[builtins.int]:
        """The number at `idx`, truncated toward zero."""
        return self._get(idx, Target.INT)

    def bool(self, idx: int) -> Result[builtins.bool]:
        return self._get(idx, Target.BOOL)

    def map(self, idx: int) -> _mapping.MapAccessor:
        """The object at `idx`; errors are propagated."""
        return self._descend(idx, _mapping.MapAccessor)

    def array(self, idx: int) -> ArrayAccessor:
        """The array at `idx`; errors are propagated."""
        return self._descend(idx, ArrayAccessor)

    def maps(self) -> Result[list[_mapping.MapAccessor]]:
        """
        One MapAccessor per element.

        Elements that are not objects produce failed accessors, so a single
        malformed entry does not hide the others.
        """
        if self._error is not None:
            return Err(self._error, [])
        return Ok([self.map(idx) for idx in range(len(self._value))])

    def model(self, idx: int, schema: type[_ModelT]) -> Result[_ModelT]:
        """Validate the item at `idx` into a pydantic model."""
        return self._get_model(idx, schema)

    def must_len(self) -> builtins.int:
        return self.len().unwrap()

    def must_string(self, idx: int) -> str:
        return self.string(idx).unwrap()

    def must_float(self, idx: int) -> builtins.float:
        return self.float(idx).unwrap()

    def must_int(self, idx: int) -> builtins.int:
        return self.int(idx).unwrap()

    def must_bool(self, idx: int) -> builtins.bool:
        return self.bool(idx).unwrap()

    def must_maps(self) -> list[_mapping.MapAccessor]:
        return self.maps().unwrap()

    def must_model(self, idx: int, schema: type[_ModelT]) -> _ModelT:
        return self.model(idx, schema).unwrap()
