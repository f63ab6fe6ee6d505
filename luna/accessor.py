"""
Shared state machine behind MapAccessor and ArrayAccessor.

An accessor is either valid (holds a value and the path to it) or failed
(holds the first error of its chain). A failed accessor answers every call
with that same error and never looks at its value again.
"""

from __future__ import annotations

import builtins
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from .codec import encode
from .context import is_sort_keys
from .errors import AccessError, EncodeError
from .lib.accessor_helpers import coerce_item, validate_model
from .path import Path, PathSegment
from .types import Err, Ok, Result
from .values import Target, zero_value

S = TypeVar("S")
A = TypeVar("A", bound="Accessor")
_ModelT = TypeVar("_ModelT", bound=BaseModel)


class Accessor(Generic[S]):
    """
    Base class for accessors, parameterized by selector type (str or int).

    Subclasses implement `_locate` (key or index validation) and `_segment`
    (the path step for a selector).
    """

    __slots__ = ("_value", "_path", "_error")

    target: ClassVar[Target]

    def __init__(
        self,
        value: Any = None,
        *,
        path: Path | None = None,
        error: AccessError | None = None,
    ):
        self._value = None if error is not None else value
        self._path = path if path is not None else Path.root()
        self._error = error

    @classmethod
    def failed(cls: type[A], error: AccessError, path: Path | None = None) -> A:
        return cls(path=path, error=error)

    @property
    def err(self) -> AccessError | None:
        """The error found up to this point, or None."""
        return self._error

    @property
    def path(self) -> Path:
        return self._path

    def is_ok(self) -> bool:
        return self._error is None

    # -- Subclass hooks ------------------------------------------------------

    def _locate(self, selector: S) -> Ok[Any] | Err[AccessError]:
        raise NotImplementedError

    def _segment(self, selector: S) -> PathSegment:
        raise NotImplementedError

    # -- Core resolution -----------------------------------------------------

    def _get(self, selector: S, target: Target) -> Result[Any]:
        """Validate `selector`, then coerce the item it points at."""
        zero = zero_value(target)
        if self._error is not None:
            return Err(self._error, zero)

        located = self._locate(selector)
        if isinstance(located, Err):
            return Err(located.error, zero)

        coerced = coerce_item(
            located.value, target, path=self._path, step=self._segment(selector)
        )
        if isinstance(coerced, Err):
            return Err(coerced.error, zero)
        return coerced

    def _descend(self, selector: S, child_cls: type[A]) -> A:
        """Navigate into a nested container; failures keep this accessor's path."""
        if self._error is not None:
            return child_cls.failed(self._error, self._path)

        located = self._locate(selector)
        if isinstance(located, Err):
            return child_cls.failed(located.error, self._path)

        step = self._segment(selector)
        coerced = coerce_item(located.value, child_cls.target, path=self._path, step=step)
        if isinstance(coerced, Err):
            return child_cls.failed(coerced.error, self._path)
        return child_cls(coerced.value, path=self._path.append(step))

    def _get_model(self, selector: S, schema: type[_ModelT]) -> Result[_ModelT]:
        if self._error is not None:
            return Err(self._error)

        located = self._locate(selector)
        if isinstance(located, Err):
            return located
        return validate_model(
            located.value, schema, path=self._path, step=self._segment(selector)
        )

    # -- Terminals shared by both shapes -------------------------------------

    def inner(self) -> Result[Any]:
        """The raw container this accessor represents, or a propagated error."""
        if self._error is not None:
            return Err(self._error)
        return Ok(self._value)

    def bytes(self) -> Result[builtins.bytes]:
        """The held value serialized as compact JSON, or a propagated error."""
        if self._error is not None:
            return Err(self._error, b"")
        try:
            return Ok(encode(self._value, path=self._path, sort_keys=is_sort_keys()))
        except EncodeError as e:
            return Err(e, b"")

    def must_inner(self) -> Any:
        return self.inner().unwrap()

    def must_bytes(self) -> builtins.bytes:
        return self.bytes().unwrap()

    def __repr__(self) -> str:
        if self._error is not None:
            return f"{type(self).__name__}(path={str(self._path)!r}, error={self._error!r})"
        return f"{type(self).__name__}(path={str(self._path)!r})"