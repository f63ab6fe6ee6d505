"""
Result type returned by luna's terminal accessor calls.

Provides a minimal Ok/Err pair. Both unpack as a (value, error) tuple:

    score, err = doc.array("people").map(0).float("score")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVar, Union

from .errors import AccessError

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    @property
    def error(self) -> None:
        return None

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value

    def __iter__(self) -> Iterator[Any]:
        yield self.value
        yield None


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """
    Error result containing an error value.

    `value` holds the zero value of the requested type, so callers that
    unpack a result always receive something of the expected shape.
    """

    error: E
    value: Any = None

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """Raise the carried error."""
        if isinstance(self.error, BaseException):
            raise self.error.with_traceback(None) from self.error.__cause__
        raise RuntimeError(f"unwrap() called on Err({self.error!r})")

    def unwrap_or(self, default: Any) -> Any:
        return default

    def __iter__(self) -> Iterator[Any]:
        yield self.value
        yield self.error


Result = Union[Ok[T], Err[AccessError]]
