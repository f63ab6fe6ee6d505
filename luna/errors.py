"""
Error types for luna accessors.

Every error records the path of the last step that resolved successfully.
Errors are created once, at the first failure in a chain, and the same
instance is handed back by every later call on that chain.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class AccessError(Exception):
    """Base class for all luna errors."""

    def __init__(self, message: str, *, path: Any = "$"):
        super().__init__(message)
        self.path = str(path)


class DecodeError(AccessError):
    """The input could not be decoded into the requested document shape."""


class EncodeError(AccessError):
    """The held value could not be serialized back to JSON."""


class KeyNotFoundError(AccessError):
    """A key was requested that the object at `path` does not have."""

    def __init__(self, key: str, *, path: Any, valid_keys: Iterable[str]):
        self.key = key
        self.valid_keys = list(valid_keys)
        listing = ", ".join(f"'{k}'" for k in self.valid_keys) or "(none)"
        super().__init__(
            f"key '{key}' not found at {path}; valid keys: {listing}", path=path
        )


class IndexOutOfRangeError(AccessError):
    """An index was requested outside [0, length) of the array at `path`."""

    def __init__(self, index: int, *, path: Any, length: int):
        self.index = index
        self.length = length
        valid = f"[0, {length - 1}]" if length > 0 else "[] (array is empty)"
        super().__init__(
            f"index {index} out of range at {path}; valid range: {valid}", path=path
        )


class TypeMismatchError(AccessError):
    """A value exists but has a different shape than the one requested."""

    def __init__(
        self,
        *,
        actual: str,
        expected: str,
        path: Any,
        subject: str = "value",
        step: Any = None,
        detail: str | None = None,
    ):
        self.actual = actual
        self.expected = expected
        self.subject = subject
        self.step = step
        message = (
            f"{subject} at {path} was {_with_article(actual)}, "
            f"not {_with_article(expected)}"
        )
        if detail:
            message += f" ({detail})"
        super().__init__(message, path=path)


def _with_article(noun: str) -> str:
    if noun == "null":
        return noun
    article = "an" if noun[:1].lower() in "aeiou" else "a"
    return f"{article} {noun}"
