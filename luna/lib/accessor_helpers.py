"""
Helper functions shared by the map and array accessors.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..context import get_int_mode
from ..errors import AccessError, TypeMismatchError
from ..path import Path, PathSegment, PathSegmentType
from ..types import Err, Ok
from ..values import Target, coerce, describe

logger = logging.getLogger(__name__)

_ErrorT = TypeVar("_ErrorT", bound=AccessError)
_ModelT = TypeVar("_ModelT", bound=BaseModel)


def freeze(error: _ErrorT) -> _ErrorT:
    """Record the first failure of a chain; the error is returned unchanged."""
    logger.debug("Accessor chain failed at %s: %s", error.path, error)
    return error


def step_subject(step: PathSegment | None) -> str:
    """Describe the item a step points at, for use in error messages."""
    if step is None:
        return "value"
    if step.type is PathSegmentType.INDEX:
        return f"item at index {step.value}"
    return f"item with key '{step.value}'"


def coerce_item(
    raw: Any, target: Target, *, path: Path, step: PathSegment | None
) -> Ok[Any] | Err[AccessError]:
    """
    Coerce a located item, turning a shape mismatch into a TypeMismatchError.

    `path` is the path of the container holding the item, not of the item.
    """
    result = coerce(raw, target, int_mode=get_int_mode())
    if isinstance(result, Err):
        return Err(
            freeze(
                TypeMismatchError(
                    actual=describe(raw),
                    expected=result.error,
                    path=path,
                    subject=step_subject(step),
                    step=step,
                )
            )
        )
    return result


def validate_model(
    raw: Any, schema: type[_ModelT], *, path: Path, step: PathSegment | None
) -> Ok[_ModelT] | Err[AccessError]:
    """Validate a raw item into a pydantic model."""
    try:
        return Ok(schema.model_validate(raw))
    except ValidationError as e:
        error = TypeMismatchError(
            actual=describe(raw),
            expected=schema.__name__,
            path=path,
            subject=step_subject(step),
            step=step,
            detail=_summarize(e),
        )
        error.__cause__ = e
        return Err(freeze(error))


def _summarize(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    count = exc.error_count()
    noun = "error" if count == 1 else "errors"
    return f"{count} validation {noun}; first at {location}: {first['msg']}"
