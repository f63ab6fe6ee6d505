from .array import ArrayAccessor
from .context import access_context
from .core import (
    array_from_bytes,
    array_from_reader,
    map_from_bytes,
    map_from_reader,
    new_array,
    new_map,
)
from .errors import (
    AccessError,
    DecodeError,
    EncodeError,
    IndexOutOfRangeError,
    KeyNotFoundError,
    TypeMismatchError,
)
from .mapping import MapAccessor
from .path import Path
from .types import Err, Ok, Result
from .values import Kind

__all__ = [
    # Construction
    "map_from_bytes",
    "map_from_reader",
    "array_from_bytes",
    "array_from_reader",
    "new_map",
    "new_array",
    # Accessors
    "MapAccessor",
    "ArrayAccessor",
    "Path",
    "Kind",
    # Results
    "Ok",
    "Err",
    "Result",
    # Errors
    "AccessError",
    "DecodeError",
    "EncodeError",
    "KeyNotFoundError",
    "IndexOutOfRangeError",
    "TypeMismatchError",
    # Configuration
    "access_context",
]
