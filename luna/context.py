"""
Context manager for accessor configuration (integer policy, key sorting).
"""

from contextlib import contextmanager
from contextvars import ContextVar

from .values import INT_MODES

# Context variables for accessor settings
_int_mode: ContextVar[str] = ContextVar("int_mode", default="truncate")
_sort_keys: ContextVar[bool] = ContextVar("sort_keys", default=False)


def get_int_mode() -> str:
    """Return how int() treats fractional numbers: "truncate" or "exact"."""
    return _int_mode.get()


def is_sort_keys() -> bool:
    """Check if bytes() should emit object keys in sorted order."""
    return _sort_keys.get()


@contextmanager
def access_context(*, int_mode: str | None = None, sort_keys: bool | None = None):
    """
    Context manager for accessor configuration.

    Settings left as None keep the value of the enclosing context.

    Args:
        int_mode: "truncate" (default) converts 4.9 to 4 in int() calls.
                  "exact" reports fractional numbers as a type mismatch.
        sort_keys: If True, bytes() serializes object keys in sorted order.

    Example:
        from luna import access_context, map_from_bytes

        doc = map_from_bytes(b'{"ratio": 4.9}')

        doc.int("ratio")  # Ok(4)

        with access_context(int_mode="exact"):
            doc.int("ratio")  # Err(TypeMismatchError)
    """
    if int_mode is not None and int_mode not in INT_MODES:
        raise ValueError(
            f"int_mode must be one of {', '.join(INT_MODES)}, got {int_mode!r}"
        )

    tokens = []
    if int_mode is not None:
        tokens.append((_int_mode, _int_mode.set(int_mode)))
    if sort_keys is not None:
        tokens.append((_sort_keys, _sort_keys.set(bool(sort_keys))))
    try:
        yield
    finally:
        for var, token in reversed(tokens):
            var.reset(token)
