"""Contract-checking primitives."""

from typing import TypeVar

T = TypeVar("T")


def check_not_none(value: T | None, message: str) -> T:
    """Return value, or raise ValueError if it is None."""
    if value is None:
        raise ValueError(message)
    return value


def check_not_empty(value: object, message: str) -> str:
    """Return value if it is a non-empty string, otherwise raise ValueError."""
    if not isinstance(value, str) or not value:
        raise ValueError(message)
    return value
