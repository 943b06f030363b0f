from __future__ import annotations

from typing import Any, TypeVar

from nr.stream import NotSet
from typing_extensions import TypeGuard

from dictflow.exceptions import InvalidKeyError

__all__ = [
    "NotSet",
    "check_key",
    "is_present",
]

T = TypeVar("T")


def is_present(value: T | NotSet) -> TypeGuard[T]:
    """Returns `True` if *value* is anything other than the absence marker :attr:`NotSet.Value`."""

    return value is not NotSet.Value


def check_key(key: Any) -> str:
    if not isinstance(key, str):
        raise InvalidKeyError(key)
    return key
