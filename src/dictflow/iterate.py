""" Lazy enumeration of the entries, keys and values of a dictionary. Each call returns a fresh generator over the
current state of the dictionary; entries that hold :attr:`NotSet.Value` are skipped.

Adding or removing keys while a generator is running makes it raise :class:`RuntimeError`. A value replaced in place
is seen by a running generator.
"""

from __future__ import annotations

from typing import Iterator, Mapping, TypeVar

from dictflow.dictionary import Entry
from dictflow.utils import is_present

__all__ = [
    "entries",
    "keys",
    "values",
]

V = TypeVar("V")


def entries(dictionary: Mapping[str, V]) -> Iterator[Entry[V]]:
    """Returns an iterator over the `(key, value)` pairs of the dictionary.

    .. code:: Example

        for key, value in entries(singleton("Car", {"color": "blue"})):
            ...
    """

    for key, value in dictionary.items():
        if is_present(value):
            yield key, value


def keys(dictionary: Mapping[str, V]) -> Iterator[str]:
    """Returns an iterator over the keys of the dictionary."""

    for key, value in dictionary.items():
        if is_present(value):
            yield key


def values(dictionary: Mapping[str, V]) -> Iterator[V]:
    """Returns an iterator over the values of the dictionary."""

    for value in dictionary.values():
        if is_present(value):
            yield value
