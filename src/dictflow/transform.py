""" Functions that build a new dictionary from the entries of an existing one. None of them modify their input. """

from __future__ import annotations

from typing import Callable, Mapping, Tuple, TypeVar

from typing_extensions import TypeAlias

from dictflow.dictionary import Dictionary, Entry
from dictflow.iterate import entries
from dictflow.utils import check_key

__all__ = [
    "Mapper",
    "Predicate",
    "map",
    "filter",
    "partition",
]

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

Mapper: TypeAlias = Callable[[T], U]
Predicate: TypeAlias = Callable[[T], bool]


def map(mapper: Mapper[Entry[V], Entry[U]], dictionary: Mapping[str, V]) -> Dictionary[U]:
    """Maps the entries of the dictionary with the given function. The *mapper* receives a `(key, value)` pair and
    returns a new `(key, value)` pair, so it may change keys as well as values. If two entries are mapped to the same
    key, the one that comes later in the dictionary wins.

    .. code:: Example

        before = from_entries([("a", 1), ("b", 2)])
        after = map(lambda entry: (entry[0].upper(), str(entry[1] + 5)), before)
        assert after == {"A": "6", "B": "7"}
    """

    mapped: Dictionary[U] = Dictionary()
    for entry in entries(dictionary):
        new_key, new_value = mapper(entry)
        mapped[check_key(new_key)] = new_value
    return mapped


def filter(predicate: Predicate[Entry[V]], dictionary: Mapping[str, V]) -> Dictionary[V]:
    """Keep the entries of the dictionary that satisfy the *predicate*.

    .. code:: Example

        before = from_entries([("a", -1), ("b", 2)])
        assert filter(lambda entry: entry[1] > 0, before) == {"b": 2}
    """

    filtered: Dictionary[V] = Dictionary()
    for key, value in entries(dictionary):
        if predicate((key, value)):
            filtered[key] = value
    return filtered


def partition(predicate: Predicate[Entry[V]], dictionary: Mapping[str, V]) -> Tuple[Dictionary[V], Dictionary[V]]:
    """Partition the dictionary according to the *predicate* in a single pass. The first dictionary contains all
    entries which satisfy the predicate, and the second contains the rest.

    .. code:: Example

        positive, negative = partition(lambda entry: entry[1] > 0, from_entries([("a", -1), ("b", 2)]))
        assert positive == {"b": 2}
        assert negative == {"a": -1}
    """

    filtered: Dictionary[V] = Dictionary()
    rest: Dictionary[V] = Dictionary()
    for key, value in entries(dictionary):
        if predicate((key, value)):
            filtered[key] = value
        else:
            rest[key] = value
    return filtered, rest
