""" This module provides the :class:`Dictionary` type, a mapping of unique string keys to values, and the functions
to construct, modify and query it.

The mutating functions :func:`set`, :func:`update` and :func:`remove` modify the dictionary that is passed to them
in place and return that same object. After calling one of them, only the returned reference should be used going
forward.

.. code:: Example

    import dictflow as Dictionary

    v0 = Dictionary.from_entries([("a", 1), ("b", 2)])
    v1 = Dictionary.set("b", 15, v0)
    assert v1 == {"a": 1, "b": 15}
    assert v1 is v0
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Mapping, Tuple, TypeVar, Union

from nr.stream import NotSet
from typing_extensions import TypeAlias

from dictflow.util.repr import SafeRepr
from dictflow.utils import check_key, is_present

__all__ = [
    "Dictionary",
    "Entry",
    "Updater",
    "empty",
    "singleton",
    "from_entries",
    "set",
    "update",
    "remove",
    "has",
    "get",
]

T = TypeVar("T")
V = TypeVar("V")

#: A `(key, value)` pair of a dictionary.
Entry: TypeAlias = Tuple[str, V]

#: Receives the current value of an entry (or :attr:`NotSet.Value` if there is none) and returns its new value,
#: or :attr:`NotSet.Value` to remove the entry.
Updater: TypeAlias = Callable[[Union[V, NotSet]], Union[V, NotSet]]


class Dictionary(SafeRepr, Dict[str, V]):
    """Dictionary of string keys and values. A `Dictionary[User]` lets you look up a `User` by a `str` key (such as
    a user name).

    A key that maps to :attr:`NotSet.Value` is treated as if it was not in the dictionary at all by every function
    in this library. The builtin `len()`, `==` and `in` still count such an entry."""

    def __safe_repr__(self) -> str:
        return f"{type(self).__name__}({dict.__repr__(self)})"


def empty() -> Dictionary[V]:
    """Creates an empty dictionary.

    .. code:: Example

        v0: Dictionary[int] = empty()
        v1 = set("Jack", 1, v0)
        assert v1 == {"Jack": 1}
    """

    return Dictionary()


def singleton(key: str, value: V) -> Dictionary[V]:
    """Create a dictionary with one entry of the given *key*, *value* pair.

    .. code:: Example

        assert singleton("Zoe", 15) == {"Zoe": 15}
    """

    result: Dictionary[V] = Dictionary()
    result[check_key(key)] = value
    return result


def from_entries(entries: Iterable[Entry[V]]) -> Dictionary[V]:
    """Create a dictionary from an iterable of `(key, value)` pairs. The iterable is consumed exactly once. If a key
    occurs more than once, the last value wins.

    .. code:: Example

        assert from_entries([("Zoe", 17), ("Sandro", 18)]) == {"Zoe": 17, "Sandro": 18}
        assert from_entries(users_by_name.items()) == users_by_name
    """

    result: Dictionary[V] = Dictionary()
    for key, value in entries:
        result[check_key(key)] = value
    return result


def set(key: str, value: V, dictionary: Dictionary[V]) -> Dictionary[V]:
    """Insert an entry under *key* with the given *value*, replacing the value of the entry if there was one. Returns
    *dictionary*, modified in place."""

    dictionary[check_key(key)] = value
    return dictionary


def update(key: str, updater: Updater[V], dictionary: Dictionary[V]) -> Dictionary[V]:
    """Updates the entry for *key* with the provided *updater* function.

    The *updater* receives the current value, or :attr:`NotSet.Value` if there is no entry for *key*. If it returns
    :attr:`NotSet.Value`, the entry is removed from the dictionary, otherwise the entry is set to the returned value.
    This covers insertion, modification and deletion in a single operation. Returns *dictionary*, modified in place.

    .. code:: Example

        def inc(v: int | NotSet) -> int:
            return 0 if v is NotSet.Value else v + 1

        v0 = from_entries([("a", 1), ("b", 2)])
        v1 = update("c", inc, v0)                        # {"a": 1, "b": 2, "c": 0}
        v2 = update("b", inc, v1)                        # {"a": 1, "b": 3, "c": 0}
        v3 = update("b", lambda _: NotSet.Value, v2)     # {"a": 1, "c": 0}
    """

    value = updater(dictionary.get(check_key(key), NotSet.Value))
    if value is NotSet.Value:
        dictionary.pop(key, None)
    else:
        dictionary[key] = value
    return dictionary


def remove(key: str, dictionary: Dictionary[V]) -> Dictionary[V]:
    """Remove the entry for *key* from the dictionary. If there is no such entry, no changes are made. Returns
    *dictionary*, modified in place."""

    dictionary.pop(check_key(key), None)
    return dictionary


def has(key: str, dictionary: Mapping[str, V]) -> bool:
    """Returns `True` if there is an entry for *key* in the dictionary. A key that maps to :attr:`NotSet.Value`
    counts as missing."""

    return is_present(dictionary.get(check_key(key), NotSet.Value))


def get(key: str, dictionary: Mapping[str, V], fallback: T) -> V | T:
    """Returns the value for *key* in the dictionary, or *fallback* if there is no entry for *key*. Pass
    :attr:`NotSet.Value` as *fallback* to tell a missing entry apart from any stored value.

    .. code:: Example

        animals = from_entries([("Tom", "Cat"), ("Jerry", "Mouse")])
        assert get("Tom", animals, "") == "Cat"
        assert get("Spike", animals, "") == ""
    """

    value = dictionary.get(check_key(key), NotSet.Value)
    if is_present(value):
        return value
    return fallback
