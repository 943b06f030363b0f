""" Functions that combine two dictionaries. They never modify either input.

:func:`union`, :func:`intersect` and :func:`diff` return a new dictionary, taking values from the *left* dictionary
where both have an entry for a key. :func:`merge` is the general form that folds over the entries of both
dictionaries.
"""

from __future__ import annotations

from typing import Callable, Mapping, Tuple, TypeVar

from nr.stream import NotSet
from typing_extensions import TypeAlias

from dictflow.dictionary import Dictionary, Entry
from dictflow.iterate import entries
from dictflow.utils import is_present

__all__ = [
    "Accumulator",
    "union",
    "intersect",
    "diff",
    "merge",
]

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
R = TypeVar("R")
V = TypeVar("V")

#: Folds one chunk of input into the state and returns the new state.
Accumulator: TypeAlias = Callable[[C, R], R]


def union(left: Mapping[str, V], right: Mapping[str, V]) -> Dictionary[V]:
    """Combine two dictionaries. If there is a collision, preference is given to the *left* dictionary.

    .. code:: Example

        left = from_entries([("a", 1), ("b", 2)])
        right = from_entries([("b", 18), ("c", 9)])
        assert union(left, right) == {"a": 1, "b": 2, "c": 9}
    """

    result: Dictionary[V] = Dictionary()
    for key, value in entries(left):
        result[key] = value
    for key, value in entries(right):
        if key not in result:
            result[key] = value
    return result


def intersect(left: Mapping[str, V], right: Mapping[str, object]) -> Dictionary[V]:
    """Keep the entries of the *left* dictionary for which the *right* dictionary has an entry with the same key."""

    result: Dictionary[V] = Dictionary()
    for key, value in entries(left):
        if is_present(right.get(key, NotSet.Value)):
            result[key] = value
    return result


def diff(left: Mapping[str, V], right: Mapping[str, object]) -> Dictionary[V]:
    """Keep the entries of the *left* dictionary only if the *right* dictionary has no entry for that key."""

    result: Dictionary[V] = Dictionary()
    for key, value in entries(left):
        if not is_present(right.get(key, NotSet.Value)):
            result[key] = value
    return result


def merge(
    accumulate_left: Accumulator[Entry[A], R],
    accumulate_both: Accumulator[Entry[Tuple[A, B]], R],
    accumulate_right: Accumulator[Entry[B], R],
    left: Mapping[str, A],
    right: Mapping[str, B],
    init: R,
) -> R:
    """The most general way of combining two dictionaries. You provide three accumulators for when a given key
    appears:

    * only in the *left* dictionary,
    * in both dictionaries,
    * only in the *right* dictionary.

    The entries of *left* are visited first, in the order of *left*, calling either *accumulate_left* or
    *accumulate_both*. Then the remaining entries of *right* are visited in the order of *right*, calling
    *accumulate_right*. Keys are not sorted. Every accumulator receives the state returned by the previous call,
    starting with *init*, and the final state is returned.

    .. code:: Example

        log = merge(
            lambda entry, log: [*log, f"- {entry[0]}:{entry[1]}"],
            lambda entry, log: [*log, f"= {entry[0]}:{entry[1][0]}->{entry[1][1]}"],
            lambda entry, log: [*log, f"+ {entry[0]}:{entry[1]}"],
            from_entries([("a", 1), ("b", 2)]),
            from_entries([("b", 18), ("c", 9)]),
            [],
        )
        assert log == ["- a:1", "= b:2->18", "+ c:9"]
    """

    state = init
    for key, left_value in entries(left):
        right_value = right.get(key, NotSet.Value)
        if is_present(right_value):
            state = accumulate_both((key, (left_value, right_value)), state)
        else:
            state = accumulate_left((key, left_value), state)

    for key, right_value in entries(right):
        if not is_present(left.get(key, NotSet.Value)):
            state = accumulate_right((key, right_value), state)

    return state
