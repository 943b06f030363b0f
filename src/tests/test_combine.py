from __future__ import annotations

from typing import Any

import pytest

from dictflow.combine import diff, intersect, merge, union
from dictflow.dictionary import Dictionary, empty, from_entries, get
from dictflow.iterate import keys
from dictflow.utils import NotSet

SAMPLES = [
    ({}, {}),
    ({"a": 1}, {}),
    ({}, {"a": 1}),
    ({"a": 1, "b": 2}, {"b": 18, "c": 9}),
    ({"x": 1, "y": 2, "z": 3}, {"z": 30, "y": 20, "x": 10}),
    ({"a": 1, "b": NotSet.Value}, {"b": 2, "c": NotSet.Value}),
]


def _log_merge(left: Any, right: Any) -> list[str]:
    return merge(
        lambda entry, log: [*log, f"- {entry[0]}:{entry[1]}"],
        lambda entry, log: [*log, f"= {entry[0]}:{entry[1][0]}->{entry[1][1]}"],
        lambda entry, log: [*log, f"+ {entry[0]}:{entry[1]}"],
        left,
        right,
        [],
    )


def test__union(left: Dictionary[int], right: Dictionary[int]) -> None:
    result = union(left, right)
    assert result == {"a": 1, "b": 2, "c": 9}
    assert list(result) == ["a", "b", "c"]
    assert left == {"a": 1, "b": 2}
    assert right == {"b": 18, "c": 9}


def test__intersect(left: Dictionary[int], right: Dictionary[int]) -> None:
    assert intersect(left, right) == {"b": 2}
    assert left == {"a": 1, "b": 2}


def test__diff(left: Dictionary[int], right: Dictionary[int]) -> None:
    assert diff(left, right) == {"a": 1}
    assert right == {"b": 18, "c": 9}


def test__combinators__return_new_dictionaries(left: Dictionary[int]) -> None:
    for result in (union(left, empty()), intersect(left, left), diff(left, empty())):
        assert isinstance(result, Dictionary)
        assert result == left
        assert result is not left


def test__combinators__ignore_stored_absence_marker() -> None:
    left = from_entries([("a", 1), ("b", NotSet.Value)])
    right = from_entries([("a", NotSet.Value), ("b", 2)])

    assert union(left, right) == {"a": 1, "b": 2}
    assert intersect(left, right) == {}
    assert diff(left, right) == {"a": 1}


@pytest.mark.parametrize("left,right", SAMPLES)
def test__union__is_left_biased(left: dict[str, Any], right: dict[str, Any]) -> None:
    result = union(left, right)
    for key in keys(left):
        assert get(key, result, NotSet.Value) == left[key]
    assert set(keys(result)) == set(keys(left)) | set(keys(right))


@pytest.mark.parametrize("left,right", SAMPLES)
def test__intersect_and_diff__partition_left_keys(left: dict[str, Any], right: dict[str, Any]) -> None:
    both = set(intersect(left, right))
    only_left = set(diff(left, right))
    assert both.isdisjoint(only_left)
    assert both | only_left == set(keys(left))


def test__merge(left: Dictionary[int], right: Dictionary[int]) -> None:
    assert _log_merge(left, right) == ["- a:1", "= b:2->18", "+ c:9"]


def test__merge__visits_left_before_remaining_right_keys() -> None:
    left = from_entries([("z", 1), ("m", 2), ("a", 3)])
    right = from_entries([("y", 10), ("a", 30), ("b", 20), ("z", 40)])
    assert _log_merge(left, right) == ["= z:1->40", "- m:2", "= a:3->30", "+ y:10", "+ b:20"]


@pytest.mark.parametrize("left,right", SAMPLES)
def test__merge__visits_every_key_exactly_once(left: dict[str, Any], right: dict[str, Any]) -> None:
    def visit(entry: Any, state: list[str]) -> list[str]:
        return [*state, entry[0]]

    visited = merge(visit, visit, visit, left, right, [])
    assert sorted(visited) == sorted(set(keys(left)) | set(keys(right)))


def test__merge__threads_state_through_accumulators(left: Dictionary[int], right: Dictionary[int]) -> None:
    total = merge(
        lambda entry, acc: acc + entry[1],
        lambda entry, acc: acc + entry[1][0] * entry[1][1],
        lambda entry, acc: acc - entry[1],
        left,
        right,
        100,
    )
    assert total == 100 + 1 + 2 * 18 - 9


def test__merge__returns_init_for_empty_inputs() -> None:
    sentinel = object()
    assert merge(None, None, None, empty(), empty(), sentinel) is sentinel  # type: ignore[arg-type]


def test__merge__propagates_accumulator_exceptions(left: Dictionary[int], right: Dictionary[int]) -> None:
    def fail(entry: Any, state: Any) -> Any:
        raise RuntimeError(entry[0])

    with pytest.raises(RuntimeError, match="c"):
        merge(lambda e, s: s, lambda e, s: s, fail, left, right, None)
