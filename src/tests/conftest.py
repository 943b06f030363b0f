import pytest

from dictflow.dictionary import Dictionary, from_entries


@pytest.fixture
def left() -> Dictionary[int]:
    return from_entries([("a", 1), ("b", 2)])


@pytest.fixture
def right() -> Dictionary[int]:
    return from_entries([("b", 18), ("c", 9)])
