""" A functional-style API over mutable dictionaries of string keys to values. """

__version__ = "0.1.0"

from dictflow.combine import Accumulator, diff, intersect, merge, union
from dictflow.dictionary import Dictionary, Entry, Updater, empty, from_entries, get, has, remove, set, singleton, update
from dictflow.exceptions import InvalidKeyError
from dictflow.iterate import entries, keys, values
from dictflow.transform import Mapper, Predicate, filter, map, partition
from dictflow.utils import NotSet, is_present

__all__ = [
    "Accumulator",
    "Dictionary",
    "Entry",
    "InvalidKeyError",
    "Mapper",
    "NotSet",
    "Predicate",
    "Updater",
    "diff",
    "empty",
    "entries",
    "filter",
    "from_entries",
    "get",
    "has",
    "intersect",
    "is_present",
    "keys",
    "map",
    "merge",
    "partition",
    "remove",
    "set",
    "singleton",
    "union",
    "update",
    "values",
]
