"""
lodash_lite - a lightweight collection of commonly used data helpers.

Object access/merge/clone, array chunking/dedup/flatten/grouping, string
capitalization, random integers, and debounce/throttle wrappers.

Usage:
    >>> from lodash_lite import get, merge, chunk
    >>> get({"a": {"b": 1}}, "a.b")
    1
"""

from lodash_lite.arrays.transforms import chunk, flatten, group_by, uniq
from lodash_lite.core.types import (
    DeepPartial,
    Primitive,
    PropertyPath,
    Record,
    ValueKind,
    is_record,
    is_sequence,
    kind_of,
)
from lodash_lite.functions.timing import Debounced, Throttled, debounce, throttle
from lodash_lite.objects.access import get, omit, pick
from lodash_lite.objects.structural import clone_deep, is_empty, is_equal, merge
from lodash_lite.utils.numbers import random, set_random_seed
from lodash_lite.utils.strings import capitalize

__version__ = "0.1.0"

__all__ = [
    "get",
    "pick",
    "omit",
    "merge",
    "clone_deep",
    "is_empty",
    "is_equal",
    "chunk",
    "uniq",
    "flatten",
    "group_by",
    "debounce",
    "throttle",
    "Debounced",
    "Throttled",
    "capitalize",
    "random",
    "set_random_seed",
    "ValueKind",
    "kind_of",
    "is_record",
    "is_sequence",
    "Primitive",
    "Record",
    "DeepPartial",
    "PropertyPath",
]
