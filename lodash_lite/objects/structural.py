"""
Recursive structural operations: merge, deep clone, emptiness, deep equality.

**Conceptual**: These helpers recurse over arbitrarily nested data built from
records (Mappings) and sequences (lists/tuples). Every value is classified with
kind_of(); records and sequences are walked, everything else is treated as an
opaque leaf that is copied or compared by reference/value without inspection.

**Why a shared classifier?**
  - merge, clone_deep and is_equal agree on what counts as a record.
  - bool is never confused with int (True is not 1 for equality purposes).
  - Strings are never walked as sequences.
"""

import logging
from collections.abc import MutableMapping, Sized
from typing import Any, TypeVar

import numpy as np

from lodash_lite.core.types import DeepPartial, ValueKind, is_record, kind_of

logger = logging.getLogger(__name__)

T = TypeVar("T")


def merge(target: MutableMapping, *sources: DeepPartial) -> MutableMapping:
    """
    Recursively merge sources into target, left to right.

    **Side effect**: target is mutated in place and also returned.

    **Rules per source key**:
      - Source value is a record: merge it into the nested record on target,
        creating a fresh dict first when target has no record at that key,
        and copying a read-only nested record (e.g. MappingProxyType) into a
        dict before writing to it.
      - Anything else (scalars, lists, tuples, None): overwrite target's value.
        Sequences are replaced wholesale, never concatenated.

    Later sources win on conflicting scalar keys. None sources are skipped.
    Nested records coming from a source are copied into new dicts rather than
    shared with the target.

    Args:
        target: Mutable record to merge into. Anything else (including a
            read-only mapping) is returned as-is.
        *sources: Records merged in order.

    Returns:
        target.

    Example:
        >>> merge({"a": 1}, {"b": 2}, {"a": 3})
        {'a': 3, 'b': 2}
        >>> merge({"a": {"x": 1}}, {"a": {"y": 2}})
        {'a': {'x': 1, 'y': 2}}
    """
    if not isinstance(target, MutableMapping):
        logger.debug("merge target is not a mutable record (%s); left unchanged", type(target).__name__)
        return target

    for source in sources:
        if not is_record(source):
            continue
        for key, value in source.items():
            if is_record(value):
                existing = target.get(key)
                if not is_record(existing):
                    target[key] = {}
                elif not isinstance(existing, MutableMapping):
                    # Read-only nested records are copied, never written into.
                    target[key] = dict(existing)
                merge(target[key], value)
            else:
                target[key] = value

    return target


def clone_deep(value: T) -> T:
    """
    Create a fully independent deep copy of value.

    **Conceptual**: Lists, tuples and records are rebuilt recursively, so
    mutating any nested container of the clone never affects the original.
    Records come back as plain dicts; namedtuples keep their type. All other
    values (numbers, strings, callables, opaque objects) are returned as-is
    and therefore shared.

    **Difference from copy.deepcopy**: opaque objects are not copied, and no
    memo table is kept, so self-referencing structures are not supported.

    Args:
        value: Value to clone.

    Returns:
        Deep copy of value.
    """
    kind = kind_of(value)
    if kind is ValueKind.SEQUENCE:
        items = [clone_deep(item) for item in value]
        if not isinstance(value, tuple):
            return items
        if hasattr(value, "_fields"):
            return type(value)(*items)
        return tuple(items)
    if kind is ValueKind.RECORD:
        return {key: clone_deep(item) for key, item in value.items()}
    return value


def is_empty(value: Any) -> bool:
    """
    Check whether value is empty.

    True for None, for zero-length strings, sequences and records, and for
    other empty sized containers (sets, bytes). False for every other value,
    including 0 and False.

    Example:
        >>> is_empty({}), is_empty([]), is_empty(""), is_empty(None)
        (True, True, True, True)
        >>> is_empty(0), is_empty(False), is_empty({"a": 1})
        (False, False, False)
    """
    kind = kind_of(value)
    if kind is ValueKind.NULL:
        return True
    if kind in (ValueKind.STRING, ValueKind.SEQUENCE, ValueKind.RECORD):
        return len(value) == 0
    if kind is ValueKind.OTHER and isinstance(value, Sized):
        return len(value) == 0
    return False


def is_equal(value: Any, other: Any) -> bool:
    """
    Deep structural comparison of two values.

    **Rules**:
      - Same object: True.
      - Different ValueKind: False ({"a": 1} vs {"a": "1"}, 1 vs True).
      - Sequences: equal length and pairwise deep-equal, order-sensitive.
        A list and a tuple with the same items are equal.
      - Records: same key count, every key present in both, values pairwise
        deep-equal. Key order is irrelevant.
      - Callables: identity only.
      - numpy arrays: numpy.array_equal (same shape and elements).
      - Primitives and other values: ==, or False when == has no single
        truth value.

    Args:
        value: First value.
        other: Second value.

    Returns:
        True if the two values are structurally equal.

    Example:
        >>> is_equal({"a": 1, "b": 2}, {"b": 2, "a": 1})
        True
        >>> is_equal([1, [2, 3]], [1, [2, 3]])
        True
    """
    if value is other:
        return True

    kind = kind_of(value)
    if kind is not kind_of(other):
        return False

    if kind is ValueKind.SEQUENCE:
        if len(value) != len(other):
            return False
        return all(is_equal(left, right) for left, right in zip(value, other))

    if kind is ValueKind.RECORD:
        if len(value) != len(other):
            return False
        return all(key in other and is_equal(item, other[key]) for key, item in value.items())

    if kind is ValueKind.CALLABLE:
        return False

    if isinstance(value, np.ndarray) or isinstance(other, np.ndarray):
        return bool(np.array_equal(value, other))

    try:
        return bool(value == other)
    except (ValueError, TypeError):
        # Elementwise == (e.g. DataFrames) has no single truth value.
        return False
