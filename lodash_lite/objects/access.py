"""
Safe property access and key selection for records.

**Conceptual**: Nested configuration blobs and API payloads are routinely
missing intermediate keys. These helpers let callers read or reshape such data
without a cascade of `if key in d` checks and without try/except KeyError
around every lookup.

**Error policy**: Nothing here raises for missing data. get() falls back to a
caller-supplied default; pick() and omit() silently ignore keys that are not
present on the source.
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable

from lodash_lite.core.types import PropertyPath

# Distinguishes "key absent" from "key present with value None".
_MISSING = object()


def _to_segments(path: PropertyPath) -> list:
    """Split a dot-delimited path string, or copy an explicit segment list."""
    if isinstance(path, str):
        return path.split(".")
    return list(path)


def _step(container: Any, key: Any) -> Any:
    """
    Resolve a single path segment against container.

    Returns _MISSING when the segment cannot be resolved.
    """
    if isinstance(container, Mapping):
        try:
            return container[key]
        except (KeyError, TypeError):
            return _MISSING

    if isinstance(container, (list, tuple, str)):
        if isinstance(key, bool):
            return _MISSING
        if isinstance(key, int):
            index = key
        # int() accepts decimal digits only; "²" is a digit but not a decimal.
        elif isinstance(key, str) and key.isdecimal():
            index = int(key)
        else:
            return _MISSING
        if 0 <= index < len(container):
            return container[index]
        return _MISSING

    if isinstance(key, str):
        return getattr(container, key, _MISSING)

    return _MISSING


def get(obj: Any, path: PropertyPath, default: Any = None) -> Any:
    """
    Safely read the value at path inside a nested structure.

    **Conceptual**: Walks the structure one segment at a time. As soon as an
    intermediate value is None, or a segment cannot be resolved, the walk
    stops and default is returned. A value that is present but None at the
    final segment is returned as None; only a missing value triggers default.

    **Segment resolution**:
      - Mapping: key lookup.
      - list / tuple / str: an int segment or a decimal-digit string segment is
        used as a non-negative index.
      - Any other object: attribute lookup for string segments.

    **Known limitation**: the string form splits on every ".", so a key that
    itself contains a dot cannot be addressed that way. Pass the path as a
    list of segments instead: get(data, ["a.b", "c"]).

    Args:
        obj: Root object to read from (may be None).
        path: Dot-delimited string ("a.b.0") or sequence of segments.
        default: Value returned when the path cannot be resolved.

    Returns:
        The resolved value, or default.

    Example:
        >>> get({"a": {"b": 1}}, "a.b")
        1
        >>> get({"a": {"b": 1}}, "a.c", 99)
        99
        >>> get({"roles": ["admin", "user"]}, "roles.1")
        'user'
    """
    result = obj
    for key in _to_segments(path):
        if result is None:
            return default
        result = _step(result, key)
        if result is _MISSING:
            return default
    return result


def pick(obj: Mapping, keys: Iterable) -> Dict:
    """
    Create a new dict containing only the listed keys present on obj.

    Presence is a membership check, so a key mapped to None is still picked.
    Values are shared by reference (shallow copy).

    Args:
        obj: Source record (None yields an empty dict).
        keys: Keys to keep; keys absent from obj are ignored.

    Returns:
        New dict with the selected key/value pairs, in the order of keys.

    Example:
        >>> pick({"a": 1, "b": 2, "c": 3}, ["a", "c", "z"])
        {'a': 1, 'c': 3}
    """
    if obj is None:
        return {}
    return {key: obj[key] for key in keys if key in obj}


def omit(obj: Mapping, keys: Iterable) -> Dict:
    """
    Create a shallow copy of obj without the listed keys.

    Args:
        obj: Source record (None yields an empty dict).
        keys: Keys to drop; keys absent from obj are ignored.

    Returns:
        New dict with every other key/value pair of obj, values by reference.

    Example:
        >>> omit({"a": 1, "b": 2}, ["b"])
        {'a': 1}
    """
    if obj is None:
        return {}
    result = dict(obj)
    for key in keys:
        result.pop(key, None)
    return result
