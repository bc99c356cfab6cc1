"""
Value kinds, shared predicates and type aliases.

**Conceptual**: The recursive helpers (merge, clone_deep, is_equal) need to
answer one question about every value they meet: "is this a record I should
descend into, a sequence I should walk, or an opaque leaf?" Instead of
scattering isinstance() checks through each helper, this module classifies a
value once into a closed set of kinds and exposes small predicates on top of
that classification.

**Kinds**:
  - NULL:     None
  - BOOLEAN:  True / False (checked before NUMBER, since bool subclasses int)
  - NUMBER:   int, float, Decimal, Fraction, complex
  - STRING:   str
  - SEQUENCE: list, tuple
  - RECORD:   any Mapping (dict, OrderedDict, MappingProxyType, ...)
  - CALLABLE: functions, methods, classes, objects defining __call__
  - OTHER:    everything else (sets, bytes, datetimes, custom objects)

The type aliases at the bottom are for static typing convenience only and
carry no runtime behavior.
"""

import numbers
from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, Hashable, Sequence, Union


class ValueKind(Enum):
    """Closed set of value categories understood by the structural helpers."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    SEQUENCE = "sequence"
    RECORD = "record"
    CALLABLE = "callable"
    OTHER = "other"


def kind_of(value: Any) -> ValueKind:
    """
    Classify a value into its ValueKind.

    **Ordering matters**: bool must be tested before numbers.Number because
    True and False are ints in Python. Mappings are tested before callables
    so a callable mapping still counts as a record.

    Args:
        value: Any Python value.

    Returns:
        The ValueKind tag for value.

    Example:
        >>> kind_of(True)
        <ValueKind.BOOLEAN: 'boolean'>
        >>> kind_of({"a": 1})
        <ValueKind.RECORD: 'record'>
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, numbers.Number):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, Mapping):
        return ValueKind.RECORD
    if callable(value):
        return ValueKind.CALLABLE
    return ValueKind.OTHER


def is_record(value: Any) -> bool:
    """Return True if value is a non-null, non-sequence structured record."""
    return kind_of(value) is ValueKind.RECORD


def is_sequence(value: Any) -> bool:
    """Return True if value is an ordered sequence (list or tuple, never str)."""
    return kind_of(value) is ValueKind.SEQUENCE


# Static typing helpers
Primitive = Union[str, int, float, bool, None]

Record = Dict[str, Any]

# A record whose keys are all optional, recursively. Python has no mapped
# types, so this is a plain alias used to document merge() sources.
DeepPartial = Mapping[str, Any]

# Dot-delimited string ("a.b.0") or explicit segments (["a", "b", 0]).
PropertyPath = Union[str, Sequence[Hashable]]
