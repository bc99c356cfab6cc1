"""
Tests for lodash_lite/core/types.py

These tests pin down the value-kind classification that merge, clone_deep and
is_equal all rely on.
"""

from collections import OrderedDict
from decimal import Decimal
from types import MappingProxyType

import pytest

from lodash_lite.core.types import ValueKind, is_record, is_sequence, kind_of


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, ValueKind.NULL),
        (True, ValueKind.BOOLEAN),
        (False, ValueKind.BOOLEAN),
        (0, ValueKind.NUMBER),
        (3.5, ValueKind.NUMBER),
        (Decimal("1.2"), ValueKind.NUMBER),
        ("", ValueKind.STRING),
        ([1, 2], ValueKind.SEQUENCE),
        ((1, 2), ValueKind.SEQUENCE),
        ({}, ValueKind.RECORD),
        (OrderedDict(a=1), ValueKind.RECORD),
        (MappingProxyType({"a": 1}), ValueKind.RECORD),
        (len, ValueKind.CALLABLE),
        (lambda: None, ValueKind.CALLABLE),
        ({1, 2}, ValueKind.OTHER),
        (b"bytes", ValueKind.OTHER),
    ],
)
def test_kind_of_classifies_values(value, expected):
    """Test that each sample value maps to its expected ValueKind."""
    assert kind_of(value) is expected


def test_bool_is_never_a_number():
    """True is an int subclass in Python but must be classified as BOOLEAN."""
    assert kind_of(True) is not kind_of(1)


def test_is_record_excludes_sequences_and_none():
    """Test that only mappings count as records."""
    assert is_record({"a": 1})
    assert not is_record([("a", 1)])
    assert not is_record(None)
    assert not is_record("abc")


def test_is_sequence_excludes_strings():
    """Strings are iterable but must not be walked as sequences."""
    assert is_sequence([])
    assert is_sequence(())
    assert not is_sequence("abc")
    assert not is_sequence({"a": 1})
