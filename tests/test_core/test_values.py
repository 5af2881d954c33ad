"""Tests for tuple values and the value classifier."""

from collections import OrderedDict

import pytest

from patmatch.core.errors import ConstructionError, PatternMatchError
from patmatch.core.values import MakeTuple, TupleValue, ValueKind, classify, is_scalar


def test_make_tuple():
    """Test building a tuple value."""
    value = MakeTuple([1, 2, 3], [4, 5, 6])
    assert isinstance(value, TupleValue)
    assert value.components == ([1, 2, 3], [4, 5, 6])
    assert len(value) == 2
    assert list(value) == [[1, 2, 3], [4, 5, 6]]


@pytest.mark.parametrize("components", [(), (1,)])
def test_make_tuple_needs_two_components(components):
    with pytest.raises(ConstructionError):
        MakeTuple(*components)


def test_construction_error_is_pattern_match_error():
    with pytest.raises(PatternMatchError):
        MakeTuple(1)


def test_tuple_value_str():
    assert str(MakeTuple(1, "a")) == "(1, 'a')"


@pytest.mark.parametrize(
    ("value", "kind"),
    [
        (1, ValueKind.NUMBER),
        (2.5, ValueKind.NUMBER),
        ("hi", ValueKind.STRING),
        (True, ValueKind.BOOLEAN),
        (False, ValueKind.BOOLEAN),
        ([1, 2], ValueKind.SEQUENCE),
        ([], ValueKind.SEQUENCE),
        ((1, 2), ValueKind.SEQUENCE),
        ({"a": 1}, ValueKind.RECORD),
        (OrderedDict(a=1), ValueKind.RECORD),
        (None, ValueKind.OTHER),
        (b"bytes", ValueKind.OTHER),
        (object(), ValueKind.OTHER),
    ],
)
def test_classify_kinds(value, kind):
    assert classify(value)[0] is kind


def test_classify_tuple_value_yields_components():
    kind, data = classify(MakeTuple(1, 2, 3))
    assert kind is ValueKind.TUPLE
    assert data == (1, 2, 3)


def test_classify_returns_value_unchanged():
    seq = [1, 2]
    assert classify(seq)[1] is seq


def test_is_scalar():
    assert is_scalar(ValueKind.NUMBER)
    assert is_scalar(ValueKind.BOOLEAN)
    assert not is_scalar(ValueKind.SEQUENCE)
    assert not is_scalar(ValueKind.OTHER)
