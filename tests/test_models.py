"""
Tests for the Point and Aux record models.
"""

import pytest
from pydantic import ValidationError

from querywire.domain.models import (
    Aux,
    Point,
    all_record_types,
    get_record_type,
)

# ============================================================================
# Safe accessors
# ============================================================================


def test_point_accessors_return_zero_values_when_absent():
    """Test every Point accessor falls back to its type's zero value."""
    point = Point()
    assert point.get_name() == b""
    assert point.get_tags() == b""
    assert point.get_time() == 0
    assert point.get_nil() is False
    assert point.get_aux() == []
    assert point.get_aggregated() == 0
    assert point.get_float_value() == 0.0
    assert point.get_integer_value() == 0
    assert point.get_string_value() == b""
    assert point.get_boolean_value() is False


def test_point_accessors_return_values_when_present():
    """Test accessors return the stored value when set."""
    point = Point(
        name=b"cpu",
        tags=b"host=a",
        time=10,
        nil=False,
        aggregated=3,
        float_value=2.5,
        integer_value=-4,
        string_value=b"up",
        boolean_value=True,
    )
    assert point.get_name() == b"cpu"
    assert point.get_tags() == b"host=a"
    assert point.get_time() == 10
    assert point.get_nil() is False
    assert point.get_aggregated() == 3
    assert point.get_float_value() == 2.5
    assert point.get_integer_value() == -4
    assert point.get_string_value() == b"up"
    assert point.get_boolean_value() is True


def test_aux_accessors():
    """Test Aux accessors for absent and present values."""
    empty = Aux()
    assert empty.get_data_type() == 0
    assert empty.get_float_value() == 0.0
    assert empty.get_integer_value() == 0
    assert empty.get_string_value() == b""
    assert empty.get_boolean_value() is False

    aux = Aux(data_type=3, string_value=b"x", boolean_value=True)
    assert aux.get_data_type() == 3
    assert aux.get_string_value() == b"x"
    assert aux.get_boolean_value() is True


def test_presence_distinct_from_zero():
    """Test a zero value is present while an unset field is None."""
    point = Point(float_value=0.0)
    assert point.float_value is not None
    assert Point().float_value is None


def test_nil_distinct_from_absent_value():
    """Test nil and value presence are independent fields."""
    point = Point(nil=True)
    assert point.nil is True
    assert point.float_value is None
    assert Point(nil=False).float_value is None


def test_is_aggregated():
    """Test the aggregate marker treats 0 and absent as raw."""
    assert Point().is_aggregated() is False
    assert Point(aggregated=0).is_aggregated() is False
    assert Point(aggregated=1).is_aggregated() is True


# ============================================================================
# Required fields
# ============================================================================


def test_point_missing_required():
    """Test missing_required lists absent Point fields in tag order."""
    assert Point().missing_required() == ["Name", "Tags", "Time", "Nil"]
    assert Point(name=b"", tags=b"", nil=False).missing_required() == ["Time"]
    assert Point(name=b"", tags=b"", time=0, nil=False).missing_required() == []


def test_aux_missing_required():
    """Test missing_required on Aux uses qualified names."""
    assert Aux().missing_required() == ["Aux.DataType"]
    assert Aux(data_type=0).missing_required() == []


# ============================================================================
# Field constraints
# ============================================================================


@pytest.mark.parametrize(
    "kwargs",
    [
        {"time": 2**63},
        {"time": -(2**63) - 1},
        {"aggregated": -1},
        {"aggregated": 2**32},
        {"integer_value": 2**63},
    ],
)
def test_point_rejects_out_of_range_integers(kwargs):
    """Test integers outside their wire width are rejected."""
    with pytest.raises(ValidationError):
        Point(**kwargs)


@pytest.mark.parametrize("data_type", [2**31, -(2**31) - 1])
def test_aux_rejects_out_of_range_data_type(data_type):
    """Test DataType is limited to int32."""
    with pytest.raises(ValidationError):
        Aux(data_type=data_type)


def test_unknown_attributes_rejected():
    """Test records do not accept attributes outside the schema."""
    with pytest.raises(ValidationError):
        Point(value=1.0)


def test_assignment_is_validated():
    """Test assignments go through the same validation as construction."""
    point = Point()
    point.aggregated = 5
    assert point.aggregated == 5
    with pytest.raises(ValidationError):
        point.aggregated = -1


# ============================================================================
# Equality
# ============================================================================


def test_equality_compares_floats_by_bits():
    """Test NaN equals NaN and signed zeros differ."""
    nan = float("nan")
    assert Point(float_value=nan) == Point(float_value=nan)
    assert Point(float_value=0.0) != Point(float_value=-0.0)
    assert Point(float_value=None) != Point(float_value=0.0)
    assert Aux(data_type=1, float_value=nan) == Aux(data_type=1, float_value=nan)


def test_equality_includes_aux_order():
    """Test Aux order matters for equality."""
    first = Aux(data_type=1)
    second = Aux(data_type=2)
    assert Point(aux=[first, second]) == Point(aux=[first, second])
    assert Point(aux=[first, second]) != Point(aux=[second, first])


def test_equality_across_types():
    """Test a Point never equals an Aux."""
    assert Point() != Aux()


# ============================================================================
# Registry
# ============================================================================


def test_record_registry():
    """Test record classes are registered by their wire names."""
    assert get_record_type("internal.Point") is Point
    assert get_record_type("internal.Aux") is Aux
    assert set(all_record_types()) == {Point, Aux}


def test_record_registry_unknown_name():
    """Test unknown wire names raise KeyError."""
    with pytest.raises(KeyError):
        get_record_type("internal.Series")
