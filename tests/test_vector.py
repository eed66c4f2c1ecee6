import io
import math

import pytest

from kgtmath.vector import MAX_DIM, Vector


def test_zeros_has_requested_length_and_zero_values():
    v = Vector.zeros(4)
    assert len(v) == 4
    assert list(v) == [0.0, 0.0, 0.0, 0.0]


def test_zeros_rejects_too_large_dimension():
    with pytest.raises(ValueError):
        Vector.zeros(MAX_DIM)


def test_zeros_rejects_negative_dimension():
    with pytest.raises(ValueError):
        Vector.zeros(-1)


def test_values_converted_to_float():
    v = Vector([1, 2, 3])
    assert all(isinstance(x, float) for x in v)
    assert list(v) == [1.0, 2.0, 3.0]


def test_copy_is_independent():
    v = Vector([1.0, 2.0])
    c = v.copy()
    c[0] = 9.0
    assert v[0] == 1.0
    assert c[0] == 9.0


def test_resized_truncates():
    v = Vector([1.0, 2.0, 3.0])
    assert v.resized(2) == Vector([1.0, 2.0])


def test_resized_pads_with_zeros():
    v = Vector([1.0, 2.0])
    assert v.resized(4) == Vector([1.0, 2.0, 0.0, 0.0])


def test_setitem_and_getitem_roundtrip():
    v = Vector.zeros(3)
    v[1] = 4.5
    assert v[1] == 4.5


def test_index_out_of_range_raises():
    v = Vector.zeros(2)
    with pytest.raises(IndexError):
        v[2]
    with pytest.raises(IndexError):
        v[5] = 1.0
    assert list(v) == [0.0, 0.0]


def test_str_format():
    assert str(Vector([1.0, 2.5])) == "[ 1.00000, 2.50000]"


def test_str_of_empty_vector():
    assert str(Vector([])) == "[]"


def test_write_matches_str():
    v = Vector([0.25, -3.0])
    buf = io.StringIO()
    v.write(buf)
    assert buf.getvalue() == str(v)


def test_repr_names_class_and_values():
    v = Vector([1.5, -2.0])
    text = repr(v)
    assert text.startswith("Vector(")
    assert "1.5" in text
    assert "-2.0" in text


def test_apply_uses_function():
    v = Vector([1.0, 4.0, 9.0])
    assert v.apply(math.sqrt) == Vector([1.0, 2.0, 3.0])


def test_add_then_subtract_restores():
    a = Vector([1.0, 2.0, 3.0])
    b = Vector([4.0, -5.0, 6.0])
    assert (a + b) - b == a


def test_multiply_then_divide_restores():
    a = Vector([1.0, 2.0, 3.0])
    b = Vector([2.0, 4.0, 8.0])
    assert (a * b) / b == a


def test_scalar_multiply_equals_self_add():
    a = Vector([1.0, -2.0, 3.5])
    assert a * 2 == a + a


def test_scalar_add_then_subtract_restores():
    a = Vector([1.0, -2.0, 3.5])
    assert (a + 3) - 3 == a


def test_scalar_divide_inverts_multiply():
    a = Vector([1.0, -2.0, 3.5])
    assert (a * 4) / 4 == a


def test_divide_by_zero_gives_ieee_values():
    v = Vector([1.0, -1.0, 0.0]) / 0.0
    assert v[0] == math.inf
    assert v[1] == -math.inf
    assert math.isnan(v[2])


def test_mismatched_dimensions_raise():
    with pytest.raises(ValueError):
        Vector([1.0, 2.0]) + Vector([1.0])
    with pytest.raises(ValueError):
        Vector([1.0, 2.0]).dot(Vector([1.0]))


def test_dot_with_basis_selects_component():
    v = Vector([3.0, -7.0, 11.0])
    for i in range(3):
        basis = Vector.zeros(3)
        basis[i] = 1.0
        assert v.dot(basis) == v[i]


def test_dot_is_symmetric():
    a = Vector([1.0, 2.0, 3.0])
    b = Vector([-4.0, 0.5, 2.0])
    assert a.dot(b) == b.dot(a)


def test_equality_and_inequality():
    assert Vector([1.0, 2.0]) == Vector([1.0, 2.0])
    assert Vector([1.0, 2.0]) != Vector([1.0, 3.0])
    assert Vector([1.0]) != Vector([1.0, 0.0])


def test_lexicographic_ordering():
    assert Vector([1.0, 3.0]) > Vector([1.0, 2.0, 9.0])
    assert Vector([1.0, 2.0]) < Vector([1.0, 2.0, 0.0])
    assert not (Vector([1.0, 2.0]) > Vector([1.0, 2.0]))


def test_ge_and_le_include_equality():
    a = Vector([1.0, 2.0])
    assert a >= a.copy()
    assert a <= a.copy()
    assert Vector([2.0]) >= Vector([1.0, 5.0])
    assert not (Vector([2.0]) <= Vector([1.0, 5.0]))


def test_nan_elements_are_skipped_in_ordering():
    a = Vector([math.nan, 2.0])
    b = Vector([math.nan, 1.0])
    assert a > b
    assert b < a