import copy
import itertools
import math
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from ndvec import Vector, Vec2, Vec3, vector, Settings, UnsupportedOperationError, F64, I32


def test_bin_ops():
    a = vector(1, 2, 3)
    b = vector(4, 5, 6)

    assert a + b == vector(5, 7, 9)
    assert a - b == vector(-3, -3, -3)
    assert a / b == vector(0, 0, 0)
    assert a % b == vector(1, 2, 3)
    # inputs are untouched
    assert a == vector(1, 2, 3)


def test_scalar_ops():
    a = vector(1, 2, 3)

    assert a + 2 == vector(3, 4, 5)
    assert a - 2 == vector(-1, 0, 1)
    assert a / 2 == vector(0, 1, 1)
    assert a % 2 == vector(1, 0, 1)
    assert a * 2 == vector(2, 4, 6)
    assert 2 * a == vector(2, 4, 6)


def test_integer_division_truncates_toward_zero():
    assert vector(-7, 7) / 2 == vector(-3, 3)
    assert vector(-7, 7) % 2 == vector(-1, 1)
    assert vector(7, -7) / vector(-2, -2) == vector(-3, 3)
    assert vector(7, -7) % vector(-2, -2) == vector(1, -1)


def test_integer_remainder_overflow():
    with pytest.raises(OverflowError):
        Vector([-128], "i8") / -1
    with pytest.raises(OverflowError):
        Vector([-128], "i8") % -1


def test_float_remainder_keeps_dividend_sign():
    assert vector(-7.0) % 2.0 == vector(-1.0)
    assert vector(7.0) % -2.0 == vector(1.0)
    assert vector(-5.0) % math.inf == vector(-5.0)
    assert math.isnan((vector(math.inf) % 2.0)[0])


def test_integer_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        vector(1, 2) / vector(1, 0)
    with pytest.raises(ZeroDivisionError):
        vector(1, 2) % 0


def test_float_division_by_zero_is_ieee():
    result = vector(1.0, -1.0, 0.0) / 0.0
    assert result[0] == math.inf
    assert result[1] == -math.inf
    assert math.isnan(result[2])
    assert (vector(1.0) / -0.0)[0] == -math.inf
    assert math.isnan((vector(5.0) % 0.0)[0])


def test_float_vector_accepts_int_scalar():
    assert vector(1.0, 2.0) + 1 == vector(2.0, 3.0)
    assert (vector(1.0, 2.0) * 3).dtype is F64


def test_integer_vector_rejects_float_scalar():
    with pytest.raises(TypeError):
        vector(1, 2) + 1.5


def test_unsupported_operands():
    with pytest.raises(TypeError):
        vector(1, 2) + "a"
    with pytest.raises(TypeError):
        vector(1, 2) * vector(1, 2)
    with pytest.raises(TypeError):
        vector(1, 2) + vector(1.0, 2.0)
    with pytest.raises(ValueError):
        vector(1, 2) + vector(1, 2, 3)


def test_overflow_raises():
    with pytest.raises(OverflowError):
        Vector([127], "i8") + 1
    with pytest.raises(OverflowError):
        Vector([200], "u8") + Vector([100], "u8")
    with pytest.raises(OverflowError):
        Vector([0], "u8") - 1


def test_unary_ops():
    a = vector(1, 2, 3)

    assert -a == vector(-1, -2, -3)
    assert -(-a) == a
    assert -Vector([0, 0], "u8") == Vector([0, 0], "u8")
    with pytest.raises(OverflowError):
        -Vector([1], "u8")


def test_compound_assignment_mutates_in_place():
    a = vector(4, 6, 8)
    alias = a

    a += vector(1, 1, 1)
    assert a == vector(5, 7, 9)
    a -= vector(1, 2, 3)
    assert a == vector(4, 5, 6)
    a /= vector(2, 2, 4)
    assert a == vector(2, 2, 1)
    a %= vector(2, 3, 2)
    assert a == vector(0, 2, 1)
    assert alias is a


def test_compound_assignment_failure_leaves_receiver_unchanged():
    a = Vector([1, 127], "i8")
    with pytest.raises(OverflowError):
        a += Vector([1, 1], "i8")
    assert a == Vector([1, 127], "i8")


def test_compound_assignment_with_scalar_rebinds():
    a = vector(1, 2)
    original = a
    a += 1
    assert a == vector(2, 3)
    assert original == vector(1, 2)


def test_product():
    a = vector(1, 2, 3)
    b = vector(4, 5, 6)

    assert a.dot(b) == 32
    assert a.hadamard_product(b) == vector(4, 10, 18)
    assert a.dot(b) == a.hadamard_product(b).sum()


def test_sum():
    assert vector(1, 2, 3).sum() == 6
    assert Vector([], "i32").sum() == 0
    with pytest.raises(OverflowError):
        Vector([100, 100], "i8").sum()


def test_norms():
    a = vector(1.0, 2.0, 3.0)

    assert a.magnitude_squared() == 14.0
    assert a.magnitude() == math.sqrt(14.0)
    assert a.magnitude_squared() == a.dot(a)


def test_normalize():
    a = vector(3.0, -4.0, 12.0)
    assert a.normalize().magnitude() == pytest.approx(1.0)
    assert a.normalize() == vector(3.0 / 13.0, -4.0 / 13.0, 12.0 / 13.0)


def test_normalize_zero_vector_is_not_finite():
    result = Vector.zero(3).normalize()
    assert all(math.isnan(c) for c in result)


def test_distance():
    a = vector(1.0, 2.0, 3.0)
    b = vector(4.0, 5.0, 6.0)

    assert a.manhattan_distance(b) == 9.0
    assert a.distance(b) == 5.196152422706632
    assert a.distance(b) == (a - b).magnitude()
    assert vector(1, -2).manhattan_distance(vector(-3, 4)) == 10


def test_real_only_operations_on_integers():
    a = vector(3, 4)
    with pytest.raises(UnsupportedOperationError):
        a.magnitude()
    with pytest.raises(UnsupportedOperationError):
        a.normalize()
    with pytest.raises(TypeError):
        a.distance(vector(0, 0))


def test_min_max():
    a = vector(1, 5, 3)
    b = vector(4, 2, 6)

    assert a.min(b) == vector(1, 2, 3)
    assert a.max(b) == vector(4, 5, 6)
    assert a.min_component() == 1
    assert a.max_component() == 5


def test_min_max_require_total_order():
    with pytest.raises(UnsupportedOperationError):
        vector(1.0, 2.0).min(vector(2.0, 1.0))
    with pytest.raises(UnsupportedOperationError):
        vector(1.0, 2.0).max_component()


def test_min_component_of_empty_vector():
    with pytest.raises(ValueError):
        Vector([], "i32").min_component()
    with pytest.raises(ValueError):
        Vector([], "i32").max_component()


def test_sign_operations():
    a = vector(-1, 0, 2)

    assert a.abs() == vector(1, 0, 2)
    assert a.opposite() == vector(1, 0, -2)
    assert a.opposite() == -a
    assert a.signum() == vector(-1, 0, 1)
    assert vector(-2.5, 0.0, 3.0).signum() == vector(-1.0, 0.0, 1.0)
    assert math.isnan(vector(math.nan).signum()[0])


def test_sign_operations_require_signed_type():
    a = Vector([1, 2], "u8")
    for operation in (a.abs, a.opposite, a.signum):
        with pytest.raises(UnsupportedOperationError):
            operation()
    with pytest.raises(UnsupportedOperationError):
        a.manhattan_distance(a)


def test_abs_overflow():
    with pytest.raises(OverflowError):
        Vector([-128], "i8").abs()


def test_from_iter_zero_fills():
    assert Vector.from_iter([1, 2], 4) == vector(1, 2, 0, 0)
    assert Vec3.from_iter([1.0]) == Vec3(1.0, 0.0, 0.0)


def test_from_iter_truncates_without_overconsuming():
    assert Vector.from_iter(itertools.count(), 3) == vector(0, 1, 2)

    items = iter([1, 2, 3, 4, 5])
    assert Vector.from_iter(items, 3) == vector(1, 2, 3)
    assert next(items) == 4


def test_from_iter_needs_dimension():
    with pytest.raises(TypeError):
        Vector.from_iter([1, 2])
    with pytest.raises(ValueError):
        Vec2.from_iter([1, 2], 3)


def test_zero_and_default():
    assert Vector.zero(3) == vector(0.0, 0.0, 0.0)
    assert Vector.zero(2, "i32") == vector(0, 0)
    assert Vector.default(2, "u8") == Vector.zero(2, "u8")
    assert len(Vec2.zero()) == 2
    assert type(Vec3.zero()) is Vec3


def test_accessors():
    a = vector(1, 2)
    assert (a.x, a.y) == (1, 2)
    assert Vec3(1, 2, 3).z == 3
    with pytest.raises(AttributeError):
        a.z
    with pytest.raises(AttributeError):
        vector(1, 2, 3, 4).x
    assert not hasattr(vector(1), "y")


def test_sequence_access():
    a = vector(1, 2, 3)
    assert a.as_slice() == (1, 2, 3)
    assert list(a) == [1, 2, 3]
    assert len(a) == 3
    assert a[1] == 2
    assert a[1:] == (2, 3)


def test_value_semantics():
    source = [1, 2, 3]
    a = Vector(source)
    source.append(4)
    assert len(a) == 3

    b = copy.copy(a)
    b += vector(1, 1, 1)
    assert a == vector(1, 2, 3)
    assert copy.deepcopy(a) == a


def test_operations_keep_subclass():
    assert type(Vec2(1, 2) + Vec2(3, 4)) is Vec2
    assert Vec2(1, 2) == vector(1, 2)


def test_fixed_dimension_subclasses():
    with pytest.raises(ValueError):
        Vec3.from_iter([1, 2, 3, 4], 4)
    assert Vec2(1, 2).as_slice() == (1, 2)


def test_equality_and_hash():
    a = vector(1, 2, 3)
    b = vector(1, 2, 3)

    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert vector(1.0, 2.0) != vector(1.0, 2.0 + 1e-9)
    assert vector(1, 2) != Vector([1, 2], "i64")
    assert vector(1, 2) != vector(1, 2, 3)
    assert vector(1, 2) != (1, 2)
    assert vector(math.nan) != vector(math.nan)


def test_formatting():
    assert str(vector(1, 2, 3)) == "(1, 2, 3)"
    assert str(vector(1.5, -2.0)) == "(1.5, -2.0)"
    assert str(Vector([], "i32")) == "()"
    assert repr(vector(1, 2)) == "Vector([1, 2], dtype='i32')"
    assert repr(Vec2(1, 2)) == "Vec2(1, 2, dtype='i32')"


def test_construction_validation():
    with pytest.raises(TypeError):
        vector(True)
    with pytest.raises(TypeError):
        vector("a")
    with pytest.raises(TypeError):
        Vector([1.5], "i32")
    with pytest.raises(OverflowError):
        Vector([300], "u8")
    with pytest.raises(ValueError):
        Vector([1, 2], "bogus")


def test_type_inference():
    assert vector(1, 2).dtype is I32
    mixed = vector(1, 2.5)
    assert mixed.dtype is F64
    assert mixed.as_slice() == (1.0, 2.5)
    assert Vector([]).dtype is F64


def test_type_inference_follows_settings(monkeypatch):
    monkeypatch.setattr(Settings, "DEFAULT_INTEGER_TYPE", "i64")
    assert vector(1).dtype.name == "i64"
    assert Vector.zero(2, int).dtype.name == "i64"


def test_single_precision_rounding():
    a = Vector([0.1], "f32")
    assert a[0] != 0.1
    assert a[0] == pytest.approx(0.1)
    assert (Vector([3.0e38], "f32") * 10)[0] == math.inf
