import math

import pytest

from renderengine.vectors import Vec2, Vec3, Vec4, cross, dot, length, normalize


@pytest.mark.parametrize(
    "a,b",
    [
        (Vec2(1.5, -2.0), Vec2(3.0, 4.0)),
        (Vec3(1.0, 2.0, 3.0), Vec3(-4.0, 0.5, 2.0)),
        (Vec4(1.0, 2.0, 3.0, 4.0), Vec4(0.5, -1.0, 2.0, 8.0)),
    ],
)
def test_add_then_sub_round_trip(a, b):
    assert (a + b) - b == a


@pytest.mark.parametrize("v", [Vec2(1.0, 2.0), Vec3(1.0, -2.0, 4.0), Vec4(2.0, 4.0, 8.0, 16.0)])
def test_scalar_mul_div_round_trip(v):
    assert (v * 4) / 4 == v
    assert 4 * v == v * 4


@pytest.mark.parametrize("v", [Vec2(1.0, 2.0), Vec3(1.0, -2.0, 4.0), Vec4(2.0, 4.0, 8.0, 16.0)])
def test_double_negation(v):
    assert -(-v) == v
    assert v + (-v) == type(v)()


def test_indexing_and_iteration_follow_fields():
    v = Vec4(1.0, 2.0, 3.0, 4.0)
    assert list(v) == [v.x, v.y, v.z, v.w]
    assert v[0] == v.x and v[3] == v.w
    with pytest.raises(IndexError):
        v[4]


def test_str_format():
    assert str(Vec3(1, 2.5, -3)) == "( 1, 2.5, -3 )"
    assert str(Vec2(0, 1)) == "( 0, 1 )"


def test_scalar_operand_acts_as_splat():
    v = Vec3(1.0, 2.0, 3.0)
    assert v + 1 == v + Vec3.splat(1)
    assert v - 2 == v - Vec3.splat(2)


def test_vec3_component_wise_multiplication():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(4.0, 5.0, 6.0)
    r = a * b
    assert (r.x, r.y, r.z) == (a.x * b.x, a.y * b.y, a.z * b.z)


def test_vec4_component_multiplication_scales_w_by_z():
    a = Vec4(1.0, 2.0, 3.0, 4.0)
    b = Vec4(1.0, 1.0, 5.0, 1.0)
    r = a * b
    assert r.w == a.w * b.z


def test_vec4_plus_vec3_promotes_with_w_one():
    a = Vec4(1.0, 2.0, 3.0, 0.0)
    r = a + Vec3(1.0, 1.0, 1.0)
    assert r.w == 1.0
    assert r.xyz() == Vec3(2.0, 3.0, 4.0)


def test_vec3_plus_vec4_is_type_error():
    with pytest.raises(TypeError):
        Vec3(1.0, 2.0, 3.0) + Vec4(1.0, 2.0, 3.0, 4.0)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec3(1.0, 2.0, 3.0) / 0


def test_constructors():
    assert Vec3.splat(2.0) == Vec3(2.0, 2.0, 2.0)
    assert Vec3.from_vec2(Vec2(1.0, 2.0), 3.0) == Vec3(1.0, 2.0, 3.0)
    assert Vec4.from_vec3(Vec3(1.0, 2.0, 3.0)).w == 1.0
    assert Vec4.from_vec3(Vec3(1.0, 2.0, 3.0), 0.0) == Vec4(1.0, 2.0, 3.0, 0.0)


def test_cross_of_unit_axes():
    assert cross(Vec3(1, 0, 0), Vec3(0, 1, 0)) == Vec3(0, 0, 1)


def test_cross_is_orthogonal_and_anticommutative():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-2.0, 0.5, 4.0)
    c = cross(a, b)
    assert dot(c, a) == pytest.approx(0.0)
    assert dot(c, b) == pytest.approx(0.0)
    assert cross(b, a) == -c


def test_cross_accepts_vec4():
    a = Vec4(1.0, 2.0, 3.0, 7.0)
    b = Vec4(-2.0, 0.5, 4.0, 9.0)
    assert cross(a, b) == cross(a.xyz(), b.xyz())


def test_cross_rejects_vec2():
    with pytest.raises(TypeError):
        cross(Vec2(1.0, 0.0), Vec3(0.0, 1.0, 0.0))


def test_normalize_gives_unit_length():
    for v in (Vec2(3.0, 4.0), Vec3(1.0, -2.0, 2.0)):
        assert length(normalize(v)) == pytest.approx(1.0)


def test_normalize_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        normalize(Vec3())


def test_length_is_sqrt_of_dot():
    v = Vec3(2.0, 3.0, 6.0)
    assert length(v) == pytest.approx(math.sqrt(dot(v, v)))


def test_vec4_dot_sums_w_terms():
    u = Vec4(0.0, 0.0, 0.0, 2.0)
    v = Vec4(0.0, 0.0, 0.0, 3.0)
    assert dot(u, v) == u.w + v.w


def test_dot_of_mismatched_sizes_raises():
    with pytest.raises(TypeError):
        dot(Vec3(1.0, 2.0, 3.0), Vec2(1.0, 2.0))