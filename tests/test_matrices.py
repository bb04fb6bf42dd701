import math

import pytest

from renderengine.matrices import (
    Matrix,
    frustum,
    identity,
    look_at,
    matrix_comp_mult,
    ortho,
    ortho2d,
    perspective,
    rotate_x,
    rotate_y,
    rotate_z,
    scale,
    translate,
    transpose,
    trs,
)
from renderengine.vectors import Vec2, Vec3, Vec4


def assert_matrix_close(a, b, tol=1e-9):
    assert a.size == b.size
    assert all(math.isclose(x, y, abs_tol=tol) for x, y in zip(a.flat(), b.flat()))


def assert_vec_close(a, b, tol=1e-9):
    assert type(a) is type(b)
    assert all(math.isclose(x, y, abs_tol=tol) for x, y in zip(a, b))


A = Matrix([[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 16]])
B = Matrix([[2, 0, 1, 3], [1, 1, 0, 2], [4, 3, 2, 1], [0, 1, 5, 2]])
C = Matrix([[1, 1, 0, 0], [0, 2, 1, 0], [3, 0, 1, 1], [1, 0, 0, 4]])


def test_identity_is_neutral():
    assert identity() * A == A
    assert A * identity() == A


def test_diagonal_matches_identity():
    assert Matrix.diagonal(4, 1) == identity()
    assert Matrix.diagonal(3, 2)[1, 1] == 2.0
    assert Matrix.diagonal(3, 2)[0, 1] == 0.0


def test_indexing_rows_and_entries():
    assert A[1] == (5.0, 6.0, 7.0, 8.0)
    assert A[2][3] == 12.0
    assert A[3, 0] == 13.0


def test_non_square_rejected():
    with pytest.raises(ValueError):
        Matrix([[1, 2], [3]])
    with pytest.raises(ValueError):
        Matrix([])


def test_add_and_sub_round_trip():
    assert (A + B) - B == A


def test_size_mismatch_raises():
    with pytest.raises(ValueError):
        A + Matrix.diagonal(3)
    with pytest.raises(ValueError):
        A * Matrix.diagonal(2)


def test_scalar_multiplication_commutes_and_division_inverts():
    assert 2 * A == A * 2
    assert (A * 4) / 4 == A


def test_division_by_zero():
    assert A / 2 == A * 0.5
    with pytest.raises(ZeroDivisionError):
        A / 0


def test_bad_operand_type():
    assert A * 1 == A
    with pytest.raises(TypeError):
        A * "x"


def test_product_is_associative():
    assert (A * B) * C == A * (B * C)


def test_transpose_of_product():
    assert transpose(A * B) == transpose(B) * transpose(A)
    assert transpose(transpose(A)) == A


def test_matrix_comp_mult_keeps_diagonal():
    m = Matrix([[1, 2], [3, 4]])
    assert matrix_comp_mult(m, Matrix.diagonal(2, 1)) == Matrix([[1, 0], [0, 4]])


def test_matrix_vector_sizes():
    m2 = Matrix([[1, 2], [3, 4]])
    result = m2 * Vec2(1, 0)
    assert result == Vec2(1, 3)
    with pytest.raises(ValueError):
        m2 * Vec4(1, 0, 0, 1)


def test_translate_moves_points():
    moved = translate(3, -2, 5) * Vec4(1, 1, 1, 1)
    assert moved == Vec4(4, -1, 6, 1)
    assert translate(Vec3(3, -2, 5)) == translate(3, -2, 5)


def test_translate_leaves_directions():
    assert translate(3, -2, 5) * Vec4(1, 1, 1, 0) == Vec4(1, 1, 1, 0)


def test_vec3_promoted_for_4x4():
    assert translate(1, 2, 3) * Vec3(0, 0, 0) == Vec4(1, 2, 3, 1)


def test_scale_forms():
    assert scale(2, 3, 4) * Vec4(1, 1, 1, 1) == Vec4(2, 3, 4, 1)
    assert scale(7) == scale(7, 7, 7)
    assert scale(Vec3(2, 3, 4)) == scale(2, 3, 4)
    with pytest.raises(TypeError):
        translate(1)


def test_flat_is_row_major():
    flat = translate(1, 2, 3).flat()
    assert flat[3] == 1.0
    assert flat[7] == 2.0
    assert flat[11] == 3.0


def test_str_format():
    assert str(Matrix.diagonal(2, 1)) == "\n( 1, 0 )\n( 0, 1 )\n"


@pytest.mark.parametrize("rot", [rotate_x, rotate_y, rotate_z])
@pytest.mark.parametrize("angle", [0, 30, 90, 137.5, -60])
def test_rotation_is_orthogonal(rot, angle):
    m = rot(angle)
    assert_matrix_close(m * transpose(m), identity())
    assert_matrix_close(rot(angle) * rot(-angle), identity())


def test_rotate_x_quarter_turn():
    assert_vec_close(rotate_x(90) * Vec4(0, 1, 0, 1), Vec4(0, 0, 1, 1))


def test_rotation_preserves_length():
    p = Vec4(1, 2, 3, 1)
    r = rotate_y(33) * rotate_z(71) * p
    assert math.isclose(r.x**2 + r.y**2 + r.z**2, 14.0)


def test_trs_without_rotation():
    m = trs(Vec3(1, 2, 3), Vec3(0, 0, 0), Vec3(2, 2, 2))
    assert_matrix_close(m, translate(1, 2, 3) * scale(2))


def test_trs_order():
    pos, rot, sc = Vec3(1, -4, 2), Vec3(10, 20, 30), Vec3(1, 2, 3)
    expected = translate(pos) * rotate_x(10) * rotate_y(20) * rotate_z(30) * scale(sc)
    assert_matrix_close(trs(pos, rot, sc), expected)


def test_ortho_maps_box_to_unit_cube():
    m = ortho(-4, 6, -2, 8, 1, 11)
    assert_vec_close(m * Vec4(-4, -2, -1, 1), Vec4(-1, -1, -1, 1))
    assert_vec_close(m * Vec4(6, 8, -11, 1), Vec4(1, 1, 1, 1))


def test_ortho2d_uses_unit_depth():
    assert ortho2d(0, 10, 0, 20) == ortho(0, 10, 0, 20, -1, 1)


def test_perspective_bottom_rows():
    m = perspective(60, 1.5, 0.1, 1000)
    assert m[3] == (0.0, 0.0, -1.0, 1.0)
    assert math.isclose(m[0, 0] * 1.5, m[1, 1])


def test_frustum_symmetric_has_no_skew():
    m = frustum(-1, 1, -1, 1, 1, 10)
    assert m[0, 2] == 0.0
    assert m[1, 2] == 0.0
    assert m[3, 2] == -1.0


def test_look_at_moves_eye_to_origin():
    eye = Vec4(3, 4, 5, 1)
    at = Vec4(0, 0, 0, 1)
    view = look_at(eye, at, Vec4(0, 1, 0, 1))
    assert_vec_close(view * eye, Vec4(0, 0, 0, 1))
    target = view * at
    assert math.isclose(target.x, 0, abs_tol=1e-9)
    assert math.isclose(target.y, 0, abs_tol=1e-9)
    assert target.z < 0


def test_look_at_rotation_part_is_orthonormal():
    view = look_at(Vec4(1, 2, 9, 1), Vec4(0, 1, 0, 1), Vec4(0, 1, 0, 1))
    rot = Matrix([row[:3] for row in view[:3]])
    assert_matrix_close(rot * transpose(rot), Matrix.diagonal(3, 1))