import math

import pytest

from kinetica.matrices import (
    Matrix3,
    Matrix4,
    look_at_rh,
    perspective_fov_rh,
    rotate,
    rotate_matrix,
    scale,
    translate,
    transpose,
    yaw_pitch_roll,
)
from kinetica.vectors import Vector3, Vector4, cross


def flat(m):
    return [value for row in m for value in row]


def approx_matrix(m):
    return pytest.approx(flat(m), abs=1e-9)


def approx_vec(v):
    return pytest.approx(list(v), abs=1e-9)


SAMPLE = Matrix3(2.0, 1.0, 0.5, -1.0, 3.0, 0.25, 0.0, 1.5, 4.0)


def test_identity_transform_leaves_vector():
    v = Vector3(1.5, -2.0, 3.0)
    assert Matrix3().transform(v) == v
    assert Matrix4().transform(v) == v


def test_diagonal_constructor():
    m = Matrix3(5.0)
    assert flat(m) == [5.0, 0.0, 0.0, 0.0, 5.0, 0.0, 0.0, 0.0, 5.0]


def test_nine_coefficient_layout():
    m = Matrix3(1, 2, 3, 4, 5, 6, 7, 8, 9)
    assert m[0][0] == 1 and m[1][0] == 2 and m[2][0] == 3
    assert m[0][1] == 4 and m[1][1] == 5 and m[2][1] == 6
    assert m[0][2] == 7 and m[1][2] == 8 and m[2][2] == 9


def test_bad_coefficient_count():
    with pytest.raises(TypeError):
        Matrix3(1.0, 2.0)


def test_inverse_round_trip():
    product = SAMPLE @ SAMPLE.inverse()
    assert flat(product) == approx_matrix(Matrix3())


def test_singular_inverse_gives_identity():
    assert Matrix3(0.0).inverse() == Matrix3()


def test_set_inverse_singular_leaves_unchanged():
    m = SAMPLE.copy()
    m.set_inverse(Matrix3(0.0))
    assert m == SAMPLE


def test_transpose_twice_is_original():
    assert transpose(transpose(SAMPLE)) == SAMPLE
    assert transpose(SAMPLE)[0][1] == SAMPLE[1][0]


def test_transform_transpose_matches_transpose():
    v = Vector3(0.3, -1.2, 2.5)
    assert list(SAMPLE.transform_transpose(v)) == approx_vec(transpose(SAMPLE).transform(v))


def test_matmul_composes_transforms():
    other = Matrix3(1.0, 0.0, 2.0, 0.5, 1.0, 0.0, -1.0, 0.0, 3.0)
    v = Vector3(1.0, 2.0, -0.5)
    expected = other.transform(SAMPLE.transform(v))
    assert list((SAMPLE @ other) @ v) == approx_vec(expected)


def test_in_place_matmul_applies_other_first():
    other = Matrix3(1.0, 0.0, 2.0, 0.5, 1.0, 0.0, -1.0, 0.0, 3.0)
    m = SAMPLE.copy()
    m @= other
    assert flat(m) == approx_matrix(other @ SAMPLE)


def test_scalar_and_addition():
    m = SAMPLE * 2.0
    assert flat(m) == approx_matrix(SAMPLE + SAMPLE)
    assert SAMPLE == Matrix3(2.0, 1.0, 0.5, -1.0, 3.0, 0.25, 0.0, 1.5, 4.0)


def test_skew_symmetric_equals_cross_product():
    a = Vector3(1.0, -2.0, 0.5)
    v = Vector3(3.0, 0.25, -1.0)
    m = Matrix3()
    m.set_skew_symmetric(a)
    assert list(m.transform(v)) == approx_vec(cross(a, v))


def test_set_components_axes():
    one, two, three = Vector3(1, 2, 3), Vector3(4, 5, 6), Vector3(7, 8, 9)
    m = Matrix3()
    m.set_components(one, two, three)
    assert m.transform(Vector3(1, 0, 0)) == one
    assert m.transform(Vector3(0, 0, 1)) == three
    one.x = 100
    assert m[0][0] == 1


def test_inertia_tensor_coeffs_symmetric():
    m = Matrix3()
    m.set_inertia_tensor_coeffs(1.0, 2.0, 3.0, 0.5, 0.25, 0.125)
    assert m == transpose(m)
    assert m[1][0] == -0.5
    assert m[2][1] == -0.125


def test_set_diagonal():
    m = SAMPLE.copy()
    m.set_diagonal(4.0, 5.0, 6.0)
    assert flat(m) == [4.0, 0.0, 0.0, 0.0, 5.0, 0.0, 0.0, 0.0, 6.0]


def test_block_inertia_tensor_cube():
    m = Matrix3()
    m.set_block_inertia_tensor(Vector3(1.0, 1.0, 1.0), 1.0)
    assert m[0][0] == pytest.approx(0.6)
    assert m[0][0] == pytest.approx(m[1][1]) == pytest.approx(m[2][2])
    assert m[0][1] == 0


def test_linear_interpolate_endpoints_and_midpoint():
    a = SAMPLE
    b = Matrix3(3.0)
    assert flat(Matrix3.linear_interpolate(a, b, 0.0)) == approx_matrix(a)
    assert flat(Matrix3.linear_interpolate(a, b, 1.0)) == approx_matrix(b)
    mid = Matrix3.linear_interpolate(a, b, 0.5)
    assert flat(mid) == approx_matrix((a + b) * 0.5)


def test_copy_is_independent():
    m = SAMPLE.copy()
    m[0][0] = 99.0
    assert SAMPLE[0][0] == 2.0


def test_translate_and_inverse_round_trip():
    offset = Vector3(1.0, -2.0, 3.0)
    m = translate(offset)
    p = Vector3(0.5, 0.5, 0.5)
    moved = m.transform(p)
    assert list(moved) == approx_vec(p + offset)
    assert list(m.transform_inverse(moved)) == approx_vec(p)
    assert m.transform_direction(p) == p


def test_scale_matrix():
    m = scale(Vector3(2.0, 3.0, 4.0))
    assert m.transform(Vector3(1.0, 1.0, 1.0)) == Vector3(2.0, 3.0, 4.0)
    assert m[3] == Vector4(0.0, 0.0, 0.0, 1.0)


def test_rotation_preserves_length_and_axis():
    axis = Vector3(1.0, 2.0, -1.0)
    m = rotate(0.7, axis)
    v = Vector3(0.3, -4.0, 2.0)
    rotated = m.transform(v)
    assert rotated.magnitude() == pytest.approx(v.magnitude())
    assert list(m.transform(axis)) == approx_vec(axis)


def test_rotation_inverse_direction_round_trip():
    m = rotate(1.1, Vector3(0.0, 1.0, 1.0))
    v = Vector3(2.0, -1.0, 0.5)
    assert list(m.transform_inverse_direction(m.transform_direction(v))) == approx_vec(v)


def test_rotate_matrix_of_identity_matches_rotate():
    axis = Vector3(0.0, 0.0, 1.0)
    assert flat(rotate_matrix(Matrix4(), 0.4, axis)) == approx_matrix(rotate(0.4, axis))


def test_yaw_pitch_roll_zero_is_identity():
    assert flat(yaw_pitch_roll(0.0, 0.0, 0.0)) == approx_matrix(Matrix4())


def test_yaw_pitch_roll_is_orthonormal():
    m = yaw_pitch_roll(0.3, -0.8, 1.2)
    product = m @ transpose(m)
    assert flat(product) == approx_matrix(Matrix4())


def test_look_at_maps_eye_to_origin_and_center_forward():
    eye = Vector3(1.0, 2.0, 5.0)
    center = Vector3(1.0, 2.0, 0.0)
    m = look_at_rh(eye, center, Vector3(0.0, 1.0, 0.0))
    assert list(m.transform(eye)) == approx_vec(Vector3())
    seen = m.transform(center)
    assert seen.x == pytest.approx(0.0, abs=1e-9)
    assert seen.y == pytest.approx(0.0, abs=1e-9)
    assert seen.z == pytest.approx(-5.0)


def test_perspective_structure():
    m = perspective_fov_rh(math.pi / 2, 800.0, 400.0, 1.0, 100.0)
    assert m[2][3] == -1.0
    assert m[3][3] == 0.0
    assert m[0][0] == pytest.approx(m[1][1] * 400.0 / 800.0)
    near = m @ Vector4(0.0, 0.0, -1.0, 1.0)
    assert near.z / near.w == pytest.approx(-1.0)


def test_matrix4_scalar_and_axis_vector():
    m = translate(Vector3(1.0, 2.0, 3.0)) * 2.0
    assert m.axis_vector(3) == Vector3(2.0, 4.0, 6.0)
    assert m[0][0] == 2.0


def test_matrix4_product_composes():
    a = rotate(0.5, Vector3(1.0, 0.0, 0.0))
    b = translate(Vector3(0.0, 1.0, 0.0))
    v = Vector3(1.0, 1.0, 1.0)
    assert list((a @ b) @ v) == approx_vec(b.transform(a.transform(v)))