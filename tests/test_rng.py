import math

import pytest

from kinetica.rng import Random, rotl, rotr
from kinetica.vectors import Vector3


def test_rotl_simple_and_wraps():
    assert rotl(1, 1) == 2
    assert rotl(0x80000000, 1) == 1


def test_rotr_undoes_rotl():
    for n in (0, 1, 0xDEADBEEF, 0xFFFFFFFF, 123456789):
        for r in (1, 9, 13, 31):
            assert rotr(rotl(n, r), r) == n
            assert rotl(rotr(n, r), r) == n


def test_rotation_stays_in_32_bits():
    assert 0 <= rotl(0xFFFFFFFF, 13) <= 0xFFFFFFFF
    assert rotl(0xFFFFFFFF, 13) == 0xFFFFFFFF


def test_same_seed_same_stream():
    a = Random(42)
    b = Random(42)
    assert [a.random_bits() for _ in range(50)] == [b.random_bits() for _ in range(50)]


def test_different_seeds_differ():
    a = Random(1)
    b = Random(2)
    assert [a.random_bits() for _ in range(10)] != [b.random_bits() for _ in range(10)]


def test_reseed_restarts_stream():
    rng = Random(7)
    first = [rng.random_bits() for _ in range(40)]
    rng.seed(7)
    assert [rng.random_bits() for _ in range(40)] == first


def test_bits_are_32_bit_words():
    rng = Random(99)
    assert all(0 <= rng.random_bits() <= 0xFFFFFFFF for _ in range(200))


def test_random_real_unit_interval_and_quantized():
    rng = Random(5)
    for _ in range(500):
        value = rng.random_real()
        assert 0.0 <= value < 1.0
        assert (value * 2**23).is_integer()


def test_random_real_range():
    rng = Random(11)
    values = [rng.random_real(-3.0, 2.0) for _ in range(500)]
    assert all(-3.0 <= v < 2.0 for v in values)


def test_random_real_consistent_with_scaled():
    a = Random(13)
    b = Random(13)
    assert a.random_scaled(4.0) == pytest.approx(b.random_real() * 4.0)


def test_random_int_below_maximum():
    rng = Random(17)
    values = [rng.random_int(6) for _ in range(300)]
    assert all(0 <= v < 6 for v in values)
    assert set(values) == set(range(6))


def test_random_int_matches_bits_modulo():
    a = Random(21)
    b = Random(21)
    assert a.random_int(1000) == b.random_bits() % 1000


def test_random_int_rejects_non_positive():
    with pytest.raises(ValueError):
        Random(3).random_int(0)


def test_binomial_bounds():
    rng = Random(23)
    values = [rng.random_binomial(2.5) for _ in range(500)]
    assert all(-2.5 < v < 2.5 for v in values)


def test_random_vector_scalar_and_vector_scale():
    rng = Random(29)
    v = rng.random_vector(1.5)
    assert all(abs(c) < 1.5 for c in v)
    w = rng.random_vector(Vector3(0.0, 1.0, 0.0))
    assert w.x == 0.0 and w.z == 0.0
    assert abs(w.y) < 1.0


def test_random_vector_between_bounds():
    rng = Random(31)
    low = Vector3(-1.0, 0.0, 5.0)
    high = Vector3(1.0, 2.0, 6.0)
    for _ in range(100):
        v = rng.random_vector_between(low, high)
        assert low.x <= v.x < high.x
        assert low.y <= v.y < high.y
        assert low.z <= v.z < high.z


def test_random_xz_vector_has_zero_y():
    rng = Random(37)
    for _ in range(50):
        v = rng.random_xz_vector(3.0)
        assert v.y == 0.0
        assert abs(v.x) < 3.0 and abs(v.z) < 3.0


def test_random_quaternion_is_unit():
    rng = Random(41)
    for _ in range(50):
        q = rng.random_quaternion()
        assert math.sqrt(sum(c * c for c in q)) == pytest.approx(1.0)


def test_zero_seed_still_produces_valid_stream():
    rng = Random()
    value = rng.random_real()
    assert 0.0 <= value < 1.0