import math

import pytest

from curvesearch.vectors import (
    add_vectors,
    dot_product,
    mod,
    normal,
    uniform_int,
    uniform_real,
    vectors_are_equal,
)


def test_add_vectors_sums_elementwise():
    assert add_vectors([1.0, 2.0], [3.0, 4.0]) == [4.0, 6.0]


def test_add_vectors_with_zero_vector_is_identity():
    assert add_vectors([1.5, -2.5, 7.0], [0.0, 0.0, 0.0]) == [1.5, -2.5, 7.0]


def test_add_vectors_size_mismatch_raises():
    with pytest.raises(ValueError):
        add_vectors([1.0], [1.0, 2.0])


def test_vectors_are_equal_within_tolerance():
    assert vectors_are_equal([1.0, 2.0], [1.0 + 1e-6, 2.0 - 1e-6]) is True


def test_vectors_are_equal_outside_tolerance():
    assert vectors_are_equal([1.0, 2.0], [1.0 + 1e-3, 2.0]) is False


def test_vectors_are_equal_size_mismatch_raises():
    with pytest.raises(ValueError):
        vectors_are_equal([1.0, 2.0], [1.0])


def test_dot_product_with_unit_vector_selects_component():
    assert dot_product([4.0, 5.0, 6.0], [0.0, 1.0, 0.0]) == 5.0


def test_dot_product_is_symmetric():
    a = [1.5, -2.0, 3.25]
    b = [0.5, 4.0, -1.0]
    assert dot_product(a, b) == dot_product(b, a)


def test_dot_product_size_mismatch_raises():
    with pytest.raises(ValueError):
        dot_product([1.0, 2.0, 3.0], [1.0, 2.0])


def test_mod_of_negative_is_non_negative():
    assert mod(-1, 5) == 4


@pytest.mark.parametrize("a", [0, 1, 3, 6])
def test_mod_of_small_non_negative_is_itself(a):
    assert mod(a, 7) == a


def test_uniform_int_stays_in_closed_range():
    values = {uniform_int(2, 4) for _ in range(300)}
    assert values <= {2, 3, 4}
    assert uniform_int(3, 3) == 3


def test_uniform_real_stays_in_range():
    for _ in range(300):
        value = uniform_real(1.0, 2.0)
        assert 1.0 <= value <= 2.0


def test_normal_samples_are_centred():
    samples = [normal() for _ in range(4000)]
    assert all(math.isfinite(s) for s in samples)
    assert abs(sum(samples) / len(samples)) < 0.2