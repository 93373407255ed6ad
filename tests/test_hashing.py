import pytest

from curvesearch.curve import FlattenedCurve
from curvesearch.hashing import (
    AMPLIFIED_MODULUS,
    AmplifiedHash,
    HashFunction,
    HashTable,
)


def test_hash_function_shape_and_noise():
    hf = HashFunction(1000, 6)
    assert len(hf.normal_vector) == 6
    assert 0.0 <= hf.noise <= 1.0


def test_hash_function_is_deterministic():
    hf = HashFunction(4, 3)
    query = [1.0, -2.0, 3.5]
    assert hf.hash(query) == hf.hash(list(query))


def test_hash_function_fixed_parameters():
    hf = HashFunction(1, 2)
    hf.normal_vector = [1.0, 0.0]
    hf.noise = 0.25
    assert hf.hash([2.5, 9.0]) == 2
    assert hf.hash([-0.5, 9.0]) == -1


def test_hash_function_dimension_mismatch():
    hf = HashFunction(10, 3)
    with pytest.raises(ValueError):
        hf.hash([1.0])


def test_amplified_hash_range():
    amp = AmplifiedHash(4, 10, 3)
    assert len(amp.functions) == 4
    assert all(0 <= r <= 2**31 - 1 for r in amp.random_vars)
    for k in range(20):
        value = amp.hash([float(k), float(-k), 0.5 * k])
        assert 0 <= value < AMPLIFIED_MODULUS


def test_amplified_hash_combination():
    amp = AmplifiedHash(1, 1, 1)
    amp.functions[0].normal_vector = [1.0]
    amp.functions[0].noise = 0.0
    amp.random_vars = [5]
    assert amp.hash([2.0]) == 10


def test_amplified_hash_negative_component_stays_in_range():
    amp = AmplifiedHash(1, 1, 1)
    amp.functions[0].normal_vector = [1.0]
    amp.functions[0].noise = 0.0
    amp.random_vars = [1]
    assert amp.hash([-1.0]) == AMPLIFIED_MODULUS - 1


def test_hash_table_insert_and_bucket():
    table = HashTable(7, AmplifiedHash(3, 10, 2))
    curve = FlattenedCurve("c", [1.0, 2.0])
    table.insert(curve)
    ident = table.hash(curve)
    assert table.table_size == 7
    assert table.bucket(ident % 7) == [(ident, curve)]
    assert sum(len(table.bucket(i)) for i in range(7)) == 1


def test_hash_table_rejects_empty_size():
    with pytest.raises(ValueError):
        HashTable(0, AmplifiedHash(1, 10, 1))