import pytest

from csrgraph.bits import (
    WeightedRandomGenerator,
    compare_float_abs,
    compare_float_relative,
    delete_bit,
    delete_bits,
    multiply_shift_hash32,
    multiply_shift_hash64,
    read_bit,
    write_bit,
    write_bits,
)


@pytest.mark.parametrize("word_bits", [8, 32, 64])
@pytest.mark.parametrize("pos", [0, 5, 7, 8, 31, 63, 100])
def test_write_then_read_bit(word_bits, pos):
    words = [0] * 16
    write_bit(words, pos, word_bits)
    assert read_bit(words, pos, word_bits)
    others = [p for p in range(16 * word_bits) if p != pos]
    assert not any(read_bit(words, p, word_bits) for p in others)


@pytest.mark.parametrize("word_bits", [8, 32])
def test_delete_bit_clears_only_that_bit(word_bits):
    words = [(1 << word_bits) - 1] * 4
    delete_bit(words, 9, word_bits)
    assert not read_bit(words, 9, word_bits)
    assert all(read_bit(words, p, word_bits) for p in range(4 * word_bits) if p != 9)
    assert all(0 <= w < (1 << word_bits) for w in words)


@pytest.mark.parametrize("start,end", [(0, 0), (3, 5), (0, 8), (5, 30), (7, 17)])
def test_write_bits_sets_range(start, end):
    words = [0] * 5
    write_bits(words, start, end, 8)
    for p in range(40):
        assert read_bit(words, p, 8) == (start <= p < end)


@pytest.mark.parametrize("start,end", [(2, 3), (0, 16), (6, 27)])
def test_delete_bits_clears_range(start, end):
    words = [0xFF] * 4
    delete_bits(words, start, end, 8)
    for p in range(32):
        assert read_bit(words, p, 8) == (not start <= p < end)


def test_bit_range_errors():
    with pytest.raises(ValueError):
        write_bits([0, 0], 5, 2, 8)
    with pytest.raises(IndexError):
        write_bit([0], -1, 8)


def test_compare_float_abs():
    assert compare_float_abs(1.0, 1.0 + 0.5e-3, 1e-3)
    assert not compare_float_abs(1.0, 1.0 + 2e-3, 1e-3)


def test_compare_float_relative():
    assert compare_float_relative(0.0, 0.0, 1e-6)
    assert compare_float_relative(1e9, 1e9 + 1.0, 1e-6)
    assert not compare_float_relative(1.0, 2.0, 1e-3)


@pytest.mark.parametrize("bins", [1, 2, 16, 1024])
def test_hash32_in_range(bins):
    for value in range(200):
        assert 0 <= multiply_shift_hash32(2654435761, 12345, bins, value) < bins


@pytest.mark.parametrize("bins", [2, 256, 1 << 20])
def test_hash64_in_range(bins):
    for value in range(200):
        assert 0 <= multiply_shift_hash64(0x9E3779B97F4A7C15, 7, bins, value) < bins


def test_hash_full_width_is_identity():
    for value in (0, 1, 12345, 0xFFFFFFFF):
        assert multiply_shift_hash32(1, 0, 1 << 32, value) == value


def test_hash_rejects_non_power_of_two():
    with pytest.raises(ValueError):
        multiply_shift_hash32(3, 1, 12, 5)
    with pytest.raises(ValueError):
        multiply_shift_hash64(3, 1, 0, 5)


def test_weighted_generator_is_reproducible():
    a = WeightedRandomGenerator([1, 2, 3, 4], seed=42)
    b = WeightedRandomGenerator([1, 2, 3, 4], seed=42)
    assert [a.get() for _ in range(50)] == [b.get() for _ in range(50)]


@pytest.mark.parametrize("weights", [[0, 5, 0], [0.0, 0.0, 2.5], [3, 0]])
def test_weighted_generator_never_picks_zero_weight(weights):
    gen = WeightedRandomGenerator(weights, seed=1)
    picks = {gen.get() for _ in range(300)}
    assert picks == {i for i, w in enumerate(weights) if w > 0}


def test_weighted_generator_covers_all_positive_weights():
    gen = WeightedRandomGenerator([1.5, 2.5, 0.5], seed=3)
    picks = [gen.get() for _ in range(2000)]
    assert set(picks) == {0, 1, 2}
    assert picks.count(1) > picks.count(2)


@pytest.mark.parametrize("weights", [[], [0, 0], [1, -1]])
def test_weighted_generator_rejects_bad_weights(weights):
    with pytest.raises(ValueError):
        WeightedRandomGenerator(weights, seed=0)