"""Bit arrays packed into integer words, float comparison, hashing and weighted sampling."""

from __future__ import annotations

import bisect
import random
from collections.abc import MutableSequence, Sequence
from numbers import Integral

from csrgraph.numeric import is_power2, log2

__all__ = [
    "read_bit",
    "write_bit",
    "write_bits",
    "delete_bit",
    "delete_bits",
    "compare_float_abs",
    "compare_float_relative",
    "multiply_shift_hash32",
    "multiply_shift_hash64",
    "WeightedRandomGenerator",
]

_FLOAT32_MAX = 3.4028234663852886e38


def _check_word_bits(word_bits: int) -> int:
    if word_bits <= 0:
        raise ValueError("word_bits must be positive")
    return (1 << word_bits) - 1


def _check_pos(pos: int) -> None:
    if pos < 0:
        raise IndexError("bit position must be non-negative")


def read_bit(words: Sequence[int], pos: int, word_bits: int = 64) -> bool:
    """Return the bit at ``pos`` of a bit array stored in ``words``."""
    _check_word_bits(word_bits)
    _check_pos(pos)
    word, bit = divmod(pos, word_bits)
    return bool(words[word] & (1 << bit))


def write_bit(words: MutableSequence[int], pos: int, word_bits: int = 64) -> None:
    """Set the bit at ``pos``."""
    _check_word_bits(word_bits)
    _check_pos(pos)
    word, bit = divmod(pos, word_bits)
    words[word] |= 1 << bit


def delete_bit(words: MutableSequence[int], pos: int, word_bits: int = 64) -> None:
    """Clear the bit at ``pos``."""
    mask = _check_word_bits(word_bits)
    _check_pos(pos)
    word, bit = divmod(pos, word_bits)
    words[word] &= mask & ~(1 << bit)


def _range_masks(start: int, end: int, word_bits: int):
    """Yield ``(word_index, mask)`` covering the bits in ``[start, end)``."""
    full = _check_word_bits(word_bits)
    _check_pos(start)
    if end < start:
        raise ValueError("end must not be smaller than start")
    pos = start
    while pos < end:
        word, bit = divmod(pos, word_bits)
        stop = min(end, (word + 1) * word_bits)
        width = stop - pos
        yield word, ((1 << width) - 1) << bit & full
        pos = stop


def write_bits(
    words: MutableSequence[int], start: int, end: int, word_bits: int = 64
) -> None:
    """Set every bit in the half-open range ``[start, end)``."""
    for word, mask in _range_masks(start, end, word_bits):
        words[word] |= mask


def delete_bits(
    words: MutableSequence[int], start: int, end: int, word_bits: int = 64
) -> None:
    """Clear every bit in the half-open range ``[start, end)``."""
    full = (1 << word_bits) - 1 if word_bits > 0 else 0
    for word, mask in _range_masks(start, end, word_bits):
        words[word] &= full & ~mask


def compare_float_abs(a: float, b: float, epsilon: float) -> bool:
    """True if ``a`` and ``b`` differ by less than ``epsilon``."""
    return abs(a - b) < epsilon


def compare_float_relative(a: float, b: float, epsilon: float) -> bool:
    """True if ``a`` and ``b`` are close in absolute or relative terms."""
    diff = abs(a - b)
    if diff < epsilon:
        return True
    return diff / min(abs(a) + abs(b), _FLOAT32_MAX) < epsilon


def _multiply_shift(a: int, b: int, bins: int, value: int, width: int) -> int:
    if bins <= 0 or not is_power2(bins):
        raise ValueError("bins must be a power of 2")
    log_bins = log2(bins)
    if log_bins > width:
        raise ValueError(f"bins must not exceed 2**{width}")
    hashed = (a * value + b) & ((1 << width) - 1)
    return hashed >> (width - log_bins)


def multiply_shift_hash32(a: int, b: int, bins: int, value: int) -> int:
    """Multiply-shift hash of a 32-bit value into ``bins`` buckets."""
    return _multiply_shift(a, b, bins, value, 32)


def multiply_shift_hash64(a: int, b: int, bins: int, value: int) -> int:
    """Multiply-shift hash of a 64-bit value into ``bins`` buckets."""
    return _multiply_shift(a, b, bins, value, 64)


class WeightedRandomGenerator:
    """Draw indices with probability proportional to their weights."""

    def __init__(self, weights: Sequence[float], seed=None) -> None:
        weights = list(weights)
        if not weights:
            raise ValueError("weights must not be empty")
        if any(w < 0 for w in weights):
            raise ValueError("weights must be non-negative")
        self._integral = all(isinstance(w, Integral) for w in weights)
        self._cumulative = [0]
        for weight in weights:
            self._cumulative.append(self._cumulative[-1] + weight)
        self._total = self._cumulative[-1]
        if self._total <= 0:
            raise ValueError("the sum of the weights must be positive")
        self._size = len(weights)
        self._rng = random.Random(seed)

    def __len__(self) -> int:
        return self._size

    def get(self) -> int:
        """Return a random index chosen according to the weights."""
        if self._integral:
            value = self._rng.randrange(self._total)
        else:
            value = self._rng.random() * self._total
        index = bisect.bisect_right(self._cumulative, value) - 1
        return min(index, self._size - 1)