"""Integer arithmetic helpers: rounding divisions, powers of two, logarithms."""

from __future__ import annotations

__all__ = [
    "check_overflow",
    "ceil_div",
    "round_div",
    "upper_approx",
    "lower_approx",
    "is_power2",
    "factorial",
    "roundup_pow2",
    "rounddown_pow2",
    "log2",
    "ceil_log2",
    "int_log",
    "ceil_int_log",
    "int_pow",
    "geometric_serie",
    "per_cent",
    "mcd",
]


def _require_nonzero(div: int) -> None:
    if div == 0:
        raise ZeroDivisionError("division by zero in integer arithmetic")


def check_overflow(value, max_value) -> None:
    """Raise OverflowError if ``value`` exceeds ``max_value``."""
    if value > max_value:
        raise OverflowError("value overflow")


def ceil_div(value: int, div: int) -> int:
    """Integer division rounded towards positive infinity."""
    _require_nonzero(div)
    return -(-value // div)


def round_div(value: int, div: int) -> int:
    """Integer division rounded to the nearest integer, halves rounded up.

    Both operands must be non-negative and ``div`` must be non-zero.
    """
    _require_nonzero(div)
    if value < 0 or div < 0:
        raise ValueError("round_div requires non-negative operands")
    return (value + div // 2) // div


def upper_approx(value: int, mul: int) -> int:
    """Smallest multiple of ``mul`` that is not below ``value``."""
    return ceil_div(value, mul) * mul


def lower_approx(value: int, mul: int) -> int:
    """Largest multiple of ``mul`` that is not above ``value``."""
    _require_nonzero(mul)
    if value < 0:
        raise ValueError("lower_approx requires a non-negative value")
    return (value // mul) * mul


def is_power2(value: int) -> bool:
    """Return True if ``value`` is a positive power of two."""
    if value < 0:
        raise ValueError("is_power2 requires a non-negative value")
    return value != 0 and not value & (value - 1)


def factorial(value: int) -> int:
    """Return ``value!``; any value not above one gives 1."""
    result = 1
    for factor in range(2, value + 1):
        result *= factor
    return result


def roundup_pow2(value: int) -> int:
    """Smallest power of two not below ``value`` (0 stays 0)."""
    if value < 0:
        raise ValueError("roundup_pow2 requires a non-negative value")
    if value == 0:
        return 0
    return 1 << (value - 1).bit_length()


def rounddown_pow2(value: int) -> int:
    """Largest power of two not above ``value`` (0 stays 0)."""
    if value < 0:
        raise ValueError("rounddown_pow2 requires a non-negative value")
    if value == 0:
        return 0
    return 1 << (value.bit_length() - 1)


def log2(value: int) -> int:
    """Floor of the base-2 logarithm of a positive integer."""
    if value <= 0:
        raise ValueError("log2 requires a positive value")
    return value.bit_length() - 1


def ceil_log2(value: int) -> int:
    """Ceiling of the base-2 logarithm of a positive integer."""
    return log2(value) if is_power2(value) else log2(value) + 1


def _check_base(base: int) -> None:
    if base < 2:
        raise ValueError("logarithm base must be at least 2")


def int_log(value: int, base: int) -> int:
    """Integer logarithm of ``value`` in ``base``.

    For a power-of-two base this is the floor of the logarithm; for any
    other base it is the number of digits of ``value`` in that base.
    """
    _check_base(base)
    if is_power2(base):
        return log2(value) // log2(base)
    if value < 0:
        raise ValueError("int_log requires a non-negative value")
    count = 0
    while value:
        value //= base
        count += 1
    return count


def ceil_int_log(value: int, base: int) -> int:
    """Ceiling of the logarithm of ``value`` in a power-of-two ``base``."""
    _check_base(base)
    if not is_power2(base):
        raise ValueError("ceil_int_log requires a power-of-two base")
    return ceil_div(ceil_log2(value), log2(base))


def int_pow(base: int, exp: int) -> int:
    """Return ``base`` raised to the non-negative integer ``exp``."""
    if exp < 0:
        raise ValueError("int_pow requires a non-negative exponent")
    if base > 0 and is_power2(base):
        return 1 << (log2(base) * exp)
    return base**exp


def geometric_serie(base: int, repetition: int) -> int:
    """Sum of ``base**k`` for ``k`` in ``0..repetition``."""
    if base == 1:
        raise ValueError("geometric_serie requires a base other than 1")
    return (int_pow(base, repetition + 1) - 1) // (base - 1)


def per_cent(part, total) -> float:
    """Return ``part`` as a percentage of ``total``."""
    return float(part) / float(total) * 100.0


def mcd(a: int, b: int) -> int:
    """Greatest common divisor of two non-negative integers."""
    if a < 0 or b < 0:
        raise ValueError("mcd requires non-negative operands")
    while b:
        a, b = b, a % b
    return a