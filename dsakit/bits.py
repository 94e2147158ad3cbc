"""Bit manipulation helpers on integers."""

from __future__ import annotations


def get_ith_bit(n: int, i: int) -> int:
    """Return bit ``i`` of ``n`` as 0 or 1."""
    mask = 1 << i
    if n & mask > 0:
        return 1
    return 0


def set_ith_bit(n: int, i: int) -> int:
    """Return ``n`` with bit ``i`` set."""
    return n | (1 << i)


def clear_ith_bit(n: int, i: int) -> int:
    """Return ``n`` with bit ``i`` cleared."""
    return n & ~(1 << i)


def update_ith_bit(n: int, i: int, v: int) -> int:
    """Return ``n`` with bit ``i`` replaced by ``v``."""
    return clear_ith_bit(n, i) | (v << i)


def clear_last_i_bits(n: int, i: int) -> int:
    """Return ``n`` with its lowest ``i`` bits cleared."""
    return n & (-1 << i)


def clear_bits_in_range(n: int, i: int, j: int) -> int:
    """Return ``n`` with bits ``i`` through ``j`` (inclusive) cleared."""
    mask = (~0 << (j + 1)) | ((1 << i) - 1)
    return n & mask


def replace_bits(n: int, i: int, j: int, m: int) -> int:
    """Return ``n`` with bits ``i`` through ``j`` replaced by ``m``."""
    return clear_bits_in_range(n, i, j) | (m << i)


def count_bits(n: int) -> int:
    """Count set bits by inspecting each bit; 0 for non-positive ``n``."""
    total = 0
    while n > 0:
        total += n & 1
        n >>= 1
    return total


def count_bits_hack(n: int) -> int:
    """Count set bits by repeatedly dropping the lowest set bit."""
    total = 0
    while n > 0:
        n &= n - 1
        total += 1
    return total


def convert_to_binary(n: int) -> int:
    """Return the integer whose decimal digits spell ``n`` in binary."""
    result = 0
    place = 1
    while n > 0:
        result += place * (n & 1)
        place *= 10
        n >>= 1
    return result


def fast_expo(a: int, n: int) -> int:
    """Raise ``a`` to ``n`` by binary exponentiation; 1 for ``n <= 0``."""
    result = 1
    while n > 0:
        if n & 1:
            result *= a
        a *= a
        n >>= 1
    return result


def is_odd(x: int) -> bool:
    """Return whether the lowest bit of ``x`` is set."""
    return bool(x & 1)


def is_power_of_two(n: int) -> bool:
    """Return whether ``n & (n - 1)`` is zero; this also holds for 0."""
    return n & (n - 1) == 0