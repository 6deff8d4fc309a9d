"""Bit manipulation problems."""

from __future__ import annotations

_UINT32_LIMIT = 1 << 32
_MASK64 = (1 << 64) - 1
_SIGN64 = 1 << 63


def _check_uint32(num: int) -> None:
    if not 0 <= num < _UINT32_LIMIT:
        raise ValueError(f"{num} is not an unsigned 32-bit integer")


def reverse_bits(num: int) -> int:
    """Reverse the bits of an unsigned 32-bit integer."""
    _check_uint32(num)
    result = 0
    for _ in range(32):
        result = (result << 1) | (num & 1)
        num >>= 1
    return result


def hamming_weight(num: int) -> int:
    """Number of set bits in an unsigned 32-bit integer."""
    _check_uint32(num)
    return bin(num).count("1")


def hamming_weight_kernighan(num: int) -> int:
    """Number of set bits, clearing the lowest set bit each step."""
    _check_uint32(num)
    count = 0
    while num:
        num &= num - 1
        count += 1
    return count


def count_bits(num: int) -> list[int]:
    """Set-bit counts of every integer from 0 to ``num``."""
    if num < -1:
        raise ValueError("num must not be less than -1")
    bits = [0] * (num + 1)
    for i in range(1, num + 1):
        bits[i] = bits[i & (i - 1)] + 1
    return bits


def get_sum(a: int, b: int) -> int:
    """Add two signed 64-bit integers without ``+``, wrapping on overflow."""
    a &= _MASK64
    b &= _MASK64
    while a and b:
        a, b = ((a & b) << 1) & _MASK64, a ^ b
    result = b if a == 0 else a
    return result - (1 << 64) if result & _SIGN64 else result