"""Arithmetic helpers on 64-bit words."""

from __future__ import annotations

_WORD_BITS = 64
_MASK = (1 << _WORD_BITS) - 1
_TWO32 = 1 << 32


def _check_word(name: str, value: int) -> None:
    if not 0 <= value <= _MASK:
        raise ValueError(f"{name} does not fit in a 64-bit word: {value}")


def split(a: int) -> tuple[int, int]:
    """Split a 64-bit word into its high and low 32-bit halves."""
    _check_word("a", a)
    return a >> 32, a & 0xFFFF_FFFF


def _check_division(hi: int, lo: int, y: int) -> None:
    _check_word("hi", hi)
    _check_word("lo", lo)
    _check_word("y", y)
    if y == 0:
        raise ZeroDivisionError("division by zero")
    if hi >= y:
        raise ValueError("high word must be smaller than the divisor")


def div_mod_word(hi: int, lo: int, y: int) -> tuple[int, int]:
    """Divide the two-word number ``hi:lo`` by ``y`` using only 64-bit steps.

    Returns ``(quotient, remainder)``. ``hi`` must be smaller than ``y``.
    """
    _check_division(hi, lo, y)
    s = _WORD_BITS - y.bit_length()
    y = (y << s) & _MASK
    yn1, yn0 = split(y)
    un32 = ((hi << s) & _MASK) | (lo >> (_WORD_BITS - s) if s else 0)
    un10 = (lo << s) & _MASK
    un1, un0 = split(un10)

    q1 = un32 // yn1
    rhat = un32 - q1 * yn1
    while q1 >= _TWO32 or q1 * yn0 > _TWO32 * rhat + un1:
        q1 -= 1
        rhat += yn1
        if rhat >= _TWO32:
            break

    un21 = (un32 * _TWO32 + un1 - q1 * y) & _MASK
    q0 = un21 // yn1
    rhat = (un21 - q0 * yn1) & _MASK
    while q0 >= _TWO32 or q0 * yn0 > _TWO32 * rhat + un0:
        q0 -= 1
        rhat += yn1
        if rhat >= _TWO32:
            break

    rem = (un21 * _TWO32 + un0 - y * q0) & _MASK
    return (q1 * _TWO32 + q0) & _MASK, rem >> s


def div_mod_word_wide(hi: int, lo: int, y: int) -> tuple[int, int]:
    """Divide the two-word number ``hi:lo`` by ``y`` in one wide step.

    Returns ``(quotient, remainder)``. ``hi`` must be smaller than ``y``.
    """
    _check_division(hi, lo, y)
    return divmod((hi << _WORD_BITS) + lo, y)


def isqrt_bitwise(value: int, bit_width: int) -> int:
    """Integer square root of an unsigned ``bit_width``-bit value, digit by digit."""
    if bit_width <= 0:
        raise ValueError("bit width must be positive")
    if not 0 <= value < (1 << bit_width):
        raise ValueError(f"value does not fit in {bit_width} bits: {value}")
    if value <= 1:
        return value

    # Start at the highest power of four not above the value.
    bit = 1 << ((value.bit_length() - 1) & ~1)
    remainder = value
    result = 0
    while bit:
        candidate = result + bit
        result >>= 1
        if remainder >= candidate:
            remainder -= candidate
            result += bit
        bit >>= 2
    return result