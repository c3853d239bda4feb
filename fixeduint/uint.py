"""Fixed-width unsigned integers built from little-endian 64-bit words."""

from __future__ import annotations

import math
import sys
from typing import ClassVar

from . import codec

_WORD_BITS = 64
_WORD_MASK = (1 << _WORD_BITS) - 1
_U32_MAX = (1 << 32) - 1
_U128_MAX = (1 << 128) - 1
_USIZE_MAX = sys.maxsize * 2 + 1

_BY_WIDTH: dict[int, type[UInt]] = {}


def _overflow() -> OverflowError:
    return OverflowError("arithmetic operation overflow")


class UInt:
    """Base of all fixed-width unsigned integer types.

    A concrete type is made by subclassing with ``n_words``, for example
    ``class U128(UInt, n_words=2)``, or with :func:`construct_uint`.
    Arithmetic that leaves the range of the type raises
    :class:`OverflowError`; the ``overflowing_*``, ``checked_*`` and
    ``saturating_*`` methods offer the wrapping and checked forms.
    """

    __slots__ = ("_value",)

    N_WORDS: ClassVar[int]
    BITS: ClassVar[int]
    MAX: ClassVar[UInt]
    _mask: ClassVar[int]

    def __init_subclass__(cls, n_words: int | None = None, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if n_words is None:
            if not hasattr(cls, "N_WORDS"):
                raise TypeError(f"{cls.__name__} needs a word count: n_words=...")
            return
        if isinstance(n_words, bool) or not isinstance(n_words, int) or n_words <= 0:
            raise ValueError(f"word count must be a positive integer: {n_words!r}")
        cls.N_WORDS = n_words
        cls.BITS = n_words * _WORD_BITS
        cls._mask = (1 << cls.BITS) - 1
        cls.MAX = cls._make(cls._mask)
        _BY_WIDTH.setdefault(n_words, cls)

    def __init__(self, value: int | str | UInt = 0) -> None:
        if not hasattr(type(self), "N_WORDS"):
            raise TypeError("UInt has no width; subclass it or use construct_uint")
        self._value = self._convert(value)

    @classmethod
    def _make(cls, value: int) -> UInt:
        obj = object.__new__(cls)
        obj._value = value
        return obj

    @classmethod
    def _convert(cls, value: object) -> int:
        if isinstance(value, UInt):
            if value.N_WORDS != cls.N_WORDS:
                raise TypeError(f"cannot convert {type(value).__name__} to {cls.__name__}")
            return value._value
        if isinstance(value, str):
            return codec.parse_hex(value, cls.N_WORDS)
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"cannot convert {type(value).__name__} to {cls.__name__}")
        if value < 0:
            raise ValueError("Unsigned integer can't be created from negative value")
        if value > cls._mask:
            raise OverflowError(f"integer does not fit in {cls.__name__}")
        return value

    def _operand(self, other: object) -> int | None:
        if type(other) is type(self):
            return other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._convert(other)
        return None

    def _require(self, other: object) -> int:
        value = self._operand(other)
        if value is None:
            raise TypeError(
                f"unsupported operand {type(other).__name__} for {type(self).__name__}"
            )
        return value

    def _wrap(self, value: int) -> tuple[UInt, bool]:
        mask = self._mask
        return self._make(value & mask), not 0 <= value <= mask

    # Construction

    @classmethod
    def from_words(cls, words) -> UInt:
        """Build from ``N_WORDS`` little-endian 64-bit words."""
        words = tuple(words)
        if len(words) != cls.N_WORDS:
            raise ValueError(f"{cls.__name__} needs {cls.N_WORDS} words, got {len(words)}")
        value = 0
        for position, word in enumerate(words):
            if not 0 <= word <= _WORD_MASK:
                raise ValueError(f"word does not fit in 64 bits: {word}")
            value |= word << (position * _WORD_BITS)
        return cls._make(value)

    @classmethod
    def from_dec_str(cls, value: str) -> UInt:
        """Parse decimal digits, raising :class:`FromDecStrError` on failure."""
        return cls._make(codec.parse_dec(value, cls.N_WORDS))

    @classmethod
    def from_hex_str(cls, value: str) -> UInt:
        """Parse hex digits with an optional ``0x`` prefix."""
        return cls._make(codec.parse_hex(value, cls.N_WORDS))

    @classmethod
    def from_str_radix(cls, txt: str, radix: int) -> UInt:
        """Parse in radix 10 or 16, raising :class:`FromStrRadixError`."""
        return cls._make(codec.parse_radix(txt, radix, cls.N_WORDS))

    @classmethod
    def from_big_endian(cls, data: bytes) -> UInt:
        """Decode at most ``N_WORDS * 8`` big-endian bytes."""
        return cls._make(codec.from_big_endian(bytes(data), cls.N_WORDS))

    @classmethod
    def from_little_endian(cls, data: bytes) -> UInt:
        """Decode at most ``N_WORDS * 8`` little-endian bytes."""
        return cls._make(codec.from_little_endian(bytes(data), cls.N_WORDS))

    @classmethod
    def zero(cls) -> UInt:
        """The additive identity."""
        return cls._make(0)

    @classmethod
    def one(cls) -> UInt:
        """The multiplicative identity."""
        return cls._make(1)

    @classmethod
    def max_value(cls) -> UInt:
        """The largest value of the type."""
        return cls.MAX

    @classmethod
    def exp10(cls, n: int) -> UInt:
        """``10 ** n`` as this type; raises OverflowError if it does not fit."""
        if n < 0:
            raise ValueError(f"exponent must not be negative: {n}")
        if n > cls.BITS:
            raise _overflow()
        value = 10**n
        if value > cls._mask:
            raise _overflow()
        return cls._make(value)

    # Views and conversions

    def words(self) -> tuple[int, ...]:
        """The little-endian 64-bit words."""
        return tuple(
            (self._value >> (position * _WORD_BITS)) & _WORD_MASK
            for position in range(self.N_WORDS)
        )

    def low_u32(self) -> int:
        """The lowest 32 bits."""
        return self._value & _U32_MAX

    def low_u64(self) -> int:
        """The lowest word."""
        return self._value & _WORD_MASK

    def low_u128(self) -> int:
        """The lowest two words."""
        return self._value & _U128_MAX

    def _checked_cast(self, limit: int, target: str) -> int:
        if self._value > limit:
            raise OverflowError(f"Integer overflow when casting to {target}")
        return self._value

    def as_u32(self) -> int:
        """The value, which must fit in 32 bits."""
        return self._checked_cast(_U32_MAX, "u32")

    def as_u64(self) -> int:
        """The value, which must fit in 64 bits."""
        return self._checked_cast(_WORD_MASK, "u64")

    def as_u128(self) -> int:
        """The value, which must fit in 128 bits."""
        return self._checked_cast(_U128_MAX, "u128")

    def as_usize(self) -> int:
        """The value, which must fit in a machine-sized unsigned integer."""
        return self._checked_cast(_USIZE_MAX, "usize")

    def is_zero(self) -> bool:
        """Whether the value is zero."""
        return self._value == 0

    def bits(self) -> int:
        """The least number of bits needed to represent the value."""
        return self._value.bit_length()

    def bit(self, index: int) -> bool:
        """Whether bit ``index`` is set; bit 0 is the least significant."""
        if not 0 <= index < self.BITS:
            raise IndexError(f"bit index {index} out of range for {type(self).__name__}")
        return bool((self._value >> index) & 1)

    def byte(self, index: int) -> int:
        """Byte ``index``; byte 0 is the least significant."""
        if not 0 <= index < self.N_WORDS * 8:
            raise IndexError(f"byte index {index} out of range for {type(self).__name__}")
        return (self._value >> (index * 8)) & 0xFF

    def leading_zeros(self) -> int:
        """Number of zero bits above the highest set bit."""
        return self.BITS - self._value.bit_length()

    def trailing_zeros(self) -> int:
        """Number of zero bits below the lowest set bit."""
        if self._value == 0:
            return self.BITS
        return (self._value & -self._value).bit_length() - 1

    def to_big_endian(self) -> bytes:
        """All ``N_WORDS * 8`` bytes, most significant first."""
        return codec.to_big_endian(self._value, self.N_WORDS)

    def to_little_endian(self) -> bytes:
        """All ``N_WORDS * 8`` bytes, least significant first."""
        return codec.to_little_endian(self._value, self.N_WORDS)

    # Arithmetic

    def div_mod(self, other: UInt | int) -> tuple[UInt, UInt]:
        """Return ``(self // other, self % other)``."""
        divisor = self._require(other)
        if divisor == 0:
            raise ZeroDivisionError("division by zero")
        quotient, remainder = divmod(self._value, divisor)
        return self._make(quotient), self._make(remainder)

    def integer_sqrt(self) -> UInt:
        """The highest ``n`` such that ``n * n <= self``."""
        return self._make(math.isqrt(self._value))

    def pow(self, expon: UInt | int) -> UInt:
        """``self ** expon``; raises OverflowError if it does not fit."""
        result, overflow = self.overflowing_pow(expon)
        if overflow:
            raise _overflow()
        return result

    def overflowing_pow(self, expon: UInt | int) -> tuple[UInt, bool]:
        """Exponentiation by squaring, wrapping; returns the overflow flag too."""
        n = self._require(expon)
        if n == 0:
            return self.one(), False
        mask = self._mask
        overflow = False

        def multiply(a: int, b: int) -> int:
            nonlocal overflow
            product = a * b
            overflow |= product > mask
            return product & mask

        x, y = self._value, 1
        while n > 1:
            if n & 1:
                y = multiply(x, y)
                n -= 1
            x = multiply(x, x)
            n >>= 1
        result = multiply(x, y)
        return self._make(result), overflow

    def checked_pow(self, expon: UInt | int) -> UInt | None:
        """``self ** expon``, or ``None`` on overflow."""
        result, overflow = self.overflowing_pow(expon)
        return None if overflow else result

    def overflowing_add(self, other: UInt | int) -> tuple[UInt, bool]:
        """Wrapping addition and whether it overflowed."""
        return self._wrap(self._value + self._require(other))

    def saturating_add(self, other: UInt | int) -> UInt:
        """Addition that stops at the maximum value."""
        result, overflow = self.overflowing_add(other)
        return self.MAX if overflow else result

    def checked_add(self, other: UInt | int) -> UInt | None:
        """Addition, or ``None`` on overflow."""
        result, overflow = self.overflowing_add(other)
        return None if overflow else result

    def overflowing_sub(self, other: UInt | int) -> tuple[UInt, bool]:
        """Wrapping subtraction and whether it underflowed."""
        return self._wrap(self._value - self._require(other))

    def saturating_sub(self, other: UInt | int) -> UInt:
        """Subtraction that stops at zero."""
        result, overflow = self.overflowing_sub(other)
        return self.zero() if overflow else result

    def checked_sub(self, other: UInt | int) -> UInt | None:
        """Subtraction, or ``None`` on underflow."""
        result, overflow = self.overflowing_sub(other)
        return None if overflow else result

    def abs_diff(self, other: UInt | int) -> UInt:
        """The absolute difference of the two values."""
        return self._make(abs(self._value - self._require(other)))

    def overflowing_mul(self, other: UInt | int) -> tuple[UInt, bool]:
        """Wrapping multiplication and whether it overflowed."""
        return self._wrap(self._value * self._require(other))

    def saturating_mul(self, other: UInt | int) -> UInt:
        """Multiplication that stops at the maximum value."""
        result, overflow = self.overflowing_mul(other)
        return self.MAX if overflow else result

    def checked_mul(self, other: UInt | int) -> UInt | None:
        """Multiplication, or ``None`` on overflow."""
        result, overflow = self.overflowing_mul(other)
        return None if overflow else result

    def full_mul(self, other: UInt | int) -> UInt:
        """The exact product, as the type of twice the width."""
        wide = _BY_WIDTH.get(2 * self.N_WORDS) or construct_uint(
            f"U{2 * self.BITS}", 2 * self.N_WORDS
        )
        return wide._make(self._value * self._require(other))

    def checked_div(self, other: UInt | int) -> UInt | None:
        """Quotient, or ``None`` when dividing by zero."""
        divisor = self._require(other)
        return None if divisor == 0 else self._make(self._value // divisor)

    def checked_rem(self, other: UInt | int) -> UInt | None:
        """Remainder, or ``None`` when dividing by zero."""
        divisor = self._require(other)
        return None if divisor == 0 else self._make(self._value % divisor)

    def overflowing_neg(self) -> tuple[UInt, bool]:
        """Two's complement negation; overflows for every non-zero value."""
        if self._value == 0:
            return self, False
        return self._make(-self._value & self._mask), True

    def checked_neg(self) -> UInt | None:
        """Zero for zero, ``None`` for anything else."""
        result, overflow = self.overflowing_neg()
        return None if overflow else result

    # Python protocols

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def _compare_value(self, other: object) -> int | None:
        if type(other) is type(self):
            return other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def __eq__(self, other: object) -> bool:
        value = self._compare_value(other)
        return NotImplemented if value is None else self._value == value

    def __lt__(self, other: object) -> bool:
        value = self._compare_value(other)
        return NotImplemented if value is None else self._value < value

    def __le__(self, other: object) -> bool:
        value = self._compare_value(other)
        return NotImplemented if value is None else self._value <= value

    def __gt__(self, other: object) -> bool:
        value = self._compare_value(other)
        return NotImplemented if value is None else self._value > value

    def __ge__(self, other: object) -> bool:
        value = self._compare_value(other)
        return NotImplemented if value is None else self._value >= value

    def __hash__(self) -> int:
        return hash(self._value)

    def _checked(self, value: int) -> UInt:
        if not 0 <= value <= self._mask:
            raise _overflow()
        return self._make(value)

    def __add__(self, other: object) -> UInt:
        rhs = self._operand(other)
        return NotImplemented if rhs is None else self._checked(self._value + rhs)

    def __radd__(self, other: object) -> UInt:
        return self.__add__(other)

    def __sub__(self, other: object) -> UInt:
        rhs = self._operand(other)
        return NotImplemented if rhs is None else self._checked(self._value - rhs)

    def __rsub__(self, other: object) -> UInt:
        lhs = self._operand(other)
        return NotImplemented if lhs is None else self._checked(lhs - self._value)

    def __mul__(self, other: object) -> UInt:
        rhs = self._operand(other)
        return NotImplemented if rhs is None else self._checked(self._value * rhs)

    def __rmul__(self, other: object) -> UInt:
        return self.__mul__(other)

    def __floordiv__(self, other: object) -> UInt:
        if self._operand(other) is None:
            return NotImplemented
        return self.div_mod(other)[0]

    def __rfloordiv__(self, other: object) -> UInt:
        lhs = self._operand(other)
        return NotImplemented if lhs is None else self._make(lhs).div_mod(self)[0]

    def __mod__(self, other: object) -> UInt:
        if self._operand(other) is None:
            return NotImplemented
        return self.div_mod(other)[1]

    def __rmod__(self, other: object) -> UInt:
        lhs = self._operand(other)
        return NotImplemented if lhs is None else self._make(lhs).div_mod(self)[1]

    def __divmod__(self, other: object) -> tuple[UInt, UInt]:
        if self._operand(other) is None:
            return NotImplemented
        return self.div_mod(other)

    def __rdivmod__(self, other: object) -> tuple[UInt, UInt]:
        lhs = self._operand(other)
        return NotImplemented if lhs is None else self._make(lhs).div_mod(self)

    def __and__(self, other: object) -> UInt:
        rhs = self._operand(other)
        return NotImplemented if rhs is None else self._make(self._value & rhs)

    __rand__ = __and__

    def __or__(self, other: object) -> UInt:
        rhs = self._operand(other)
        return NotImplemented if rhs is None else self._make(self._value | rhs)

    __ror__ = __or__

    def __xor__(self, other: object) -> UInt:
        rhs = self._operand(other)
        return NotImplemented if rhs is None else self._make(self._value ^ rhs)

    __rxor__ = __xor__

    def __invert__(self) -> UInt:
        return self._make(self._value ^ self._mask)

    def _shift_amount(self, shift: object) -> int | None:
        amount = self._operand(shift)
        if amount is None:
            return None
        if amount > _USIZE_MAX:
            raise OverflowError("Integer overflow when casting to usize")
        return amount

    def __lshift__(self, shift: object) -> UInt:
        amount = self._shift_amount(shift)
        if amount is None:
            return NotImplemented
        if amount >= self.BITS:
            return self.zero()
        return self._make((self._value << amount) & self._mask)

    def __rshift__(self, shift: object) -> UInt:
        amount = self._shift_amount(shift)
        if amount is None:
            return NotImplemented
        if amount >= self.BITS:
            return self.zero()
        return self._make(self._value >> amount)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def __format__(self, spec: str) -> str:
        kind = spec[-1:]
        if kind.isalpha() and kind not in "dxX":
            raise ValueError(f"unsupported format {spec!r} for {type(self).__name__}")
        text = format(self._value, spec)
        if kind == "X" and "#" in spec:
            text = text.replace("0X", "0x", 1)
        return text


def construct_uint(name: str, n_words: int) -> type[UInt]:
    """Create an unsigned integer type of ``n_words`` 64-bit words."""
    if not name.isidentifier():
        raise ValueError(f"not a valid type name: {name!r}")
    return type(name, (UInt,), {"__slots__": (), "__qualname__": name}, n_words=n_words)


class U256(UInt, n_words=4):
    """A 256-bit unsigned integer."""

    __slots__ = ()


class U512(UInt, n_words=8):
    """A 512-bit unsigned integer."""

    __slots__ = ()