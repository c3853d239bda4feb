"""Text and byte encodings of fixed-width unsigned integers."""

from __future__ import annotations

from .errors import (
    FromDecStrError,
    FromHexError,
    FromStrRadixErrKind,
    FromStrRadixError,
)

_WORD_BYTES = 8


def _byte_width(n_words: int) -> int:
    if n_words <= 0:
        raise ValueError(f"word count must be positive: {n_words}")
    return n_words * _WORD_BYTES


def _check_value(value: int, n_words: int) -> int:
    width = _byte_width(n_words)
    if not 0 <= value < (1 << (width * 8)):
        raise ValueError(f"value does not fit in {n_words} 64-bit words: {value}")
    return width


def parse_dec(value: str, n_words: int) -> int:
    """Parse a string of decimal digits into an ``n_words``-word unsigned value.

    An empty string yields zero. Raises :class:`FromDecStrError` for a
    character outside ``0-9`` or a number too large for the width.
    """
    limit = 1 << (_byte_width(n_words) * 8)
    result = 0
    for byte in value.encode("utf-8"):
        digit = (byte - ord("0")) & 0xFF
        if digit > 9:
            raise FromDecStrError(FromStrRadixErrKind.INVALID_CHARACTER)
        result *= 10
        if result >= limit:
            raise FromDecStrError(FromStrRadixErrKind.INVALID_LENGTH)
        result += digit
        if result >= limit:
            raise FromDecStrError(FromStrRadixErrKind.INVALID_LENGTH)
    return result


def _hex_digit(byte: int, index: int) -> int:
    char = chr(byte)
    if char in "0123456789abcdefABCDEF":
        return int(char, 16)
    raise FromHexError(
        f"Invalid character {char!r} at position {index}",
        FromStrRadixErrKind.INVALID_CHARACTER,
    )


def parse_hex(value: str, n_words: int) -> int:
    """Parse hexadecimal text, with an optional ``0x`` prefix.

    Odd-length input is read as if it had a leading ``0``. Raises
    :class:`FromHexError` for a bad character or for too many digits.
    """
    max_len = _byte_width(n_words) * 2
    if value.startswith("0x"):
        value = value[2:]
    encoded = value.encode("utf-8")
    if len(encoded) > max_len:
        raise FromHexError("Invalid string length", FromStrRadixErrKind.INVALID_LENGTH)
    if len(encoded) % 2:
        encoded = b"0" + encoded

    result = 0
    for pair_start in range(0, len(encoded), 2):
        high = _hex_digit(encoded[pair_start], pair_start)
        low = _hex_digit(encoded[pair_start + 1], pair_start + 1)
        result = (result << 8) | (high << 4) | low
    return result


def parse_radix(txt: str, radix: int, n_words: int) -> int:
    """Parse ``txt`` in radix 10 or 16, raising :class:`FromStrRadixError`."""
    if radix == 10:
        parser = parse_dec
    elif radix == 16:
        parser = parse_hex
    else:
        raise FromStrRadixError.unsupported()
    try:
        return parser(txt, n_words)
    except (FromDecStrError, FromHexError) as error:
        raise FromStrRadixError.from_error(error) from error


def to_big_endian(value: int, n_words: int) -> bytes:
    """Encode ``value`` as ``n_words * 8`` big-endian bytes."""
    return value.to_bytes(_check_value(value, n_words), "big")


def to_little_endian(value: int, n_words: int) -> bytes:
    """Encode ``value`` as ``n_words * 8`` little-endian bytes."""
    return value.to_bytes(_check_value(value, n_words), "little")


def _check_length(data: bytes, n_words: int) -> None:
    width = _byte_width(n_words)
    if len(data) > width:
        raise ValueError(f"{len(data)} bytes do not fit in {width} bytes")


def from_big_endian(data: bytes, n_words: int) -> int:
    """Decode big-endian bytes, at most ``n_words * 8`` of them."""
    _check_length(data, n_words)
    return int.from_bytes(data, "big")


def from_little_endian(data: bytes, n_words: int) -> int:
    """Decode little-endian bytes, at most ``n_words * 8`` of them."""
    _check_length(data, n_words)
    return int.from_bytes(data, "little")


def format_hex(value: int, upper: bool = False) -> str:
    """Hex digits of ``value`` without prefix or leading zeros."""
    if value < 0:
        raise ValueError(f"value must not be negative: {value}")
    return format(value, "X" if upper else "x")