"""Errors raised when parsing fixed-width unsigned integers from text."""

from __future__ import annotations

import enum


class FromStrRadixErrKind(enum.Enum):
    """Categories of failure met while parsing a number."""

    INVALID_CHARACTER = "invalid_character"
    INVALID_LENGTH = "invalid_length"
    UNSUPPORTED_RADIX = "unsupported_radix"


_KIND_MESSAGES = {
    FromStrRadixErrKind.UNSUPPORTED_RADIX: "the given radix is not supported",
    FromStrRadixErrKind.INVALID_CHARACTER: "input contains an invalid character",
    FromStrRadixErrKind.INVALID_LENGTH: "length not supported for radix or type",
}

_DEC_MESSAGES = {
    FromStrRadixErrKind.INVALID_CHARACTER: "a character is not in the range 0-9",
    FromStrRadixErrKind.INVALID_LENGTH: "the number is too large for the type",
}


class FromDecStrError(ValueError):
    """A decimal string could not be converted."""

    def __init__(self, kind: FromStrRadixErrKind) -> None:
        if kind not in _DEC_MESSAGES:
            raise ValueError(f"not a decimal parse error kind: {kind!r}")
        self.kind = kind
        super().__init__(_DEC_MESSAGES[kind])


class FromHexError(ValueError):
    """A hexadecimal string could not be converted."""

    def __init__(self, message: str, kind: FromStrRadixErrKind) -> None:
        if kind is FromStrRadixErrKind.UNSUPPORTED_RADIX:
            raise ValueError("a hex parse error cannot be about the radix")
        self.kind = kind
        self.message = message
        super().__init__(message)


class FromStrRadixError(ValueError):
    """Parsing a number in a given radix failed."""

    def __init__(
        self,
        kind: FromStrRadixErrKind,
        source: FromDecStrError | FromHexError | None = None,
    ) -> None:
        self.kind = kind
        self.source = source
        self.__cause__ = source
        message = str(source) if source is not None else _KIND_MESSAGES[kind]
        super().__init__(message)

    @classmethod
    def unsupported(cls) -> FromStrRadixError:
        """Error for a radix other than 10 or 16."""
        return cls(FromStrRadixErrKind.UNSUPPORTED_RADIX)

    @classmethod
    def from_error(cls, error: FromDecStrError | FromHexError) -> FromStrRadixError:
        """Wrap a decimal or hexadecimal parse error."""
        if not isinstance(error, (FromDecStrError, FromHexError)):
            raise TypeError(f"cannot wrap {type(error).__name__}")
        return cls(error.kind, error)