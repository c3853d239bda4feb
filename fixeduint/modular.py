"""Modular arithmetic over a prime field using 256-bit integers."""

from __future__ import annotations

import argparse

from .errors import FromDecStrError
from .uint import U256, UInt

DEFAULT_MODULUS = (
    "38873241744847760218045702002058062581688990428170398542849190507947196700873"
)


def field_add(a: UInt, b: UInt, p: UInt) -> UInt:
    """``(a + b) mod p`` with both operands reduced first."""
    return (a % p + b % p) % p


def field_mul_small(a: UInt, times: int, p: UInt) -> UInt:
    """``(a * times) mod p`` computed as a series of additions."""
    if times < 0:
        raise ValueError(f"multiplier must not be negative: {times}")
    reduced = a % p
    if times == 0:
        return type(reduced).zero()
    result = reduced
    for _ in range(times - 1):
        result = (reduced + result) % p
    return result


def main(argv: list[str] | None = None) -> int:
    """Check a few identities in the field of integers modulo a prime."""
    parser = argparse.ArgumentParser(
        prog="fixeduint-modular",
        description="Check modular identities with 256-bit integers.",
    )
    parser.add_argument(
        "--modulus",
        default=DEFAULT_MODULUS,
        help="decimal modulus of the field (default: a 256-bit prime)",
    )
    args = parser.parse_args(argv)

    try:
        p = U256.from_dec_str(args.modulus)
    except FromDecStrError as error:
        parser.error(f"invalid modulus: {error}")
    if p < 3 or p > U256.MAX >> 1:
        parser.error("modulus must be at least 3 and at most 2**255 - 1")

    checks = [
        ("(p - 1) + (p + 1) = 0", field_add(p - 1, p + 1, p) == 0),
        ("(p - 1) + (p - 1) = p - 2", field_add(p - 1, p - 1, p) == p - 2),
        ("(p - 1) * 3 = p - 3", field_mul_small(p - 1, 3, p) == p - 3),
    ]
    for description, passed in checks:
        print(f"{description} (mod p): {'ok' if passed else 'FAILED'}")
    return 0 if all(passed for _, passed in checks) else 1