# fixeduint

Unsigned integers of a fixed width, built from 64-bit little-endian words.
Every operation comes in a plain form that raises `OverflowError` when the
result leaves the range of the type, and in `overflowing_*`, `checked_*` and
`saturating_*` forms that wrap, return `None` or clamp instead.

Two widths come ready to use, `U256` (4 words) and `U512` (8 words). Other
widths are made with `construct_uint` or by subclassing `UInt` with
`n_words=...`.

## Installation

```
pip install fixeduint
```

## Usage

```python
from fixeduint.uint import U256, U512, construct_uint

p = U256.from_dec_str(
    "38873241744847760218045702002058062581688990428170398542849190507947196700873"
)
assert ((p - 1) % p + (p + 1) % p) % p == 0

a = U256.from_hex_str("0xff")
q, r = a.div_mod(U256(3))
print(q, r)                  # 85 0
print(f"{a:x}", f"{a:#X}")   # ff 0xFF

value, overflowed = U256.max_value().overflowing_add(U256.one())
assert value.is_zero() and overflowed
assert U256.max_value().checked_add(U256.one()) is None
assert U256.max_value().saturating_add(U256.one()) == U256.max_value()

wide = U256.max_value().full_mul(U256.max_value())   # a U512
print(wide.bits())           # 512

U128 = construct_uint("U128", 2)
print(U128.max_value())      # 340282366920938463463374607431768211455
```

Operands may be values of the same type or non-negative Python integers that
fit the type. Mixing two different widths raises `TypeError`; dividing by
zero raises `ZeroDivisionError`. Shifting by the width of the type or more
gives zero.

### Construction and conversion

- `UInt(value)` takes an integer, another value of the same type, or a hex
  string.
- `from_words`, `from_dec_str`, `from_hex_str`, `from_str_radix` (radix 10 or
  16 only), `from_big_endian`, `from_little_endian`, `zero`, `one`,
  `max_value`, `exp10`; the class attributes `N_WORDS`, `BITS` and `MAX`.
- `to_big_endian`, `to_little_endian`, `words`, `low_u32`, `low_u64`,
  `low_u128`, and the checked conversions `as_u32`, `as_u64`, `as_u128`,
  `as_usize`, which raise `OverflowError` when the value does not fit.
- `int(x)` gives the value as a Python integer; `str(x)` gives decimal; the
  `d`, `x` and `X` format specs are supported, and `#X` writes a lower-case
  `0x` prefix.

### Arithmetic and bits

- Operators `+ - * // % divmod & | ^ ~ << >>` and comparisons, also against
  plain integers.
- `div_mod`, `integer_sqrt`, `pow`, `overflowing_pow`, `checked_pow`,
  `abs_diff`, `full_mul`, `checked_div`, `checked_rem`, `overflowing_neg`,
  `checked_neg`.
- `bits`, `bit`, `byte`, `leading_zeros`, `trailing_zeros`, `is_zero`.

### Parsing errors

Parsing failures raise the errors in `fixeduint.errors`, all subclasses of
`ValueError`: `FromDecStrError` for decimal input, `FromHexError` for
hexadecimal input, and `FromStrRadixError` from `from_str_radix`. Each
carries a `kind` from `FromStrRadixErrKind`: `INVALID_CHARACTER`,
`INVALID_LENGTH` or `UNSUPPORTED_RADIX`.

### Lower-level helpers

- `fixeduint.codec` converts between Python integers and decimal, hex and
  byte representations of a given word count: `parse_dec`, `parse_hex`,
  `parse_radix`, `to_big_endian`, `to_little_endian`, `from_big_endian`,
  `from_little_endian`, `format_hex`.
- `fixeduint.wordmath` holds word-level routines: `split`, `div_mod_word`,
  `div_mod_word_wide` and `isqrt_bitwise`.
- `fixeduint.modular` offers `field_add` and `field_mul_small` for
  arithmetic modulo a prime.

## Command line

```
fixeduint-modular
fixeduint-modular --modulus 101
```

checks three identities in the field of integers modulo a prime
(`(p - 1) + (p + 1) = 0`, `(p - 1) + (p - 1) = p - 2`,
`(p - 1) * 3 = p - 3`) with `U256` values, prints `ok` or `FAILED` for each,
and exits with status 0 only if all hold. The default modulus is a 256-bit
prime; `--modulus` takes a decimal value from 3 to 2**255 - 1.

## Limits

Text parsing covers radix 10 and 16 only; other radixes raise
`FromStrRadixError` with kind `UNSUPPORTED_RADIX`. There are no signed types.

## Running the tests

```
pip install "fixeduint[test]"
pytest
```