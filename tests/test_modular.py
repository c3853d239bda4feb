import pytest
from hypothesis import given, strategies as st

from fixeduint.modular import DEFAULT_MODULUS, field_add, field_mul_small, main
from fixeduint.uint import U256

P = U256.from_dec_str(DEFAULT_MODULUS)


def test_identities_on_default_field():
    assert field_add(P - 1, P + 1, P) == 0
    assert field_add(P - 1, P - 1, P) == P - 2
    assert field_mul_small(P - 1, 3, P) == P - 3


def test_small_field():
    p = U256(7)
    assert field_add(U256(5), U256(4), p) == 2
    assert field_mul_small(p - 1, 3, p) == p - 3
    assert field_mul_small(U256(3), 0, p) == 0


def test_negative_multiplier_rejected():
    with pytest.raises(ValueError):
        field_mul_small(U256(3), -1, U256(7))


@given(st.integers(min_value=0, max_value=int(U256.MAX)), st.integers(min_value=0, max_value=int(U256.MAX)))
def test_field_add_commutes_and_reduces(a, b):
    x, y = U256(a), U256(b)
    result = field_add(x, y, P)
    assert result == field_add(y, x, P)
    assert result < P


@given(st.integers(min_value=0, max_value=int(U256.MAX)))
def test_mul_small_agrees_with_addition(a):
    x = U256(a)
    assert field_mul_small(x, 1, P) == x % P
    assert field_mul_small(x, 2, P) == field_add(x, x, P)
    assert field_mul_small(x, 3, P) == field_add(field_add(x, x, P), x, P)


def test_main_default(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count(": ok") == 3
    assert "FAILED" not in out


def test_main_custom_modulus(capsys):
    assert main(["--modulus", "7"]) == 0
    assert "FAILED" not in capsys.readouterr().out


@pytest.mark.parametrize("modulus", ["2", "abc", str(U256.MAX)])
def test_main_rejects_bad_modulus(modulus):
    with pytest.raises(SystemExit) as info:
        main(["--modulus", modulus])
    assert info.value.code == 2