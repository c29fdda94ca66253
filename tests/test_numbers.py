import pytest

from ftlib.numbers import (
    atoi,
    atoi_base,
    convert_nbr_base,
    itoa,
    nbrlen,
    nbrlen_uint,
)

HEX = "0123456789abcdef"


@pytest.mark.parametrize("n", [0, 7, -7, 12345, -98765, 2147483647, -2147483648])
def test_atoi_matches_decimal_text(n):
    assert atoi(str(n)) == n


def test_atoi_skips_whitespace_and_sign():
    assert atoi(" \t\n\v\f\r-42abc") == -42
    assert atoi("   +17") == 17


def test_atoi_single_sign_only():
    assert atoi("--5") == atoi("")
    assert atoi("+-5") == atoi("")


def test_atoi_non_numeric_is_zero_like_empty():
    assert atoi("abc") == atoi("0")


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648


def test_atoi_long_overflow():
    assert atoi("9223372036854775808") == -1
    assert atoi("-9223372036854775809") == 0


def test_atoi_accepts_long_min():
    assert atoi("-9223372036854775808") == atoi("0")


@pytest.mark.parametrize("text", ["ff", "1a2b", "0", "7fffffff"])
def test_atoi_base_hex(text):
    assert atoi_base(text, HEX) == int(text, 16)


def test_atoi_base_multiple_signs_and_whitespace():
    assert atoi_base("  --+-101", "01") == -int("101", 2)
    assert atoi_base("\t-+-101", "01") == int("101", 2)


def test_atoi_base_stops_at_foreign_character():
    assert atoi_base("1012", "01") == int("101", 2)


@pytest.mark.parametrize("base", ["", "0", "0+1", "01-", "0 1", "aa", "0\t1"])
def test_atoi_base_rejects_bad_base(base):
    with pytest.raises(ValueError):
        atoi_base("1", base)


@pytest.mark.parametrize("n", [0, 5, -5, 255, -4096, 2147483647, -2147483648])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n
    assert itoa(n) == str(n)


def test_itoa_min_int():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2**31)


@pytest.mark.parametrize("n", [0, 1, -1, 10, 255, -4096, 2147483647, -2147483648])
def test_convert_nbr_base_binary_and_hex(n):
    assert convert_nbr_base(n, "01") == format(n, "b")
    assert convert_nbr_base(n, HEX) == format(n, "x")


@pytest.mark.parametrize("n", [0, 9, -300, 123456])
def test_convert_round_trips_through_atoi_base(n):
    base = "poneyvif"
    assert atoi_base(convert_nbr_base(n, base), base) == n


def test_convert_zero_uses_first_symbol():
    assert convert_nbr_base(0, "xyz") == "x"


def test_convert_rejects_short_base():
    with pytest.raises(ValueError):
        convert_nbr_base(3, "0")


def test_convert_out_of_range():
    with pytest.raises(OverflowError):
        convert_nbr_base(-(2**31) - 1, "01")


@pytest.mark.parametrize("n", [0, 9, 10, -1, -10, 2147483647, -2147483648])
def test_nbrlen_matches_text_length(n):
    assert nbrlen(n) == len(str(n))


@pytest.mark.parametrize("n", [0, 9, 10, 4294967295])
def test_nbrlen_uint_matches_text_length(n):
    assert nbrlen_uint(n) == len(str(n))


def test_nbrlen_uint_rejects_negative():
    with pytest.raises(ValueError):
        nbrlen_uint(-1)