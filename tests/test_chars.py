import pytest

from treasure.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)

ALL_BYTES = [chr(code) for code in range(256)]


@pytest.mark.parametrize("c", ALL_BYTES)
def test_classification_matches_ascii_rules(c):
    ascii_char = c.isascii()
    assert is_alpha(c) == (ascii_char and c.isalpha())
    assert is_digit(c) == (ascii_char and c.isdigit())
    assert is_alnum(c) == (ascii_char and c.isalnum())
    assert is_ascii(c) == ascii_char
    assert is_print(c) == (ascii_char and c.isprintable())


def test_classification_accepts_code_points():
    assert is_alpha(ord("q"))
    assert is_digit(ord("7"))
    assert not is_ascii(-1)
    assert not is_print(ord("\x7f"))
    assert is_print(ord(" "))


def test_classification_rejects_long_strings():
    with pytest.raises(ValueError):
        is_alpha("ab")


@pytest.mark.parametrize("c", [chr(code) for code in range(128)])
def test_case_conversion_matches_ascii(c):
    assert to_upper(c) == c.upper()
    assert to_lower(c) == c.lower()


def test_case_conversion_keeps_integer_type():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")
    assert to_upper(ord("é")) == ord("é")


def test_case_round_trip():
    for c in "abcdefghijklmnopqrstuvwxyz":
        assert to_lower(to_upper(c)) == c


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi("\t\n\v\f\r 7") == 7
    assert atoi("  -42abc") == -42
    assert atoi("+15 16") == 15


def test_atoi_without_digits_is_zero():
    assert atoi("") == 0
    assert atoi("+-5") == 0
    assert atoi("abc") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("-2147483648") == -2147483648
    assert atoi("2147483648") == -2147483648


def test_itoa_min_int():
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 123456, 2147483647, -2147483647])
def test_itoa_atoi_round_trip(n):
    assert itoa(n) == str(n)
    assert atoi(itoa(n)) == n