import string

import pytest

from sigtalk.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_space,
    itoa,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("ch", [" ", "\t", "\n", "\v", "\f", "\r"])
def test_is_space_accepts_whitespace(ch):
    assert is_space(ch) is True
    assert is_space(ord(ch)) is True


@pytest.mark.parametrize("ch", ["a", "0", "_", "\x00"])
def test_is_space_rejects_others(ch):
    assert is_space(ch) is False


def test_classifiers_match_ascii_sets():
    for code in range(256):
        ch = chr(code)
        assert is_digit(code) == (ch in string.digits)
        assert is_alpha(code) == (ch in string.ascii_letters)
        assert is_alnum(code) == (ch in string.ascii_letters + string.digits)
        assert is_ascii(code) == (code < 128)


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


def test_is_ascii_rejects_negative():
    assert is_ascii(-1) is False


def test_case_mapping_on_strings():
    assert to_upper("a") == "A"
    assert to_lower("Z") == "z"
    assert to_upper("5") == "5"
    assert to_lower("!") == "!"


def test_case_mapping_on_codes_round_trip():
    for ch in string.ascii_lowercase:
        upper = to_upper(ord(ch))
        assert upper == ord(ch.upper())
        assert to_lower(upper) == ord(ch)


def test_classifier_rejects_multi_character_string():
    with pytest.raises(ValueError):
        is_digit("12")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -42abc", -42),
        ("\t\n+17", 17),
        ("abc", 0),
        ("", 0),
        ("-", 0),
        ("+-3", 0),
        ("007", 7),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("n", [0, 5, -5, 10, 2147483647, -2147483648, 123456789012])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_values():
    assert itoa(0) == "0"
    assert itoa(-7) == "-7"
    assert itoa(1234) == "1234"