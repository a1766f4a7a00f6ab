import string

import pytest

from pipeforge.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_letters_are_alpha(c):
    assert is_alpha(c)
    assert is_alpha(ord(c))
    assert is_alnum(c)
    assert not is_digit(c)


@pytest.mark.parametrize("c", list(string.digits))
def test_digits(c):
    assert is_digit(c)
    assert is_alnum(c)
    assert not is_alpha(c)


@pytest.mark.parametrize("c", ["[", "@", "`", "{", " ", "\x00", "é"])
def test_non_alnum(c):
    assert not is_alpha(c)
    assert not is_alnum(c)
    assert not is_digit(c)


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_is_print_bounds():
    assert is_print(" ")
    assert is_print("~")
    assert not is_print(31)
    assert not is_print(127)


def test_printable_matches_string_module():
    printable = set(string.digits + string.ascii_letters + string.punctuation + " ")
    for code in range(256):
        assert is_print(code) == (chr(code) in printable)


@pytest.mark.parametrize("c", list(string.ascii_lowercase))
def test_case_round_trip(c):
    upper = to_upper(c)
    assert upper == c.upper()
    assert to_lower(upper) == c


def test_case_conversion_keeps_int_kind():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")


@pytest.mark.parametrize("code", [91, 64, 96, 123, ord("5"), 200, -3])
def test_case_conversion_leaves_others(code):
    assert to_upper(code) == code
    assert to_lower(code) == code


def test_multi_char_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")