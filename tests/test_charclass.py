import string

import pytest

from minishell.charclass import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_letters_are_alpha_and_alnum(c):
    assert is_alpha(c) is True
    assert is_alnum(c) is True
    assert is_digit(c) is False


@pytest.mark.parametrize("c", list(string.digits))
def test_digits(c):
    assert is_digit(c) is True
    assert is_alnum(c) is True
    assert is_alpha(c) is False


@pytest.mark.parametrize("c", list(string.punctuation + " \t\n"))
def test_punctuation_and_space_are_not_alnum(c):
    assert is_alnum(c) is False


def test_integer_codes_accepted():
    assert is_alpha(ord("q")) is True
    assert is_digit(ord("7")) is True
    assert is_alpha(ord("@")) is False


def test_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False
    assert is_ascii("é") is False


def test_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


@pytest.mark.parametrize("upper", list(string.ascii_uppercase))
def test_case_round_trip(upper):
    lower = to_lower(upper)
    assert lower in string.ascii_lowercase
    assert to_upper(lower) == upper


@pytest.mark.parametrize("c", list(string.digits + string.punctuation + " "))
def test_case_conversion_leaves_others_unchanged(c):
    assert to_lower(c) == c
    assert to_upper(c) == c


def test_case_conversion_on_codes_returns_codes():
    assert to_lower(ord("A")) == ord("a")
    assert to_upper(ord("z")) == ord("Z")


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)