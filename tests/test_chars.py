import string

import pytest

from ftls.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_sign,
    is_whitespace,
    to_lower,
)


def test_alpha_accepts_all_ascii_letters():
    assert all(is_alpha(c) for c in string.ascii_letters)


def test_alpha_rejects_digits_and_punctuation():
    assert not any(is_alpha(c) for c in string.digits + string.punctuation + " ")


def test_alpha_matches_str_method_over_ascii():
    for code in range(128):
        assert is_alpha(code) == chr(code).isalpha()


def test_digit_accepts_only_digits():
    for code in range(128):
        assert is_digit(code) == (chr(code) in string.digits)


def test_alnum_is_union_of_alpha_and_digit():
    for code in range(200):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


def test_print_matches_printable_set():
    printable = set(string.printable) - set(string.whitespace) | {" "}
    for code in range(128):
        assert is_print(code) == (chr(code) in printable)


def test_sign():
    assert is_sign("+") is True
    assert is_sign("-") is True
    assert is_sign(0) is False
    assert is_sign("*") is False


def test_whitespace_matches_string_whitespace():
    for code in range(128):
        assert is_whitespace(code) == (chr(code) in string.whitespace)


def test_to_lower_on_uppercase_strings():
    for upper, lower in zip(string.ascii_uppercase, string.ascii_lowercase):
        assert to_lower(upper) == lower


def test_to_lower_keeps_int_type():
    assert to_lower(ord("Q")) == ord("q")


def test_to_lower_leaves_other_characters():
    for c in string.ascii_lowercase + string.digits + string.punctuation:
        assert to_lower(c) == c


def test_to_lower_leaves_non_ascii():
    assert to_lower("É") == "É"


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)