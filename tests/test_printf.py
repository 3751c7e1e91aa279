import io

import pytest

from ftls.printf import (
    format_address,
    format_hex,
    format_printf,
    format_unsigned,
    printf,
)


@pytest.mark.parametrize("n", [0, 1, 15, 16, 255, 4096, 2**40 + 7])
def test_format_hex_round_trip(n):
    assert int(format_hex(n, False), 16) == n
    assert int(format_hex(n, True), 16) == n


def test_format_hex_case():
    text = format_hex(0xABCDEF, True)
    assert text == text.upper()
    assert format_hex(0xABCDEF, False) == text.lower()


def test_format_hex_negative_rejected():
    with pytest.raises(ValueError):
        format_hex(-1, False)


def test_format_address_nil():
    assert format_address(None) == "(nil)"
    assert format_address(0) == "(nil)"


def test_format_address_prefix():
    text = format_address(0x7FFE1234)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0x7FFE1234


def test_format_unsigned_wraps():
    assert format_unsigned(-1) == "4294967295"
    assert format_unsigned(123) == str(123)


def test_percent_literal():
    assert format_printf("%%") == "%"


def test_unknown_conversion_kept():
    assert format_printf("%q") == "%q"
    assert format_printf("100%") == "100%"


def test_string_and_null():
    assert format_printf("%s", None) == "(null)"
    assert format_printf("a %s b", "mid") == "a mid b"


def test_char_conversion():
    assert format_printf("%c%c", "x", ord("y")) == "xy"


def test_decimal_round_trip():
    for value in (0, -5, 2147483647, -2147483648):
        assert int(format_printf("%d", value)) == value
        assert format_printf("%i", value) == format_printf("%d", value)


def test_hex_conversions():
    assert int(format_printf("%x", 3054), 16) == 3054
    assert format_printf("%X", 3054) == format_printf("%x", 3054).upper()


def test_missing_argument():
    with pytest.raises(ValueError):
        format_printf("%d %d", 1)


def test_none_template():
    with pytest.raises(TypeError):
        format_printf(None)


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf(stream, "total %d\n", 12)
    assert stream.getvalue() == "total 12\n"
    assert count == len(stream.getvalue())