"""A small printf: ``%c %s %p %d %i %u %x %X %%`` conversions written to a text stream."""

from __future__ import annotations

import sys
from typing import Iterator, Optional, TextIO, Union

_CONVERSIONS = "cspduixX%"
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_UINT_MODULUS = 2**32


def _to_int32(value: int) -> int:
    """Reduce ``value`` to a 32-bit signed integer, as a C ``int`` argument would be."""
    value %= _UINT_MODULUS
    return value - _UINT_MODULUS if value >= 2**31 else value


def _require_int(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return value


def format_hex(number: int, upper: bool = False) -> str:
    """Hexadecimal digits of a non-negative integer, without prefix."""
    number = _require_int(number)
    if number < 0:
        raise ValueError(f"negative number: {number}")
    digits = _HEX_UPPER if upper else _HEX_LOWER
    out = [digits[number % 16]]
    number //= 16
    while number:
        out.append(digits[number % 16])
        number //= 16
    return "".join(reversed(out))


def format_address(value: Optional[int]) -> str:
    """``0x``-prefixed lower-case hexadecimal address; None or 0 gives ``(nil)``."""
    if value is None or value == 0:
        return "(nil)"
    value = _require_int(value)
    if value < 0:
        raise ValueError(f"negative address: {value}")
    return "0x" + format_hex(value, False)


def format_unsigned(number: int) -> str:
    """Decimal text of ``number`` taken as a 32-bit unsigned integer."""
    return str(_require_int(number) % _UINT_MODULUS)


def _next_arg(values: Iterator[object]) -> object:
    try:
        return next(values)
    except StopIteration:
        raise ValueError("not enough arguments for template") from None


def _format_char(value: object) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(_require_int(value) & 0xFF)


def _convert(spec: str, values: Iterator[object]) -> str:
    if spec == "%":
        return "%"
    value = _next_arg(values)
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return format_address(value)  # type: ignore[arg-type]
    if spec in "di":
        return str(_to_int32(_require_int(value)))
    if spec == "u":
        return format_unsigned(value)  # type: ignore[arg-type]
    return format_hex(_require_int(value) % _UINT_MODULUS, spec == "X")


def format_printf(template: str, *args: object) -> str:
    """Expand ``template`` with ``args``.

    A ``%`` not followed by a known conversion is kept as is, and the
    character after it is treated as ordinary text. Raises ValueError when
    the template asks for more arguments than were given.
    """
    if template is None:
        raise TypeError("a template is required")
    values = iter(args)
    out: list[str] = []
    i = 0
    while i < len(template):
        ch = template[i]
        spec = template[i + 1] if i + 1 < len(template) else ""
        if ch == "%" and spec and spec in _CONVERSIONS:
            out.append(_convert(spec, values))
            i += 2
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def printf(stream: Union[TextIO, None], template: str, *args: object) -> int:
    """Write the expanded template to ``stream`` (standard output when None).

    Returns the number of characters written.
    """
    text = format_printf(template, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)