"""String helpers: integer parsing and formatting, searching, comparing and bounded copies."""

from __future__ import annotations

from typing import NamedTuple, Optional, Union

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = "0123456789"

Text = Union[str, bytes]


class BoundedResult(NamedTuple):
    """Outcome of a size-limited copy: the text produced and the length it tried to create."""

    text: str
    length: int


def parse_int(text: str) -> int:
    """Parse a leading decimal integer, C style.

    Leading whitespace is skipped, one optional sign is accepted and digits are
    read until the first non-digit. Text without digits gives 0. Raises
    OverflowError when the value does not fit a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    number = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        number = number * 10 + int(ch)
        if not INT_MIN <= number * sign <= INT_MAX:
            raise OverflowError(f"{text!r} does not fit a 32-bit signed integer")
    return number * sign


def int_to_str(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit a 32-bit signed integer")
    return str(n)


def _as_char(c: Union[int, str]) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def find_char(text: str, c: Union[int, str]) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``text``, or None.

    Searching for the NUL character gives the length of ``text``.
    """
    ch = _as_char(c)
    index = text.find(ch)
    if index >= 0:
        return index
    return len(text) if ch == "\0" else None


def find_last_char(text: str, c: Union[int, str]) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``text``, or None.

    Searching for the NUL character gives the length of ``text``.
    """
    ch = _as_char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def str_equal(first: Optional[str], second: Optional[str]) -> bool:
    """True when both strings are present and identical."""
    if first is None or second is None:
        return False
    return first == second


def _codes(text: Text) -> list[int]:
    if isinstance(text, (bytes, bytearray)):
        return list(text)
    return [ord(ch) for ch in text]


def compare_prefix(first: Text, second: Text, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns 0 when they match, otherwise the difference between the first
    pair of codes that differ; the end of a string counts as code 0.
    """
    if n < 0:
        raise ValueError(f"negative length: {n}")
    a_codes = _codes(first)
    b_codes = _codes(second)
    for i in range(n):
        a = a_codes[i] if i < len(a_codes) else 0
        b = b_codes[i] if i < len(b_codes) else 0
        if a != b:
            return a - b
        if a == 0:
            return 0
    return 0


def find_substring(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` within the first ``length`` characters of ``haystack``, or None.

    An empty needle, or a zero length with an empty needle, matches at 0; a
    non-empty needle never matches within a zero length.
    """
    if length < 0:
        raise ValueError(f"negative length: {length}")
    if not needle:
        return 0
    if length == 0:
        return None
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def bounded_copy(src: str, size: int) -> BoundedResult:
    """Copy ``src`` into room for ``size`` characters including a terminator.

    The text holds at most ``size - 1`` characters; the length is that of ``src``.
    """
    if size < 0:
        raise ValueError(f"negative size: {size}")
    return BoundedResult(src[: max(size - 1, 0)], len(src))


def bounded_concat(dst: str, src: str, size: int) -> BoundedResult:
    """Append ``src`` to ``dst`` within room for ``size`` characters including a terminator.

    When ``size`` does not exceed the length of ``dst`` nothing is appended and
    the length is ``size + len(src)``; otherwise it is ``len(dst) + len(src)``.
    """
    if size < 0:
        raise ValueError(f"negative size: {size}")
    if size <= len(dst):
        return BoundedResult(dst, size + len(src))
    room = size - len(dst) - 1
    return BoundedResult(dst + src[:room], len(dst) + len(src))


def dup_prefix(text: str, size: int) -> str:
    """Return a copy of at most the first ``size`` characters of ``text``."""
    if size < 0:
        raise ValueError(f"negative size: {size}")
    return text[:size]