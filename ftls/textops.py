"""Text and string-list helpers: splitting, trimming, joining, templating and list building."""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence


def _check_separator(sep: str) -> None:
    if len(sep) != 1:
        raise ValueError(f"expected a single separator character, got {sep!r}")


def count_words(text: str, sep: str) -> int:
    """Number of non-empty runs of characters in ``text`` between occurrences of ``sep``."""
    _check_separator(sep)
    return sum(1 for word in text.split(sep) if word)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces between repeated separators."""
    _check_separator(sep)
    return [word for word in text.split(sep) if word]


def trim(text: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``text``."""
    if not chars:
        return text
    return text.strip(chars)


def substring(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from index ``start``.

    A start beyond the end of ``text`` gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def join(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    if first is None or second is None:
        raise TypeError("both strings are required")
    return first + second


def build_string(template: str, *args: object) -> str:
    """Fill a template in which each ``%s`` takes the next argument.

    Any other ``%`` followed by a character is dropped together with that
    character and consumes no argument; a ``%`` at the very end is kept.
    Raises ValueError when there are fewer arguments than ``%s`` markers.
    """
    pieces: list[str] = []
    remaining = iter(args)
    i = 0
    start = 0
    while i < len(template):
        if template[i] == "%" and i + 1 < len(template):
            pieces.append(template[start:i])
            if template[i + 1] == "s":
                try:
                    pieces.append(str(next(remaining)))
                except StopIteration:
                    raise ValueError("not enough arguments for template") from None
            i += 2
            start = i
        else:
            i += 1
    pieces.append(template[start:])
    return "".join(pieces)


def count_char(text: str, c: str) -> int:
    """Number of occurrences of the character ``c`` in ``text``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return text.count(c)


def map_chars(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def iter_chars(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(index, char)`` on every character.

    When ``func`` returns a character it replaces the original one; when it
    returns None the character is kept. The resulting string is returned.
    """
    result = []
    for index, ch in enumerate(text):
        replacement = func(index, ch)
        result.append(ch if replacement is None else replacement)
    return "".join(result)


def append(items: Optional[Sequence[str]], item: str) -> list[str]:
    """Return a new list holding ``items`` (None counts as empty) followed by ``item``."""
    return [*(items or ()), item]


def extend(items: Optional[Sequence[str]], extra: Iterable[str]) -> list[str]:
    """Return a new list holding ``items`` followed by every element of ``extra``."""
    return [*(items or ()), *extra]


def duplicate(items: Sequence[str]) -> list[str]:
    """Return an independent copy of ``items``."""
    return list(items)


def array_length(items: Optional[Sequence[str]]) -> int:
    """Number of elements in ``items``; None counts as empty."""
    return 0 if items is None else len(items)