"""Helpers that write characters, strings, numbers and string lists to a text stream."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return stream if stream is not None else sys.stdout


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text``; None writes nothing."""
    if text is None:
        return
    _target(stream).write(text)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline."""
    put_str(text, stream)
    _target(stream).write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal text of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _target(stream).write(str(n))


def print_array(lines: Optional[Iterable[str]], stream: Optional[TextIO] = None) -> None:
    """Write each line, adding a newline where it lacks one, then three blank lines.

    None writes nothing.
    """
    if lines is None:
        return
    out = _target(stream)
    for line in lines:
        out.write(line if line.endswith("\n") else line + "\n")
    out.write("\n\n\n")