"""Case-insensitive ordering of file names."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, Optional

from ftls.chars import to_lower
from ftls.options import Flags


def compare_names(first: Optional[str], second: Optional[str]) -> int:
    """Compare two names ignoring ASCII case.

    Returns a negative, zero or positive number; the end of a name counts as
    code 0. A missing name compares equal to anything.
    """
    if first is None or second is None:
        return 0
    for a, b in zip(first, second):
        diff = to_lower(ord(a)) - to_lower(ord(b))
        if diff:
            return diff
    shorter = min(len(first), len(second))
    a = to_lower(ord(first[shorter])) if shorter < len(first) else 0
    b = to_lower(ord(second[shorter])) if shorter < len(second) else 0
    return a - b


_KEY = cmp_to_key(compare_names)


def sort_names(names: Iterable[str]) -> list[str]:
    """Names in ascending case-insensitive order; equal names keep their order."""
    return sorted(names, key=_KEY)


def sort_names_reverse(names: Iterable[str]) -> list[str]:
    """Names in descending case-insensitive order; equal names keep their order."""
    return sorted(names, key=_KEY, reverse=True)


def select_sort(names: Iterable[str], flags: Flags) -> list[str]:
    """Sort names in the order the flags ask for."""
    return sort_names_reverse(names) if flags.reverse else sort_names(names)