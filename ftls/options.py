"""Command-line argument classification for the directory lister."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable

FLAG_LETTERS = "lrRat"


@dataclass
class Flags:
    """Listing options selected on the command line."""

    long_format: bool = False
    reverse: bool = False
    recursive: bool = False
    show_all: bool = False
    by_time: bool = False


@dataclass
class Arguments:
    """Command-line arguments sorted into flags, folders and files."""

    flag_args: list[str] = field(default_factory=list)
    folders: list[str] = field(default_factory=list)
    files: list[str] = field(default_factory=list)
    flags: Flags = field(default_factory=Flags)


def is_flag_argument(arg: str) -> bool:
    """True for an option argument such as ``-la``.

    A dash followed only by letters from ``lrRat`` is a flag argument, and so
    is a lone dash. Any other argument of exactly one character is taken as a
    flag argument too.
    """
    if len(arg) == 1:
        return True
    return arg.startswith("-") and all(ch in FLAG_LETTERS for ch in arg[1:])


def is_folder(path: str) -> bool:
    """True when ``path`` is a directory that can be opened for listing."""
    try:
        with os.scandir(path):
            return True
    except OSError:
        return False


def is_readable_file(path: str) -> bool:
    """True when ``path`` can be opened for reading."""
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError:
        return False
    os.close(fd)
    return True


def _collect_flags(flag_args: Iterable[str]) -> Flags:
    flags = Flags()
    for arg in flag_args:
        if "l" in arg:
            flags.long_format = True
        if "a" in arg:
            flags.show_all = True
        if "r" in arg:
            flags.reverse = True
        if "R" in arg:
            flags.recursive = True
        if "t" in arg:
            flags.by_time = True
    return flags


def parse_arguments(argv: Iterable[str]) -> Arguments:
    """Sort ``argv`` (without the program name) into flags, folders and files.

    Folders are given a trailing ``/``. Arguments that are neither flags,
    folders nor readable files are ignored.
    """
    result = Arguments()
    for arg in argv:
        if is_flag_argument(arg):
            result.flag_args.append(arg)
        elif is_folder(arg):
            result.folders.append(arg)
        elif is_readable_file(arg):
            result.files.append(arg)
    result.flags = _collect_flags(result.flag_args)
    result.folders = [f if f.endswith("/") else f + "/" for f in result.folders]
    return result