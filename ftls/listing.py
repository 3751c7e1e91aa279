"""Directory listing, in short or long format."""

from __future__ import annotations

import grp
import os
import pwd
import stat
import sys
import time
from typing import Iterable, Optional, TextIO

from ftls.options import Flags
from ftls.sorting import select_sort

_PERMISSIONS = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)


def blocks_total(paths: Iterable[str]) -> int:
    """Sum of allocated blocks of the given paths; paths that cannot be read count as 0."""
    total = 0
    for path in paths:
        try:
            total += os.stat(path).st_blocks
        except OSError:
            continue
    return total


def mode_string(mode: int) -> str:
    """Ten-character type and permission text, e.g. ``drwxr-xr-x``."""
    kind = "d" if stat.S_ISDIR(mode) else "-"
    return kind + "".join(ch if mode & bit else "-" for bit, ch in _PERMISSIONS)


def _user_name(uid: int) -> str:
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def _group_name(gid: int) -> str:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def long_entry(path: str) -> str:
    """Long-format details of ``path``: mode, links, owner, group, size and modification time."""
    info = os.stat(path)
    stamp = time.ctime(info.st_mtime)
    day, month, clock = stamp[8:10], stamp[4:7], stamp[11:16]
    return (
        f"{mode_string(info.st_mode)} {info.st_nlink} "
        f" {_user_name(info.st_uid)} {_group_name(info.st_gid)}"
        f" {info.st_size} {day} {month} {clock}"
    )


def list_directory(base: str, flags: Flags, out: Optional[TextIO] = None) -> None:
    """Write the listing of directory ``base`` (ending in ``/``) to ``out``."""
    stream = out if out is not None else sys.stdout
    names = [".", "..", *os.listdir(base)]
    paths = [base + name for name in names]
    if flags.long_format:
        stream.write(f"total {blocks_total(paths)}\n")
    prefix = len(base)
    for path in select_sort(paths, flags):
        name = path[prefix:]
        if name.startswith(".") and not flags.show_all:
            continue
        if flags.long_format:
            stream.write(f"{long_entry(path)} {name}\n")
        else:
            stream.write(f"{name} ")
    if not flags.long_format:
        stream.write("\n")