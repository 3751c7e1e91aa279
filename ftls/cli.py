"""Command entry point: list a directory."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from ftls.listing import list_directory
from ftls.options import parse_arguments

DEFAULT_BASE = "./"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """List the first folder named in ``argv``, or the current directory when none is named."""
    args = parse_arguments(sys.argv[1:] if argv is None else argv)
    if args.folders:
        base = args.folders[0]
    elif not args.files:
        base = DEFAULT_BASE
    else:
        return 0
    try:
        list_directory(base, args.flags, sys.stdout)
    except OSError as exc:
        print(f"ftls: cannot open directory '{base}': {exc.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())