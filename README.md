# ftls

`ftls` lists the contents of a directory, in the manner of a minimal `ls`.
It runs on POSIX systems (it looks up owner and group names through the
system user and group databases).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

```
ftls [-lrRat] [directory ...]
```

Each argument is sorted into one of three kinds:

- a flag argument: a dash followed only by letters from `lrRat` (a lone `-`
  counts too). Any argument that is exactly one character long is also taken
  as a flag argument, so `ftls .` behaves like `ftls`.
- a folder: a directory that can be opened.
- a file: a path that can be opened for reading.

Anything else is silently ignored.

If a folder was named, the first folder is listed. If nothing was named, the
current directory (`./`) is listed. If only files were named, nothing is
printed.

Options can be given separately (`-l -a`) or grouped (`-la`):

- `-l` long format: a `total` line with the summed block count, then one line
  per entry with its type (`d` or `-`) and permission bits, link count,
  owner, group, size in bytes, modification day, month and time (`HH:MM`),
  and the name.
- `-a` include entries whose names start with `.`, including `.` and `..`.
- `-r` reverse the sort order.
- `-R` and `-t` are accepted and recorded in the parsed flags, but do not
  change the listing.

Entries are sorted by name, ignoring ASCII letter case. Without `-l`, names
are written on one line, each followed by a space, and the line ends with a
newline.

If the directory cannot be read, `ftls` prints
`ftls: cannot open directory '<dir>': <reason>` to standard error and exits
with status 1.

## What it does not do

- It lists only one directory per run: folders after the first are ignored.
- It does not list files named on the command line.
- It does not descend into subdirectories (`-R`) or sort by modification time
  (`-t`).
- It does not arrange short output in columns, and it does not report
  arguments that do not exist.

## Library use

The pieces behind the command can be used directly:

```python
import sys
from ftls.options import parse_arguments
from ftls.listing import list_directory

args = parse_arguments(["-la", "."])          # arguments without the program name
base = args.folders[0] if args.folders else "./"   # folders end in "/"
list_directory(base, args.flags, sys.stdout)
```

- `ftls.options`: `Flags` (`long_format`, `reverse`, `recursive`, `show_all`,
  `by_time`), `Arguments` (`flag_args`, `folders`, `files`, `flags`),
  `parse_arguments`, `is_flag_argument`, `is_folder`, `is_readable_file`.
- `ftls.sorting`: `compare_names`, `sort_names`, `sort_names_reverse`,
  `select_sort`.
- `ftls.listing`: `list_directory`, `long_entry`, `mode_string`,
  `blocks_total`.
- `ftls.cli`: `main(argv=None)`, the entry point of the `ftls` command; it
  returns the exit status.

The package also carries small general-purpose helpers:

- `ftls.chars`: ASCII classification (`is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`, `is_sign`, `is_whitespace`) and `to_lower`.
- `ftls.memory`: byte-buffer operations (`mem_set`, `zero`,
  `allocate_zeroed`, `mem_chr`, `mem_cmp`, `mem_copy`, `mem_move`).
- `ftls.strings`: `parse_int` (32-bit, raises `OverflowError`), `int_to_str`,
  `find_char`, `find_last_char`, `str_equal`, `compare_prefix`,
  `find_substring`, `bounded_copy`, `bounded_concat` (both returning a
  `BoundedResult`), `dup_prefix`.
- `ftls.textops`: `split`, `count_words`, `trim`, `substring`, `join`,
  `build_string` (`%s` templates), `count_char`, `map_chars`, `iter_chars`,
  and list helpers `append`, `extend`, `duplicate`, `array_length`.
- `ftls.printf`: `format_printf` and `printf` with the conversions
  `%c %s %p %d %i %u %x %X %%`, plus `format_hex`, `format_address` and
  `format_unsigned`.
- `ftls.output`: `put_char`, `put_str`, `put_endl`, `put_nbr` and
  `print_array`, writing to a given stream or standard output.