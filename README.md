# uls

`uls` lists files and directories in the style of `ls`. It supports a small,
fixed set of options. It runs on POSIX systems because it uses `pwd` and `grp`
to look up owner and group names.

## Installation

```
pip install .
```

## Usage

```
uls [-1AaflopRrS] [file ...]
```

You can also start it with `python -m uls.cli`.

Output order:

- With no operands, the current directory is listed.
- Operands are sorted before they are examined.
- Regular files named on the command line are printed first.
- Each directory follows. A `name:` heading is printed before it when files were also named or when more than one directory is listed.

| Flag | Meaning |
|------|---------|
| `-1` | One entry per line |
| `-A` | Show hidden entries, except `.` and `..` |
| `-a` | Show all entries, including `.` and `..` |
| `-f` | Do not sort; also shows all entries |
| `-l` | Long format: mode, links, owner, group, size, time, name |
| `-o` | Long format without the group column |
| `-p` | Append `/` to directory names |
| `-R` | Recurse into subdirectories |
| `-r` | Reverse the sort order |
| `-S` | Sort by size, largest first |

`-A` and `-a` replace each other. Because the arguments are sorted before
they are read, `-a` wins when both are given as separate arguments. Within a
single argument such as `-aA`, the later letter wins.

Errors:

- An unknown option letter prints `uls: illegal option -- <letter>` and the usage line to standard error. The program then stops.
- An operand that does not exist is reported as `uls: <name>: No such file or directory`.
- A directory that cannot be read is reported as `uls: <name>: Permission denied` when access was refused.

The exit status is always 0.

In long format:

- The first line is `total <blocks>`.
- Times of entries changed within about six months show the hour and minute. Older entries show the year instead.
- Unknown user or group ids are shown as numbers.

In column mode, each cell is as wide as the longest name, rounded up past the
next multiple of eight. Names run down the columns to fit the terminal width.
When output is not a terminal, cells are not padded.

## Library use

The pieces can be imported directly:

```python
from uls.options import parse_args
from uls.cli import render_all

parsed = parse_args(["-l", "."])
print(render_all(parsed.files, parsed.dirs, parsed.flags, 80, True), end="")
```

Modules:

- `uls.options`: `parse_args`, `merge_flags`, `ParsedArgs` and `IllegalOptionError`.
- `uls.listing`: reads and orders directory entries, and gathers file statistics with `read_directory`, `sort_names`, `mode_string`, `total_blocks` and related functions.
- `uls.render`: builds the three layouts with `format_long`, `format_columns` and `format_single`.
- `uls.cli`: `render_files`, `render_dirs`, `render_all` and `main`.
- `uls.strutil`: general string and number helpers such as `strsplit`, `del_extra_spaces`, `replace_substr`, `hex_to_nbr`, `nbr_to_hex`, `bubble_sort`, `quicksort`, `binary_search` and `encode_unicode`.

## Limitations

- The mode column shows only `d` or `-` as the entry type.
- Symbolic link targets are not shown.
- There is no colour output.
- No other options are supported beyond those listed above.

## Running the tests

```
pip install .[test]
pytest
```