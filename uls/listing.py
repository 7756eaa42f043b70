"""Reading directories, ordering entries and gathering file statistics."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterable

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


def full_path(name: str, directory: str) -> str:
    """Join ``name`` onto ``directory`` with exactly one slash between them."""
    separator = "" if directory.endswith("/") else "/"
    return f"{directory}{separator}{name}"


def _lstat(name: str, directory: str) -> os.stat_result:
    return os.lstat(full_path(name, directory))


def sort_by_size(names: Iterable[str], directory: str) -> list[str]:
    """Order names by file size, largest first; equal sizes keep their order."""
    return sorted(names, key=lambda name: _lstat(name, directory).st_size, reverse=True)


def sort_names(names: Iterable[str], flags: str, directory: str) -> list[str]:
    """Order names as the flags ask: unsorted (f), by size (S), reversed (r)."""
    names = list(names)
    if "f" in flags:
        return names
    ordered = sort_by_size(names, directory) if "S" in flags else sorted(names)
    if "r" in flags:
        ordered.reverse()
    return ordered


def read_directory(directory: str, flags: str) -> list[str]:
    """Return the entry names of ``directory`` filtered and ordered by ``flags``.

    Raises OSError when the directory cannot be read.
    """
    entries = [".", "..", *os.listdir(directory)]
    if "a" in flags or "f" in flags:
        kept = entries
    elif "A" in flags:
        kept = [name for name in entries if len(name) > 1 and name[1] != "."]
    else:
        kept = [name for name in entries if not name.startswith(".")]
    return sort_names(kept, flags, directory)


def column_width(names: Iterable[str]) -> int:
    """Width of one column: the longest name rounded up past the next tab stop."""
    longest = max(map(len, names), default=0)
    return (longest // 8 + 1) * 8


def mode_string(path: str) -> str:
    """Return the ten-character type and permission string of ``path``."""
    mode = os.lstat(path).st_mode
    kind = "d" if mode & stat.S_IFDIR else "-"
    return kind + "".join(char if mode & bit else "-" for bit, char in _PERMISSIONS)


def total_blocks(names: Iterable[str], directory: str) -> int:
    """Sum of the allocated blocks of the named entries."""
    return sum(_lstat(name, directory).st_blocks for name in names)


def max_links(names: Iterable[str], directory: str) -> int:
    """Largest hard-link count among the named entries, or 0."""
    return max((_lstat(name, directory).st_nlink for name in names), default=0)


def max_size(names: Iterable[str], directory: str) -> int:
    """Largest size in bytes among the named entries, or 0."""
    return max((_lstat(name, directory).st_size for name in names), default=0)


def is_dir(path: str) -> bool:
    """Return True if ``path`` is, or links to, a directory."""
    return os.path.isdir(path)