"""Formatting of directory entries: long, column and one-per-line layouts."""

from __future__ import annotations

import grp
import os
import pwd
import time
from collections.abc import Iterable

from uls.listing import (
    column_width,
    full_path,
    is_dir,
    max_links,
    max_size,
    mode_string,
    total_blocks,
)

# Files changed longer ago than this show the year instead of the time.
RECENT_SECONDS = 15811200


def format_time(mtime: float, ctime: float, now: float) -> str:
    """Render a modification time as ``Mmm dd hh:mm`` or ``Mmm dd  yyyy``."""
    stamp = time.ctime(mtime)
    if now - ctime < RECENT_SECONDS:
        return stamp[4:10] + stamp[10:16]
    return stamp[4:10] + " " + stamp[19:24]


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


def _suffix(name: str, directory: str, flags: str) -> str:
    """Return the ``/`` marker for directories when the ``p`` flag is set."""
    if "p" not in flags:
        return ""
    path = full_path(name, directory)
    if is_dir(path):
        return "/"
    return ""


def format_long(
    names: Iterable[str], directory: str, flags: str, now: float | None = None
) -> str:
    """Render the long listing, headed by the block total."""
    names = list(names)
    if now is None:
        now = time.time()
    links_width = len(str(max_links(names, directory)))
    size_width = len(str(max_size(names, directory)))
    lines = [f"total {total_blocks(names, directory)}\n"]
    for name in names:
        path = full_path(name, directory)
        info = os.lstat(path)
        parts = [
            mode_string(path),
            "  ",
            str(info.st_nlink).rjust(links_width),
            " ",
            _user_name(info.st_uid),
        ]
        if "o" not in flags:
            parts += ["  ", _group_name(info.st_gid)]
        parts += [
            "  ",
            str(info.st_size).rjust(size_width),
            " ",
            format_time(info.st_mtime, info.st_ctime, now),
            " ",
            name,
            _suffix(name, directory, flags),
            "\n",
        ]
        lines.append("".join(parts))
    return "".join(lines)


def format_columns(
    names: Iterable[str], directory: str, flags: str, width: int, is_tty: bool
) -> str:
    """Render names down columns that fit ``width``; cells are padded only on a terminal."""
    names = list(names)
    cell_width = column_width(names)
    cols = max(width // cell_width, 1)
    rows = len(names) // cols
    if rows == 0 or len(names) % cols:
        rows += 1
    lines = []
    for row in range(rows):
        cells = []
        for name in names[row::rows][:cols]:
            cell = name + _suffix(name, directory, flags)
            cells.append(cell.ljust(cell_width) if is_tty else cell)
        lines.append("".join(cells) + "\n")
    return "".join(lines)


def format_single(names: Iterable[str], directory: str, flags: str) -> str:
    """Render one name per line."""
    return "".join(f"{name}{_suffix(name, directory, flags)}\n" for name in names)