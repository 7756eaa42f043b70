"""The uls command: list files and directories."""

from __future__ import annotations

import errno
import shutil
import sys
from collections.abc import Iterable, Sequence

from uls.listing import full_path, is_dir, read_directory
from uls.options import IllegalOptionError, parse_args
from uls.render import format_columns, format_long, format_single


def base_name(path: str) -> str:
    """Return the part of ``path`` after its last slash."""
    return path.rpartition("/")[2]


def format_error(path: str, error: OSError | None) -> str:
    """Render the message printed when a directory cannot be listed."""
    reason = (
        "Permission denied"
        if error is not None and error.errno == errno.EACCES
        else ""
    )
    return f"uls: {base_name(path)}: {reason}\n"


def render_files(
    names: Sequence[str], flags: str, directory: str, width: int, is_tty: bool
) -> str:
    """Render entries in the layout the flags select."""
    if not names:
        return ""
    if "l" in flags or "o" in flags:
        return format_long(names, directory, flags)
    if "1" in flags:
        return format_single(names, directory, flags)
    return format_columns(names, directory, flags, width, is_tty)


def _render_subdirs(directory: str, flags: str, width: int, is_tty: bool) -> str:
    try:
        names = read_directory(directory, flags)
    except OSError as exc:
        return format_error(directory, exc)
    if not names:
        return format_error(directory, None)
    subdirs = [
        full_path(name, directory)
        for name in names
        if name not in (".", "..") and is_dir(full_path(name, directory))
    ]
    if not subdirs:
        return ""
    return "\n" + render_dirs(subdirs, flags, False, width, is_tty)


def render_dirs(
    dirs: Iterable[str], flags: str, only_dir: bool, width: int, is_tty: bool
) -> str:
    """Render the contents of each directory, with headers unless it is the only one."""
    dirs = list(dirs)
    last = len(dirs) - 1
    out = []
    for index, directory in enumerate(dirs):
        if not only_dir or index > 0 or index < last:
            out.append(f"{directory}:\n")
        try:
            names = read_directory(directory, flags)
        except OSError as exc:
            out.append(format_error(directory, exc))
            continue
        if not names:
            out.append(format_error(directory, None))
            continue
        out.append(render_files(names, flags, directory, width, is_tty))
        if "R" in flags:
            out.append(_render_subdirs(directory, flags, width, is_tty))
        if index < last:
            out.append("\n")
    return "".join(out)


def render_all(
    files: Sequence[str], dirs: Sequence[str], flags: str, width: int, is_tty: bool
) -> str:
    """Render the named files first, then the named directories."""
    out = render_files(files, flags, "./", width, is_tty)
    if dirs and files:
        out += "\n"
    return out + render_dirs(dirs, flags, not files, width, is_tty)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command with ``argv`` (defaults to the process arguments)."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        parsed = parse_args(args)
    except IllegalOptionError as exc:
        sys.stderr.write(str(exc))
        return 0
    for path in parsed.missing:
        sys.stderr.write(f"uls: {path}: No such file or directory\n")
    width = shutil.get_terminal_size().columns
    is_tty = sys.stdout.isatty()
    sys.stdout.write(render_all(parsed.files, parsed.dirs, parsed.flags, width, is_tty))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())