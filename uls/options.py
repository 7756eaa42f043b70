"""Command-line argument parsing: option letters, files and directories."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterable
from dataclasses import dataclass, field

ALLOWED_OPTIONS = "1AaflopRrS"
USAGE = f"usage: uls [-{ALLOWED_OPTIONS}] [file ...]"


class IllegalOptionError(ValueError):
    """Raised when an argument carries an option letter that is not supported."""

    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f"uls: illegal option -- {option}\n{USAGE}\n")


@dataclass
class ParsedArgs:
    """The outcome of parsing the command line."""

    flags: str = ""
    files: list[str] = field(default_factory=list)
    dirs: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)


def merge_flags(flags: str, arg: str) -> str:
    """Add the option letters of ``arg`` to ``flags`` and return the result.

    Letters already present and dashes are ignored; ``a`` and ``A`` replace
    each other. Raises IllegalOptionError for an unsupported letter.
    """
    for char in arg:
        if char == "-" or char in flags:
            continue
        if char not in ALLOWED_OPTIONS:
            raise IllegalOptionError(char)
        if char == "A" and "a" in flags:
            flags = flags.replace("a", "A", 1)
        elif char == "a" and "A" in flags:
            flags = flags.replace("A", "a", 1)
        else:
            flags += char
    return flags


def parse_args(args: Iterable[str]) -> ParsedArgs:
    """Split sorted arguments into options, regular files and directories.

    Paths that cannot be examined are collected in ``missing``. When nothing
    is named and nothing is missing, the current directory is listed.
    """
    parsed = ParsedArgs()
    for arg in sorted(args):
        if arg.startswith("-"):
            parsed.flags = merge_flags(parsed.flags, arg)
            continue
        try:
            info = os.stat(arg)
        except OSError:
            parsed.missing.append(arg)
            continue
        if stat.S_ISREG(info.st_mode):
            parsed.files.append(arg)
        else:
            parsed.dirs.append(arg)
    if not parsed.missing and not parsed.files and not parsed.dirs:
        parsed.dirs.append(".")
    return parsed