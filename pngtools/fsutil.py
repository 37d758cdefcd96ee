"""Small file-system utilities: file types, directory listings, argument echo."""

from __future__ import annotations

import os
import stat
import sys
from os import PathLike
from pathlib import Path
from typing import Sequence


def file_type(path: str | PathLike[str]) -> str:
    """Return a description of the type of ``path`` without following links.

    Raises :class:`OSError` if the path cannot be examined.
    """
    mode = os.lstat(path).st_mode
    if stat.S_ISREG(mode):
        return "regular"
    if stat.S_ISDIR(mode):
        return "directory"
    if stat.S_ISCHR(mode):
        return "character special"
    if stat.S_ISBLK(mode):
        return "block special"
    if stat.S_ISFIFO(mode):
        return "fifo"
    if stat.S_ISLNK(mode):
        return "symbolic link"
    if stat.S_ISSOCK(mode):
        return "socket"
    return "**unknown mode**"


def list_names(path: str | PathLike[str]) -> list[str]:
    """Return every entry name of a directory, including ``.`` and ``..``."""
    return [os.curdir, os.pardir, *os.listdir(path)]


def ls_main(argv: Sequence[str] | None = None) -> int:
    """List the names in the directory given as the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: ls_fname <directory name>", file=sys.stderr)
        return 1
    directory = args[0]
    try:
        names = list_names(directory)
    except OSError as error:
        print(f"opendir({directory}): {error.strerror or error}", file=sys.stderr)
        return 2
    for name in names:
        print(name)
    return 0


def ftype_main(argv: Sequence[str] | None = None) -> int:
    """Print the type of each path given as an argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    for path in args:
        print(f"{path}: ", end="")
        try:
            kind = file_type(path)
        except OSError as error:
            sys.stdout.flush()
            print(f"lstat error: {error.strerror or error}", file=sys.stderr)
            continue
        print(kind)
    return 0


def args_main(argv: Sequence[str] | None = None) -> int:
    """Print every command-line argument, the program name first."""
    args = list(sys.argv[1:] if argv is None else argv)
    program = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "args"
    print("A complete list of command line arguments:")
    for index, value in enumerate([program, *args]):
        print(f"argv[{index}]={value}")
    return 0