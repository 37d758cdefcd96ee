"""Search a directory tree for PNG files."""

from __future__ import annotations

import os
import sys
from os import PathLike
from typing import Iterator, Sequence

from .fsutil import file_type
from .png import PNG_SIG_SIZE, is_png

_PROG = "findpng"


def find_pngs(directory: str | PathLike[str]) -> Iterator[str]:
    """Yield the path of every file under ``directory`` that starts with a PNG signature.

    Directories are descended into; symbolic links are not followed. Paths are
    built by joining names with ``/`` onto ``directory``. Raises
    :class:`OSError` if a directory cannot be listed or a file cannot be read.
    """
    base = os.fspath(directory)
    for name in os.listdir(base):
        full_path = f"{base}/{name}"
        try:
            kind = file_type(full_path)
        except OSError:
            continue
        if kind == "directory":
            yield from find_pngs(full_path)
        elif kind == "regular":
            with open(full_path, "rb") as stream:
                if is_png(stream.read(PNG_SIG_SIZE)):
                    yield full_path


def _is_regular(path: str) -> bool:
    try:
        return file_type(path) == "regular"
    except OSError:
        return False


def main(argv: Sequence[str] | None = None) -> int:
    """Print every PNG file found under the directory given as the only argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(f"Usage: {_PROG} <directory name>", file=sys.stderr)
        return 1

    found = False
    try:
        for path in find_pngs(args[0]):
            found = True
            print(path)
    except OSError as error:
        target = os.fspath(error.filename) if error.filename else args[0]
        reason = error.strerror or error
        if _is_regular(target):
            print(f"Couldn't open {target}: {reason}", file=sys.stderr)
            return 1
        print(f"opendir({target}): {reason}", file=sys.stderr)
        return 2

    if not found:
        print(f"{_PROG}: No PNG file found ")
    return 0


if __name__ == "__main__":
    sys.exit(main())