"""Print the dimensions of a PNG file and report chunk CRC mismatches."""

from __future__ import annotations

import sys
from os import PathLike
from typing import Sequence

from .png import PNGError, read_png

_PROG = "pnginfo"


def describe_png(path: str | PathLike[str]) -> list[str]:
    """Return the report lines for the PNG at ``path``.

    The first line gives the image size; each following line describes a
    chunk whose stored CRC does not match its contents. Raises
    :class:`PNGError` if the file is not a PNG and :class:`OSError` if it
    cannot be read.
    """
    image = read_png(path)
    lines = [f"{path}: {image.width} x {image.height}"]
    lines.extend(f"{error} " for error in image.crc_errors())
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command with ``argv`` (excluding the program name)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(f"Usage: {_PROG} <png file>", file=sys.stderr)
        return 1
    path = args[0]
    try:
        lines = describe_png(path)
    except PNGError as error:
        print(error)
        return 0
    except OSError as error:
        print(f"Couldn't open {path}: {error.strerror or error}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())