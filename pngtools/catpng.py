"""Stack PNG images of equal width vertically into a single PNG."""

from __future__ import annotations

import dataclasses
import sys
from os import PathLike
from pathlib import Path
from typing import Iterable, Sequence

from .png import IHDR, PNG_SIGNATURE, Chunk, PNGError, PNGFile, read_png
from .zutil import Z_DEFAULT_COMPRESSION, ZlibError, mem_def, mem_inf

OUTPUT_NAME = "all.png"
_PROG = "catpng"


def uncompress_idat(image: PNGFile) -> bytes:
    """Return the inflated image data of the PNG's IDAT chunk.

    Raises :class:`ZlibError` if the data is not a valid zlib stream.
    """
    return mem_inf(image.idat_chunk.data)


def same_width(images: Iterable[PNGFile]) -> bool:
    """Return True if every image has the width of the first one."""
    images = list(images)
    return all(image.width == images[0].width for image in images[1:])


def concatenate(images: Iterable[PNGFile]) -> tuple[bytes, int]:
    """Return the images' inflated data joined in order, and their total height."""
    images = list(images)
    data = b"".join(uncompress_idat(image) for image in images)
    height = sum(image.height for image in images)
    return data, height


def build_png(ihdr: IHDR, height: int, idat: bytes) -> bytes:
    """Return a complete PNG with ``ihdr``'s fields, the given height and compressed data."""
    header = dataclasses.replace(ihdr, height=height)
    chunks = (
        Chunk(b"IHDR", header.to_bytes()),
        Chunk(b"IDAT", idat),
        Chunk(b"IEND"),
    )
    return PNG_SIGNATURE + b"".join(chunk.to_bytes() for chunk in chunks)


def write_png(path: str | PathLike[str], data: bytes) -> None:
    """Write the PNG bytes to ``path``, replacing any existing file."""
    Path(path).write_bytes(data)


def main(argv: Sequence[str] | None = None) -> int:
    """Concatenate the PNG files named in ``argv`` into ``all.png``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(f"Usage: {_PROG} <png file> ...", file=sys.stderr)
        return 1

    images: list[PNGFile] = []
    raw_parts: list[bytes] = []
    for path in args:
        try:
            image = read_png(path)
        except PNGError as error:
            print(error)
            print(f"{path} PNG file is not good.")
            return 0
        except OSError as error:
            print(f"Couldn't open {path}: {error.strerror or error}", file=sys.stderr)
            return 1
        errors = image.crc_errors()
        if errors:
            for error in errors:
                print(f"{error} ")
            print(f"{path} PNG file is not good.")
            return 0
        try:
            raw_parts.append(uncompress_idat(image))
        except ZlibError:
            print("IDAT mem_inf uncompression not succesful.")
            return 0
        images.append(image)

    if not same_width(images):
        print("The PNG files do not have the same width.")
        return 0

    height = sum(image.height for image in images)
    try:
        compressed = mem_def(b"".join(raw_parts), Z_DEFAULT_COMPRESSION)
    except ZlibError as error:
        print(f"mem_def failed. ret = {error.code}.", file=sys.stderr)
        print("IDAT mem_def uncompression not succesful.")
        return 0

    try:
        write_png(OUTPUT_NAME, build_png(images[0].header, height, compressed))
    except OSError as error:
        print(f"Couldn't create {OUTPUT_NAME}: {error.strerror or error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())