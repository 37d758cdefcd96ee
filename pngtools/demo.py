"""Demonstrate deflating, inflating and checksumming a buffer."""

from __future__ import annotations

import sys
from typing import Sequence

from .crc import crc
from .zutil import Z_DEFAULT_COMPRESSION, ZlibError, mem_def, mem_inf

BUF_LEN = 256 * 16


def init_data(length: int) -> bytes:
    """Return ``length`` bytes cycling through the values 0 to 255."""
    return bytes(i % 256 for i in range(length))


def main(argv: Sequence[str] | None = None) -> int:
    """Compress a sample buffer, inflate it again and print its CRC."""
    source = init_data(BUF_LEN)

    try:
        deflated = mem_def(source, Z_DEFAULT_COMPRESSION)
    except ZlibError as error:
        print(f"mem_def failed. ret = {error.code}.", file=sys.stderr)
        return error.code
    print(f"original len = {BUF_LEN}, len_def = {len(deflated)}")

    try:
        inflated = mem_inf(deflated)
    except ZlibError as error:
        print(f"mem_inf failed. ret = {error.code}.", file=sys.stderr)
    else:
        print(
            f"original len = {BUF_LEN}, len_def = {len(deflated)}, "
            f"len_inf = {len(inflated)}"
        )

    print(f"crc_val = {crc(deflated)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())