"""In-memory deflation and inflation of zlib streams."""

from __future__ import annotations

import zlib

Z_OK = 0
Z_STREAM_END = 1
Z_NEED_DICT = 2
Z_STREAM_ERROR = -2
Z_DATA_ERROR = -3
Z_MEM_ERROR = -4
Z_VERSION_ERROR = -6

Z_NO_COMPRESSION = 0
Z_BEST_SPEED = 1
Z_BEST_COMPRESSION = 9
Z_DEFAULT_COMPRESSION = -1


def describe_error(code: int) -> str:
    """Return a human-readable description of a zlib error code."""
    if code == Z_STREAM_ERROR:
        return "invalid compression level"
    if code == Z_DATA_ERROR:
        return "invalid or incomplete deflate data"
    if code == Z_MEM_ERROR:
        return "out of memory"
    generic = f"zlib returns err {code}!"
    if code == Z_VERSION_ERROR:
        return f"zlib version mismatch!\n{generic}"
    return generic


class ZlibError(Exception):
    """A compression or decompression failure carrying a zlib error code."""

    def __init__(self, code: int) -> None:
        super().__init__(f"zutil: {describe_error(code)}")
        self.code = code


def mem_def(source: bytes, level: int = Z_DEFAULT_COMPRESSION) -> bytes:
    """Deflate ``source`` into a complete zlib stream."""
    if not Z_DEFAULT_COMPRESSION <= level <= Z_BEST_COMPRESSION:
        raise ZlibError(Z_STREAM_ERROR)
    try:
        compressor = zlib.compressobj(level)
        return compressor.compress(bytes(source)) + compressor.flush(zlib.Z_FINISH)
    except MemoryError as exc:
        raise ZlibError(Z_MEM_ERROR) from exc
    except zlib.error as exc:
        raise ZlibError(Z_STREAM_ERROR) from exc


def mem_inf(source: bytes) -> bytes:
    """Inflate a zlib stream; data after the end of the stream is ignored."""
    decompressor = zlib.decompressobj()
    try:
        result = decompressor.decompress(bytes(source))
    except MemoryError as exc:
        raise ZlibError(Z_MEM_ERROR) from exc
    except zlib.error as exc:
        raise ZlibError(Z_DATA_ERROR) from exc
    if not decompressor.eof:
        raise ZlibError(Z_DATA_ERROR)
    return result