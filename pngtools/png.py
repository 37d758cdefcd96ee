"""Reading and describing simple three-chunk PNG files."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from os import PathLike
from typing import BinaryIO

from .crc import crc

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
PNG_SIG_SIZE = 8
CHUNK_LEN_SIZE = 4
CHUNK_TYPE_SIZE = 4
CHUNK_CRC_SIZE = 4
DATA_IHDR_SIZE = 13
DATA_IEND_SIZE = 0

_IHDR_LAYOUT = struct.Struct(">IIBBBBB")
_U32 = struct.Struct(">I")


class PNGError(Exception):
    """The data is not a PNG file or is malformed."""


class CRCError(PNGError):
    """A chunk's stored CRC does not match the CRC computed over its contents."""

    def __init__(self, chunk_type: bytes, computed: int, expected: int) -> None:
        self.chunk_type = chunk_type
        self.computed = computed
        self.expected = expected
        name = chunk_type.decode("latin-1")
        super().__init__(
            f"{name} chunk CRC error: computed {computed:x}, expected {expected:x}"
        )


@dataclass
class Chunk:
    """One PNG chunk: a four-byte type, its data, and its CRC.

    When ``crc`` is omitted it is computed from the type and data.
    """

    type: bytes
    data: bytes = b""
    crc: int | None = None

    def __post_init__(self) -> None:
        self.type = bytes(self.type)
        self.data = bytes(self.data)
        if len(self.type) != CHUNK_TYPE_SIZE:
            raise PNGError(f"chunk type must be {CHUNK_TYPE_SIZE} bytes, got {self.type!r}")
        if self.crc is None:
            self.crc = self.compute_crc()

    @property
    def length(self) -> int:
        """Length of the chunk data in bytes."""
        return len(self.data)

    def compute_crc(self) -> int:
        """Return the CRC over the chunk type followed by its data."""
        return crc(self.type + self.data)

    def check_crc(self) -> None:
        """Raise :class:`CRCError` if the stored CRC is wrong."""
        computed = self.compute_crc()
        if computed != self.crc:
            raise CRCError(self.type, computed, self.crc)

    def to_bytes(self) -> bytes:
        """Return the chunk as it is laid out in a PNG file."""
        return _U32.pack(self.length) + self.type + self.data + _U32.pack(self.crc)


@dataclass(frozen=True)
class IHDR:
    """The fields of an IHDR chunk's data."""

    width: int
    height: int
    bit_depth: int = 8
    color_type: int = 6
    compression: int = 0
    filter: int = 0
    interlace: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> IHDR:
        """Parse the 13 data bytes of an IHDR chunk."""
        if len(data) < DATA_IHDR_SIZE:
            raise PNGError(
                f"IHDR data must be {DATA_IHDR_SIZE} bytes, got {len(data)}"
            )
        return cls(*_IHDR_LAYOUT.unpack(bytes(data[:DATA_IHDR_SIZE])))

    def to_bytes(self) -> bytes:
        """Return the 13 data bytes of an IHDR chunk."""
        return _IHDR_LAYOUT.pack(
            self.width,
            self.height,
            self.bit_depth,
            self.color_type,
            self.compression,
            self.filter,
            self.interlace,
        )


@dataclass
class PNGFile:
    """A PNG made of exactly one IHDR, one IDAT and one IEND chunk."""

    ihdr_chunk: Chunk
    idat_chunk: Chunk
    iend_chunk: Chunk
    header: IHDR = field(init=False)

    def __post_init__(self) -> None:
        self.header = IHDR.from_bytes(self.ihdr_chunk.data)

    @property
    def width(self) -> int:
        return self.header.width

    @property
    def height(self) -> int:
        return self.header.height

    @property
    def chunks(self) -> tuple[Chunk, Chunk, Chunk]:
        return (self.ihdr_chunk, self.idat_chunk, self.iend_chunk)

    def crc_errors(self) -> list[CRCError]:
        """Return a CRC error for every chunk whose CRC does not match, in file order."""
        errors = []
        for chunk in self.chunks:
            try:
                chunk.check_crc()
            except CRCError as error:
                errors.append(error)
        return errors


def is_png(buf: bytes) -> bool:
    """Return True if ``buf`` starts with the eight-byte PNG signature."""
    return len(buf) >= PNG_SIG_SIZE and bytes(buf[:PNG_SIG_SIZE]) == PNG_SIGNATURE


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise PNGError(f"unexpected end of file reading {what}")
    return data


def read_chunk(stream: BinaryIO) -> Chunk:
    """Read one chunk from a binary stream; the stored CRC is kept as read."""
    (length,) = _U32.unpack(_read_exact(stream, CHUNK_LEN_SIZE, "chunk length"))
    chunk_type = _read_exact(stream, CHUNK_TYPE_SIZE, "chunk type")
    data = _read_exact(stream, length, "chunk data")
    (stored_crc,) = _U32.unpack(_read_exact(stream, CHUNK_CRC_SIZE, "chunk CRC"))
    return Chunk(chunk_type, data, stored_crc)


def read_png(path: str | PathLike[str]) -> PNGFile:
    """Read a three-chunk PNG file; raise :class:`PNGError` if it is not one."""
    with open(path, "rb") as stream:
        signature = stream.read(PNG_SIG_SIZE)
        if not is_png(signature):
            raise PNGError(f"{path}: Not a PNG file")
        ihdr_chunk = read_chunk(stream)
        idat_chunk = read_chunk(stream)
        iend_chunk = read_chunk(stream)
    return PNGFile(ihdr_chunk, idat_chunk, iend_chunk)