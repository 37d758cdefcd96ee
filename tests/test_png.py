import io
import zlib

import pytest

from pngtools.crc import crc
from pngtools.png import (
    IHDR,
    PNG_SIGNATURE,
    Chunk,
    CRCError,
    PNGError,
    PNGFile,
    is_png,
    read_chunk,
    read_png,
)


def _png_bytes(width=2, height=3, idat_crc=None):
    header = IHDR(width, height)
    raw = b"".join(b"\x00" + b"\x7f" * (4 * width) for _ in range(height))
    idat = Chunk(b"IDAT", zlib.compress(raw), idat_crc)
    return (
        PNG_SIGNATURE
        + Chunk(b"IHDR", header.to_bytes()).to_bytes()
        + idat.to_bytes()
        + Chunk(b"IEND").to_bytes()
    )


def test_signature_bytes():
    expected = bytes([137, 80, 78, 71, 13, 10, 26, 10])
    assert PNG_SIGNATURE == expected
    assert is_png(expected) is True
    assert is_png(bytes([137, 80, 78, 71, 13, 10, 26, 11])) is False


def test_is_png_accepts_signature():
    assert is_png(PNG_SIGNATURE) is True
    assert is_png(PNG_SIGNATURE + b"more") is True


def test_is_png_rejects_short_or_wrong():
    assert is_png(PNG_SIGNATURE[:7]) is False
    assert is_png(b"GIF89a\x00\x00") is False
    assert is_png(b"") is False


def test_iend_chunk_wire_bytes():
    assert Chunk(b"IEND").to_bytes() == bytes.fromhex("0000000049454e44ae426082")


def test_chunk_crc_computed_from_type_and_data():
    chunk = Chunk(b"tEXt", b"hello")
    assert chunk.crc == crc(b"tEXthello")
    assert chunk.length == 5
    chunk.check_crc()


def test_chunk_bad_type_length():
    with pytest.raises(PNGError):
        Chunk(b"ABC")


def test_check_crc_raises_with_message():
    chunk = Chunk(b"IDAT", b"abc", 0x1234)
    with pytest.raises(CRCError) as info:
        chunk.check_crc()
    computed = crc(b"IDATabc")
    assert info.value.computed == computed
    assert info.value.expected == 0x1234
    assert str(info.value) == f"IDAT chunk CRC error: computed {computed:x}, expected 1234"


def test_ihdr_round_trip():
    header = IHDR(640, 480, 8, 2, 0, 0, 1)
    data = header.to_bytes()
    assert len(data) == 13
    assert IHDR.from_bytes(data) == header


def test_ihdr_big_endian_width():
    data = IHDR(0x01020304, 1).to_bytes()
    assert data[:4] == b"\x01\x02\x03\x04"


def test_ihdr_too_short():
    with pytest.raises(PNGError):
        IHDR.from_bytes(b"\x00" * 12)


def test_read_chunk_round_trip():
    chunk = Chunk(b"IDAT", b"\x01\x02\x03")
    stream = io.BytesIO(chunk.to_bytes() + b"trailing")
    assert read_chunk(stream) == chunk
    assert stream.read() == b"trailing"


def test_read_chunk_truncated():
    data = Chunk(b"IDAT", b"\x01\x02\x03").to_bytes()[:-2]
    with pytest.raises(PNGError):
        read_chunk(io.BytesIO(data))


def test_read_png(tmp_path):
    path = tmp_path / "img.png"
    path.write_bytes(_png_bytes(width=2, height=3))
    image = read_png(path)
    assert (image.width, image.height) == (2, 3)
    assert image.idat_chunk.type == b"IDAT"
    assert image.iend_chunk.length == 0
    assert image.crc_errors() == []
    assert len(zlib.decompress(image.idat_chunk.data)) == (1 + 4 * 2) * 3


def test_read_png_reports_crc_error(tmp_path):
    path = tmp_path / "bad.png"
    path.write_bytes(_png_bytes(idat_crc=0xDEADBEEF))
    errors = read_png(path).crc_errors()
    assert [e.chunk_type for e in errors] == [b"IDAT"]
    assert errors[0].expected == 0xDEADBEEF


def test_read_png_not_png(tmp_path):
    path = tmp_path / "text.png"
    path.write_bytes(b"not a png at all")
    with pytest.raises(PNGError, match="Not a PNG file"):
        read_png(path)


def test_read_png_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_png(tmp_path / "missing.png")


def test_pngfile_from_chunks():
    image = PNGFile(
        Chunk(b"IHDR", IHDR(5, 7).to_bytes()),
        Chunk(b"IDAT", b""),
        Chunk(b"IEND"),
    )
    assert image.header == IHDR(5, 7)
    assert [c.type for c in image.chunks] == [b"IHDR", b"IDAT", b"IEND"]