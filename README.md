# pngtools

Small command-line tools and a library for simple PNG files. A simple PNG
file here is one made of the PNG signature followed by exactly one `IHDR`,
one `IDAT` and one `IEND` chunk.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Commands

- `pnginfo FILE`: prints `FILE: WIDTH x HEIGHT`. For each chunk whose stored
  CRC does not match its contents it also prints a line such as
  `IDAT chunk CRC error: computed ..., expected ...`. A file without the PNG
  signature is reported as `FILE: Not a PNG file`.
- `findpng DIRECTORY`: walks the directory tree, without following symbolic
  links, and prints the path of every regular file that starts with the PNG
  signature. Prints `findpng: No PNG file found` when there are none.
- `catpng FILE...`: stacks the given PNG images from top to bottom and writes
  the result to `all.png` in the current directory, replacing any file of that
  name. Every image must have the same width and every chunk's CRC must be
  correct; otherwise a message is printed and nothing is written. The output
  takes its bit depth, colour type and other header fields from the first image.
- `png-demo`: compresses and decompresses a 4096-byte buffer and prints the
  lengths and the CRC of the compressed data.
- `ls-names DIRECTORY`: lists the entry names in a directory, `.` and `..`
  included.
- `ls-ftype PATH...`: prints the file type of each path (`regular`,
  `directory`, `symbolic link`, `fifo`, ...), without following links.
- `show-args ARG...`: prints every command-line argument with its index, the
  program name first.

## Library

    from pngtools.png import read_png, is_png
    from pngtools.crc import crc
    from pngtools.zutil import mem_def, mem_inf
    from pngtools.catpng import concatenate, build_png, write_png

    image = read_png("picture.png")
    print(image.width, image.height)
    for error in image.crc_errors():
        print(error)

    first, second = read_png("a.png"), read_png("b.png")
    raw, height = concatenate([first, second])
    write_png("all.png", build_png(first.header, height, mem_def(raw)))

- `pngtools.png`: `read_png(path)` returns a `PNGFile` with `ihdr_chunk`,
  `idat_chunk`, `iend_chunk`, the parsed `header` (an `IHDR`), `width` and
  `height`; it raises `PNGError` for a file that is not a PNG or is cut short.
  `Chunk` holds a type, data and CRC, with `compute_crc()`, `check_crc()`
  (raises `CRCError`) and `to_bytes()`. `read_chunk(stream)` reads one chunk
  and `is_png(buf)` checks the signature.
- `pngtools.crc`: `crc(data)` gives the PNG CRC-32 of a byte string;
  `update_crc` and `make_crc_table` are also available.
- `pngtools.zutil`: `mem_def(data, level)` and `mem_inf(data)` compress and
  decompress zlib streams and raise `ZlibError` (with a `code`) on failure.
- `pngtools.catpng`: `uncompress_idat`, `same_width`, `concatenate`,
  `build_png` and `write_png`.
- `pngtools.findpng`: `find_pngs(directory)` yields the paths of PNG files
  under a directory.
- `pngtools.fsutil`: `file_type(path)` and `list_names(path)`.

## Limitations

Only simple PNG files are read: exactly three chunks in the order `IHDR`,
`IDAT`, `IEND`. Files with several `IDAT` chunks or with ancillary chunks are
not supported. `catpng` joins the filtered pixel rows as they are. It does not
decode, filter or convert pixels, so the images must share a pixel format.