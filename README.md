# zkit

A small toolkit around the deflate format: checksums, zlib and gzip
streams, fitting compressed output to a fixed block size, counting of
complete prefix codes, and Huffman tree construction with the bit output
for dynamic block headers. It also carries a few small record-keeping
programs used as worked examples.

No dependencies beyond the Python standard library. Python 3.10 or later.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Library

Checksums (`zkit.checksum`):

```python
from zkit.checksum import adler32, crc32, make_crc_table, format_table

a = adler32(b"hello, hello!", 1)   # running Adler-32, starting value 1
c = crc32(b"hello, hello!", 0)     # running CRC-32, starting value 0
table = make_crc_table()           # the 256-entry CRC-32 table
print(format_table(table))         # five hex entries per line
```

Whole-buffer and streaming compression (`zkit.compression`):

```python
import io
from zkit.compression import compress_data, uncompress, compress_stream, CompressionError

packed = compress_data(b"hello, hello!\0")
plain = uncompress(packed, 100)    # raises CompressionError on bad or oversized data

target = io.BytesIO()
compress_stream(io.BytesIO(b"some data"), target)
```

Fitting compressed data into a fixed-size block (`zkit.fitblk`):
`fit_block(data, size)` returns a `FitResult` with a zlib stream no longer
than `size` bytes (at least 8) and how much of the input it holds.

Prefix-code counting (`zkit.codecount`): `CodeCounter(syms, root,
max_bits)` counts the complete prefix codes for up to `syms` symbols with
lengths limited to `max_bits`. `total_codes()` sums the counts for 2 to
`syms` symbols, `count(syms, left, length)` counts from one intermediate
state, and `reachable(...)` tells whether a state has been counted.

Huffman tree building and bit output (`zkit.trees`, `zkit.bitstream`):
`build_tree`, `gen_codes`, `scan_tree` and `build_bl_tree` compute
length-limited code lengths and canonical codes; `BitWriter`,
`send_tree`, `send_all_trees` and `detect_data_type` write the dynamic
block header bits and classify literal frequencies as text or binary.

The zlib header check (`zkit.zheader`): `read_zlib_header(stream)` raises
`ZlibHeaderError` for a short header, a method other than deflate or a
bad check value.

## Commands

    zkit-compress INPUT OUTPUT

Reads INPUT in 1024-byte pieces, compresses each piece as its own zlib
stream and writes them one after another to OUTPUT.

    zkit-minigzip [-c] [-d] [-f] [-h] [-r] [-1 ... -9] [FILE ...]

A small gzip: compresses each FILE to FILE.gz and removes the original,
or with `-d` restores it. `-c` writes to standard output; `-f`, `-h` and
`-r` pick the filtered, Huffman-only and run-length strategies; `-1` to
`-9` set the level. With no files it filters standard input to standard
output.

    zkit-fitblk SIZE < input > block

Compresses standard input into a zlib stream of at most SIZE bytes
(SIZE of 8 or more) and reports the unused bytes on standard error.

    zkit-zheader FILE

Checks the zlib header at the start of FILE, then compresses the rest of
it to `test.z`.

The example programs:

    zkit-students     # menu-driven student records with birthdates
    zkit-roster       # a student list with add, delete and listing
    zkit-courses      # one student enrolling in and dropping courses
    zkit-stack        # a stack that reports underflow instead of crashing

## What it does not do

zkit counts prefix codes, but it does not work out the largest number of
inflate decoding-table entries over those codes, and there is no command
that reports code counts or table sizes. Use `CodeCounter` from Python
for the counts.