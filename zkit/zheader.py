"""Check a zlib stream header, then deflate the rest of the input."""

from __future__ import annotations

import sys
import zlib
from typing import BinaryIO, Optional, Sequence

MAX_MEM_LEVEL = 8
MAX_WBITS = 15
BUFSIZE = 1024
OUTPUT_NAME = "test.z"


class ZlibHeaderError(ValueError):
    """Raised when a zlib header is missing or malformed."""


def read_zlib_header(stream: BinaryIO) -> tuple[int, int]:
    """Read and check the two header bytes; return ``(cmf, flags)``."""
    header = stream.read(2)
    if len(header) < 2:
        raise ZlibHeaderError("Failed to read zlib header.")
    cmf, flags = header[0], header[1]
    if cmf & 0x0F != zlib.DEFLATED:
        raise ZlibHeaderError("Invalid compression method.")
    if ((cmf << 8) + flags) % 31 != 0:
        raise ZlibHeaderError("Bad FCHECK value.")
    return cmf, flags


def deflate_stream(source: BinaryIO, target: BinaryIO,
                   level: int = zlib.Z_DEFAULT_COMPRESSION,
                   strategy: int = zlib.Z_DEFAULT_STRATEGY) -> int:
    """Compress the rest of ``source`` into a zlib stream on ``target``.

    Returns the number of compressed bytes written.
    """
    try:
        deflater = zlib.compressobj(level, zlib.DEFLATED, MAX_WBITS, MAX_MEM_LEVEL, strategy)
    except (ValueError, zlib.error) as exc:
        raise ValueError(f"deflateInit2 error: {exc}") from exc
    written = 0
    while chunk := source.read(BUFSIZE):
        out = deflater.compress(chunk)
        target.write(out)
        written += len(out)
    out = deflater.flush()
    target.write(out)
    return written + len(out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Check the input file's zlib header and compress the rest into ``test.z``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: zkit-zheader <input_file>", file=sys.stderr)
        return 1
    try:
        source = open(args[0], "rb")
    except OSError:
        print("Error opening input file.", file=sys.stderr)
        return 1
    with source:
        try:
            read_zlib_header(source)
        except ZlibHeaderError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        try:
            target = open(OUTPUT_NAME, "wb")
        except OSError:
            print("Error opening output file.", file=sys.stderr)
            return 1
        with target:
            try:
                deflate_stream(source, target)
            except (ValueError, OSError) as exc:
                print(f"deflate error: {exc}", file=sys.stderr)
                return 1
    return 0