"""One-shot zlib compression and decompression, and a chunked file compressor."""

from __future__ import annotations

import sys
import zlib
from contextlib import ExitStack
from typing import BinaryIO, Optional, Sequence

BUFFER_SIZE = 1024


class CompressionError(Exception):
    """Raised when data cannot be compressed or decompressed."""


def compress_data(data: bytes) -> bytes:
    """Compress ``data`` into a zlib stream; empty input gives empty output."""
    if not data:
        return b""
    try:
        return zlib.compress(bytes(data))
    except zlib.error as exc:
        raise CompressionError(f"Compression failed: {exc}") from exc


def uncompress(source: bytes, max_length: Optional[int] = None) -> bytes:
    """Decompress a complete zlib stream.

    When ``max_length`` is given, a stream that decodes to more bytes than
    that is rejected. Corrupt, truncated and dictionary-requiring streams
    are all reported as data errors.
    """
    if max_length is not None and max_length < 0:
        raise ValueError("max_length must not be negative")
    inflater = zlib.decompressobj()
    limit = 0 if max_length is None else max_length + 1
    try:
        output = inflater.decompress(bytes(source), limit)
    except zlib.error as exc:
        raise CompressionError(f"data error: {exc}") from exc
    if max_length is not None and len(output) > max_length:
        raise CompressionError(f"buffer error: output exceeds {max_length} bytes")
    if not inflater.eof:
        raise CompressionError("data error: incomplete compressed stream")
    return output


def compress_stream(source: BinaryIO, target: BinaryIO) -> int:
    """Compress ``source`` in independent 1024-byte chunks into ``target``.

    Each chunk becomes its own zlib stream. Returns the bytes written.
    """
    written = 0
    while chunk := source.read(BUFFER_SIZE):
        compressed = compress_data(chunk)
        target.write(compressed)
        written += len(compressed)
    return written


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Compress the file named first into the file named second."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("Usage: zkit-compress <input> <output>", file=sys.stderr)
        return 1
    input_path, output_path = args[0], args[1]
    try:
        with ExitStack() as stack:
            try:
                source = stack.enter_context(open(input_path, "rb"))
            except OSError as exc:
                raise CompressionError(f"Could not open input file: {input_path}") from exc
            try:
                target = stack.enter_context(open(output_path, "wb"))
            except OSError as exc:
                raise CompressionError(f"Could not open output file: {output_path}") from exc
            try:
                compress_stream(source, target)
            except OSError as exc:
                raise CompressionError("Failed to write to output file.") from exc
    except CompressionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0