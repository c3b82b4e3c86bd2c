"""Compress input so that the zlib stream just fits a requested block size.

Three passes are made: the first compresses until the block plus some excess
is filled, the second recompresses what fit to get a final deflate block of
realistic size, and the third recompresses a little less than the requested
size so that the finished stream is guaranteed to fit.
"""

from __future__ import annotations

import sys
import zlib
from dataclasses import dataclass
from typing import BinaryIO, Iterator, Optional, Sequence, TextIO

RAWLEN = 4096
EXCESS = 256
MARGIN = 8
MIN_SIZE = 8


@dataclass(frozen=True)
class FitResult:
    """A compressed block and how much input it holds."""

    block: bytes
    requested: int
    consumed: int
    all_input: bool

    @property
    def unused(self) -> int:
        """Bytes of the requested block left unfilled."""
        return self.requested - len(self.block)


def _chunks(data: bytes) -> Iterator[memoryview]:
    view = memoryview(data)
    for start in range(0, len(view), RAWLEN):
        yield view[start:start + RAWLEN]


def _deflate_capped(data: bytes, cap: int) -> tuple[bytes, bool]:
    """Compress ``data`` until ``cap`` output bytes; report whether it finished."""
    deflater = zlib.compressobj()
    output = bytearray()
    for chunk in _chunks(data):
        output += deflater.compress(chunk)
        if len(output) >= cap:
            return bytes(output[:cap]), False
    output += deflater.flush()
    if len(output) > cap:
        return bytes(output[:cap]), False
    return bytes(output), True


def _inflate_prefix(stream: bytes) -> bytes:
    """Decompress as much as a possibly truncated zlib stream yields."""
    return zlib.decompressobj().decompress(stream)


def fit_block(data: bytes, size: int) -> FitResult:
    """Compress a prefix of ``data`` into a zlib stream of at most ``size`` bytes."""
    if size < MIN_SIZE:
        raise ValueError("need positive size of 8 or greater")
    data = bytes(data)

    block, finished = _deflate_capped(data, size + EXCESS)
    if finished and len(block) <= size:
        return FitResult(block, size, len(data), True)

    near = _deflate_capped(_inflate_prefix(block), size + EXCESS)[0]
    raw = _inflate_prefix(near[:size - MARGIN])
    final, finished = _deflate_capped(raw, size)
    if not finished:
        raise RuntimeError("margin too small to complete the stream")
    return FitResult(final, size, len(raw), False)


def _run(args: Sequence[str], source: BinaryIO, target: BinaryIO, errors: TextIO) -> int:
    def abort(why: str) -> int:
        print(f"fitblk abort: {why}", file=errors)
        return 1

    if len(args) != 1:
        return abort("need one argument: size of output block")
    try:
        size = int(args[0], 10)
    except ValueError:
        return abort("argument must be a number")
    if size < MIN_SIZE:
        return abort("need positive size of 8 or greater")
    try:
        data = source.read()
    except OSError:
        return abort("error reading input")
    result = fit_block(data, size)
    try:
        target.write(result.block)
        target.flush()
    except OSError:
        return abort("error writing output")
    detail = "all input" if result.all_input else f"{result.consumed} input"
    print(f"{result.unused} bytes unused out of {size} requested ({detail})", file=errors)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Compress standard input into a block of the size given as the argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    return _run(args, sys.stdin.buffer, sys.stdout.buffer, sys.stderr)