"""Bit-level output for deflate blocks: a bit writer, stored-block copying,
dynamic tree headers and a text/binary guess from literal frequencies."""

from __future__ import annotations

import enum
from typing import Iterator, Sequence

from zkit.trees import (
    BL_CODES,
    BL_ORDER,
    MAX_BITS,
    REP_3_6,
    REPZ_3_10,
    REPZ_11_138,
    gen_codes,
)

BUF_SIZE = 16
"""Number of bits held in the bit buffer before a short is emitted."""

LITERALS = 256
L_CODES = 286
D_CODES = 30
MAX_STORED = 0xFFFF

# Bytes 0..6, 14..25 and 28..31 mark data as binary.
_BLACK_MASK = 0xF3FFC07F
_WHITE_CONTROLS = (9, 10, 13)
_GUARD = 0xFFFF


class DataType(enum.IntEnum):
    """Guess at the kind of data in a block."""

    BINARY = 0
    TEXT = 1


class BitWriter:
    """Collects bits least significant first and emits them as bytes."""

    def __init__(self) -> None:
        self._pending = bytearray()
        self._buf = 0
        self._valid = 0

    @property
    def bits_written(self) -> int:
        """Total bits written so far, emitted or still buffered."""
        return 8 * len(self._pending) + self._valid

    def _put_short(self, value: int) -> None:
        self._pending += (value & 0xFFFF).to_bytes(2, "little")

    def write_bits(self, value: int, length: int) -> None:
        """Append the low ``length`` bits of ``value``, least significant first."""
        if not 0 <= length <= BUF_SIZE:
            raise ValueError(f"bit length must be between 0 and {BUF_SIZE}")
        if value < 0 or value >> length:
            raise ValueError(f"value {value} does not fit in {length} bits")
        self._buf |= value << self._valid
        self._valid += length
        if self._valid > BUF_SIZE:
            self._put_short(self._buf)
            self._buf >>= BUF_SIZE
            self._valid -= BUF_SIZE

    def flush(self) -> None:
        """Emit whole bytes from the bit buffer, keeping at most 7 bits."""
        if self._valid == BUF_SIZE:
            self._put_short(self._buf)
            self._buf = 0
            self._valid = 0
        elif self._valid >= 8:
            self._pending.append(self._buf & 0xFF)
            self._buf >>= 8
            self._valid -= 8

    def windup(self) -> None:
        """Emit all buffered bits, padding to a byte boundary."""
        if self._valid > 8:
            self._put_short(self._buf)
        elif self._valid > 0:
            self._pending.append(self._buf & 0xFF)
        self._buf = 0
        self._valid = 0

    def copy_block(self, data: bytes, header: bool = True) -> None:
        """Align to a byte and copy ``data``, preceded by its length and
        the length's one's complement when ``header`` is true."""
        data = bytes(data)
        if header and len(data) > MAX_STORED:
            raise ValueError(f"stored block longer than {MAX_STORED} bytes")
        self.windup()
        if header:
            self._put_short(len(data))
            self._put_short(~len(data))
        self._pending += data

    def getvalue(self) -> bytes:
        """Return the bytes emitted so far, without buffered bits."""
        return bytes(self._pending)


def bi_reverse(code: int, length: int) -> int:
    """Reverse the lowest ``length`` bits of ``code``."""
    if length < 1:
        raise ValueError("length must be at least 1")
    result = 0
    for _ in range(length):
        result = (result << 1) | (code & 1)
        code >>= 1
    return result


def _tree_symbols(lengths: Sequence[int]) -> Iterator[tuple[int, int, int]]:
    """Yield (bit length symbol, extra value, extra bits) to describe ``lengths``."""
    values = list(lengths)
    if not values:
        return
    prevlen = -1
    count = 0
    max_count, min_count = (138, 3) if values[0] == 0 else (7, 4)
    for curlen, nextlen in zip(values, values[1:] + [_GUARD]):
        count += 1
        if count < max_count and curlen == nextlen:
            continue
        if count < min_count:
            for _ in range(count):
                yield curlen, 0, 0
        elif curlen != 0:
            if curlen != prevlen:
                yield curlen, 0, 0
                count -= 1
            yield REP_3_6, count - 3, 2
        elif count <= 10:
            yield REPZ_3_10, count - 3, 3
        else:
            yield REPZ_11_138, count - 11, 7
        count = 0
        prevlen = curlen
        if nextlen == 0:
            max_count, min_count = 138, 3
        elif curlen == nextlen:
            max_count, min_count = 6, 3
        else:
            max_count, min_count = 7, 4


def send_tree(writer: BitWriter, lengths: Sequence[int],
              bl_lengths: Sequence[int]) -> None:
    """Send the code lengths ``lengths`` in compressed form using the bit
    length tree described by ``bl_lengths``."""
    if len(bl_lengths) != BL_CODES:
        raise ValueError(f"bit length tree needs {BL_CODES} entries")
    if any(not 0 <= bits <= MAX_BITS for bits in lengths):
        raise ValueError(f"code lengths must be between 0 and {MAX_BITS}")
    bl_codes = gen_codes(bl_lengths)
    for symbol, extra, extra_bits in _tree_symbols(lengths):
        if not bl_lengths[symbol]:
            raise ValueError(f"bit length code {symbol} has no code")
        writer.write_bits(bl_codes[symbol], bl_lengths[symbol])
        if extra_bits:
            writer.write_bits(extra, extra_bits)


def send_all_trees(writer: BitWriter, lit_lengths: Sequence[int],
                   dist_lengths: Sequence[int], bl_lengths: Sequence[int],
                   blcodes: int) -> None:
    """Send the header of a dynamic block: the counts, the bit length code
    lengths, then the literal/length and distance trees."""
    lcodes = len(lit_lengths)
    dcodes = len(dist_lengths)
    if not LITERALS + 1 <= lcodes <= L_CODES:
        raise ValueError(f"literal/length tree needs {LITERALS + 1} to {L_CODES} codes")
    if not 1 <= dcodes <= D_CODES:
        raise ValueError(f"distance tree needs 1 to {D_CODES} codes")
    if not 4 <= blcodes <= BL_CODES:
        raise ValueError(f"bit length code count must be between 4 and {BL_CODES}")
    if len(bl_lengths) != BL_CODES:
        raise ValueError(f"bit length tree needs {BL_CODES} entries")
    writer.write_bits(lcodes - 257, 5)
    writer.write_bits(dcodes - 1, 5)
    writer.write_bits(blcodes - 4, 4)
    for rank in range(blcodes):
        writer.write_bits(bl_lengths[BL_ORDER[rank]], 3)
    send_tree(writer, lit_lengths, bl_lengths)
    send_tree(writer, dist_lengths, bl_lengths)


def detect_data_type(freqs: Sequence[int]) -> DataType:
    """Guess whether literal frequencies describe text or binary data.

    Text has no bytes from 0..6, 14..25 or 28..31 and at least one of tab,
    line feed, carriage return or 32..255. Other control bytes are ignored.
    """
    if len(freqs) < LITERALS:
        raise ValueError(f"need at least {LITERALS} literal frequencies")
    mask = _BLACK_MASK
    for n in range(32):
        if mask & 1 and freqs[n]:
            return DataType.BINARY
        mask >>= 1
    if any(freqs[n] for n in _WHITE_CONTROLS):
        return DataType.TEXT
    if any(freqs[32:LITERALS]):
        return DataType.TEXT
    return DataType.BINARY