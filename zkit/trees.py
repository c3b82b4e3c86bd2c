"""Huffman tree construction for deflate blocks.

Trees are described by per-symbol frequencies or per-symbol code lengths.
Codes produced by :func:`gen_codes` are bit-reversed, ready to be sent
least significant bit first.
"""

from __future__ import annotations

from collections import Counter
from typing import Optional, Sequence

MAX_BITS = 15
"""Longest code length for literal/length and distance trees."""

MAX_BL_BITS = 7
"""Longest code length for the bit length tree."""

BL_CODES = 19
"""Number of codes in the bit length tree."""

REP_3_6 = 16
"""Repeat the previous length 3 to 6 times (2 extra bits)."""

REPZ_3_10 = 17
"""Repeat a zero length 3 to 10 times (3 extra bits)."""

REPZ_11_138 = 18
"""Repeat a zero length 11 to 138 times (7 extra bits)."""

BL_ORDER = (16, 17, 18, 0, 8, 7, 9, 6, 10, 5, 11, 4, 12, 3, 13, 2, 14, 1, 15)
"""The order in which bit length code lengths are sent."""

_GUARD = 0xFFFF


def _reverse(code: int, length: int) -> int:
    result = 0
    for _ in range(length):
        result = (result << 1) | (code & 1)
        code >>= 1
    return result


def build_tree(freqs: Sequence[int], max_length: int = MAX_BITS) -> list[int]:
    """Return optimal code lengths for ``freqs``, limited to ``max_length`` bits.

    Symbols with zero frequency get length zero, except that at least two
    symbols are always coded so that the tree is complete.
    """
    elems = len(freqs)
    if elems < 2:
        raise ValueError("a tree needs at least two symbols")
    if max_length < 1:
        raise ValueError("max_length must be positive")
    if any(f < 0 for f in freqs):
        raise ValueError("frequencies must not be negative")

    heap_size = 2 * elems + 1
    freq = list(freqs) + [0] * elems
    depth = [0] * (2 * elems)
    dad = [0] * (2 * elems)
    length = [0] * (2 * elems)
    heap = [0] * heap_size

    heap_len = 0
    max_code = -1
    for n, f in enumerate(freqs):
        if f:
            heap_len += 1
            heap[heap_len] = n
            max_code = n

    # Force at least two codes of non-zero frequency.
    while heap_len < 2:
        if max_code < 2 and max_code + 1 < elems:
            max_code += 1
            node = max_code
        else:
            node = 0
        heap_len += 1
        heap[heap_len] = node
        freq[node] = 1

    if heap_len > 1 << max_length:
        raise ValueError(f"{heap_len} symbols cannot be coded in {max_length} bits")

    def smaller(n: int, m: int) -> bool:
        return freq[n] < freq[m] or (freq[n] == freq[m] and depth[n] <= depth[m])

    def downheap(k: int) -> None:
        v = heap[k]
        j = k << 1
        while j <= heap_len:
            if j < heap_len and smaller(heap[j + 1], heap[j]):
                j += 1
            if smaller(v, heap[j]):
                break
            heap[k] = heap[j]
            k = j
            j <<= 1
        heap[k] = v

    for k in range(heap_len // 2, 0, -1):
        downheap(k)

    heap_max = heap_size
    node = elems
    while True:
        n = heap[1]
        heap[1] = heap[heap_len]
        heap_len -= 1
        downheap(1)
        m = heap[1]

        heap_max -= 1
        heap[heap_max] = n
        heap_max -= 1
        heap[heap_max] = m

        freq[node] = freq[n] + freq[m]
        depth[node] = max(depth[n], depth[m]) + 1
        dad[n] = dad[m] = node

        heap[1] = node
        node += 1
        downheap(1)
        if heap_len < 2:
            break
    heap_max -= 1
    heap[heap_max] = heap[1]

    # First pass: optimal lengths, which may exceed the limit.
    bl_count = [0] * (max_length + 1)
    overflow = 0
    length[heap[heap_max]] = 0
    for h in range(heap_max + 1, heap_size):
        n = heap[h]
        bits = length[dad[n]] + 1
        if bits > max_length:
            bits = max_length
            overflow += 1
        length[n] = bits
        if n > max_code:
            continue
        bl_count[bits] += 1

    if overflow:
        while True:
            bits = max_length - 1
            while bl_count[bits] == 0:
                bits -= 1
            bl_count[bits] -= 1
            bl_count[bits + 1] += 2
            bl_count[max_length] -= 1
            overflow -= 2
            if overflow <= 0:
                break
        # Reassign lengths, scanning leaves in increasing frequency.
        h = heap_size
        for bits in range(max_length, 0, -1):
            remaining = bl_count[bits]
            while remaining:
                h -= 1
                m = heap[h]
                if m > max_code:
                    continue
                length[m] = bits
                remaining -= 1

    return length[:elems]


def gen_codes(lengths: Sequence[int]) -> list[int]:
    """Return the canonical code of each symbol, bit-reversed.

    Symbols of length zero get code zero. Over-subscribed lengths are rejected.
    """
    if any(bits < 0 for bits in lengths):
        raise ValueError("code lengths must not be negative")
    counts = Counter(bits for bits in lengths if bits)
    next_code: dict[int, int] = {}
    code = 0
    for bits in range(1, max(counts, default=0) + 1):
        code = (code + counts.get(bits - 1, 0)) << 1
        if code + counts.get(bits, 0) > 1 << bits:
            raise ValueError("code lengths are over-subscribed")
        next_code[bits] = code

    codes = []
    for bits in lengths:
        if bits:
            codes.append(_reverse(next_code[bits], bits))
            next_code[bits] += 1
        else:
            codes.append(0)
    return codes


def scan_tree(lengths: Sequence[int], bl_freqs: Optional[Sequence[int]] = None) -> list[int]:
    """Count the bit length codes needed to send ``lengths``.

    The counts start from ``bl_freqs`` when given; a new list is returned.
    """
    counts = [0] * BL_CODES if bl_freqs is None else list(bl_freqs)
    if len(counts) != BL_CODES:
        raise ValueError(f"bit length frequencies need {BL_CODES} entries")
    if any(not 0 <= bits <= MAX_BITS for bits in lengths):
        raise ValueError(f"code lengths must be between 0 and {MAX_BITS}")

    max_code = max((n for n, bits in enumerate(lengths) if bits), default=-1)
    used = list(lengths[:max_code + 1])
    prevlen = -1
    count = 0
    first = used[0] if used else 0
    max_count, min_count = (138, 3) if first == 0 else (7, 4)

    for curlen, nextlen in zip(used, used[1:] + [_GUARD]):
        count += 1
        if count < max_count and curlen == nextlen:
            continue
        if count < min_count:
            counts[curlen] += count
        elif curlen != 0:
            if curlen != prevlen:
                counts[curlen] += 1
            counts[REP_3_6] += 1
        elif count <= 10:
            counts[REPZ_3_10] += 1
        else:
            counts[REPZ_11_138] += 1
        count = 0
        prevlen = curlen
        if nextlen == 0:
            max_count, min_count = 138, 3
        elif curlen == nextlen:
            max_count, min_count = 6, 3
        else:
            max_count, min_count = 7, 4
    return counts


def build_bl_tree(lit_lengths: Sequence[int],
                  dist_lengths: Sequence[int]) -> tuple[list[int], int]:
    """Build the bit length tree for the two trees.

    Returns the bit length code lengths and the index in :data:`BL_ORDER`
    of the last one that must be sent.
    """
    freqs = scan_tree(dist_lengths, scan_tree(lit_lengths))
    bl_lengths = build_tree(freqs, MAX_BL_BITS)
    max_blindex = next(
        (index for index in range(BL_CODES - 1, 2, -1) if bl_lengths[BL_ORDER[index]]),
        2,
    )
    return bl_lengths, max_blindex