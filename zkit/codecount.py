"""Counting of complete, length-limited prefix codes.

A code is described by how many symbols are coded at each bit length, so
only canonical codes are counted. The code is built from shorter to longer
lengths: at each step the state is the number of symbols still to code, the
number of unused bit patterns at the current length, and that length.
Intermediate results are remembered per state, which also records which
states can be reached while building valid codes.
"""

from __future__ import annotations

BIG_BITS = 64
BIG_MAX = (1 << BIG_BITS) - 1
"""Largest count representable by the counting type."""


class CodeCounter:
    """Count complete prefix codes for up to ``syms`` symbols.

    ``max_bits`` limits the code length; it is reduced to ``syms - 1``, the
    longest length any complete code can use. ``root`` is the size in bits
    of the base decoding table and is reduced to ``max_bits``.
    """

    def __init__(self, syms: int = 286, root: int = 9, max_bits: int = 15) -> None:
        if syms < 2 or root < 1 or max_bits < 1:
            raise ValueError("invalid arguments, need: [sym >= 2 [root >= 1 [max >= 1]]]")
        self.length_limited = max_bits < syms - 1
        max_bits = min(max_bits, syms - 1)
        if max_bits > BIG_BITS or syms - 2 >= BIG_MAX >> (max_bits - 1):
            raise ValueError("code length too long for internal types")
        if syms - 1 > (1 << max_bits) - 1:
            raise ValueError(f"{syms} symbols cannot be coded in {max_bits} bits")
        self.syms = syms
        self.max_bits = max_bits
        self.root = min(root, max_bits)
        self._num: dict[tuple[int, int, int], int] = {}
        self._total: int | None = None

    def count(self, syms: int, left: int, length: int) -> int:
        """Return the number of codes for ``syms`` symbols from the given state.

        ``left`` is the number of unused bit patterns of ``length`` bits;
        lengths from ``length`` up to ``max_bits`` may still be used.
        """
        if syms == left:
            return 1
        if not (syms > left > 0 and length < self.max_bits):
            raise ValueError(f"invalid code state ({syms}, {left}, {length})")

        key = (syms, left, length)
        saved = self._num.get(key)
        if saved:
            return saved

        # Use enough patterns that the code is not incomplete at the next
        # length, but leave enough for the rest at the maximum length.
        least = max((left << 1) - syms, 0)
        span = self.max_bits - length
        most = ((left << span) - syms) // ((1 << span) - 1)

        total = 0
        for use in range(least, most + 1):
            total += self.count(syms - use, (left - use) << 1, length + 1)
            if total > BIG_MAX:
                raise OverflowError("overflow while counting prefix codes")
        if total == 0:
            raise ValueError(f"no complete code from state ({syms}, {left}, {length})")

        self._num[key] = total
        return total

    def total_codes(self) -> int:
        """Return the number of codes summed over 2 to ``syms`` symbols."""
        if self._total is None:
            total = 0
            for n in range(2, self.syms + 1):
                total += self.count(n, 2, 1)
                if total > BIG_MAX:
                    raise OverflowError("overflow while counting prefix codes")
            self._total = total
        return self._total

    def reachable(self, syms: int, left: int, length: int) -> bool:
        """Tell whether this state has been reached and counted so far."""
        return bool(self._num.get((syms, left, length), 0))