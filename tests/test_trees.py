from fractions import Fraction

import pytest

from zkit.trees import (
    BL_CODES,
    BL_ORDER,
    MAX_BL_BITS,
    REP_3_6,
    REPZ_3_10,
    REPZ_11_138,
    build_bl_tree,
    build_tree,
    gen_codes,
    scan_tree,
)


def kraft(lengths):
    return sum(Fraction(1, 2 ** bits) for bits in lengths if bits)


def unreverse(code, length):
    return int(format(code, f"0{length}b")[::-1], 2)


FIB = [1, 1, 2, 3, 5, 8, 13, 21]


def test_textbook_lengths():
    assert build_tree([1, 1, 2, 4], 15) == [3, 3, 2, 1]


@pytest.mark.parametrize(
    "freqs",
    [
        [1, 1, 2, 4],
        [5, 9, 12, 13, 16, 45],
        [10] * 16,
        FIB,
        [0, 3, 0, 7, 1, 0, 2],
    ],
)
def test_tree_is_complete(freqs):
    assert kraft(build_tree(freqs, 15)) == 1


def test_zero_frequencies_get_zero_length():
    freqs = [0, 3, 0, 7, 1, 0, 2]
    lengths = build_tree(freqs, 15)
    for f, bits in zip(freqs, lengths):
        assert (bits == 0) == (f == 0)


def test_length_limit_applied():
    assert max(build_tree(FIB, 15)) > 4
    limited = build_tree(FIB, 4)
    assert max(limited) <= 4
    assert kraft(limited) == 1


def test_single_symbol_gets_partner():
    lengths = build_tree([0, 0, 5, 0], 15)
    assert lengths[2] == lengths[0]
    assert kraft(lengths) == 1


def test_no_symbols_still_complete():
    lengths = build_tree([0, 0, 0], 7)
    assert kraft(lengths) == 1
    assert lengths[2] == 0


def test_too_few_elements():
    with pytest.raises(ValueError):
        build_tree([5], 15)


def test_too_many_symbols_for_limit():
    with pytest.raises(ValueError):
        build_tree([1] * 5, 2)


def test_rfc_canonical_example():
    lengths = [3, 3, 3, 3, 3, 2, 4, 4]
    codes = gen_codes(lengths)
    plain = [unreverse(code, bits) for code, bits in zip(codes, lengths)]
    assert plain == [0b010, 0b011, 0b100, 0b101, 0b110, 0b00, 0b1110, 0b1111]


def test_codes_are_prefix_free():
    freqs = [5, 9, 12, 13, 16, 45, 0, 1]
    lengths = build_tree(freqs, 15)
    codes = gen_codes(lengths)
    words = [
        format(unreverse(code, bits), f"0{bits}b")
        for code, bits in zip(codes, lengths)
        if bits
    ]
    assert len(set(words)) == len(words)
    for a in words:
        for b in words:
            if a != b:
                assert not b.startswith(a)


def test_zero_length_gets_zero_code():
    assert gen_codes([0, 1, 1])[0] == 0


def test_oversubscribed_lengths_rejected():
    with pytest.raises(ValueError):
        gen_codes([1, 1, 1])


def test_scan_repeat_of_nonzero():
    expected = [0] * BL_CODES
    expected[3] = 1
    expected[REP_3_6] = 1
    assert scan_tree([3] * 5) == expected


def test_scan_long_zero_run():
    expected = [0] * BL_CODES
    expected[REPZ_11_138] = 1
    expected[5] = 1
    assert scan_tree([0] * 20 + [5]) == expected


def test_scan_short_zero_run():
    counts = scan_tree([0] * 4 + [2])
    assert counts[REPZ_3_10] == 1
    assert counts[2] == 1
    assert counts[REPZ_11_138] == 0


def test_scan_accumulates():
    first = [3, 3, 0, 0, 0, 4]
    second = [1, 2, 2, 2, 2, 2, 2, 2]
    combined = scan_tree(second, scan_tree(first))
    assert combined == [a + b for a, b in zip(scan_tree(first), scan_tree(second))]


def test_scan_rejects_bad_lengths():
    with pytest.raises(ValueError):
        scan_tree([16])


def test_build_bl_tree_invariants():
    lit_freqs = [(n % 7) + (1 if n == 256 else 0) for n in range(286)]
    dist_freqs = [n % 3 for n in range(30)]
    lit = build_tree(lit_freqs, 15)
    dist = build_tree(dist_freqs, 15)
    bl_lengths, max_blindex = build_bl_tree(lit, dist)

    assert len(bl_lengths) == BL_CODES
    assert max(bl_lengths) <= MAX_BL_BITS
    assert kraft(bl_lengths) == 1
    assert bl_lengths[BL_ORDER[max_blindex]] != 0
    assert all(bl_lengths[symbol] == 0 for symbol in BL_ORDER[max_blindex + 1:])

    freqs = scan_tree(dist, scan_tree(lit))
    for f, bits in zip(freqs, bl_lengths):
        assert (bits == 0) == (f == 0)