import pytest

from zkit.codecount import CodeCounter


def test_two_symbols_have_a_single_code():
    counter = CodeCounter(2, 1, 1)
    assert counter.total_codes() == counter.count(2, 2, 1)
    assert counter.count(2, 2, 1) == 1


def test_equal_symbols_and_patterns_is_one_code():
    counter = CodeCounter(10, 9, 9)
    for n in (2, 4, 6):
        assert counter.count(n, n, 1) == 1


def test_four_symbols_unlimited():
    counter = CodeCounter(4, 9, 15)
    assert counter.count(4, 2, 1) == 2


def test_total_is_sum_over_symbol_counts():
    counter = CodeCounter(6, 9, 15)
    expected = sum(counter.count(n, 2, 1) for n in range(2, 7))
    assert counter.total_codes() == expected


def test_totals_grow_with_symbols():
    totals = [CodeCounter(n, 9, 15).total_codes() for n in range(2, 12)]
    assert totals == sorted(totals)
    assert len(set(totals)) == len(totals)


def test_length_limit_reduces_count():
    limited = CodeCounter(10, 9, 4)
    unlimited = CodeCounter(10, 9, 9)
    assert limited.length_limited
    assert not unlimited.length_limited
    assert limited.total_codes() < unlimited.total_codes()


def test_max_and_root_are_reduced():
    counter = CodeCounter(5, 9, 15)
    assert counter.max_bits == 5 - 1
    assert counter.root == counter.max_bits


def test_count_is_repeatable():
    counter = CodeCounter(12, 9, 6)
    first = counter.count(12, 2, 1)
    assert counter.count(12, 2, 1) == first


def test_reachable_after_counting():
    counter = CodeCounter(8, 9, 7)
    assert not counter.reachable(3, 2, 1)
    counter.total_codes()
    assert counter.reachable(3, 2, 1)
    assert not counter.reachable(2, 2, 1)


def test_invalid_arguments():
    with pytest.raises(ValueError):
        CodeCounter(1, 9, 15)
    with pytest.raises(ValueError):
        CodeCounter(10, 0, 15)
    with pytest.raises(ValueError):
        CodeCounter(10, 9, 0)


def test_too_many_symbols_for_length():
    with pytest.raises(ValueError, match="cannot be coded"):
        CodeCounter(300, 1, 8)


def test_code_length_too_long_for_types():
    with pytest.raises(ValueError, match="too long"):
        CodeCounter(70, 9, 64)


def test_invalid_state_rejected():
    counter = CodeCounter(6, 9, 15)
    with pytest.raises(ValueError):
        counter.count(3, 4, 1)