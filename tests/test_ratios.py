import pytest

from taskbook.ratios import pairs_with_kth_ratio, pairwise_ratios


def test_ratio_count_and_order():
    values = [3.0, 1.5, 8.0, 2.0, 5.0]
    ratios = pairwise_ratios(values)
    assert len(ratios) == len(values) * (len(values) - 1) // 2
    assert ratios == sorted(ratios)


def test_pairs_for_middle_ratio():
    assert pairs_with_kth_ratio([1.0, 2.0, 4.0], 1) == [(1.0, 2.0), (2.0, 4.0)]


def test_found_pairs_match_requested_ratio():
    values = [7.0, 2.0, 9.0, 3.0]
    ratios = pairwise_ratios(values)
    for k in range(len(ratios)):
        pairs = pairs_with_kth_ratio(values, k)
        assert pairs
        assert all(a / b == ratios[k] for a, b in pairs)


def test_index_out_of_range():
    with pytest.raises(IndexError):
        pairs_with_kth_ratio([1.0, 2.0], 1)


def test_duplicates_rejected():
    with pytest.raises(ValueError):
        pairwise_ratios([1.0, 1.0, 2.0])