"""Tests for the descriptive statistics engine and data set."""

import itertools

import pytest

from errors import EmptyDataError, NotANumberError
from stats import DataSet, StatResult, compute_stats, parse_many, parse_number


SAMPLES = [
    [5, 10, 15],
    [3, 1, 4, 1, 5, 9, 2, 6],
    [1, 2, 3, 4, 5, 6, 7, 8],
    [-2.5, 0, 7.25],
    [42],
    [0.1, 0.2, 0.3, 0.4],
]


# --- compute_stats ---

def test_basic_example():
    r = compute_stats([5, 10, 15])
    assert r.mean == pytest.approx(10)
    assert r.median == pytest.approx(10)
    assert r.mode == ()
    assert r.variance == pytest.approx(50 / 3)
    assert r.std_dev == pytest.approx(4.0825, abs=1e-4)
    assert (r.min, r.max, r.range, r.sum, r.count) == (5, 15, 10, 30, 3)


def test_even_count_median_averages_middle_pair():
    assert compute_stats([4, 1, 3, 2]).median == pytest.approx(2.5)


def test_nearest_rank_quartiles():
    r = compute_stats([8, 7, 6, 5, 4, 3, 2, 1])
    assert r.q1 == 3
    assert r.q3 == 7
    assert r.iqr == 4
    assert r.median == pytest.approx(4.5)


def test_single_value():
    r = compute_stats([7])
    assert r.mean == r.median == r.min == r.max == r.q1 == r.q3 == 7
    assert r.variance == 0
    assert r.range == 0
    assert r.mode == ()


@pytest.mark.parametrize("values", SAMPLES)
def test_order_statistics_are_ordered(values):
    r = compute_stats(values)
    assert r.min <= r.q1 <= r.median <= r.q3 <= r.max
    assert r.range == pytest.approx(r.max - r.min)
    assert r.iqr == pytest.approx(r.q3 - r.q1)
    assert r.std_dev == pytest.approx(r.variance ** 0.5)
    assert r.count == len(values)


def test_result_ignores_input_order():
    values = [3, 1, 4, 1, 5]
    expected = compute_stats(values)
    for perm in itertools.permutations(values):
        r = compute_stats(list(perm))
        assert r.mode == expected.mode
        assert r.median == expected.median
        assert r.q1 == expected.q1 and r.q3 == expected.q3
        assert r.mean == pytest.approx(expected.mean)
        assert r.variance == pytest.approx(expected.variance)


def test_variance_zero_only_for_identical_values():
    assert compute_stats([0.1, 0.1, 0.1]).variance == 0.0
    assert compute_stats([1, 2]).variance > 0


def test_mode_lists_every_tied_value():
    assert compute_stats([3, 3, 1, 2, 2]).mode == (2.0, 3.0)
    assert compute_stats([1, 1, 1, 2, 2]).mode == (1.0,)


@pytest.mark.parametrize("values", SAMPLES)
def test_mode_empty_iff_all_distinct(values):
    r = compute_stats(values)
    assert (r.mode == ()) == (len(set(values)) == len(values))


def test_empty_input_raises():
    with pytest.raises(EmptyDataError, match="at least one number"):
        compute_stats([])


def test_result_is_frozen():
    r = compute_stats([1, 2])
    assert isinstance(r, StatResult)
    with pytest.raises(AttributeError):
        r.mean = 0


# --- parsing ---

def test_parse_number():
    assert parse_number(" 3.5 ") == 3.5
    assert parse_number("-1e3") == -1000.0


@pytest.mark.parametrize("text", ["abc", "", "nan", "inf", "-Infinity", "1,5"])
def test_parse_number_rejects(text):
    with pytest.raises(NotANumberError):
        parse_number(text)


def test_parse_many_splits_on_commas_and_whitespace():
    assert parse_many("1, 2  3\n4,5") == [1.0, 2.0, 3.0, 4.0, 5.0]


def test_parse_many_blank():
    with pytest.raises(NotANumberError, match="Please enter some numbers"):
        parse_many(" , ")


# --- DataSet ---

def test_dataset_keeps_insertion_order():
    ds = DataSet()
    ds.add_one("3")
    ds.add_one("1")
    assert ds.values == [3.0, 1.0]
    assert len(ds) == 2


def test_add_many_is_all_or_nothing():
    ds = DataSet([1])
    with pytest.raises(NotANumberError):
        ds.add_many("2, x, 3")
    assert ds.values == [1.0]


def test_add_many_appends():
    ds = DataSet([1])
    assert ds.add_many("2 3") == [2.0, 3.0]
    assert ds.values == [1.0, 2.0, 3.0]


def test_remove_by_index():
    ds = DataSet([5, 10, 15])
    assert ds.remove(1) == 10
    assert ds.values == [5, 15]


@pytest.mark.parametrize("index", [-1, 3])
def test_remove_out_of_range(index):
    ds = DataSet([5, 10, 15])
    with pytest.raises(IndexError):
        ds.remove(index)
    assert ds.values == [5, 10, 15]


def test_values_property_is_a_copy():
    ds = DataSet([1])
    ds.values.append(2)
    assert ds.values == [1]


def test_calculate_and_clear():
    ds = DataSet([5, 10, 15])
    assert ds.result is None
    result = ds.calculate()
    assert ds.result is result
    assert result.mean == pytest.approx(10)
    ds.clear()
    assert ds.values == []
    assert ds.result is None


def test_calculate_on_empty_dataset():
    with pytest.raises(EmptyDataError):
        DataSet().calculate()
