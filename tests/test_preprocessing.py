import pytest

from mlprims.preprocessing import (
    min_max_scaling,
    normalize,
    one_hot_encode,
    standardize,
)
from mlprims.stats import mean, standard_deviation

DATA = [10.0, 20.0, 30.0, 40.0, 50.0, 60.0, 70.0, 80.0, 90.0, 100.0]


def test_normalize_gives_zero_mean():
    assert abs(mean(normalize(DATA))) < 1e-12


def test_normalize_gives_unit_deviation():
    assert standard_deviation(normalize(DATA)) == pytest.approx(1.0)


def test_normalize_does_not_mutate_input():
    data = list(DATA)
    normalize(data)
    assert data == DATA


def test_standardize_matches_unit_min_max_scaling():
    assert standardize(DATA) == min_max_scaling(DATA, 0.0, 1.0)


def test_min_max_scaling_hits_requested_bounds():
    new_min, new_max = -2.0, 5.0
    result = min_max_scaling([3.0, -1.0, 7.0, 4.0], new_min, new_max)
    assert min(result) == pytest.approx(new_min)
    assert max(result) == pytest.approx(new_max)


def test_min_max_scaling_preserves_order():
    data = [3.0, -1.0, 7.0, 4.0]
    result = min_max_scaling(data, 0.0, 10.0)
    order = sorted(range(len(data)), key=data.__getitem__)
    assert sorted(range(len(result)), key=result.__getitem__) == order


def test_min_max_scaling_is_linear():
    result = min_max_scaling(DATA, 0.0, 9.0)
    steps = [b - a for a, b in zip(result, result[1:])]
    assert steps == pytest.approx([steps[0]] * len(steps))


@pytest.mark.parametrize(
    "func",
    [normalize, standardize, lambda d: min_max_scaling(d, 0.0, 1.0)],
)
def test_constant_data_is_rejected(func):
    with pytest.raises(ValueError):
        func([4.0, 4.0, 4.0])


@pytest.mark.parametrize(
    "func",
    [normalize, standardize, lambda d: min_max_scaling(d, 0.0, 1.0)],
)
def test_empty_data_is_rejected(func):
    with pytest.raises(ValueError):
        func([])


def test_one_hot_marks_each_category():
    categories = [0, 1, 2, 0, 1, 2, 0, 1, 2, 0]
    encoded = one_hot_encode(categories, 3)
    assert len(encoded) == len(categories)
    for category, row in zip(categories, encoded):
        assert len(row) == 3
        assert row.index(1.0) == category
        assert sum(row) == 1.0


def test_one_hot_out_of_range_category_is_all_zero():
    (row,) = one_hot_encode([5], 3)
    assert len(row) == 3
    assert not any(row)