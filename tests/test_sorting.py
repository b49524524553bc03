import pytest

from dskit.errors import CapacityError, InvalidPositionError
from dskit.sorting import (
    Point2D,
    ascend,
    bubble_sort,
    descend,
    insertion_sort,
    insertion_sort_by,
    merge_sort,
    partition,
    quick_sort,
    radix_sort,
    selection_sort,
    x_ascend,
    y_descend,
    z_ascend,
)

ORIGINAL = [6, 3, 7, 4, 9, 1, 5, 2, 8]
RADIX_INPUT = [7792, 2104, 7009, 2001, 7116, 6099, 7971, 1912, 4846, 8929]
POINTS = [
    Point2D(6, 6), Point2D(7, 4), Point2D(2, 3), Point2D(1, 5), Point2D(5, 2),
    Point2D(3, 3), Point2D(9, 4), Point2D(1, 8), Point2D(5, 3),
]


@pytest.mark.parametrize("sort", [selection_sort, insertion_sort, bubble_sort])
def test_step_sorts_sort_in_place(sort):
    values = list(ORIGINAL)
    sort(values)
    assert values == sorted(ORIGINAL)


@pytest.mark.parametrize("sort", [selection_sort, insertion_sort])
def test_step_sorts_record_every_pass(sort):
    values = list(ORIGINAL)
    steps = sort(values)
    assert len(steps) == len(ORIGINAL) - 1
    assert list(steps[-1]) == sorted(ORIGINAL)


def test_selection_sort_prefix_is_final_after_each_pass():
    values = list(ORIGINAL)
    target = sorted(ORIGINAL)
    for i, step in enumerate(selection_sort(values)):
        assert list(step[: i + 1]) == target[: i + 1]


def test_insertion_sort_prefix_is_sorted_after_each_pass():
    values = list(ORIGINAL)
    for i, step in enumerate(insertion_sort(values), start=1):
        assert list(step[: i + 1]) == sorted(step[: i + 1])


def test_bubble_sort_stops_early_on_sorted_input():
    values = [1, 2, 3, 4]
    assert bubble_sort(values) == []
    assert values == [1, 2, 3, 4]


def test_bubble_sort_largest_settles_at_end_each_pass():
    values = list(ORIGINAL)
    steps = bubble_sort(values)
    target = sorted(ORIGINAL)
    for k, step in enumerate(steps, start=1):
        assert list(step[-k:]) == target[-k:]


def test_compare_functions_signs():
    assert ascend(1, 2) > 0
    assert ascend(2, 1) < 0
    assert descend(1, 2) < 0
    assert ascend(3, 3) == descend(3, 3) == 0


def test_insertion_sort_by_descend():
    values = list(ORIGINAL)
    steps = insertion_sort_by(values, descend)
    assert values == sorted(ORIGINAL, reverse=True)
    assert len(steps) == len(ORIGINAL) - 1


def test_insertion_sort_by_ascend():
    values = list(ORIGINAL)
    insertion_sort_by(values, ascend)
    assert values == sorted(ORIGINAL)


def test_merge_sort_sorts_only_given_range():
    values = list(ORIGINAL)
    merge_sort(values, 0, 6)
    assert values[:7] == sorted(ORIGINAL[:7])
    assert values[7:] == ORIGINAL[7:]


def test_merge_sort_whole_list_by_default():
    values = list(ORIGINAL)
    merge_sort(values)
    assert values == sorted(ORIGINAL)


def test_quick_sort_sorts_range_and_whole_list():
    values = list(ORIGINAL)
    quick_sort(values, 0, 6)
    assert values[:7] == sorted(ORIGINAL[:7])
    assert values[7:] == ORIGINAL[7:]
    quick_sort(values)
    assert values == sorted(ORIGINAL)


def test_quick_sort_with_duplicates():
    values = [3, 1, 3, 2, 1, 3]
    quick_sort(values)
    assert values == sorted([3, 1, 3, 2, 1, 3])


def test_partition_places_pivot():
    values = list(ORIGINAL)
    q = partition(values, 0, len(values) - 1)
    assert values[q] == ORIGINAL[0]
    assert all(v <= values[q] for v in values[:q])
    assert all(v > values[q] for v in values[q + 1 :])


def test_range_out_of_bounds():
    with pytest.raises(InvalidPositionError):
        merge_sort([1, 2], 0, 5)
    with pytest.raises(InvalidPositionError):
        quick_sort([1, 2], -1, 1)


def test_radix_sort_source_example():
    values = list(RADIX_INPUT)
    steps = radix_sort(values)
    assert values == sorted(RADIX_INPUT)
    assert len(steps) == 4


def test_radix_sort_first_pass_orders_last_digit():
    values = list(RADIX_INPUT)
    steps = radix_sort(values)
    last_digits = [v % 10 for v in steps[0]]
    assert last_digits == sorted(last_digits)


def test_radix_sort_only_considers_given_digits():
    values = [100, 5]
    radix_sort(values, digits=2)
    assert values == [100, 5]
    radix_sort(values, digits=3)
    assert values == [5, 100]


def test_radix_sort_rejects_negatives():
    with pytest.raises(ValueError):
        radix_sort([3, -1])


def test_radix_sort_bucket_overflow():
    with pytest.raises(CapacityError):
        radix_sort([0] * 100, digits=1)


def test_points_x_ascend_is_stable():
    points = list(POINTS)
    insertion_sort_by(points, x_ascend)
    assert points == sorted(POINTS, key=lambda p: p.x)


def test_points_y_descend_is_stable():
    points = list(POINTS)
    insertion_sort_by(points, y_descend)
    assert points == sorted(POINTS, key=lambda p: -p.y)


def test_points_z_ascend_is_stable():
    points = list(POINTS)
    insertion_sort_by(points, z_ascend)
    assert points == sorted(POINTS, key=lambda p: p.x * p.x + p.y * p.y)