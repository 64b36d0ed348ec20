from hypothesis import given
from hypothesis import strategies as st

from algokit.arrays import find_difference, pivot_index, search_range, unique_occurrences

small_ints = st.integers(min_value=-20, max_value=20)


def test_pivot_index_examples():
    assert pivot_index([1, 7, 3, 6, 5, 6]) == 3
    assert pivot_index([2, 1, -1]) == 0
    assert pivot_index([1, 2, 3]) == -1
    assert pivot_index([]) == -1


@given(st.lists(small_ints, max_size=30))
def test_pivot_index_is_leftmost_balance_point(nums):
    result = pivot_index(nums)
    balanced = [i for i in range(len(nums)) if sum(nums[:i]) == sum(nums[i + 1 :])]
    if result == -1:
        assert balanced == []
    else:
        assert result == balanced[0]


def test_search_range_example():
    assert search_range([5, 7, 7, 8, 8, 10], 8) == (3, 4)
    assert search_range([5, 7, 7, 8, 8, 10], 6) == (-1, -1)
    assert search_range([], 0) == (-1, -1)


@given(st.lists(small_ints, max_size=40), small_ints)
def test_search_range_bounds(values, target):
    nums = sorted(values)
    first, last = search_range(nums, target)
    if target not in nums:
        assert (first, last) == (-1, -1)
    else:
        assert nums[first] == target and nums[last] == target
        assert first == 0 or nums[first - 1] < target
        assert last == len(nums) - 1 or nums[last + 1] > target
        assert last - first + 1 == nums.count(target)


def test_unique_occurrences_examples():
    assert unique_occurrences([1, 2, 2, 1, 1, 3])
    assert not unique_occurrences([1, 2])
    assert unique_occurrences([])


@given(st.lists(small_ints, max_size=30))
def test_unique_occurrences_duplicate_counts(values):
    doubled = values + [v + 100 for v in values]
    if values:
        assert not unique_occurrences(doubled)
    else:
        assert unique_occurrences(doubled)


@given(st.lists(small_ints, max_size=30), st.lists(small_ints, max_size=30))
def test_find_difference_invariants(nums1, nums2):
    only1, only2 = find_difference(nums1, nums2)
    common = set(nums1) & set(nums2)
    assert len(only1) == len(set(only1))
    assert len(only2) == len(set(only2))
    assert set(only1) | common == set(nums1)
    assert set(only2) | common == set(nums2)
    assert not set(only1) & set(nums2)
    assert not set(only2) & set(nums1)


def test_find_difference_keeps_first_appearance_order():
    only1, only2 = find_difference([3, 1, 3, 2], [2, 4, 4])
    assert only1 == [3, 1]
    assert only2 == [4]