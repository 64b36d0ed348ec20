# algokit

A collection of classic algorithms in plain Python, with no third-party
dependencies. The functions take ordinary Python values (sequences, strings,
integers) or the small node classes the package provides, and return plain
results.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Numbers — `algokit.numbers`

- `int_to_roman(num)` — the Roman numeral for `num`, from 0 to 3999; 0 gives an
  empty string and anything outside that range raises `ValueError`.
- `reverse_integer(x)` — `x` with its decimal digits reversed and its sign kept;
  returns `0` when the result does not fit in a signed 32-bit integer.

```python
from algokit.numbers import int_to_roman, reverse_integer

int_to_roman(1994)       # 'MCMXCIV'
reverse_integer(-123)    # -321
reverse_integer(1534236469)  # 0
```

## Arrays — `algokit.arrays`

- `pivot_index(nums)` — the leftmost index whose left and right sums are equal,
  or `-1`.
- `search_range(nums, target)` — a tuple of the first and last index of
  `target` in the sorted sequence `nums`, or `(-1, -1)`.
- `unique_occurrences(arr)` — whether every distinct value occurs a different
  number of times.
- `find_difference(nums1, nums2)` — two lists: the distinct values found only in
  `nums1`, and those found only in `nums2`, each in order of first appearance.

```python
from algokit.arrays import find_difference, pivot_index, search_range

pivot_index([1, 7, 3, 6, 5, 6])          # 3
search_range([5, 7, 7, 8, 8, 10], 8)     # (3, 4)
find_difference([1, 2, 3], [2, 4, 6])    # [[1, 3], [4, 6]]
```

## Strings — `algokit.strings`

- `close_strings(word1, word2)` — whether one word can be turned into the other
  by swapping characters and by exchanging all occurrences of two letters.
- `remove_stars(s)` — each `*` is removed together with the closest kept
  character to its left; a star with nothing left to remove raises `ValueError`.

```python
from algokit.strings import close_strings, remove_stars

close_strings("abc", "bca")        # True
remove_stars("leet**cod*e")        # 'lecoe'
```

## Sorting — `algokit.sorting`

- `merge_sort(items)` — a new, sorted list; the sort is stable.
- `quick_sort(items)` — a new, sorted list, using Hoare partitioning.

Both accept any iterable of mutually comparable values.

```python
from algokit.sorting import merge_sort, quick_sort

merge_sort([3, 1, 2])   # [1, 2, 3]
quick_sort([3, 1, 2])   # [1, 2, 3]
```

The `algokit-sort` command generates random numbers below 1000, sorts them and
prints them on one line:

```
algokit-sort --count 20 --algorithm quick --seed 7
```

- `--algorithm {merge,quick}` — which sort to use (default `merge`).
- `--count N` — how many numbers, from 0 to 1000; when left out, the command
  asks for it.
- `--seed S` — seed for the random numbers, for repeatable output.

## Binary trees — `algokit.trees`

- `TreeNode(val=0, left=None, right=None)` — a binary tree node.
- `tree_to_str(root)` — the tree in preorder with parenthesised subtrees, such as
  `"1(2(4))(3)"`; an empty left subtree is written as `()` only when a right
  subtree follows.
- `kth_smallest(root, k)` — the `k`-th smallest value (counting from 1) of a
  binary search tree; raises `IndexError` when there is none.
- `insert_into_bst(root, val)` — inserts `val` into a binary search tree and
  returns the root; a value already present is left as it is.
- `preorder(root)` — a generator of the tree's values in preorder.

```python
from algokit.trees import insert_into_bst, kth_smallest, preorder

root = None
for value in (10, 2, 11, 5, 12):
    root = insert_into_bst(root, value)

list(preorder(root))    # [10, 2, 5, 11, 12]
kth_smallest(root, 2)   # 5
```

The `algokit-tree` command builds that same tree from 10, 2, 11, 5, 12 and
prints its values in preorder:

```
algokit-tree
```

## Linked lists — `algokit.linked_lists`

- `ListNode(val=0, next=None)` — a singly linked list node.
  `ListNode.from_values(values)` builds a list and returns its head (or `None`
  for no values); iterating over a node yields the values from that node on.
- `reverse_list(head)` — reverses a list in place and returns the new head.
- `is_palindrome_array`, `is_palindrome_recursive`, `is_palindrome_stack`,
  `is_palindrome_two_pointers` — four ways of checking whether a list reads the
  same in both directions. Each takes a head node or `None`.

```python
from algokit.linked_lists import ListNode, is_palindrome_two_pointers

head = ListNode.from_values([1, 2, 2, 1])
is_palindrome_two_pointers(head)   # True
list(head)                         # [1, 2, 2, 1]
```

`is_palindrome_two_pointers` reverses the second half of the list while it
works and puts it back before returning, so the list is unchanged afterwards.
`is_palindrome_recursive` recurses once per node, so very long lists can exceed
Python's recursion limit.