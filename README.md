# algodrills

Classic interview algorithms as small, self-contained Python functions: linked lists, binary trees, searching, arrays, numbers, binary search over an answer range, and an LRU cache.

The package has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

With the test requirements:

```
pip install ".[test]"
```

## Modules

### `algodrills.linked_lists`

- `ListNode(val=0, next=None)` – a singly linked list node. Nodes compare by identity.
- `build_list(values)` – build a list from an iterable and return its head (`None` when empty).
- `list_values(head)` – return the values of an acyclic list as a Python list.
- `add_two_numbers(l1, l2)` – add two numbers whose digits are stored in reverse order.
- `merge_two_lists(list1, list2)` – splice two sorted lists into one; on equal values the node from `list2` comes first.
- `reverse_k_group(head, k)` – reverse the list in groups of `k`; a shorter trailing group keeps its order. Raises `ValueError` if `k < 1`.
- `rotate_right(head, k)` – rotate the list right by `k` places. Raises `ValueError` if `k` is negative.
- `delete_duplicates(head)` – remove every node whose value occurs in an adjacent run of two or more.
- `has_cycle(head)` – tell whether the list loops.

### `algodrills.lru_cache`

- `LRUCache(capacity)` – a cache that evicts the least recently used key once full. `get(key)` returns the value and marks the key as recently used, or returns `-1` for a missing key; `put(key, value)` stores a value. `len()` and `in` are supported. A capacity below 1 raises `ValueError`.

### `algodrills.searching`

- `binary_search(nums, target)` – index of `target` in sorted `nums`, or `-1`.
- `search_insert(nums, target)` – index of `target`, or the index where it would be inserted.
- `search_range(nums, target)` – `(first, last)` indices of `target`, or `(-1, -1)`.
- `search_rotated(nums, target)` – index of `target` in a rotated sorted sequence, or `-1`.
- `search_rotated_with_duplicates(nums, target)` – whether `target` occurs in a rotated sorted sequence that may repeat values.
- `find_min(nums)` – smallest value of a rotated ascending sequence.
- `find_peak_element(nums)` – index of an element greater than its neighbours.
- `single_non_duplicate(nums)` – the one value that appears once in a sorted list of pairs.

`find_min` and `find_peak_element` raise `ValueError` for an empty sequence; `single_non_duplicate` raises `ValueError` when no value stands alone.

### `algodrills.trees`

- `TreeNode(val=0, left=None, right=None)` – a binary tree node. Nodes compare by identity.
- `build_tree(values)` – build a tree from level-order values, with `None` marking a missing child.
- `inorder_values(root)` – the values in in-order sequence.
- `is_same_tree(p, q)`, `is_symmetric(root)`, `is_balanced(root)`, `is_subtree(root, sub_root)` – structural checks.
- `zigzag_level_order(root)` – level values, alternating left-to-right and right-to-left.
- `flatten(root)` – relink the tree in place into a right-leaning chain in pre-order.
- `lowest_common_ancestor(root, p, q)` – the deepest node that has both `p` and `q` below it (or is one of them).
- `diameter_of_binary_tree(root)` – edges on the longest path between two nodes.
- `width_of_binary_tree(root)` – the widest level, counting gaps between its end nodes.
- `min_diff_in_bst(root)` – smallest difference between two values of a search tree; raises `ValueError` for fewer than two nodes.
- `bst_to_gst(root)` – replace each value of a search tree with the sum of all values not smaller than it, in place, and return the root.

### `algodrills.arrays`

- `two_sum(nums, target)` – indices `(i, j)`, with the later index first, whose values add up to `target`; raises `ValueError` if there are none.
- `merge_intervals(intervals)` – merge overlapping or touching `[start, end]` intervals.
- `merge_sorted_arrays(nums1, m, nums2, n)` – merge the first `n` items of `nums2` into the first `m` of `nums1`, in place.
- `max_product(nums)` – largest product of a non-empty contiguous run.
- `majority_element(nums)` – the value occurring more than half the time.
- `reverse_pairs(nums)` – count of pairs `i < j` with `nums[i] > 2 * nums[j]`.
- `find_diagonal_order(mat)` – matrix elements along anti-diagonals, alternating direction.
- `subarray_sum(nums, k)` – count of contiguous runs adding up to `k`.
- `find_missing_and_repeated_values(grid)` – repeated values in ascending order, followed by the values of `1..n*n` that are absent.

`max_product` and `majority_element` raise `ValueError` for an empty sequence.

### `algodrills.answer_search`

- `min_eating_speed(piles, h)` – slowest speed that finishes all piles within `h` hours; raises `ValueError` if none does.
- `smallest_divisor(nums, threshold)` – least divisor whose rounded-up quotients sum to at most `threshold`; returns `max(nums)` when none qualifies.
- `min_days(bloom_day, m, k)` – first day on which `m` bouquets of `k` adjacent flowers can be made, or `-1` when there are fewer than `m * k` flowers.

### `algodrills.numbers`

- `is_power_of_four(n)` – whether `n` is a power of four.
- `maximum_69_number(num)` – turn the most significant 6 into a 9.
- `largest_good_integer(num)` – the largest run of three equal characters in a string, or `""`.

## Examples

```python
from algodrills.linked_lists import build_list, list_values, add_two_numbers
from algodrills.lru_cache import LRUCache
from algodrills.searching import binary_search
from algodrills.trees import build_tree, zigzag_level_order

# 342 + 465 = 807, digits stored in reverse order
total = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
print(list_values(total))          # [7, 0, 8]

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                       # 1
cache.put(3, 3)                    # evicts key 2
cache.get(2)                       # -1

binary_search([-1, 0, 3, 5, 9, 12], 9)   # 4

root = build_tree([3, 9, 20, None, None, 15, 7])
zigzag_level_order(root)           # [[3], [20, 9], [15, 7]]
```

## What it does not do

This is a library only: it has no command-line tool and keeps nothing on disk. Inputs are taken to be well formed as each function describes (for example, sorted where a search expects sorted input); they are not validated beyond the errors listed above.

## Running the tests

```
pytest
```