# dsakit

A small library of classic data structures and algorithms in plain Python,
with no runtime dependencies.

## What is inside

- `dsakit.arrays`: `min_max`, `largest`, `second_largest`,
  `rotate_left_by_one`, `rotate_right`, `median_of_two`, `count_good_pairs`,
  `three_sum`, `n_choose_r`, `pascal_element`, `two_repeated`, `two_sum`,
  `is_anagram`, `kth_largest`, `kth_smallest`, `binary_search`,
  `is_symmetric`, `majority_element` and `peak_index`.
- `dsakit.subarrays`: maximum subarray sum (`max_subarray_sum`,
  `max_subarray_sum_or_zero`), `longest_subarray_with_sum`, trapped rain
  water (`trap_rain_water`, `trap_rain_water_prefix`) and the candy
  distribution problem (`min_candies`, `min_candies_by_slopes`).
- `dsakit.sorting`: `bubble_sort`, `selection_sort`, `insertion_sort`,
  `merge_sort`, `quick_sort`, `heap_sort`, `shell_sort`, `counting_sort`,
  `bucket_sort` and `radix_sort` (non-negative integers only). Each returns a
  new sorted list.
- `dsakit.merging`: `merge_sorted` and the shrinking-gap `merge_by_gap`.
- `dsakit.allocation`: the book allocation problem, `allocate_pages` by
  binary search (with `is_feasible`) and `allocate_pages_brute` by trying
  every split.
- `dsakit.queues`: bounded `CircularQueue`, `Deque` and `PriorityQueue`
  (a max-heap), an unbounded `LinkedQueue`, plus `is_palindrome_queue` and
  `reverse_queue`.
- `dsakit.stacks`: `LinkedStack`, `reverse_stack` and
  `next_greater_elements` (`-1` where no greater element follows).
- `dsakit.strings`: `longest_common_subsequence` and `can_make_palindrome`.
- `dsakit.binary_tree`: `TreeNode` and `NaryNode`; building trees
  (`parse_level_order`, `from_level_order`, `from_placeholder_array`,
  `insert_complete`, `build_from_preorder_inorder`,
  `build_from_postorder_inorder`, `parse_nary_level_order`); traversals
  (`preorder`, `inorder`, `postorder`, `level_order`);
  `to_doubly_linked_list` with `iter_linked_list`; `is_same_tree`,
  `has_duplicates`, `max_path_sum` and `max_data_node`.
- `dsakit.bst`: `AVLNode`, `bst_insert`, `height`, `level_groups`,
  `is_balanced_at_root`, `avl_insert`, `avl_delete`, `find_ceil`,
  `find_floor`, `lowest_common_ancestor` and `two_sum_bst`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from dsakit.subarrays import max_subarray_sum, trap_rain_water
from dsakit.sorting import merge_sort
from dsakit.queues import CircularQueue

max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])       # 6
trap_rain_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])  # 6
merge_sort([24, 9, 29, 14, 19, 27])  # [9, 14, 19, 24, 27, 29]

queue = CircularQueue(5)
queue.enqueue(1)
queue.enqueue(2)
queue.dequeue()  # 1
list(queue)      # [2]
```

Adding to a full `CircularQueue`, `Deque` or `PriorityQueue` raises
`QueueFullError`; removing from an empty queue raises `QueueEmptyError`.
Popping or peeking an empty `LinkedStack` raises `StackUnderflowError`.

```python
from dsakit.binary_tree import (
    inorder, iter_linked_list, parse_level_order, to_doubly_linked_list,
)
from dsakit.bst import avl_delete, avl_insert

root = parse_level_order("10 20 30 N 40")
inorder(root)  # [20, 40, 10, 30]

head = to_doubly_linked_list(parse_level_order("1 2 3"))
list(iter_linked_list(head))  # [2, 1, 3]

avl = None
for value in (4, 7, 6, 0, 2, 1, 8):
    avl = avl_insert(avl, value)
avl = avl_delete(avl, 6)
inorder(avl)  # [0, 1, 2, 4, 7, 8]
```

## What it does not do

dsakit is a library only: it has no command-line program and no interactive
menus. Queues and stacks signal errors by raising exceptions rather than
printing messages, and nothing is read from standard input.