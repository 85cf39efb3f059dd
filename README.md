# leetkit

Small, dependency-free building blocks for the data structures that algorithm
exercises are usually phrased in: binary trees, n-ary trees and singly linked
lists. Each tree type comes with the bracketed text form
(`"[3,9,20,null,null,15,7]"`) for reading and writing. A set of classic
solutions built on top of them is included, along with a small command that
prints worked examples.

## Installation

```
pip install .
```

Python 3.10 or later is required. Nothing outside the standard library is
needed at run time.

## Trees and their text form

```python
from leetkit.binary_tree import deserialize_tree, serialize_tree, build_binary_tree
from leetkit.traversals import level_order, inorder_traversal

root = deserialize_tree("[3,9,20,null,null,15,7]")
level_order(root)          # [[3], [9, 20], [15, 7]]
serialize_tree(root)       # "[3,9,20,null,null,15,7]"

# build_binary_tree takes a level-order list where -1 marks a missing child
tree = build_binary_tree([1, -1, 2, 3])
inorder_traversal(tree)    # [1, 3, 2]
```

`display_tree` and `front_display_tree` return the level-order and preorder
values as space-separated strings; `find` returns the first node holding a
value in level order. Malformed items in the text form raise `ValueError`.

N-ary trees use the same layout, with `null` closing each node's children:

```python
from leetkit.nary_tree import deserialize_nary, serialize_nary
from leetkit.nary_traversals import nary_level_order

root = deserialize_nary("[1,null,3,2,4,null,5,6]")
nary_level_order(root)     # [[1], [3, 2, 4], [5, 6]]
serialize_nary(root)       # "[1,null,3,2,4,null,5,6]"
```

Linked lists hold one digit per node, least significant first, for number
addition:

```python
from leetkit.linked_list import generate_list, add_two_numbers, display_list

total = add_two_numbers(generate_list([2, 4, 3]), generate_list([5, 6, 4]))
display_list(total)        # "708"
list(total)                # [7, 0, 8]
```

`generate_list` raises `ValueError` when given no values.

## Modules

| Module | Contents |
| --- | --- |
| `leetkit.codec` | list parsing and formatting: `parse_int_list`, `serialize_list`, `serialize_nested`, `split`, `join` |
| `leetkit.binary_tree` | `TreeNode`, `build_binary_tree`, `deserialize_tree`, `serialize_tree`, `find`, `display_tree`, `front_display_tree` |
| `leetkit.nary_tree` | `Node`, `deserialize_nary`, `serialize_nary` |
| `leetkit.linked_list` | `ListNode`, `generate_list`, `display_list`, `add_two_numbers` |
| `leetkit.traversals` | `inorder_traversal`, `preorder_traversal`, `postorder_traversal`, `level_order`, `level_order_bottom`, `zigzag_level_order`, `vertical_traversal` |
| `leetkit.nary_traversals` | `nary_level_order`, `nary_preorder`, `nary_postorder` |
| `leetkit.construction` | `build_from_preorder_inorder`, `build_from_inorder_postorder`, `build_from_preorder_postorder` |
| `leetkit.tree_queries` | `is_cousins`, `replace_value_in_tree`, `replace_value_in_tree_by_layer`, `kth_largest_level_sum`, `closest_nodes`, `lowest_common_ancestor`, `lowest_common_ancestor_bst`, `range_sum_bst`, `deepest_leaves_sum` |
| `leetkit.arrays` | `two_sum`, `length_of_lis`, `max_equal_freq`, `largest_magic_square`, `min_operations`, `get_smallest_string` |
| `leetkit.designs` | `CircularDeque`, `CircularQueue`, `OrderedStream` |

## Examples

```python
from leetkit.arrays import two_sum, get_smallest_string, length_of_lis
from leetkit.designs import CircularQueue

two_sum([2, 7, 11, 15], 9)             # [0, 1]
get_smallest_string("45320")           # "43520"
length_of_lis([10, 9, 2, 5, 3, 7, 101, 18])  # 4

queue = CircularQueue(2)
queue.enqueue(1), queue.enqueue(2), queue.enqueue(3)   # (True, True, False)
queue.front(), queue.rear()                            # (1, 2)
```

The bounded containers report a refused insert or removal with `False` and an
empty `front()`/`rear()` with `-1`. `OrderedStream.insert` raises `IndexError`
for a key outside `1..n`.

## Command line

Installing the package provides a `leetkit` command that prints the worked
example of one problem. With no argument it runs `smallest-string`:

```
leetkit
leetkit --list
leetkit level-order
```

`--list` prints the names of all available problems.

## Running the tests

```
pip install ".[test]"
pytest
```