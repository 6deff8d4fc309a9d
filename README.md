# blind75

Worked solutions to a well-known set of 75 interview problems, the small
data-structure helpers they rely on, and a way of keeping a personal copy of
each problem's starter files on disk.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `blind75.tree` | `TreeNode`, and functions that build trees from level-order lists (`ints_to_tree`, where `None` marks a missing node; `strings_to_tree`, where `"null"` does) or from traversals (`pre_in_to_tree`, `in_post_to_tree`), and that turn trees back into lists (`tree_to_preorder`, `tree_to_inorder`, `tree_to_postorder`, `tree_to_ints`, `tree_to_level_order_strings`, `tree_to_preorder_strings`); `get_target_node` finds a node by value |
| `blind75.linked_list` | `ListNode` (with `get_node_with`), `ints_to_list`, `list_to_ints` (raises `ValueError` past 100 nodes, as a guard against cycles), `ints_to_list_with_cycle` |
| `blind75.union_find` | `UnionFind` (path compression and union by rank, with a set `count`) and `UnionFindCount` (set sizes and `max_union_count`) |
| `blind75.arrays` | `longest_consecutive` and two alternatives, `max_product`, `find_min` and two alternatives, `contains_duplicate`, `product_except_self`, `missing_number`, `top_k_frequent`, `length_of_lis`, `length_of_lis_fast`, `erase_overlap_intervals`, `erase_overlap_intervals_greedy`, `Interval`, `can_attend_meetings`, `min_meeting_rooms` |
| `blind75.bits` | `reverse_bits`, `hamming_weight`, `hamming_weight_kernighan`, `count_bits`, `get_sum` (signed 64-bit wrap-around) |
| `blind75.dynamic` | `rob`, `rob_dp`, `rob_two_vars`, `rob_circular`, `coin_change` |
| `blind75.text` | `is_palindrome`, `word_break`, `is_anagram`, `is_anagram_counter`, `character_replacement`, `count_substrings`, `longest_common_subsequence`, `alien_order`, and `Codec`, which encodes a list of strings as `<byte length>\|<text>` records |
| `blind75.grids` | `num_islands`, `find_words`, `exist`, `pacific_atlantic` |
| `blind75.design` | `Trie`, `WordDictionary` (searches may use `.` for any one character), `MedianFinder` |
| `blind75.tree_problems` | `max_path_sum`, `invert_tree`, `kth_smallest`, `lowest_common_ancestor`, `is_subtree`, `is_same_tree`, `TreeCodec` |
| `blind75.list_problems` | `has_cycle`, `reorder_list`, `reorder_list_by_array`, `reverse_list` |
| `blind75.graphs` | `Node`, `clone_graph`, `can_finish`, `valid_tree`, `count_components` |
| `blind75.workspace` | `get_data_dir`, `get_problem_path`, `ensure_problem` |

Invalid input is reported with exceptions, for example `ValueError` from
`max_product([])` or from `reverse_bits` given a value outside the unsigned
32-bit range.

## Examples

```python
from blind75.tree import ints_to_tree, tree_to_ints
from blind75.tree_problems import invert_tree, max_path_sum

root = ints_to_tree([4, 2, 7, 1, 3, 6, 9])
print(tree_to_ints(invert_tree(root)))   # [4, 7, 2, 9, 6, 3, 1]
print(max_path_sum(ints_to_tree([1, 2, 3])))  # 6
```

```python
from blind75.linked_list import ints_to_list, list_to_ints
from blind75.list_problems import reorder_list

print(list_to_ints(reorder_list(ints_to_list([1, 2, 3, 4, 5]))))  # [1, 5, 2, 4, 3]
```

```python
from blind75.design import MedianFinder

finder = MedianFinder()
for n in (1, 2, 3):
    finder.add_num(n)
print(finder.find_median())  # 2.0
```

## Problem workspace

`blind75.workspace` keeps problems under `$XDG_DATA_HOME/b75/problems`
(falling back to `~/.local/share/b75/problems`). `get_data_dir()` returns the
`b75` data directory and `get_problem_path(slug)` the directory for one
problem; both return `pathlib.Path` objects.

`ensure_problem(slug, assets_root)` copies the problem's files from
`assets_root/problems/<slug>` into that directory the first time it is called
and leaves an existing directory alone. A file named `go.mod.tpl` is written
as `go.mod`. If there are no assets for the slug, `FileNotFoundError` is
raised.

## What this package does not do

There is no command to run and no interactive program for browsing or
practising problems: the package is a library of functions and classes. It
ships no problem files of its own either; `ensure_problem` only copies files
from an assets directory that the caller supplies.