"""Command that prints worked examples of the package's problems."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable, Iterator, Sequence

from leetkit.arrays import (
    get_smallest_string,
    largest_magic_square,
    length_of_lis,
    max_equal_freq,
    min_operations,
    two_sum,
)
from leetkit.binary_tree import (
    build_binary_tree,
    deserialize_tree,
    display_tree,
    find,
    front_display_tree,
    serialize_tree,
)
from leetkit.codec import parse_int_list, serialize_list, serialize_nested
from leetkit.construction import (
    build_from_inorder_postorder,
    build_from_preorder_inorder,
    build_from_preorder_postorder,
)
from leetkit.designs import OrderedStream
from leetkit.linked_list import add_two_numbers, display_list, generate_list
from leetkit.nary_traversals import nary_level_order, nary_postorder, nary_preorder
from leetkit.nary_tree import deserialize_nary, serialize_nary
from leetkit.traversals import (
    inorder_traversal,
    level_order,
    level_order_bottom,
    postorder_traversal,
    preorder_traversal,
    vertical_traversal,
    zigzag_level_order,
)
from leetkit.tree_queries import (
    closest_nodes,
    deepest_leaves_sum,
    is_cousins,
    kth_largest_level_sum,
    lowest_common_ancestor,
    lowest_common_ancestor_bst,
    range_sum_bst,
    replace_value_in_tree,
    replace_value_in_tree_by_layer,
)

DEFAULT_DEMO = "smallest-string"

DEMOS: dict[str, Callable[[], Iterator[str]]] = {}


def _demo(name: str):
    def register(func: Callable[[], Iterator[str]]) -> Callable[[], Iterator[str]]:
        DEMOS[name] = func
        return func

    return register


def _spaced(values: Iterable[int]) -> str:
    return " ".join(str(value) for value in values)


_SIMPLE_TREES = ([1, -1, 2, 3], [], [1])
_LEVEL_TREES = ("[3,9,20,null,null,15,7]", "[1]", "[]")
_NARY_TREES = (
    "[1,null,3,2,4,null,5,6]",
    "[1,null,2,3,4,5,null,null,6,7,null,8,null,9,10,null,null,"
    "11,null,12,null,13,null,null,14]",
)
_COUSINS_II_CASES = (
    [5, 4, 9, 1, 10, -1, 7],
    [3, 1, 2],
    [
        436, 623, 376, 117, 698, 467, 818, 52, 543, 880, 577, 700, 568, 361, -1, 616, -1, 232, 656,
        565, 12, -1, 95, -1, -1, -1, 389, 830, -1, 276, -1, 715, -1, 144, -1, 317, -1, -1, 91, -1,
        -1, -1, -1, -1, -1, 129, 362, 487, 272, 275, -1, -1, 908, 559, -1, -1, -1, -1, -1, 862, -1,
        -1, -1, -1, 68, 63, -1, 467, -1, 274, -1, -1, -1, -1, -1, 920, -1, 300,
    ],
)


@_demo("cousins-ii")
def _cousins_ii() -> Iterator[str]:
    for data in _COUSINS_II_CASES:
        yield display_tree(replace_value_in_tree(build_binary_tree(data)))
        yield display_tree(replace_value_in_tree_by_layer(build_binary_tree(data)))


@_demo("cousins")
def _cousins() -> Iterator[str]:
    cases = (([1, 2, 3, 4], 4, 3), ([1, 2, 3, -1, 4, -1, 5], 5, 4), ([1, 2, 3, -1, 4], 2, 3))
    for data, x, y in cases:
        yield str(int(is_cousins(build_binary_tree(data), x, y)))


@_demo("lca")
def _lca() -> Iterator[str]:
    data = [3, 5, 1, 6, 2, 0, 8, -1, -1, 7, 4]
    for tree_data, p_val, q_val in ((data, 5, 1), (data, 5, 4), ([1, 2], 1, 2)):
        tree = build_binary_tree(tree_data)
        yield str(lowest_common_ancestor(tree, find(tree, p_val), find(tree, q_val)).val)


@_demo("inorder")
def _inorder() -> Iterator[str]:
    for data in _SIMPLE_TREES:
        yield _spaced(inorder_traversal(build_binary_tree(data)))


@_demo("preorder")
def _preorder() -> Iterator[str]:
    for data in _SIMPLE_TREES:
        yield _spaced(preorder_traversal(build_binary_tree(data)))


@_demo("postorder")
def _postorder() -> Iterator[str]:
    for data in _SIMPLE_TREES:
        yield _spaced(postorder_traversal(build_binary_tree(data)))


@_demo("vertical")
def _vertical() -> Iterator[str]:
    for text in ("[3,9,20,null,null,15,7]", "[1,2,3,4,5,6,7]", "[1,2,3,4,6,5,7]"):
        yield serialize_nested(vertical_traversal(build_binary_tree(parse_int_list(text))))


@_demo("level-order")
def _level_order() -> Iterator[str]:
    for text in _LEVEL_TREES:
        yield serialize_nested(level_order(build_binary_tree(parse_int_list(text))))


@_demo("level-order-bottom")
def _level_order_bottom() -> Iterator[str]:
    for text in _LEVEL_TREES:
        yield serialize_nested(level_order_bottom(build_binary_tree(parse_int_list(text))))


@_demo("zigzag")
def _zigzag() -> Iterator[str]:
    for text in _LEVEL_TREES:
        tree = deserialize_tree(text)
        yield serialize_tree(tree)
        yield serialize_nested(zigzag_level_order(tree))


@_demo("nary-level-order")
def _nary_level_order() -> Iterator[str]:
    for text in _NARY_TREES:
        tree = deserialize_nary(text)
        yield serialize_nary(tree)
        yield serialize_nested(nary_level_order(tree))


@_demo("nary-preorder")
def _nary_preorder() -> Iterator[str]:
    for text in _NARY_TREES:
        yield serialize_list(nary_preorder(deserialize_nary(text)))


@_demo("nary-postorder")
def _nary_postorder() -> Iterator[str]:
    for text in (*_NARY_TREES, "[]"):
        yield serialize_list(nary_postorder(deserialize_nary(text)))


@_demo("construct-pre-in")
def _construct_pre_in() -> Iterator[str]:
    for pre, ino in (("[3,9,20,15,7]", "[9,3,15,20,7]"), ("[-1]", "[-1]")):
        yield serialize_tree(build_from_preorder_inorder(parse_int_list(pre), parse_int_list(ino)))


@_demo("construct-in-post")
def _construct_in_post() -> Iterator[str]:
    for ino, post in (("[9,3,15,20,7]", "[9,15,7,20,3]"), ("[-1]", "[-1]")):
        yield serialize_tree(build_from_inorder_postorder(parse_int_list(ino), parse_int_list(post)))


@_demo("construct-pre-post")
def _construct_pre_post() -> Iterator[str]:
    for pre, post in (("[1,2,4,5,3,6,7]", "[4,5,2,6,7,3,1]"), ("[-1]", "[-1]")):
        yield serialize_tree(
            build_from_preorder_postorder(parse_int_list(pre), parse_int_list(post))
        )


@_demo("kth-largest-level-sum")
def _kth_largest() -> Iterator[str]:
    cases = (
        ("[5,8,9,2,1,3,7,4,6]", 2),
        ("[1,2,null,3]", 1),
        ("[897935,796748,528909,null,null,null,905326,706311,null,null,282251,null,139169]", 4),
    )
    for text, k in cases:
        yield str(kth_largest_level_sum(deserialize_tree(text), k))


@_demo("closest-nodes")
def _closest_nodes() -> Iterator[str]:
    cases = (
        ("[6,2,13,1,4,9,15,null,null,null,null,null,null,14]", "[2,5,16]"),
        ("[4,null,9]", "[3]"),
    )
    for tree_text, queries in cases:
        yield serialize_nested(closest_nodes(deserialize_tree(tree_text), parse_int_list(queries)))


@_demo("lca-bst")
def _lca_bst() -> Iterator[str]:
    for p_val, q_val in ((2, 8), (2, 4)):
        tree = deserialize_tree("[6,2,8,0,4,7,9,null,null,3,5]")
        node = lowest_common_ancestor_bst(tree, find(tree, p_val), find(tree, q_val))
        yield str(node.val)


@_demo("range-sum-bst")
def _range_sum_bst() -> Iterator[str]:
    for text, low, high in (("[10,5,15,3,7,null,18]", 7, 15), ("[10,5,15,3,7,13,18,1,null,6]", 6, 10)):
        yield str(range_sum_bst(deserialize_tree(text), low, high))


@_demo("deepest-leaves-sum")
def _deepest_leaves_sum() -> Iterator[str]:
    cases = (
        [1, 2, 3, 4, 5, -1, 6, 7, -1, -1, -1, -1, 8],
        [6, 7, 8, 2, 7, 1, 3, 9, -1, 1, 4, -1, -1, -1, 5],
    )
    for data in cases:
        tree = build_binary_tree(data)
        yield front_display_tree(tree)
        yield str(deepest_leaves_sum(tree))


@_demo("smallest-string")
def _smallest_string() -> Iterator[str]:
    for text in ("45320", "001"):
        yield get_smallest_string(text)


@_demo("ordered-stream")
def _ordered_stream() -> Iterator[str]:
    stream = OrderedStream(5)
    for key, value in ((3, "c"), (1, "a"), (2, "b"), (5, "e"), (4, "d")):
        ready = stream.insert(key, value)
        yield "[" + "".join(f'"{item}", ' for item in ready) + "]"


@_demo("two-sum")
def _two_sum() -> Iterator[str]:
    for nums, target in (([2, 7, 11, 15], 9), ([3, 2, 4], 6), ([3, 3], 6)):
        yield _spaced(two_sum(nums, target))


@_demo("add-two-numbers")
def _add_two_numbers() -> Iterator[str]:
    cases = (([2, 4, 3], [5, 6, 4]), ([0], [0]), ([9, 9, 9, 9, 9, 9, 9], [9, 9, 9, 9]))
    for first, second in cases:
        yield display_list(add_two_numbers(generate_list(first), generate_list(second)))


@_demo("max-equal-freq")
def _max_equal_freq() -> Iterator[str]:
    for nums in ([2, 2, 1, 1, 5, 3, 3, 5], [1, 1, 1, 2, 2, 2, 3, 3, 3, 4, 4, 4, 5]):
        yield str(max_equal_freq(nums))


@_demo("lis")
def _lis() -> Iterator[str]:
    for nums in ([10, 9, 2, 5, 3, 7, 101, 18], [0, 1, 0, 3, 2, 3], [7, 7, 7, 7, 7, 7, 7]):
        yield str(length_of_lis(nums))


@_demo("largest-magic-square")
def _largest_magic_square() -> Iterator[str]:
    grid = [[7, 1, 4, 5, 6], [2, 5, 1, 6, 4], [1, 5, 4, 3, 2], [1, 2, 7, 3, 4]]
    yield str(largest_magic_square(grid))


@_demo("crawler-log-folder")
def _crawler_log_folder() -> Iterator[str]:
    cases = (
        ["d1/", "d2/", "../", "d21/", "./"],
        ["d1/", "d2/", "./", "d3/", "../", "d31/"],
        ["d1/", "../", "../", "../"],
        ["./", "../", "./"],
    )
    for logs in cases:
        yield str(min_operations(logs))


def main(argv: Sequence[str] | None = None) -> int:
    """Print the worked example of one problem."""
    parser = argparse.ArgumentParser(
        prog="leetkit", description="Print the worked example of a problem."
    )
    parser.add_argument(
        "problem", nargs="?", default=DEFAULT_DEMO, choices=sorted(DEMOS),
        help=f"problem to run (default: {DEFAULT_DEMO})",
    )
    parser.add_argument("--list", action="store_true", help="list the problems and exit")
    args = parser.parse_args(argv)
    if args.list:
        for name in sorted(DEMOS):
            print(name)
        return 0
    for line in DEMOS[args.problem]():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())