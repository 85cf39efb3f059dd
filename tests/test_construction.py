import pytest

from leetkit.binary_tree import deserialize_tree, serialize_tree
from leetkit.construction import (
    build_from_inorder_postorder,
    build_from_preorder_inorder,
    build_from_preorder_postorder,
)
from leetkit.traversals import (
    inorder_traversal,
    postorder_traversal,
    preorder_traversal,
)

TREES = [
    "[3,9,20,null,null,15,7]",
    "[1,2,3,4,5,6,7]",
    "[6,2,13,1,4,9,15,null,null,null,null,null,null,14]",
    "[10,5,15,3,7,13,18,1,null,6]",
    "[4,null,9]",
    "[-1]",
]


def test_preorder_inorder_source_example():
    tree = build_from_preorder_inorder([3, 9, 20, 15, 7], [9, 3, 15, 20, 7])
    assert serialize_tree(tree) == "[3,9,20,null,null,15,7]"


def test_inorder_postorder_source_example():
    tree = build_from_inorder_postorder([9, 3, 15, 20, 7], [9, 15, 7, 20, 3])
    assert serialize_tree(tree) == "[3,9,20,null,null,15,7]"


def test_preorder_postorder_source_example():
    tree = build_from_preorder_postorder([1, 2, 4, 5, 3, 6, 7], [4, 5, 2, 6, 7, 3, 1])
    assert serialize_tree(tree) == "[1,2,3,4,5,6,7]"


@pytest.mark.parametrize(
    "build",
    [build_from_preorder_inorder, build_from_inorder_postorder, build_from_preorder_postorder],
)
def test_single_node(build):
    assert serialize_tree(build([-1], [-1])) == "[-1]"


@pytest.mark.parametrize("text", TREES)
def test_preorder_inorder_round_trip(text):
    tree = deserialize_tree(text)
    rebuilt = build_from_preorder_inorder(preorder_traversal(tree), inorder_traversal(tree))
    assert serialize_tree(rebuilt) == text


@pytest.mark.parametrize("text", TREES)
def test_inorder_postorder_round_trip(text):
    tree = deserialize_tree(text)
    rebuilt = build_from_inorder_postorder(inorder_traversal(tree), postorder_traversal(tree))
    assert serialize_tree(rebuilt) == text


@pytest.mark.parametrize("text", TREES)
def test_preorder_postorder_keeps_traversals(text):
    tree = deserialize_tree(text)
    pre, post = preorder_traversal(tree), postorder_traversal(tree)
    rebuilt = build_from_preorder_postorder(pre, post)
    assert preorder_traversal(rebuilt) == pre
    assert postorder_traversal(rebuilt) == post


@pytest.mark.parametrize("text", ["[1,2,3,4,5,6,7]", "[5,8,9,2,1,3,7,4,6]"])
def test_preorder_postorder_full_tree_round_trip(text):
    tree = deserialize_tree(text)
    rebuilt = build_from_preorder_postorder(preorder_traversal(tree), postorder_traversal(tree))
    assert serialize_tree(rebuilt) == text


@pytest.mark.parametrize(
    "build",
    [build_from_preorder_inorder, build_from_inorder_postorder, build_from_preorder_postorder],
)
def test_empty_traversals_give_no_tree(build):
    assert build([], []) is None


@pytest.mark.parametrize(
    "build",
    [build_from_preorder_inorder, build_from_inorder_postorder, build_from_preorder_postorder],
)
def test_length_mismatch_rejected(build):
    with pytest.raises(ValueError):
        build([1, 2], [1])


def test_preorder_inorder_unknown_value_rejected():
    with pytest.raises(ValueError):
        build_from_preorder_inorder([1, 2], [1, 3])


def test_inorder_postorder_unknown_value_rejected():
    with pytest.raises(ValueError):
        build_from_inorder_postorder([1, 2], [3, 2])


def test_preorder_postorder_unknown_value_rejected():
    with pytest.raises(ValueError):
        build_from_preorder_postorder([1, 2], [3, 1])