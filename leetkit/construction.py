"""Rebuilding binary trees from pairs of traversal orders."""

from __future__ import annotations

from collections.abc import Sequence

from leetkit.binary_tree import TreeNode


def _positions(values: Sequence[int]) -> dict[int, int]:
    return {value: pos for pos, value in enumerate(values)}


def _locate(positions: dict[int, int], value: int) -> int:
    try:
        return positions[value]
    except KeyError:
        raise ValueError(f"value {value} missing from the other traversal") from None


def _check_lengths(first: Sequence[int], second: Sequence[int]) -> None:
    if len(first) != len(second):
        raise ValueError(
            f"traversals differ in length: {len(first)} and {len(second)}"
        )


def _mismatch() -> ValueError:
    return ValueError("traversals do not describe the same tree")


def build_from_preorder_inorder(
    preorder: Sequence[int], inorder: Sequence[int]
) -> TreeNode | None:
    """Rebuild a tree of distinct values from its preorder and inorder traversals.

    Raises ValueError when the traversals cannot belong to one tree.
    """
    _check_lengths(preorder, inorder)
    positions = _positions(inorder)
    values = iter(preorder)

    def build(lo: int, hi: int) -> TreeNode | None:
        if lo > hi:
            return None
        node = TreeNode(next(values))
        mid = _locate(positions, node.val)
        if not lo <= mid <= hi:
            raise _mismatch()
        node.left = build(lo, mid - 1)
        node.right = build(mid + 1, hi)
        return node

    return build(0, len(inorder) - 1)


def build_from_inorder_postorder(
    inorder: Sequence[int], postorder: Sequence[int]
) -> TreeNode | None:
    """Rebuild a tree of distinct values from its inorder and postorder traversals.

    Raises ValueError when the traversals cannot belong to one tree.
    """
    _check_lengths(inorder, postorder)
    positions = _positions(inorder)
    values = reversed(postorder)

    def build(lo: int, hi: int) -> TreeNode | None:
        if lo > hi:
            return None
        node = TreeNode(next(values))
        mid = _locate(positions, node.val)
        if not lo <= mid <= hi:
            raise _mismatch()
        node.right = build(mid + 1, hi)
        node.left = build(lo, mid - 1)
        return node

    return build(0, len(inorder) - 1)


def build_from_preorder_postorder(
    preorder: Sequence[int], postorder: Sequence[int]
) -> TreeNode | None:
    """Rebuild a tree of distinct values from its preorder and postorder traversals.

    Where the pair is ambiguous, a lone child is placed on the left.
    Raises ValueError when the traversals cannot belong to one tree.
    """
    _check_lengths(preorder, postorder)
    positions = _positions(postorder)

    def build(pre_lo: int, pre_hi: int, post_lo: int, post_hi: int) -> TreeNode | None:
        if pre_lo > pre_hi:
            return None
        node = TreeNode(preorder[pre_lo])
        if pre_lo == pre_hi:
            return node
        left_root = _locate(positions, preorder[pre_lo + 1])
        if not post_lo <= left_root < post_hi:
            raise _mismatch()
        left_size = left_root - post_lo + 1
        node.left = build(pre_lo + 1, pre_lo + left_size, post_lo, left_root)
        node.right = build(pre_lo + left_size + 1, pre_hi, left_root + 1, post_hi - 1)
        return node

    return build(0, len(preorder) - 1, 0, len(postorder) - 1)