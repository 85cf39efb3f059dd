"""Depth-first, level-order and vertical traversals of binary trees."""

from __future__ import annotations

from itertools import groupby

from leetkit.binary_tree import TreeNode


def inorder_traversal(root: TreeNode | None) -> list[int]:
    """Values in left, node, right order."""
    values: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.val)
        node = node.right
    return values


def preorder_traversal(root: TreeNode | None) -> list[int]:
    """Values in node, left, right order."""
    values: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        values.append(node.val)
        stack.append(node.right)
        stack.append(node.left)
    return values


def postorder_traversal(root: TreeNode | None) -> list[int]:
    """Values in left, right, node order."""
    values: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        values.append(node.val)
        stack.append(node.left)
        stack.append(node.right)
    values.reverse()
    return values


def _rows(root: TreeNode | None) -> list[list[TreeNode]]:
    rows: list[list[TreeNode]] = []
    row = [root] if root is not None else []
    while row:
        rows.append(row)
        row = [
            child
            for node in row
            for child in (node.left, node.right)
            if child is not None
        ]
    return rows


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Values grouped by depth, top row first."""
    return [[node.val for node in row] for row in _rows(root)]


def level_order_bottom(root: TreeNode | None) -> list[list[int]]:
    """Values grouped by depth, deepest row first."""
    return level_order(root)[::-1]


def zigzag_level_order(root: TreeNode | None) -> list[list[int]]:
    """Values grouped by depth, alternating left-to-right and right-to-left."""
    return [
        values[::-1] if depth % 2 else values
        for depth, values in enumerate(level_order(root))
    ]


def vertical_traversal(root: TreeNode | None) -> list[list[int]]:
    """Values grouped by column, left to right; within a column by row, then value."""
    entries: list[tuple[int, int, int]] = []
    stack = [(root, 0, 0)]
    while stack:
        node, col, row = stack.pop()
        if node is None:
            continue
        entries.append((col, row, node.val))
        stack.append((node.right, col + 1, row + 1))
        stack.append((node.left, col - 1, row + 1))
    entries.sort()
    return [
        [val for _, _, val in group]
        for _, group in groupby(entries, key=lambda entry: entry[0])
    ]