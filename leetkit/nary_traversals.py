"""Level-order, preorder and postorder traversals of n-ary trees."""

from __future__ import annotations

from leetkit.nary_tree import Node


def nary_level_order(root: Node | None) -> list[list[int]]:
    """Values grouped by depth, top row first."""
    result: list[list[int]] = []
    row = [root] if root is not None else []
    while row:
        result.append([node.val for node in row])
        row = [child for node in row for child in node.children]
    return result


def nary_preorder(root: Node | None) -> list[int]:
    """Values with each node before its children."""
    values: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        values.append(node.val)
        stack.extend(reversed(node.children))
    return values


def nary_postorder(root: Node | None) -> list[int]:
    """Values with each node after its children."""
    values: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        values.append(node.val)
        stack.extend(node.children)
    values.reverse()
    return values