"""Binary tree nodes and their level-order text form."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from leetkit.codec import NULL_TOKEN, NULL_VALUE, split


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def _from_level_order(root_val: int, rest: Sequence[int | None]) -> TreeNode:
    """Build a tree from a root value and the level-order values after it."""
    root = TreeNode(root_val)
    values = iter(rest)
    queue = deque([root])
    end = object()
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            value = next(values, end)
            if value is end:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                queue.append(child)
    return root


def _level_order_slots(root: TreeNode | None) -> Iterator[TreeNode | None]:
    """Yield every node and every empty child slot in level order."""
    queue = deque([root])
    while queue:
        node = queue.popleft()
        yield node
        if node is not None:
            queue.append(node.left)
            queue.append(node.right)


def build_binary_tree(data: Sequence[int]) -> TreeNode | None:
    """Build a tree from level-order values, where -1 marks a missing child."""
    if not data:
        return None
    rest = [None if value == NULL_VALUE else value for value in data[1:]]
    return _from_level_order(data[0], rest)


def display_tree(root: TreeNode | None) -> str:
    """Level-order values separated by spaces, -1 for gaps, trailing -1s dropped."""
    values = [NULL_VALUE if node is None else node.val for node in _level_order_slots(root)]
    while values and values[-1] == NULL_VALUE:
        values.pop()
    return " ".join(str(value) for value in values)


def front_display_tree(root: TreeNode | None) -> str:
    """Preorder values separated by spaces."""
    values = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        values.append(str(node.val))
        stack.append(node.right)
        stack.append(node.left)
    return " ".join(values)


def find(root: TreeNode | None, val: int) -> TreeNode | None:
    """Return the first node in level order holding ``val``."""
    for node in _level_order_slots(root):
        if node is not None and node.val == val:
            return node
    return None


def deserialize_tree(text: str) -> TreeNode | None:
    """Parse ``[3,9,20,null,null,15,7]`` into a tree.

    Raises ValueError on malformed items.
    """
    if text == "[]":
        return None
    items = split(text[1:-1], ",")
    if not items:
        raise ValueError(f"no tree items in {text!r}")
    rest = [None if item == NULL_TOKEN else int(item) for item in items[1:]]
    return _from_level_order(int(items[0]), rest)


def serialize_tree(root: TreeNode | None) -> str:
    """Render a tree as level-order text with ``null`` for gaps."""
    if root is None:
        return "[]"
    items = [NULL_TOKEN if node is None else str(node.val) for node in _level_order_slots(root)]
    while items and items[-1] == NULL_TOKEN:
        items.pop()
    return "[" + ",".join(items) + "]"