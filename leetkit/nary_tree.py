"""N-ary tree nodes and their level-order text form."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from leetkit.codec import NULL_TOKEN, split


@dataclass(eq=False)
class Node:
    """An n-ary tree node."""

    val: int = 0
    children: list[Node] = field(default_factory=list)


def serialize_nary(root: Node | None) -> str:
    """Render a tree as level-order text, each child group ended by ``null``."""
    if root is None:
        return "[]"
    items = [str(root.val), NULL_TOKEN]
    row = [root]
    while row:
        next_row = []
        for node in row:
            items.extend(str(child.val) for child in node.children)
            next_row.extend(node.children)
            items.append(NULL_TOKEN)
        row = next_row
    while items and items[-1] == NULL_TOKEN:
        items.pop()
    return "[" + ",".join(items) + "]"


def deserialize_nary(text: str) -> Node | None:
    """Parse ``[1,null,3,2,4,null,5,6]`` into a tree.

    Raises ValueError on malformed items.
    """
    if text == "[]":
        return None
    items = split(text[1:-1], ",")
    if not items:
        raise ValueError(f"no tree items in {text!r}")
    root = Node(int(items[0]))
    queue = deque([root])
    pos = 2
    while queue and pos < len(items):
        node = queue.popleft()
        children = []
        while pos < len(items) and items[pos] != NULL_TOKEN:
            child = Node(int(items[pos]))
            pos += 1
            children.append(child)
            queue.append(child)
        if pos < len(items):
            pos += 1
        node.children = children
    return root