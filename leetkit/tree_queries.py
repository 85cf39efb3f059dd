"""Questions asked of binary trees and binary search trees."""

from __future__ import annotations

from bisect import bisect_left
from collections import deque
from collections.abc import Iterable, Iterator

from leetkit.binary_tree import TreeNode
from leetkit.traversals import inorder_traversal

MISSING = -1


def _levels(root: TreeNode | None) -> Iterator[list[TreeNode]]:
    row = [root] if root is not None else []
    while row:
        yield row
        row = [
            child
            for node in row
            for child in (node.left, node.right)
            if child is not None
        ]


def _children(node: TreeNode) -> list[TreeNode]:
    return [child for child in (node.left, node.right) if child is not None]


def is_cousins(root: TreeNode | None, x: int, y: int) -> bool:
    """True when ``x`` and ``y`` sit at the same depth under different parents."""
    if root is None:
        return False
    parents: dict[int, TreeNode] = {}
    depths: dict[int, int] = {}
    queue = deque([(0, root)])
    while queue and (x not in parents or y not in parents):
        depth, node = queue.popleft()
        for child in _children(node):
            queue.append((depth + 1, child))
            for target in (x, y):
                if child.val == target:
                    parents[target] = node
                    depths[target] = depth + 1
    return depths.get(x, 0) == depths.get(y, 0) and parents.get(x) is not parents.get(y)


def replace_value_in_tree(root: TreeNode | None) -> TreeNode | None:
    """Replace each value with the sum of its cousins' values, in place."""
    if root is None:
        return None
    sums = [sum(node.val for node in row) for row in _levels(root)]
    root.val = 0
    queue = deque([(0, root)])
    while queue:
        depth, node = queue.popleft()
        children = _children(node)
        if not children:
            continue
        value = sums[depth + 1] - sum(child.val for child in children)
        for child in children:
            child.val = value
            queue.append((depth + 1, child))
    return root


def replace_value_in_tree_by_layer(root: TreeNode | None) -> TreeNode | None:
    """Same result as :func:`replace_value_in_tree`, one layer at a time."""
    if root is None:
        return None
    root.val = 0
    layer = [root]
    while layer:
        groups = [_children(node) for node in layer]
        layer_sum = sum(child.val for group in groups for child in group)
        for group in groups:
            value = layer_sum - sum(child.val for child in group)
            for child in group:
                child.val = value
        layer = [child for group in groups for child in group]
    return root


def kth_largest_level_sum(root: TreeNode | None, k: int) -> int:
    """The k-th largest sum of a level, or -1 when there are fewer than k levels.

    Raises ValueError when ``k`` is below 1.
    """
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    sums = sorted((sum(node.val for node in row) for row in _levels(root)), reverse=True)
    return sums[k - 1] if k <= len(sums) else MISSING


def closest_nodes(root: TreeNode | None, queries: Iterable[int]) -> list[list[int]]:
    """For each query, the largest value not above it and the smallest not below it.

    A side with no such value is -1.
    """
    values = inorder_traversal(root)
    result: list[list[int]] = []
    for query in queries:
        pos = bisect_left(values, query)
        if pos == len(values):
            result.append([values[-1] if values else MISSING, MISSING])
        elif values[pos] == query:
            result.append([query, query])
        elif pos == 0:
            result.append([MISSING, values[0]])
        else:
            result.append([values[pos - 1], values[pos]])
    return result


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode | None, q: TreeNode | None
) -> TreeNode | None:
    """The deepest node having both ``p`` and ``q`` (by identity) below or at it."""
    answer = root
    found: dict[TreeNode | None, bool] = {}
    stack: list[tuple[TreeNode | None, bool]] = [(root, False)]
    while stack:
        node, visited = stack.pop()
        if node is None:
            continue
        if not visited:
            stack.append((node, True))
            stack.append((node.right, False))
            stack.append((node.left, False))
            continue
        left = found.get(node.left, False)
        right = found.get(node.right, False)
        is_target = node is p or node is q
        if (left and right) or ((left or right) and is_target):
            answer = node
        found[node] = left or right or is_target
    return answer


def lowest_common_ancestor_bst(root: TreeNode | None, p: TreeNode, q: TreeNode) -> TreeNode:
    """The lowest common ancestor of ``p`` and ``q`` in a binary search tree.

    Raises ValueError when the search runs off the tree.
    """
    node = root
    while node is not None:
        if node.val > p.val and node.val > q.val:
            node = node.left
        elif node.val < p.val and node.val < q.val:
            node = node.right
        else:
            return node
    raise ValueError("the nodes are not both in the search tree")


def range_sum_bst(root: TreeNode | None, low: int, high: int) -> int:
    """Sum of the values in a binary search tree lying within ``[low, high]``."""
    total = 0
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            continue
        if node.val > high:
            queue.append(node.left)
        elif node.val < low:
            queue.append(node.right)
        else:
            total += node.val
            queue.append(node.left)
            queue.append(node.right)
    return total


def deepest_leaves_sum(root: TreeNode | None) -> int:
    """Sum of the values on the deepest level, 0 for an empty tree."""
    last: list[TreeNode] = []
    for row in _levels(root):
        last = row
    return sum(node.val for node in last)