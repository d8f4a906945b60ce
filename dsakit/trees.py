"""Binary tree traversals: spiral (zig-zag) order and vertical order."""

from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def spiral_traversal(root: Optional[TreeNode]) -> list[Any]:
    """Return the values level by level, alternating direction; the second level runs left to right."""
    if root is None:
        return []
    result: list[Any] = []
    forward: list[TreeNode] = []
    backward: list[TreeNode] = [root]
    while forward or backward:
        while forward:
            node = forward.pop()
            result.append(node.val)
            if node.left:
                backward.append(node.left)
            if node.right:
                backward.append(node.right)
        while backward:
            node = backward.pop()
            result.append(node.val)
            if node.right:
                forward.append(node.right)
            if node.left:
                forward.append(node.left)
    return result


def vertical_traversal(root: Optional[TreeNode]) -> list[list[Any]]:
    """Group values by column, left to right; within a column by row, ties sorted by value."""
    if root is None:
        return []
    columns: defaultdict[int, defaultdict[int, list[Any]]] = defaultdict(
        lambda: defaultdict(list)
    )
    queue = deque([(root, 0, 0)])
    while queue:
        node, row, col = queue.popleft()
        if node.left:
            queue.append((node.left, row + 1, col - 1))
        if node.right:
            queue.append((node.right, row + 1, col + 1))
        columns[col][row].append(node.val)
    return [
        [value for row in sorted(rows) for value in sorted(rows[row])]
        for _, rows in sorted(columns.items())
    ]