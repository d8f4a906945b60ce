"""A B+ tree of keys with node splitting on overflow."""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

DEFAULT_ORDER = 3


@dataclass(eq=False)
class _Node:
    is_leaf: bool = True
    keys: list[Any] = field(default_factory=list)
    children: list["_Node"] = field(default_factory=list)
    next_leaf: Optional["_Node"] = None


class BPlusTree:
    """A B+ tree whose nodes hold at most ``order`` keys before they split."""

    def __init__(self, order: int = DEFAULT_ORDER) -> None:
        if order < 2:
            raise ValueError("order must be at least 2")
        self.order = order
        self._root: Optional[_Node] = None

    def insert(self, key: Any) -> None:
        """Insert ``key``; duplicates are kept."""
        if self._root is None:
            self._root = _Node(keys=[key])
            return
        split = self._insert(self._root, key)
        if split is not None:
            median, sibling = split
            self._root = _Node(is_leaf=False, keys=[median], children=[self._root, sibling])

    def _insert(self, node: _Node, key: Any) -> Optional[tuple[Any, _Node]]:
        if node.is_leaf:
            insort(node.keys, key)
            if len(node.keys) <= self.order:
                return None
            half = len(node.keys) // 2
            sibling = _Node(keys=node.keys[half:], next_leaf=node.next_leaf)
            del node.keys[half:]
            node.next_leaf = sibling
            return sibling.keys[0], sibling

        index = bisect_right(node.keys, key)
        split = self._insert(node.children[index], key)
        if split is None:
            return None
        median, child = split
        node.keys.insert(index, median)
        node.children.insert(index + 1, child)
        if len(node.keys) <= self.order:
            return None
        mid = len(node.keys) // 2
        median = node.keys[mid]
        sibling = _Node(
            is_leaf=False,
            keys=node.keys[mid + 1 :],
            children=node.children[mid + 1 :],
        )
        del node.keys[mid:]
        del node.children[mid + 1 :]
        return median, sibling

    def search(self, key: Any) -> bool:
        """Tell whether ``key`` is stored in the tree."""
        node = self._root
        if node is None:
            return False
        while not node.is_leaf:
            node = node.children[bisect_right(node.keys, key)]
        index = bisect_left(node.keys, key)
        return index < len(node.keys) and node.keys[index] == key

    def __contains__(self, key: Any) -> bool:
        return self.search(key)

    def walk(self) -> Iterator[Any]:
        """Yield every node's keys in pre-order: a node's keys, then its children's."""
        if self._root is not None:
            yield from self._walk(self._root)

    def _walk(self, node: _Node) -> Iterator[Any]:
        yield from node.keys
        if not node.is_leaf:
            for child in node.children:
                yield from self._walk(child)