from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

NO_CHILD = -1


@dataclass(slots=True)
class _Node:
    key: str
    left: int = NO_CHILD
    right: int = NO_CHILD


class StringTree:
    """Unbalanced binary search tree over strings, stored in a flat node list.

    Keys strictly less than a node go left, greater or equal go right, so
    duplicates are kept and appear after their equals in order.
    """

    def __init__(self) -> None:
        self._nodes: list[_Node] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __bool__(self) -> bool:
        return bool(self._nodes)

    def __iter__(self) -> Iterator[str]:
        return self.in_order()

    @property
    def root(self) -> Optional[str]:
        return self._nodes[0].key if self._nodes else None

    def insert(self, key: str) -> None:
        index = len(self._nodes)
        self._nodes.append(_Node(key))
        if index == 0:
            return

        current = 0
        while True:
            node = self._nodes[current]
            if key < node.key:
                if node.left == NO_CHILD:
                    node.left = index
                    return
                current = node.left
            else:
                if node.right == NO_CHILD:
                    node.right = index
                    return
                current = node.right

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        current = 0 if self._nodes else NO_CHILD
        while current != NO_CHILD:
            node = self._nodes[current]
            if key == node.key:
                return True
            current = node.left if key < node.key else node.right
        return False

    def in_order(self, low: Optional[str] = None, high: Optional[str] = None) -> Iterator[str]:
        """Yield keys in sorted order, restricted to ``low <= key < high`` when given."""
        stack: list[int] = []
        current = 0 if self._nodes else NO_CHILD
        while stack or current != NO_CHILD:
            while current != NO_CHILD:
                node = self._nodes[current]
                stack.append(current)
                # Left subtree is strictly less than node.key, nothing there can reach low.
                if low is not None and node.key < low:
                    current = NO_CHILD
                else:
                    current = node.left
            node = self._nodes[stack.pop()]
            if high is not None and node.key >= high:
                return
            if low is None or node.key >= low:
                yield node.key
            current = node.right

    def with_prefix(self, prefix: str) -> list[str]:
        # Keys sharing a prefix form one contiguous run starting at the first key >= prefix.
        matches: list[str] = []
        for key in self.in_order(low=prefix):
            if not key.startswith(prefix):
                break
            matches.append(key)
        return matches

    def depth(self) -> int:
        if not self._nodes:
            return 0
        deepest = 0
        stack = [(0, 1)]
        while stack:
            index, level = stack.pop()
            deepest = max(deepest, level)
            node = self._nodes[index]
            if node.left != NO_CHILD:
                stack.append((node.left, level + 1))
            if node.right != NO_CHILD:
                stack.append((node.right, level + 1))
        return deepest
