"""An unbalanced binary search tree with neighbour queries and a command runner."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from itertools import chain, pairwise
from typing import Iterable, Iterator


@dataclass(slots=True)
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """A plain binary search tree of distinct integers; duplicates are ignored."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.contains(value)

    def __iter__(self) -> Iterator[int]:
        return self.in_order()

    def insert(self, value: int) -> bool:
        """Add ``value``; return False if it was already present."""
        if self._root is None:
            self._root = _Node(value)
            self._size = 1
            return True
        node = self._root
        while True:
            if value == node.value:
                return False
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(value)
                    break
                node = node.right
        self._size += 1
        return True

    def delete(self, value: int) -> bool:
        """Remove ``value``; return False if it was not present."""
        parent: _Node | None = None
        node = self._root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            parent, node = successor_parent, successor
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        self._size -= 1
        return True

    def contains(self, value: int) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def successor(self, value: int) -> int | None:
        """Smallest stored value greater than ``value``, or None."""
        result: int | None = None
        node = self._root
        while node is not None:
            if value < node.value:
                result = node.value
                node = node.left
            else:
                node = node.right
        return result

    def predecessor(self, value: int) -> int | None:
        """Largest stored value smaller than ``value``, or None."""
        result: int | None = None
        node = self._root
        while node is not None:
            if value > node.value:
                result = node.value
                node = node.right
            else:
                node = node.left
        return result

    def in_order(self) -> Iterator[int]:
        """Yield the stored values in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def right_view(self) -> list[int]:
        """The rightmost value on each level, from the root downwards."""
        view: list[int] = []
        level = deque([self._root] if self._root is not None else [])
        while level:
            view.append(level[0].value)
            next_level: deque[_Node] = deque()
            for node in level:
                next_level.extend(
                    child for child in (node.right, node.left) if child is not None
                )
            level = next_level
        return view

    def min_gap(self) -> int | None:
        """Smallest difference between two stored values, or None with fewer than two."""
        return min((b - a for a, b in pairwise(self.in_order())), default=None)


_WITH_ARGUMENT = {0, 1, 2, 3, 4}


def run_tree_commands(commands: Iterable[str]) -> list[str]:
    """Run numbered tree commands and collect their output.

    ``0 x`` inserts, ``1 x`` deletes, ``2 x`` prints ``true``/``false``,
    ``3 x`` prints the successor and ``4 x`` the predecessor, or ``none``.
    """
    tokens = iter(chain.from_iterable(line.split() for line in commands))
    tree = BinarySearchTree()
    output: list[str] = []
    for token in tokens:
        operation = int(token)
        if operation not in _WITH_ARGUMENT:
            continue
        try:
            value = int(next(tokens))
        except StopIteration:
            raise ValueError(f"command {operation} lacks its value") from None
        if operation == 0:
            tree.insert(value)
        elif operation == 1:
            tree.delete(value)
        elif operation == 2:
            output.append("true" if tree.contains(value) else "false")
        else:
            found = tree.successor(value) if operation == 3 else tree.predecessor(value)
            output.append("none" if found is None else str(found))
    return output