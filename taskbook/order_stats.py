"""A size-augmented binary search tree answering k-th largest queries."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain
from typing import Iterable


@dataclass(slots=True)
class _Node:
    value: int
    size: int = 1
    left: _Node | None = None
    right: _Node | None = None


def _size(node: _Node | None) -> int:
    return 0 if node is None else node.size


class OrderStatisticTree:
    """A binary search tree of distinct integers that knows its subtree sizes."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return _size(self._root)

    def insert(self, value: int) -> bool:
        """Add ``value``; return False if it was already present."""
        path: list[_Node] = []
        node = self._root
        while node is not None:
            if value == node.value:
                return False
            path.append(node)
            node = node.left if value < node.value else node.right
        fresh = _Node(value)
        if not path:
            self._root = fresh
            return True
        parent = path[-1]
        if value < parent.value:
            parent.left = fresh
        else:
            parent.right = fresh
        for ancestor in path:
            ancestor.size += 1
        return True

    def delete(self, value: int) -> None:
        """Remove ``value``; raise KeyError if it is absent."""
        path: list[_Node] = []
        node = self._root
        while node is not None and node.value != value:
            path.append(node)
            node = node.left if value < node.value else node.right
        if node is None:
            raise KeyError(value)
        if node.left is not None and node.right is not None:
            path.append(node)
            successor = node.right
            while successor.left is not None:
                path.append(successor)
                successor = successor.left
            node.value = successor.value
            node = successor
        child = node.left if node.left is not None else node.right
        if not path:
            self._root = child
        elif path[-1].left is node:
            path[-1].left = child
        else:
            path[-1].right = child
        for ancestor in path:
            ancestor.size -= 1

    def kth_largest(self, k: int) -> int:
        """The ``k``-th largest stored value, counting from 1."""
        if not 1 <= k <= len(self):
            raise IndexError(f"rank {k} out of range")
        node = self._root
        while node is not None:
            larger = _size(node.right)
            if k == larger + 1:
                return node.value
            if k <= larger:
                node = node.right
            else:
                k -= larger + 1
                node = node.left
        raise AssertionError("subtree sizes are inconsistent")


def run_kth_commands(commands: Iterable[str]) -> list[int]:
    """Run ``1 x`` (insert), ``-1 x`` (delete) and ``0 k`` (k-th largest) commands."""
    tokens = iter(chain.from_iterable(line.split() for line in commands))
    tree = OrderStatisticTree()
    answers: list[int] = []
    for token in tokens:
        operation = int(token)
        if operation not in (-1, 0, 1):
            continue
        try:
            argument = int(next(tokens))
        except StopIteration:
            raise ValueError(f"command {operation} lacks its value") from None
        if operation == 1:
            tree.insert(argument)
        elif operation == -1:
            tree.delete(argument)
        else:
            answers.append(tree.kth_largest(argument))
    return answers