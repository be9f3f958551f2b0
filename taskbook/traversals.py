"""Checking whether sequences can be pre-, in- and post-order walks of one BST."""

from __future__ import annotations

import math
from typing import Sequence


def is_preorder(values: Sequence[int]) -> bool:
    """True if ``values`` could be the pre-order walk of a binary search tree."""
    lower = -math.inf
    stack: list[int] = []
    for value in values:
        if value < lower:
            return False
        while stack and stack[-1] < value:
            lower = stack.pop()
        stack.append(value)
    return True


def is_inorder(values: Sequence[int]) -> bool:
    """True if ``values`` is non-decreasing."""
    return all(a <= b for a, b in zip(values, values[1:]))


def is_postorder(values: Sequence[int]) -> bool:
    """True if ``values`` could be the post-order walk of a binary search tree."""
    upper = math.inf
    stack: list[int] = []
    for value in reversed(values):
        if value > upper:
            return False
        while stack and stack[-1] > value:
            upper = stack.pop()
        stack.append(value)
    return True


def traversals_consistent(
    pre: Sequence[int], inorder: Sequence[int], post: Sequence[int]
) -> bool:
    """True if the three walks are each valid and have the same sum."""
    if not len(pre) == len(inorder) == len(post):
        raise ValueError("all three walks must have the same length")
    total = sum(pre)
    return (
        is_preorder(pre)
        and total == sum(inorder)
        and is_inorder(inorder)
        and total == sum(post)
        and is_postorder(post)
    )