"""Simple FIFO and LIFO command interpreters."""

from __future__ import annotations

from collections import deque
from typing import Callable, Iterable


def _parse(command: str) -> int | None:
    text = command.strip()
    if not text:
        raise ValueError("empty command")
    if text[0] == "+":
        return int(text[1:])
    return None


def _run(commands: Iterable[str], take: Callable[[deque[int]], int]) -> list[int]:
    items: deque[int] = deque()
    taken: list[int] = []
    for command in commands:
        value = _parse(command)
        if value is not None:
            items.append(value)
        elif not items:
            raise IndexError("remove from an empty container")
        else:
            taken.append(take(items))
    return taken


def run_queue(commands: Iterable[str]) -> list[int]:
    """Run ``+ x`` (enqueue) and ``-`` (dequeue) commands; return dequeued values."""
    return _run(commands, deque.popleft)


def run_stack(commands: Iterable[str]) -> list[int]:
    """Run ``+ x`` (push) and ``-`` (pop) commands; return popped values."""
    return _run(commands, deque.pop)